from __future__ import annotations

import logging

from src.bubble_vocab_trainer.app.ports.presenter import Presenter
from src.bubble_vocab_trainer.app.ports.session_store import SessionStore
from src.bubble_vocab_trainer.app.state import Settings, new_session
from src.bubble_vocab_trainer.domain import WordEntry
from src.bubble_vocab_trainer.services import gameplay, session_access
from src.bubble_vocab_trainer.services.catalog import load_bundled_words
from src.bubble_vocab_trainer.services.config_loader import load_default_settings

logger = logging.getLogger(__name__)


def initialize_state(store: SessionStore) -> None:
    """アプリ起動時に必要なセッション状態を初期化する。

    既に存在するキーは上書きせず、未定義のときのみ初期値を設定する。
    単語カタログは未読込なら同梱 CSV を読み込む。
    """
    if store.get("settings") is None:
        session_access.set_settings(store, load_default_settings())
    if store.get("game_session") is None:
        store.set("game_session", new_session(session_access.get_settings(store)))
    if store.get("catalog") is None:
        words = load_bundled_words()
        session_access.set_catalog(store, words, "bundled://words.csv")


def apply_settings(store: SessionStore, settings: Settings, presenter: Presenter) -> None:
    """設定を保存し、プレイフィールドの大きさが変わっていればバブルを収め直す。"""
    session = session_access.get_session(store)
    session_access.set_settings(store, settings)
    if (float(settings.width), float(settings.height)) != (session.width, session.height):
        logger.info(f"Playfield resized to {settings.width}x{settings.height}")
        gameplay.on_viewport_resized(session, settings.width, settings.height, presenter)


def replace_catalog(
    store: SessionStore, words: list[WordEntry], source: str, presenter: Presenter
) -> None:
    """単語カタログを差し替える。プレイ中のラウンドは終了させる。"""
    session = session_access.get_session(store)
    gameplay.stop_round(session, presenter)
    session_access.set_catalog(store, words, source)
    logger.info(f"Catalog replaced: {source} ({len(words)} words)")
