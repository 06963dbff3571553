from __future__ import annotations

from src.bubble_vocab_trainer.app.ports.session_store import SessionStore
from src.bubble_vocab_trainer.app.state import GameSession, Settings
from src.bubble_vocab_trainer.domain import WordEntry, available_levels


def get_session(store: SessionStore) -> GameSession:
    """セッション（store）内の GameSession を返す。

    initialize_state() 済みであることを前提とする。
    """
    session: GameSession | None = store.get("game_session")
    if session is None:
        raise RuntimeError("GameSession is not initialized; call initialize_state() first.")
    return session


def get_settings(store: SessionStore) -> Settings:
    """現在の設定を返す（未設定時はコード既定値）。"""
    settings = store.get("settings")
    return settings if isinstance(settings, Settings) else Settings()


def set_settings(store: SessionStore, settings: Settings) -> None:
    store.set("settings", settings)


# ---- Catalog helpers ----


def set_catalog(store: SessionStore, words: list[WordEntry], source: str) -> None:
    """セッションに単語カタログとその識別（表示用）を設定する。

    - UI からは本関数経由で設定することで、参照箇所の統一を図る。
    """
    store.set("catalog", words)
    store.set("catalog_source", source)


def get_catalog(store: SessionStore) -> list[WordEntry]:
    """セッションの単語カタログを返す（未設定時は空リスト）。"""
    return store.get("catalog", [])


def get_catalog_source(store: SessionStore) -> str | None:
    """カタログの識別（例: bundled://words.csv やアップロードしたファイル名）を返す。"""
    return store.get("catalog_source")


def get_levels(store: SessionStore) -> list[int]:
    """カタログに含まれるレベル一覧を返す。"""
    return available_levels(get_catalog(store))
