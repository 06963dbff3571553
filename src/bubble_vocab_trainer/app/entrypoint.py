import logging

import streamlit as st

from src.bubble_vocab_trainer.adapters.presenter_store import StorePresenter, current_screen
from src.bubble_vocab_trainer.adapters.session_store_streamlit import StSessionStore
from src.bubble_vocab_trainer.domain import Screen
from src.bubble_vocab_trainer.services import app_state
from src.bubble_vocab_trainer.services.config_loader import (
    get_app_title,
    get_log_level,
    load_config_from_env,
)
from src.bubble_vocab_trainer.ui.clear_screen import render_clear_screen
from src.bubble_vocab_trainer.ui.header import render_header
from src.bubble_vocab_trainer.ui.landing import render_start_screen
from src.bubble_vocab_trainer.ui.playfield import render_playfield
from src.bubble_vocab_trainer.ui.sidebar import render_sidebar


def main():
    # 起動時の設定ファイル（環境変数で指定された場合のみ）
    load_config_from_env()
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    title = get_app_title()
    st.set_page_config(page_title=title, page_icon="🫧", layout="wide")

    try:
        store = StSessionStore()
        app_state.initialize_state(store)
    except Exception as e:
        st.error(f"単語リストの読み込みに失敗しました: {e}")
        return

    presenter = StorePresenter(store)

    # サイドバー: 設定 UI
    render_sidebar(store, presenter)

    # 画面はサービスが Presenter 経由で切り替える
    screen = current_screen(store)
    if screen is Screen.START:
        st.title(title)
        render_start_screen(store, presenter)
    elif screen is Screen.GAME:
        render_header(store, presenter)
        render_playfield(store, presenter)
    else:
        render_clear_screen(store, presenter)
