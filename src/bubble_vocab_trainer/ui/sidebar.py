from __future__ import annotations

import dataclasses

import streamlit as st

from src.bubble_vocab_trainer.adapters.presenter_store import StorePresenter
from src.bubble_vocab_trainer.adapters.session_store_streamlit import StSessionStore
from src.bubble_vocab_trainer.services import app_state, session_access
from src.bubble_vocab_trainer.services.catalog import load_words_from_bytes
from src.bubble_vocab_trainer.services.config_loader import (
    load_default_settings,
    set_runtime_toml_bytes,
)


def render_sidebar(store: StSessionStore, presenter: StorePresenter) -> None:
    """サイドバーの設定 UI を描画する。

    - 音声（ミュート・ゆっくり読み上げ）はプレイ中でも切り替えられる。
    - プレイフィールドの大きさの変更は、表示中のバブルを新しい範囲へ収め直す。
    - 単語 CSV の読み込みはプレイ中のラウンドを終了させる。
    """
    settings = session_access.get_settings(store)
    with st.sidebar:
        st.subheader("ゲーム設定")
        muted = st.toggle("無音モード", value=settings.muted)
        speech_slow = st.toggle("ゆっくり読み上げ", value=settings.speech_slow)
        width = st.number_input(
            "横幅（px）", min_value=320, max_value=1920, value=int(settings.width), step=10
        )
        height = st.number_input(
            "高さ（px）", min_value=320, max_value=1200, value=int(settings.height), step=10
        )
        new_settings = dataclasses.replace(
            settings,
            muted=bool(muted),
            speech_slow=bool(speech_slow),
            width=int(width),
            height=int(height),
        )
        if new_settings != settings:
            app_state.apply_settings(store, new_settings, presenter)

        st.divider()
        st.subheader("単語リスト")
        st.caption(f"現在: {session_access.get_catalog_source(store) or '-'}")
        up_csv = st.file_uploader(
            "CSV（列: english, japanese, level）", type=["csv"], accept_multiple_files=False
        )
        if st.button("読み込む", key="sidebar_btn_load_csv"):
            loaded = False
            try:
                if not up_csv:
                    raise ValueError("CSV ファイルが選択されていません。")
                words = load_words_from_bytes(up_csv.getvalue())
                app_state.replace_catalog(store, words, up_csv.name, presenter)
                loaded = True
            except Exception as e:
                st.error(f"読み込みに失敗しました: {e}")
            if loaded:
                st.rerun()

        up_toml = st.file_uploader("設定（config.toml）", type=["toml"], accept_multiple_files=False)
        if up_toml is not None and st.button("設定を反映", key="sidebar_btn_load_toml"):
            if set_runtime_toml_bytes(up_toml.getvalue()):
                app_state.apply_settings(store, load_default_settings(), presenter)
                st.rerun()
            else:
                st.error("設定ファイルを解釈できませんでした。")

        # ページ移動リンク（Streamlit が対応している場合はサイドバーに表示）
        if hasattr(st.sidebar, "page_link"):
            st.divider()
            st.page_link("pages/word_list.py", label="単語一覧")
