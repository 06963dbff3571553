from __future__ import annotations

import streamlit as st

from src.bubble_vocab_trainer.adapters.presenter_store import StorePresenter
from src.bubble_vocab_trainer.adapters.session_store_streamlit import StSessionStore
from src.bubble_vocab_trainer.domain import DisplayMode
from src.bubble_vocab_trainer.services import session_access
from src.bubble_vocab_trainer.services.gameplay import start_round as _svc_start_round

_MODE_LABELS: dict[DisplayMode, str] = {
    DisplayMode.PRIMARY: "English（英語で表示）",
    DisplayMode.SECONDARY: "日本語（日本語で表示）",
}


def render_start_screen(store: StSessionStore, presenter: StorePresenter) -> None:
    """スタート画面（表示モード・レベル選択とスタートボタン）を描画する。"""
    st.header("えいごを聞いて、バブルをタッチ！")
    st.markdown(
        """
        - 英語の単語が読み上げられます。
        - 読み上げられた単語のバブルをクリックしてください。
        - すべてのバブルを消したらクリアです。
        """
    )
    session = session_access.get_session(store)
    levels = session_access.get_levels(store)
    if not levels:
        st.warning("単語リストが空です。サイドバーから CSV を読み込んでください。")
        return

    modes = list(_MODE_LABELS)
    mode = st.radio(
        "バブルの表示",
        options=modes,
        index=modes.index(session.mode),
        format_func=lambda m: _MODE_LABELS[m],
        horizontal=True,
    )
    level = st.radio(
        "レベル",
        options=levels,
        index=levels.index(session.level) if session.level in levels else 0,
        format_func=lambda lv: f"レベル {lv}",
        horizontal=True,
    )
    if st.button("スタート", type="primary", key="start_btn"):
        _svc_start_round(
            session, session_access.get_catalog(store), mode, int(level), presenter
        )
        st.rerun()
