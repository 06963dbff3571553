from __future__ import annotations

import streamlit as st

from src.bubble_vocab_trainer.adapters.presenter_store import StorePresenter
from src.bubble_vocab_trainer.adapters.session_store_streamlit import StSessionStore
from src.bubble_vocab_trainer.services.gameplay import replay_listen as _svc_replay_listen
from src.bubble_vocab_trainer.services.gameplay import stop_round as _svc_stop_round
from src.bubble_vocab_trainer.services.session_access import get_session


def render_header(store: StSessionStore, presenter: StorePresenter) -> None:
    """ゲーム画面のヘッダー（やめる / もういちど聞く）を描画する。"""
    session = get_session(store)
    c1, c2, c3 = st.columns([1, 2, 7])
    with c1:
        if st.button("やめる", key="exit_btn"):
            _svc_stop_round(session, presenter)
            st.rerun()
    with c2:
        if st.button("🔊 もういちど聞く", key="listen_btn", disabled=session.target is None):
            _svc_replay_listen(session, presenter)
    with c3:
        st.caption("聞こえた単語のバブルをクリックしてね。")
