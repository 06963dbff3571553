from __future__ import annotations

import streamlit as st

from src.bubble_vocab_trainer.adapters.presenter_store import StorePresenter
from src.bubble_vocab_trainer.adapters.session_store_streamlit import StSessionStore
from src.bubble_vocab_trainer.services.gameplay import stop_round as _svc_stop_round
from src.bubble_vocab_trainer.services.session_access import get_session
from src.bubble_vocab_trainer.ui.audio_player import render_audio_requests


def render_clear_screen(store: StSessionStore, presenter: StorePresenter) -> None:
    """クリア画面（お祝い演出ともういちど遊ぶボタン）を描画する。"""
    # 最後の正解の効果音を鳴らしきる
    render_audio_requests(st.empty(), st.empty(), store)

    if store.get("celebrate"):
        st.balloons()
        store.set("celebrate", False)

    session = get_session(store)
    st.header("🎉 クリア！")
    st.info(f"レベル {session.level} の単語をぜんぶ見つけました。")
    if st.button("もういちどあそぶ", type="primary", key="restart_btn"):
        _svc_stop_round(session, presenter)
        st.rerun()
