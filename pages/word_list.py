"""
単語一覧ページ
- セッションに読み込まれている単語リスト（同梱 CSV またはアップロード CSV）をレベル別に表示します。
"""

import streamlit as st

from src.bubble_vocab_trainer.adapters.session_store_streamlit import StSessionStore
from src.bubble_vocab_trainer.services import app_state, session_access
from src.bubble_vocab_trainer.services.catalog import catalog_dataframe

# ページ設定
st.set_page_config(page_title="単語一覧", layout="wide")
st.title("単語一覧")

store = StSessionStore()
try:
    app_state.initialize_state(store)
except Exception as e:
    st.error(f"単語リストの読み込みに失敗しました: {e}")
    st.stop()

st.caption(f"単語リスト: {session_access.get_catalog_source(store) or '-'}")
df = catalog_dataframe(session_access.get_catalog(store))
levels = session_access.get_levels(store)
if not levels:
    st.info("単語がありません。")
    st.stop()

tabs = st.tabs([f"レベル {lv}" for lv in levels])
for tab, lv in zip(tabs, levels, strict=True):
    with tab:
        sub = df[df["レベル"] == lv].drop(columns=["レベル"])
        st.caption(f"{len(sub)} 語")
        st.dataframe(sub, hide_index=True, use_container_width=True)
