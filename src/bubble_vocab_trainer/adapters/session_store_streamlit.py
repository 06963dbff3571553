"""Streamlit セッション状態アダプタ。

`st.session_state` にはウィジェットのキーも同居するため、アプリの状態は
接頭辞付きのキー（既定 "bubble_vocab."）で保存する。
"""

from __future__ import annotations

from typing import Any

from src.bubble_vocab_trainer.app.ports.session_store import SessionStore

KEY_PREFIX = "bubble_vocab."


class StSessionStore(SessionStore):
    """`st.session_state` を裏に持つ SessionStore。ページをまたいで同じ状態を共有する。"""

    def __init__(self, prefix: str = KEY_PREFIX) -> None:
        self._prefix = prefix

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    def get(self, key: str, default: Any = None) -> Any:  # noqa: ANN401 - 値は GameSession など任意
        import streamlit as st

        return st.session_state.get(self._key(key), default)

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401
        import streamlit as st

        st.session_state[self._key(key)] = value

    def setdefault(self, key: str, value: Any) -> Any:  # noqa: ANN401
        """未設定ならば value を保存し、保存済みの値を返す。"""
        import streamlit as st

        full = self._key(key)
        if full not in st.session_state:
            st.session_state[full] = value
        return st.session_state[full]
