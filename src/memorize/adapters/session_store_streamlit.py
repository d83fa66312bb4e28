"""Streamlit セッション状態アダプタ。

目的:
- 設定・ゲーム本体・配札状態を `st.session_state` に保存し、ボタン操作による
  再実行（st.rerun）のあとも同じゲームを続けられるようにする。
- `st.session_state` を直接触るのは UI 層と本アダプタだけに限定する。
"""

from __future__ import annotations

from typing import Any

from src.memorize.app.ports.session_store import SessionStore


class StSessionStore(SessionStore):
    """`st.session_state` に保存する SessionStore。

    streamlit の import は呼び出し時に行う（サービス層のテストで streamlit を読み込まないため）。
    """

    def get(self, key: str, default: Any = None) -> Any:  # noqa: ANN401
        import streamlit as st

        return st.session_state.get(key, default)

    def set(self, key: str, value: Any) -> None:  # noqa: ANN401
        import streamlit as st

        st.session_state[key] = value
