from __future__ import annotations

from collections.abc import Callable

import streamlit as st


def render_header(on_shuffle: Callable[[], None], on_restart: Callable[[], None]) -> None:
    """シャッフル / リスタートのボタン行を描画する。

    Args:
        on_shuffle: シャッフル押下時のコールバック。
        on_restart: リスタート押下時のコールバック（配札状態のリセットも含む）。
    """
    c1, _, c2 = st.columns([1, 6, 1])
    with c1:
        if st.button("シャッフル", use_container_width=True):
            on_shuffle()
            st.rerun()
    with c2:
        if st.button("リスタート", use_container_width=True):
            on_restart()
            st.rerun()
