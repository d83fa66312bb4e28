from __future__ import annotations

from collections.abc import Sequence

import streamlit as st

from src.memorize.domain import Card
from src.memorize.services.summary import bonus_table, summarize


def render_status_and_results(cards: Sequence[Card[str]]) -> None:
    """ステータス（残りペア・ボーナス）と終了時の結果を描画する。"""
    summary = summarize(cards)
    c1, c2 = st.columns(2)
    with c1:
        st.metric("残り", f"{summary.remaining_pairs}/{summary.total_pairs}")
    with c2:
        st.metric("ボーナス", summary.bonus_pairs)

    if not summary.is_finished or summary.total_pairs == 0:
        return

    st.info("お疲れさまでした！ すべてのペアがそろいました。")
    st.subheader("結果")
    st.dataframe(bonus_table(cards), hide_index=True, use_container_width=True)
