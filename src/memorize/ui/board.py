from __future__ import annotations

import math
from collections.abc import Callable, Sequence

import streamlit as st

from src.memorize.adapters.session_store_streamlit import StSessionStore
from src.memorize.domain import CARD_BACK, Card
from src.memorize.services.gameplay import is_card_visible


def _columns_for(count: int, aspect_ratio: float = 2 / 3) -> int:
    """カード枚数から列数を決める（縦長カードがおおよそ正方形の盤面になるように）。"""
    if count <= 0:
        return 1
    return max(1, min(count, math.ceil(math.sqrt(count / aspect_ratio))))


def _label(card: Card[str]) -> str:
    if not card.is_face_up:
        return CARD_BACK
    if card.is_matched:
        return f"{card.content} ✓"
    return card.content


def bonus_bar(card: Card[str]) -> tuple[float, str] | None:
    """ボーナス表示（割合, 文言）を返す。表示しない場合は None。

    - 裏向き、またはボーナスなし（上限 0）のカードは表示しない。
    - ボーナス消費中は残り秒数を添えて表示し、それ以外は止まった割合だけを表示する。
    """
    if not card.is_face_up or card.bonus_time_limit <= 0:
        return None
    if card.is_consuming_bonus_time:
        return card.bonus_remaining, f"⏱ {card.bonus_time_remaining:.1f}s"
    return card.bonus_remaining, ""


def render_board(
    store: StSessionStore, cards: Sequence[Card[str]], on_click: Callable[[int], None]
) -> None:
    """盤面を描画し、裏向きカードのクリックで on_click(card_id) を呼び出す。

    - 未配札・一致済みで裏向きのカードは空きマスとして描画する。
    - 表向きのカードには残りボーナスをプログレスバーで表示する（bonus_bar を参照）。
    """
    cols_dim = _columns_for(len(cards))
    for start in range(0, len(cards), cols_dim):
        cols = st.columns(cols_dim)
        for offset, card in enumerate(cards[start : start + cols_dim]):
            with cols[offset]:
                if not is_card_visible(store, card):
                    st.markdown("&nbsp;", unsafe_allow_html=True)
                    continue
                if st.button(
                    _label(card),
                    key=f"card-{card.id}",
                    use_container_width=True,
                    disabled=card.is_face_up,
                ):
                    on_click(card.id)
                    st.rerun()
                bar = bonus_bar(card)
                if bar is not None:
                    fraction, text = bar
                    st.progress(fraction, text=text or None)
