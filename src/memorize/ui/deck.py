from __future__ import annotations

from collections.abc import Callable

import streamlit as st

from src.memorize.adapters.session_store_streamlit import StSessionStore
from src.memorize.domain import CARD_BACK
from src.memorize.services.gameplay import undealt_cards


def render_deck(store: StSessionStore, on_deal: Callable[[], None]) -> None:
    """山札（未配札カード）を描画する。クリックで全カードを配る。"""
    remaining = len(undealt_cards(store))
    if remaining == 0:
        return
    if st.button(f"{CARD_BACK} × {remaining}　配る", type="primary"):
        on_deal()
        st.rerun()
