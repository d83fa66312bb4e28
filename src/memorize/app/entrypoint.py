import streamlit as st

from src.memorize.adapters.session_store_streamlit import StSessionStore
from src.memorize.app.ports.session_store import SETTINGS_KEY
from src.memorize.services import app_state, gameplay
from src.memorize.services.config_loader import get_app_title, load_config_from_env
from src.memorize.ui.board import render_board
from src.memorize.ui.deck import render_deck
from src.memorize.ui.header import render_header
from src.memorize.ui.sidebar import render_sidebar
from src.memorize.ui.status import render_status_and_results


def main():
    # set_page_config は最初に 1 度だけ呼ぶ必要があるため、固定の既定タイトルを使う
    st.set_page_config(page_title="Memorize!", layout="wide")

    try:
        load_config_from_env()
        store = StSessionStore()
        app_state.initialize_state(store)
    except Exception as e:
        st.error(f"ゲームの初期化に失敗しました: {e}")
        return

    st.title(get_app_title())

    # サイドバー: 設定 UI（新しいゲームで反映）
    render_sidebar(
        store.get(SETTINGS_KEY),
        on_new_game=lambda settings: app_state.new_game(store, settings),
    )

    render_header(
        on_shuffle=lambda: gameplay.handle_shuffle(store),
        on_restart=lambda: gameplay.handle_restart(store),
    )

    cards = app_state.get_game(store).cards
    render_status_and_results(cards)

    # 盤面
    st.divider()
    render_board(store, cards, lambda card_id: gameplay.handle_card_click(store, card_id))

    # 山札
    st.divider()
    render_deck(store, on_deal=lambda: gameplay.deal_all(store))
