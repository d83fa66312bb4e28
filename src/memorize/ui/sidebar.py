from __future__ import annotations

from collections.abc import Callable

import streamlit as st

from src.memorize.app.state import Settings
from src.memorize.services.config_loader import get_theme_emojis, get_theme_names

# ボーナス時間入力の既定上限（秒）。設定値がこれを超える場合は設定値を上限にする
BONUS_TIME_INPUT_MAX: float = 60.0


def input_limits(current: Settings, emoji_count: int) -> tuple[int, float]:
    """ペア数・ボーナス秒の入力上限を返す。現在値が必ず範囲に収まるようにする。"""
    max_pairs = max(emoji_count, current.pair_count)
    max_bonus = max(BONUS_TIME_INPUT_MAX, float(current.bonus_time_limit))
    return max_pairs, max_bonus


def render_sidebar(current: Settings, on_new_game: Callable[[Settings], None]) -> None:
    """サイドバーの設定 UI を描画する。

    - 設定の変更は「新しいゲーム」を押したときにだけ反映する（プレイ中のゲームは変えない）。
    - ペア数の上限はテーマの絵柄数（超える場合は絵柄が繰り返される）。
    """
    with st.sidebar:
        st.subheader("ゲーム設定")
        names = get_theme_names()
        theme = st.selectbox(
            "テーマ",
            options=names,
            index=names.index(current.theme) if current.theme in names else 0,
        )
        emojis = get_theme_emojis(theme)
        st.caption(" ".join(emojis))
        max_pairs, max_bonus = input_limits(current, len(emojis))
        pair_count = st.number_input(
            "ペア数",
            min_value=0,
            max_value=max_pairs,
            value=current.pair_count,
            step=1,
        )
        bonus_time_limit = st.number_input(
            "ボーナス時間（秒）",
            min_value=0.0,
            max_value=max_bonus,
            value=float(current.bonus_time_limit),
            step=1.0,
            help="0 にするとボーナスなし",
        )
        if st.button("新しいゲーム", use_container_width=True):
            on_new_game(
                Settings(
                    pair_count=int(pair_count),
                    bonus_time_limit=float(bonus_time_limit),
                    theme=str(theme),
                )
            )
            st.rerun()

        if hasattr(st.sidebar, "page_link"):
            st.divider()
            st.page_link("pages/how_to_play.py", label="遊び方")
