"""ドメイン層（純粋ロジック/データモデル）。

提供物:
- Card: カード1枚とボーナス時間の計算
- MemoryGame: デッキ・選択・一致判定・シャッフル・リスタート
"""

from src.memorize.domain.constants import (
    BUILTIN_THEMES,
    CARD_BACK,
    DEFAULT_BONUS_TIME_LIMIT,
    DEFAULT_EMOJIS,
    DEFAULT_PAIR_COUNT,
    DEFAULT_THEME,
)
from src.memorize.domain.data import Card, Clock
from src.memorize.domain.game import MemoryGame

__all__ = [
    # data
    "Card",
    "Clock",
    # game
    "MemoryGame",
    # constants
    "BUILTIN_THEMES",
    "CARD_BACK",
    "DEFAULT_BONUS_TIME_LIMIT",
    "DEFAULT_EMOJIS",
    "DEFAULT_PAIR_COUNT",
    "DEFAULT_THEME",
]
