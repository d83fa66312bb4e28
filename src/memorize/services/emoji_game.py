"""絵文字版ゲームのビューモデル。

目的:
- ドメインの MemoryGame[str] を、絵柄リストとペア数から組み立てて保持する。
- UI からの操作（選択・シャッフル・リスタート）を MemoryGame に中継する。

既定のインスタンスは持たない。構成（絵柄・ペア数・ボーナス秒数）は所有者が渡す。
"""

from __future__ import annotations

import random
import time
from collections.abc import Sequence

from src.memorize.domain import DEFAULT_BONUS_TIME_LIMIT, Card, Clock, MemoryGame


def create_memory_game(
    emojis: Sequence[str],
    pair_count: int,
    *,
    bonus_time_limit: float = DEFAULT_BONUS_TIME_LIMIT,
    clock: Clock = time.monotonic,
    rng: random.Random | None = None,
) -> MemoryGame[str]:
    """絵柄リストからゲームを作る。ペア数が絵柄数より多い場合は先頭から繰り返す。"""
    if pair_count > 0 and not emojis:
        raise ValueError("emojis must not be empty")
    emoji_list = tuple(emojis)
    return MemoryGame(
        pair_count,
        lambda pair_index: emoji_list[pair_index % len(emoji_list)],
        bonus_time_limit=bonus_time_limit,
        clock=clock,
        rng=rng,
    )


class EmojiMemoryGame:
    def __init__(
        self,
        emojis: Sequence[str],
        pair_count: int,
        *,
        bonus_time_limit: float = DEFAULT_BONUS_TIME_LIMIT,
        clock: Clock = time.monotonic,
        rng: random.Random | None = None,
    ) -> None:
        self._emojis = tuple(emojis)
        self._model = create_memory_game(
            self._emojis,
            pair_count,
            bonus_time_limit=bonus_time_limit,
            clock=clock,
            rng=rng,
        )

    @property
    def emojis(self) -> tuple[str, ...]:
        return self._emojis

    @property
    def cards(self) -> tuple[Card[str], ...]:
        return self._model.cards

    @property
    def pair_count(self) -> int:
        return self._model.pair_count

    @property
    def matched_pair_count(self) -> int:
        return self._model.matched_pair_count

    @property
    def is_finished(self) -> bool:
        return self._model.is_finished

    # ---- Intent ----

    def choose(self, card: Card[str] | int) -> bool:
        card_id = card.id if isinstance(card, Card) else int(card)
        return self._model.choose(card_id)

    def shuffle(self) -> None:
        self._model.shuffle()

    def restart(self) -> None:
        self._model.restart()
