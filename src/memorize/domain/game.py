from __future__ import annotations

import dataclasses
import random
import time
from collections.abc import Callable
from typing import Generic

from src.memorize.domain.constants import DEFAULT_BONUS_TIME_LIMIT
from src.memorize.domain.data import Card, Clock, ContentT


class MemoryGame(Generic[ContentT]):
    """神経衰弱（カード合わせ）のゲーム状態。

    現状の契約:
    - デッキ（Card の並び）はこのクラスだけが所有する。外部には cards でコピーを返す。
    - 一致していない表向きカードは常に高々1枚。
    - 不正な操作（存在しない id、一致済み・表向きのカードの選択）は何もしない。
    - スレッドセーフではない。呼び出しは1つの所有者から逐次行うこと。
    """

    def __init__(
        self,
        pair_count: int,
        create_card_content: Callable[[int], ContentT],
        *,
        bonus_time_limit: float = DEFAULT_BONUS_TIME_LIMIT,
        clock: Clock = time.monotonic,
        rng: random.Random | None = None,
    ) -> None:
        if pair_count < 0:
            raise ValueError(f"pair_count must be >= 0: {pair_count}")
        self._pair_count = pair_count
        self._create_card_content = create_card_content
        self._bonus_time_limit = bonus_time_limit
        self._clock = clock
        self._rng = rng if rng is not None else random.Random()
        self._cards: list[Card[ContentT]] = self._build_deck()
        self._check_rep()

    def _build_deck(self) -> list[Card[ContentT]]:
        """ペアごとに中身を1回生成し、id 2i / 2i+1 の2枚を作ってシャッフルする。"""
        cards: list[Card[ContentT]] = []
        for pair_index in range(self._pair_count):
            content = self._create_card_content(pair_index)
            for card_id in (2 * pair_index, 2 * pair_index + 1):
                cards.append(
                    Card(
                        id=card_id,
                        content=content,
                        bonus_time_limit=self._bonus_time_limit,
                        clock=self._clock,
                    )
                )
        self._rng.shuffle(cards)
        return cards

    def _check_rep(self) -> None:
        assert len(self._cards) == 2 * self._pair_count
        face_up_unmatched = [c for c in self._cards if c.is_face_up and not c.is_matched]
        assert len(face_up_unmatched) <= 1, "more than one unmatched card is face up"

    # ---- 読み取り ----

    @property
    def cards(self) -> tuple[Card[ContentT], ...]:
        """現在の並び順でカードのコピーを返す。"""
        return tuple(dataclasses.replace(c) for c in self._cards)

    @property
    def pair_count(self) -> int:
        return self._pair_count

    @property
    def matched_pair_count(self) -> int:
        return sum(1 for c in self._cards if c.is_matched) // 2

    @property
    def is_finished(self) -> bool:
        return all(c.is_matched for c in self._cards)

    @property
    def index_of_the_one_and_only_face_up_card(self) -> int | None:
        """一致していない表向きカードの位置。無ければ None。

        別フィールドに保持せず、毎回カードの状態から求める。
        """
        indices = [i for i, c in enumerate(self._cards) if c.is_face_up and not c.is_matched]
        assert len(indices) <= 1, "more than one unmatched card is face up"
        return indices[0] if indices else None

    # ---- 操作 ----

    def choose(self, card_id: int) -> bool:
        """カードを選ぶ。状態が変化したら True を返す。

        振る舞い:
        - 表向きの候補が1枚あれば中身を比較し、同じなら両方を一致済みにする（表向きのまま）。
          違えば候補を裏返す。どちらの場合も選んだカードを表向きにする。
        - 候補が無ければ全カードを裏返してから、選んだカードだけを表向きにする。
        """
        chosen_index = next((i for i, c in enumerate(self._cards) if c.id == card_id), None)
        if chosen_index is None:
            return False
        chosen = self._cards[chosen_index]
        if chosen.is_matched or chosen.is_face_up:
            return False

        potential_match_index = self.index_of_the_one_and_only_face_up_card
        if potential_match_index is not None:
            candidate = self._cards[potential_match_index]
            if chosen.content == candidate.content:
                chosen.mark_matched()
                candidate.mark_matched()
            else:
                candidate.turn_face_down()
        else:
            for card in self._cards:
                if card.is_face_up:
                    card.turn_face_down()
        chosen.turn_face_up()
        self._check_rep()
        return True

    def shuffle(self) -> None:
        """並び順だけを入れ替える。各カードの状態は変えない。"""
        self._rng.shuffle(self._cards)

    def restart(self) -> None:
        """同じペア数・中身生成関数で新しいデッキを作り直す。"""
        self._cards = self._build_deck()
        self._check_rep()
