"""
スコア集計サービス。

目的:
- カード列（MemoryGame.cards のコピー）から、一致済みペア数とボーナス獲得数を求める。
- 結果表示用に、一致したペアごとのボーナス残り時間を pandas.DataFrame で返す。

契約:
- ペアは content で束ねる。同じ content の2枚がともに一致済みのときだけ「一致」と数える。
- ボーナスは2枚とも has_earned_bonus のときだけ獲得とする（先にめくったカードの時間で決まる）。
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import pandas as pd

from src.memorize.domain import Card


@dataclass(frozen=True)
class GameSummary:
    total_pairs: int
    matched_pairs: int
    bonus_pairs: int

    @property
    def remaining_pairs(self) -> int:
        return self.total_pairs - self.matched_pairs

    @property
    def is_finished(self) -> bool:
        return self.matched_pairs == self.total_pairs


def _group_by_pair(cards: Iterable[Card[str]]) -> dict[int, list[Card[str]]]:
    """ペア番号（id // 2）ごとにカードをまとめる。"""
    groups: dict[int, list[Card[str]]] = {}
    for card in cards:
        groups.setdefault(card.id // 2, []).append(card)
    return groups


def summarize(cards: Iterable[Card[str]]) -> GameSummary:
    groups = _group_by_pair(cards)
    matched = [g for g in groups.values() if all(c.is_matched for c in g)]
    bonus = [g for g in matched if all(c.has_earned_bonus for c in g)]
    return GameSummary(total_pairs=len(groups), matched_pairs=len(matched), bonus_pairs=len(bonus))


def bonus_table(cards: Iterable[Card[str]]) -> pd.DataFrame:
    """一致済みペアのボーナス結果表を返す（ペア番号順）。

    列: 絵柄, ボーナス残り（秒）, ボーナス獲得
    """
    rows: list[dict[str, object]] = []
    for _, group in sorted(_group_by_pair(cards).items()):
        if not all(c.is_matched for c in group):
            continue
        rows.append(
            {
                "絵柄": group[0].content,
                "ボーナス残り（秒）": round(min(c.bonus_time_remaining for c in group), 1),
                "ボーナス獲得": all(c.has_earned_bonus for c in group),
            }
        )
    return pd.DataFrame(rows, columns=["絵柄", "ボーナス残り（秒）", "ボーナス獲得"])
