from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from src.memorize.domain.constants import DEFAULT_BONUS_TIME_LIMIT

ContentT = TypeVar("ContentT")

# 時刻取得関数（秒を返す）。テストでは任意の関数に差し替える
Clock = Callable[[], float]


@dataclass
class Card(Generic[ContentT]):
    """ゲームで使うカード1枚。

    現状の契約:
    - id: ペア番号 i に対して 2i / 2i+1（同一デッキ内で不変）
    - content: 同じペアの2枚で共有する中身（等価比較できること）
    - is_face_up / is_matched: 表向き・一致済みの状態。is_matched は一度 True になったら戻らない
    - 状態の変更は MemoryGame だけが turn_face_up / turn_face_down / mark_matched を通じて行う

    ボーナス時間:
    - 一致前に表向きになっている間だけ時計が進み、裏返す・一致させると経過時間を
      past_face_up_time に積み上げて止める。
    - bonus_time_limit 以内に一致させれば has_earned_bonus が True になる。
    """

    id: int
    content: ContentT
    is_face_up: bool = False
    is_matched: bool = False
    bonus_time_limit: float = DEFAULT_BONUS_TIME_LIMIT
    # 計測中なら、計測を開始した時刻
    last_face_up_date: float | None = None
    # 計測を止めた時点までの累積表向き時間
    past_face_up_time: float = 0.0
    clock: Clock = field(default=time.monotonic, compare=False, repr=False)

    # ---- 状態遷移（MemoryGame 専用） ----

    def turn_face_up(self) -> None:
        self.is_face_up = True
        if not self.is_matched:
            self._start_using_bonus_time()

    def turn_face_down(self) -> None:
        self.is_face_up = False
        self._stop_using_bonus_time()

    def mark_matched(self) -> None:
        self.is_matched = True
        self._stop_using_bonus_time()

    def _start_using_bonus_time(self) -> None:
        if self.last_face_up_date is None:
            self.last_face_up_date = self.clock()

    def _stop_using_bonus_time(self) -> None:
        self.past_face_up_time = self.face_up_time
        self.last_face_up_date = None

    # ---- 読み取り ----

    @property
    def face_up_time(self) -> float:
        """これまでに表向きだった合計秒数（計測中なら現在時刻までを含む）。"""
        if self.last_face_up_date is not None:
            return self.past_face_up_time + max(0.0, self.clock() - self.last_face_up_date)
        return self.past_face_up_time

    @property
    def bonus_time_remaining(self) -> float:
        return max(0.0, self.bonus_time_limit - self.face_up_time)

    @property
    def bonus_remaining(self) -> float:
        """残りボーナス時間の割合（0.0〜1.0）。"""
        remaining = self.bonus_time_remaining
        if self.bonus_time_limit > 0 and remaining > 0:
            return remaining / self.bonus_time_limit
        return 0.0

    @property
    def has_earned_bonus(self) -> bool:
        return self.is_matched and self.bonus_time_remaining > 0

    @property
    def is_consuming_bonus_time(self) -> bool:
        """表向き・未一致でボーナス時間が減っている最中か。"""
        return self.is_face_up and not self.is_matched and self.bonus_time_remaining > 0
