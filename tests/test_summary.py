"""
Tests for score summary.
"""

from src.memorize.domain import MemoryGame
from src.memorize.services.summary import bonus_table, summarize


def _play_pair(game, content):
    for card_id in sorted(c.id for c in game.cards if c.content == content):
        game.choose(card_id)


class TestSummary:
    def test_fresh_game(self, clock, rng):
        game = MemoryGame(3, lambda i: "ABC"[i], clock=clock, rng=rng)
        summary = summarize(game.cards)

        assert summary.total_pairs == 3
        assert summary.matched_pairs == 0
        assert summary.remaining_pairs == 3
        assert summary.bonus_pairs == 0
        assert not summary.is_finished

    def test_counts_bonus_pairs(self, clock, rng):
        """A pair earns the bonus only when the first pick was matched in time."""
        game = MemoryGame(2, lambda i: "AB"[i], bonus_time_limit=5.0, clock=clock, rng=rng)
        a1, a2 = sorted(c.id for c in game.cards if c.content == "A")
        game.choose(a1)
        clock.advance(10)
        game.choose(a2)
        b1, b2 = sorted(c.id for c in game.cards if c.content == "B")
        game.choose(b1)
        clock.advance(2)
        game.choose(b2)

        summary = summarize(game.cards)
        assert summary.matched_pairs == 2
        assert summary.bonus_pairs == 1
        assert summary.is_finished

    def test_slow_single_pair_has_no_bonus(self, clock, rng):
        game = MemoryGame(1, lambda i: "A", bonus_time_limit=5.0, clock=clock, rng=rng)
        a1, a2 = sorted(c.id for c in game.cards)
        game.choose(a1)
        clock.advance(60)
        game.choose(a2)

        summary = summarize(game.cards)
        assert summary.matched_pairs == 1
        assert summary.bonus_pairs == 0

    def test_no_bonus_when_limit_is_zero(self, clock, rng):
        game = MemoryGame(1, lambda i: "A", bonus_time_limit=0, clock=clock, rng=rng)
        _play_pair(game, "A")
        assert summarize(game.cards).bonus_pairs == 0


class TestBonusTable:
    def test_only_matched_pairs(self, clock, rng):
        game = MemoryGame(2, lambda i: "AB"[i], bonus_time_limit=6.0, clock=clock, rng=rng)
        a1, a2 = sorted(c.id for c in game.cards if c.content == "A")
        game.choose(a1)
        clock.advance(2)
        game.choose(a2)

        df = bonus_table(game.cards)

        assert list(df.columns) == ["絵柄", "ボーナス残り（秒）", "ボーナス獲得"]
        assert len(df) == 1
        row = df.iloc[0]
        assert row["絵柄"] == "A"
        assert row["ボーナス残り（秒）"] == 4.0
        assert bool(row["ボーナス獲得"]) is True

    def test_empty(self, clock, rng):
        game = MemoryGame(2, lambda i: "AB"[i], clock=clock, rng=rng)
        df = bonus_table(game.cards)
        assert df.empty
        assert list(df.columns) == ["絵柄", "ボーナス残り（秒）", "ボーナス獲得"]

    def test_slow_pair_shows_no_time_left(self, clock, rng):
        game = MemoryGame(1, lambda i: "A", bonus_time_limit=5.0, clock=clock, rng=rng)
        a1, a2 = sorted(c.id for c in game.cards)
        game.choose(a1)
        clock.advance(60)
        game.choose(a2)

        row = bonus_table(game.cards).iloc[0]
        assert row["ボーナス残り（秒）"] == 0.0
        assert bool(row["ボーナス獲得"]) is False
