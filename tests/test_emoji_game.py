"""
Tests for the EmojiMemoryGame view-model.
"""

import pytest

from src.memorize.services.emoji_game import EmojiMemoryGame, create_memory_game


class TestCreateMemoryGame:
    def test_content_follows_emoji_order(self, clock, rng):
        game = create_memory_game(["🐶", "🐸", "🐷"], 3, clock=clock, rng=rng)
        by_id = {c.id: c.content for c in game.cards}
        assert by_id == {0: "🐶", 1: "🐶", 2: "🐸", 3: "🐸", 4: "🐷", 5: "🐷"}

    def test_more_pairs_than_emojis_wraps_around(self, clock, rng):
        game = create_memory_game(["🐶", "🐸"], 3, clock=clock, rng=rng)
        by_id = {c.id: c.content for c in game.cards}
        assert by_id[4] == "🐶"
        assert len(game.cards) == 6

    def test_empty_emojis_rejected(self, clock):
        with pytest.raises(ValueError):
            create_memory_game([], 2, clock=clock)

    def test_empty_emojis_with_zero_pairs(self, clock):
        game = create_memory_game([], 0, clock=clock)
        assert game.cards == ()


class TestEmojiMemoryGame:
    def test_choose_accepts_card_or_id(self, clock, rng):
        vm = EmojiMemoryGame(["🐶"], 1, clock=clock, rng=rng)
        first, second = vm.cards

        assert vm.choose(first) is True
        assert vm.choose(second.id) is True
        assert vm.is_finished
        assert vm.matched_pair_count == 1

    def test_restart_and_shuffle(self, clock, rng):
        vm = EmojiMemoryGame(["🐶", "🐸"], 2, bonus_time_limit=3.0, clock=clock, rng=rng)
        vm.choose(vm.cards[0])
        vm.shuffle()
        assert sum(c.is_face_up for c in vm.cards) == 1

        vm.restart()
        assert not any(c.is_face_up for c in vm.cards)
        assert vm.pair_count == 2
        assert vm.emojis == ("🐶", "🐸")
        assert all(c.bonus_time_limit == 3.0 for c in vm.cards)
