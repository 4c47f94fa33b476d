import random
import unittest

from royal_ur.game.errors import IllegalMoveError
from royal_ur.strategy import (
    BaseStrategy,
    FirstMoveStrategy,
    GreedyStrategy,
    LastMoveStrategy,
)
from royal_ur.tournament import ShowdownResult, play_game, showdown


class OutOfRangeStrategy(BaseStrategy):
    name = "broken"

    def _select(self, board, dice, moves):
        return 99


class TestPlayGame(unittest.TestCase):
    def test_game_has_a_winner(self):
        record = play_game(
            [FirstMoveStrategy(), LastMoveStrategy()], random.Random(7)
        )
        self.assertIn(record.winner, (0, 1))
        self.assertGreater(record.turns, record.passes)

    def test_turn_cap(self):
        record = play_game(
            [GreedyStrategy(), GreedyStrategy()], random.Random(7), max_turns=3
        )
        self.assertIsNone(record.winner)
        self.assertEqual(record.turns, 3)

    def test_needs_two_players(self):
        with self.assertRaises(ValueError):
            play_game([GreedyStrategy()], random.Random(0))

    def test_illegal_choice_is_rejected(self):
        with self.assertRaises(IllegalMoveError):
            play_game([OutOfRangeStrategy(), GreedyStrategy()], random.Random(0))


class TestShowdown(unittest.TestCase):
    def test_counts(self):
        result = showdown(GreedyStrategy(), FirstMoveStrategy(), rounds=3, seed=1)
        self.assertEqual(result.names, ("greedy", "first"))
        self.assertEqual(result.games, 6)
        self.assertEqual(sum(result.wins) + result.draws, 6)
        self.assertGreater(result.average_turns, 0)

    def test_seeded_showdown_is_reproducible(self):
        first = showdown(GreedyStrategy(), LastMoveStrategy(), rounds=2, seed=9)
        second = showdown(GreedyStrategy(), LastMoveStrategy(), rounds=2, seed=9)
        self.assertEqual(first.wins, second.wins)
        self.assertEqual(first.total_turns, second.total_turns)

    def test_result_helpers(self):
        result = ShowdownResult(names=("a", "b"), wins=[3, 1], games=4, total_turns=400)
        self.assertEqual(result.win_rate(0), 0.75)
        self.assertEqual(result.average_turns, 100.0)
        self.assertEqual(ShowdownResult(names=("a", "b")).win_rate(1), 0.0)


if __name__ == "__main__":
    unittest.main()
