import random
import unittest

from royal_ur.game.board import ENTER, PIECES, Board
from royal_ur.game.dice import roll_dice


def random_playout(seed, max_plies=3000):
    """Yield (board, dice, moves) before every roll of a random game."""
    rng = random.Random(seed)
    board = Board()
    for _ in range(max_plies):
        if board.winner is not None:
            return
        dice = roll_dice(rng)
        moves = board.legal_moves(dice)
        yield board, dice, moves
        if not moves:
            board.swap_turn()
            continue
        board.apply_move(dice, rng.choice(moves))


class TestRandomPlayouts(unittest.TestCase):
    def test_invariants_hold_along_games(self):
        for seed in range(10):
            for board, _, _ in random_playout(seed):
                board.check_invariants()

    def test_move_order_is_canonical(self):
        for seed in range(5):
            for _, _, moves in random_playout(seed):
                if ENTER in moves:
                    self.assertEqual(moves[0], ENTER)
                rest = [m for m in moves if m != ENTER]
                self.assertEqual(rest, sorted(rest))
                self.assertEqual(len(set(moves)), len(moves))

    def test_random_games_terminate_with_one_winner(self):
        for seed in range(5):
            # The same board object is yielded and mutated in place
            board = None
            for board, _, _ in random_playout(seed):
                pass
            self.assertIn(board.winner, (0, 1))
            self.assertEqual(int(board.out[board.winner]), PIECES)
            self.assertLess(int(board.out[1 - board.winner]), PIECES)
            self.assertTrue(board.is_finished())

    def test_rosetta_landing_is_the_only_bonus(self):
        for seed in range(5):
            rng = random.Random(100 + seed)
            board = Board()
            while board.winner is None:
                dice = roll_dice(rng)
                moves = board.legal_moves(dice)
                if not moves:
                    board.swap_turn()
                    continue
                move = rng.choice(moves)
                mover = board.turn
                dest = dice - 1 if move == ENTER else move + dice
                board.apply_move(dice, move)
                if board.winner is not None:
                    break
                if dest in (3, 7, 13):
                    self.assertEqual(board.turn, mover)
                else:
                    self.assertNotEqual(board.turn, mover)


if __name__ == "__main__":
    unittest.main()
