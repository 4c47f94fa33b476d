import unittest

from royal_ur.evaluators import AdvancementEvaluator, Evaluator, LinearEvaluator
from royal_ur.evaluators.linear import LinearWeights
from royal_ur.game.board import ENTER, Board
from royal_ur.game.errors import IllegalMoveError
from royal_ur.search import Expectimax


class ConstantEvaluator(Evaluator):
    name = "constant"
    certain_win_value = 1.0

    def evaluate(self, board):
        return 0.0


class TestExpectimaxBasics(unittest.TestCase):
    def setUp(self):
        self.engine = Expectimax(AdvancementEvaluator())

    def test_depth_zero_is_static_evaluation(self):
        boards = [
            Board(),
            Board.from_positions([[0, 5], [7]], out=(1, 0)),
            Board.from_positions([[3], [9, 11]], out=(0, 2), turn=1),
        ]
        linear = Expectimax(
            LinearEvaluator(LinearWeights(ready=-0.1, out=0.3, bias=0.05))
        )
        for board in boards:
            self.assertEqual(
                self.engine.expected_value(board, 0),
                self.engine.evaluator.evaluate(board),
            )
            self.assertEqual(
                linear.expected_value(board, 0), linear.evaluator.evaluate(board)
            )

    def test_negative_depth(self):
        with self.assertRaises(ValueError):
            self.engine.expected_value(Board(), -1)
        with self.assertRaises(ValueError):
            self.engine.best_move(Board(), 2, 0)

    def test_eval_move_rejects_illegal_move(self):
        with self.assertRaises(IllegalMoveError):
            self.engine.eval_move(Board(), 2, 5, 0)

    def test_bonus_turn_keeps_sign(self):
        # Entering on the rosetta: still our move, +4 for the piece on cell 3
        self.assertEqual(self.engine.eval_move(Board(), 4, ENTER, 0), 4.0)

    def test_turn_change_flips_sign(self):
        # The opponent sees -2 after we enter on cell 1; negated back to +2
        self.assertEqual(self.engine.eval_move(Board(), 2, ENTER, 0), 2.0)

    def test_no_move_flips_sign(self):
        board = Board.from_positions([[5], []])
        self.assertEqual(self.engine.eval_no_move(board, 0), 6.0)
        self.assertEqual(
            self.engine.eval_no_move(board, 0),
            -self.engine.evaluator.evaluate(swapped(board)),
        )

    def test_one_ply_expectation_on_initial_board(self):
        # dice 0: 0, dice 1..3: enter for +1..+3, dice 4: rosetta for +4
        expected = (0 * 1 + 1 * 4 + 2 * 6 + 3 * 4 + 4 * 1) / 16
        self.assertAlmostEqual(self.engine.expected_value(Board(), 1), expected)

    def test_search_does_not_mutate_board(self):
        board = Board.from_positions([[1, 6], [4, 9]], out=(1, 1), turn=1)
        snapshot = board.copy()
        self.engine.expected_value(board, 2)
        self.engine.best_move(board, 2, 2)
        self.assertEqual(board, snapshot)

    def test_reflection_gives_same_value(self):
        board = Board.from_positions([[2, 6], [5, 10]], out=(0, 1))
        self.assertAlmostEqual(
            self.engine.expected_value(board, 2),
            self.engine.expected_value(board.reflected(), 2),
        )


class TestBestMove(unittest.TestCase):
    def setUp(self):
        self.engine = Expectimax(AdvancementEvaluator())

    def test_no_move_returns_none(self):
        move, value = self.engine.best_move(Board(), 0, 1)
        self.assertIsNone(move)
        self.assertEqual(value, 0.0)

    def test_prefers_capture(self):
        board = Board.from_positions([[6, 1], [4]], turn=1)
        ranking = dict(self.engine.rank_moves(board, 2, 1))
        self.assertEqual(ranking, {ENTER: -2.0, 4: 5.0})
        move, value = self.engine.best_move(board, 2, 1)
        self.assertEqual(move, 4)
        self.assertEqual(value, 5.0)

    def test_ties_go_to_first_enumerated_move(self):
        engine = Expectimax(ConstantEvaluator())
        board = Board.from_positions([[1, 5], []])
        self.assertEqual(board.legal_moves(1), [ENTER, 1, 5])
        move, _ = engine.best_move(board, 1, 1)
        self.assertEqual(move, ENTER)

    def test_winning_move_is_worth_certain_win(self):
        board = Board.from_positions([[13], [10, 11]], out=(6, 0))
        evaluator = self.engine.evaluator
        for depth in (0, 1, 2):
            self.assertEqual(
                self.engine.eval_move(board, 1, 13, depth),
                evaluator.certain_win_value,
            )
        move, value = self.engine.best_move(board, 1, 2)
        self.assertEqual(move, 13)
        self.assertEqual(value, evaluator.certain_win_value)

    def test_expected_value_mixes_win_and_pass(self):
        # Only a roll of 1 bears the last piece off; every other roll passes
        board = Board.from_positions([[13], [10]], out=(6, 0))
        self.assertEqual(self.engine.evaluator.evaluate(board), 93.0)
        expected = (4 * 105.0 + 12 * 93.0) / 16
        self.assertAlmostEqual(self.engine.expected_value(board, 1), expected)


def swapped(board):
    other = board.copy()
    other.swap_turn()
    return other


if __name__ == "__main__":
    unittest.main()
