"""Online self-play training of the linear evaluator.

At every turn the evaluator being trained produces a one-ply expectimax
target for the current board, takes a semi-gradient TD(0) step toward it, and
then picks the move actually played by greedy one-ply lookahead. The target
moves with the weights, so this is not a descent on a fixed label.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from .evaluators.linear import LinearEvaluator
from .game.board import Board
from .game.config import config, training_config
from .game.dice import roll_dice
from .game.render import format_weights
from .search import Expectimax


@dataclass
class SelfPlayResult:
    winner: Optional[int]
    plies: int
    passes: int
    mean_abs_error: float


def train_step(
    evaluator: LinearEvaluator, board: Board, target: float, alpha: float
) -> float:
    """Nudge ``evaluator`` toward ``target`` on ``board``; return the TD error."""
    return evaluator.step(board, target, alpha)


def self_play_game(
    evaluator: LinearEvaluator,
    rng: random.Random,
    alpha: float,
    max_turns: int = config.MAX_TURNS,
) -> SelfPlayResult:
    """Play one game of ``evaluator`` against itself, training every turn."""
    engine = Expectimax(evaluator)
    board = Board()
    plies = 0
    passes = 0
    total_error = 0.0
    updates = 0

    while plies + passes < max_turns:
        # Weights change only here, between two searches
        target = engine.expected_value(board, 1)
        total_error += abs(train_step(evaluator, board, target, alpha))
        updates += 1

        dice = roll_dice(rng)
        if not board.legal_moves(dice):
            board.swap_turn()
            passes += 1
            continue

        move, _ = engine.best_move(board, dice, 1)
        mover = board.turn
        plies += 1
        if board.apply_move(dice, move, check=False):
            return SelfPlayResult(
                winner=mover,
                plies=plies,
                passes=passes,
                mean_abs_error=total_error / updates,
            )

    logger.warning(f"[Train] self-play game stopped after {max_turns} turns")
    return SelfPlayResult(
        winner=None,
        plies=plies,
        passes=passes,
        mean_abs_error=total_error / max(1, updates),
    )


def train_self_play(
    games: Optional[int] = None,
    alpha: Optional[float] = None,
    seed: Optional[int] = None,
    log_every: Optional[int] = None,
    evaluator: Optional[LinearEvaluator] = None,
) -> LinearEvaluator:
    """Run ``games`` self-play games and return the trained evaluator."""
    games = training_config.games if games is None else games
    alpha = training_config.alpha if alpha is None else alpha
    seed = training_config.seed if seed is None else seed
    log_every = training_config.log_every if log_every is None else log_every
    if alpha <= 0:
        raise ValueError("alpha must be positive")

    evaluator = evaluator or LinearEvaluator()
    rng = random.Random(seed)
    started = time.time()
    logger.info(
        f"[Train] start: games={games} alpha={alpha} seed={seed} log_every={log_every}"
    )

    first_player_wins = 0
    window_games = 0
    window_error = 0.0
    window_plies = 0
    for game_idx in range(1, games + 1):
        result = self_play_game(evaluator, rng, alpha)
        window_games += 1
        window_error += result.mean_abs_error
        window_plies += result.plies
        if result.winner == 0:
            first_player_wins += 1

        if log_every > 0 and (game_idx % log_every == 0 or game_idx == games):
            elapsed = time.time() - started
            logger.info(
                f"[Train] after {game_idx}/{games} games: "
                f"first-player wins={first_player_wins / window_games:.3f} "
                f"mean |td error|={window_error / window_games:.5f} "
                f"avg plies={window_plies / window_games:.1f} "
                f"elapsed={elapsed:.1f}s"
            )
            logger.info(f"[Train] weights:\n{format_weights(evaluator.weights)}")
            first_player_wins = 0
            window_games = 0
            window_error = 0.0
            window_plies = 0

    logger.success(f"[Train] completed {games} games in {time.time() - started:.1f}s")
    return evaluator
