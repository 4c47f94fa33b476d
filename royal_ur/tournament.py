"""Match runner: plays two strategies against each other and tallies wins."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from loguru import logger

from .game.board import Board
from .game.config import config
from .game.dice import roll_dice
from .strategy.base import BaseStrategy


@dataclass
class GameRecord:
    winner: Optional[int]  # seat 0 or 1, None when the turn cap was hit
    turns: int
    passes: int


@dataclass
class ShowdownResult:
    names: tuple[str, str]
    wins: List[int] = field(default_factory=lambda: [0, 0])
    draws: int = 0
    games: int = 0
    total_turns: int = 0

    def win_rate(self, idx: int) -> float:
        return self.wins[idx] / self.games if self.games else 0.0

    @property
    def average_turns(self) -> float:
        return self.total_turns / self.games if self.games else 0.0


def play_game(
    players: Sequence[BaseStrategy],
    rng: random.Random,
    max_turns: int = config.MAX_TURNS,
) -> GameRecord:
    """Play one game; ``players[0]`` moves first."""
    if len(players) != 2:
        raise ValueError("a game needs exactly two players")

    board = Board()
    turns = 0
    passes = 0
    while turns < max_turns:
        turns += 1
        dice = roll_dice(rng)
        moves = board.legal_moves(dice)
        if not moves:
            board.swap_turn()
            passes += 1
            continue

        mover = board.turn
        move = moves[0] if len(moves) == 1 else players[mover].choose(board, dice)
        if board.apply_move(dice, move):
            return GameRecord(winner=mover, turns=turns, passes=passes)

    logger.warning(f"[Showdown] game stopped after {max_turns} turns without winner")
    return GameRecord(winner=None, turns=turns, passes=passes)


def showdown(
    strategy_a: BaseStrategy,
    strategy_b: BaseStrategy,
    rounds: int,
    seed: Optional[int] = None,
    max_turns: int = config.MAX_TURNS,
) -> ShowdownResult:
    """Play ``rounds`` pairs of games, swapping who moves first in each pair."""
    rng = random.Random(seed)
    result = ShowdownResult(names=(str(strategy_a), str(strategy_b)))

    # Seat order of each game, and which strategy (a=0, b=1) sits in seats 0/1
    pairings = (
        ((strategy_a, strategy_b), (0, 1)),
        ((strategy_b, strategy_a), (1, 0)),
    )
    for round_idx in range(rounds):
        for seats, owner in pairings:
            record = play_game(seats, rng, max_turns=max_turns)
            result.games += 1
            result.total_turns += record.turns
            if record.winner is None:
                result.draws += 1
            else:
                result.wins[owner[record.winner]] += 1
        logger.debug(f"[Showdown] round {round_idx + 1}/{rounds}: wins={result.wins}")

    logger.info(
        f"[Showdown] {result.names[0]}: {result.wins[0]}/{result.games} | "
        f"{result.names[1]}: {result.wins[1]}/{result.games} | "
        f"draws={result.draws} avg turns={result.average_turns:.1f}"
    )
    return result
