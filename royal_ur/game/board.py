from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

import numpy as np

from .config import config
from .errors import (
    GameOverError,
    IllegalMoveError,
    InvalidPlayerError,
    InvariantViolation,
)

# For each player, cells are indexed by their place in that player's path: the
# fourteen cells a piece walks through before leaving the board.
#
#   3  2  1  0        13 12     <- player 0 private lanes
#   4  5  6  7  8  9  10 11     <- shared central row
#   3  2  1  0        13 12     <- player 1 private lanes
#
# Both paths cross the central row [4, 12[, so a shared cell holds at most one
# piece across the two players.

PATH_LENGTH = config.PATH_LENGTH
PIECES = config.PIECES_PER_PLAYER
ENTER = config.ENTER
SHARED_START = config.SHARED_START
SHARED_END = config.SHARED_END
ROSETTAS = frozenset(config.ROSETTAS)
CENTRAL_ROSETTA = config.CENTRAL_ROSETTA
MAX_ROLL = config.MAX_ROLL


def is_shared(idx: int) -> bool:
    return SHARED_START <= idx < SHARED_END


def is_rosetta(idx: int) -> bool:
    return idx in ROSETTAS


def opponent(player: int) -> int:
    if player != 0 and player != 1:
        raise InvalidPlayerError(f"player should be 0 or 1, not {player!r}")
    return 1 - player


def _new_ready() -> np.ndarray:
    return np.full(2, PIECES, dtype=np.int8)


def _new_cells() -> np.ndarray:
    return np.zeros((2, PATH_LENGTH), dtype=np.bool_)


def _new_out() -> np.ndarray:
    return np.zeros(2, dtype=np.int8)


@dataclass(slots=True, eq=False)
class Board:
    """Complete game state. Mutated only by apply_move and swap_turn.

    The default instance is a new game: every piece ready, nothing on the
    board, player 0 to move.
    """

    ready: np.ndarray = field(default_factory=_new_ready)
    cells: np.ndarray = field(default_factory=_new_cells)
    out: np.ndarray = field(default_factory=_new_out)
    turn: int = 0

    def __post_init__(self) -> None:
        self.ready = np.array(self.ready, dtype=np.int8)
        self.cells = np.array(self.cells, dtype=np.bool_)
        self.out = np.array(self.out, dtype=np.int8)
        if self.ready.shape != (2,) or self.out.shape != (2,):
            raise ValueError("ready and out must hold one count per player")
        if self.cells.shape != (2, PATH_LENGTH):
            raise ValueError(f"cells must have shape (2, {PATH_LENGTH})")
        opponent(self.turn)
        self.turn = int(self.turn)

    @classmethod
    def from_positions(
        cls,
        positions: Sequence[Iterable[int]],
        out: Sequence[int] = (0, 0),
        turn: int = 0,
    ) -> "Board":
        """Build a board from the occupied path indices of each player.

        Ready counts are derived so that every player owns exactly seven
        pieces.
        """
        if len(positions) != 2:
            raise ValueError("positions must list the cells of both players")
        cells = _new_cells()
        for player, indices in enumerate(positions):
            for idx in indices:
                cells[player, idx] = True
        ready = [PIECES - int(out[p]) - int(cells[p].sum()) for p in range(2)]
        board = cls(ready=ready, cells=cells, out=out, turn=turn)
        board.check_invariants()
        return board

    def copy(self) -> "Board":
        # Bypass __post_init__: the search copies a board at every node.
        obj = object.__new__(Board)
        obj.ready = self.ready.copy()
        obj.cells = self.cells.copy()
        obj.out = self.out.copy()
        obj.turn = self.turn
        return obj

    def reflected(self) -> "Board":
        """Same position with the two players' roles exchanged."""
        obj = object.__new__(Board)
        obj.ready = self.ready[::-1].copy()
        obj.cells = self.cells[::-1].copy()
        obj.out = self.out[::-1].copy()
        obj.turn = 1 - self.turn
        return obj

    # --- Rules: enumeration and application ---
    def legal_moves(self, dice: int) -> List[int]:
        """Move tokens for the mover: ENTER first, then ascending path indices."""
        if not 0 <= dice <= MAX_ROLL:
            raise ValueError(f"dice must be within [0, {MAX_ROLL}], not {dice}")
        if dice == 0:
            return []

        me = self.turn
        mine = self.cells[me]
        theirs = self.cells[1 - me]
        moves: List[int] = []
        if self.ready[me] > 0 and not mine[dice - 1]:
            moves.append(ENTER)
        for i in np.flatnonzero(mine):
            i = int(i)
            dest = i + dice
            if dest == PATH_LENGTH:
                # Bearing off
                moves.append(i)
                continue
            if dest > PATH_LENGTH:
                continue
            if mine[dest]:
                continue
            if dest == CENTRAL_ROSETTA and theirs[CENTRAL_ROSETTA]:
                continue
            moves.append(i)
        return moves

    def apply_move(self, dice: int, move: int, check: bool = True) -> bool:
        """Play ``move`` for the mover and return True if it wins the game.

        With ``check=False`` the caller guarantees that ``move`` comes from
        ``legal_moves(dice)`` on this exact state.
        """
        if check:
            if self.winner is not None:
                raise GameOverError("Game already finished")
            if move not in self.legal_moves(dice):
                raise IllegalMoveError(
                    f"move {move} is not legal for player {self.turn} with dice {dice}"
                )

        me = self.turn
        if move == ENTER:
            dest = dice - 1
            self.cells[me, dest] = True
            self.ready[me] -= 1
        elif move + dice == PATH_LENGTH:
            self.cells[me, move] = False
            self.out[me] += 1
            self.turn = 1 - me
            return bool(self.out[me] == PIECES)
        else:
            dest = move + dice
            opp = 1 - me
            self.cells[me, move] = False
            self.cells[me, dest] = True
            if is_shared(dest) and self.cells[opp, dest]:
                # Capture: the opponent's piece goes back to its ready pool
                self.cells[opp, dest] = False
                self.ready[opp] += 1

        if dest not in ROSETTAS:
            self.turn = 1 - me
        return False

    def swap_turn(self) -> None:
        self.turn = opponent(self.turn)

    def is_finished(self) -> bool:
        return bool(self.out[1 - self.turn] == PIECES)

    @property
    def winner(self) -> Optional[int]:
        for player in (0, 1):
            if self.out[player] == PIECES:
                return player
        return None

    # --- Queries ---
    def on_board(self, player: int) -> List[int]:
        opponent(player)
        return [int(i) for i in np.flatnonzero(self.cells[player])]

    def piece_count(self, player: int) -> int:
        opponent(player)
        return int(self.ready[player]) + int(self.out[player]) + int(
            self.cells[player].sum()
        )

    def check_invariants(self) -> None:
        for player in (0, 1):
            total = self.piece_count(player)
            if total != PIECES:
                raise InvariantViolation(
                    f"player {player} owns {total} pieces instead of {PIECES}"
                )
            if self.ready[player] < 0 or self.out[player] < 0:
                raise InvariantViolation(f"negative counts for player {player}")
        shared = self.cells[:, SHARED_START:SHARED_END]
        clash = np.flatnonzero(shared[0] & shared[1])
        if clash.size:
            raise InvariantViolation(
                f"shared cells {[int(i) + SHARED_START for i in clash]} hold two pieces"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.turn == other.turn
            and np.array_equal(self.ready, other.ready)
            and np.array_equal(self.cells, other.cells)
            and np.array_equal(self.out, other.out)
        )

    def __str__(self) -> str:
        from .render import render_board

        return render_board(self)
