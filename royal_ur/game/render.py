"""Plain-text views of a board and of a linear weight table."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from .board import PATH_LENGTH, SHARED_END, SHARED_START, Board, is_rosetta

if TYPE_CHECKING:  # avoid runtime imports to prevent circular deps
    from ..evaluators.linear import LinearWeights

SYMBOLS = ("O", "X")


def _cell(board: Board, player: int, idx: int) -> str:
    if board.cells[player][idx]:
        return SYMBOLS[player]
    return "#" if is_rosetta(idx) else "."


def _private_row(board: Board, player: int) -> str:
    entry = " ".join(_cell(board, player, i) for i in reversed(range(SHARED_START)))
    exit_ = " ".join(
        _cell(board, player, i) for i in reversed(range(SHARED_END, PATH_LENGTH))
    )
    return f"{entry}     {exit_}"


def _shared_row(board: Board) -> str:
    symbols: List[str] = []
    for i in range(SHARED_START, SHARED_END):
        if board.cells[0][i]:
            symbols.append(SYMBOLS[0])
        elif board.cells[1][i]:
            symbols.append(SYMBOLS[1])
        else:
            symbols.append("#" if is_rosetta(i) else ".")
    return " ".join(symbols)


def render_board(board: Board) -> str:
    lines = [
        f"Turn: {SYMBOLS[board.turn]}",
        _private_row(board, 0),
        _shared_row(board),
        _private_row(board, 1),
        "",
    ]
    for player in (0, 1):
        lines.append(
            f"Player {SYMBOLS[player]}: {int(board.ready[player])} ready / "
            f"{int(board.out[player])} out"
        )
    return "\n".join(lines)


def format_weights(weights: "LinearWeights") -> str:
    """Weight table labelled with the board's column letters (A/C lanes, B row)."""
    lines = [f"READY  : {weights.ready:.6f}"]
    for i in range(SHARED_START):
        lines.append(f"A{SHARED_START - i}-C{SHARED_START - i}: {weights.cells[i]:.6f}")
    for i in range(SHARED_START, SHARED_END):
        lines.append(f"B{i - SHARED_START + 1}     : {weights.cells[i]:.6f}")
    for i in range(SHARED_END, PATH_LENGTH):
        # Exit lanes sit at the far end of the A/C rows, drawn right to left
        label = (SHARED_END - SHARED_START) - (i - SHARED_END)
        lines.append(f"A{label}-C{label}: {weights.cells[i]:.6f}")
    lines.append(f"OUT    : {weights.out:.6f}")
    lines.append(f"ADV    : {weights.bias:.6f}")
    return "\n".join(lines)
