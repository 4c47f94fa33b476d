# Contract violations raised by the rules engine. None of them is recoverable:
# they signal a caller bug and are never caught inside the library.
class RoyalUrError(Exception):
    """Base exception for rules-engine errors."""

    pass


class InvalidPlayerError(RoyalUrError, ValueError):
    """Raised when a player id is outside {0, 1}."""

    pass


class IllegalMoveError(RoyalUrError, ValueError):
    """Raised when a move token is not among the legal moves for the roll."""

    pass


class GameOverError(RoyalUrError, RuntimeError):
    """Raised when a move is applied to a finished board."""

    pass


class InvariantViolation(RoyalUrError, AssertionError):
    """Raised when piece conservation or shared-track exclusion is broken."""

    pass
