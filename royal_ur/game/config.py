import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _optional_int(name: str) -> int | None:
    value = os.getenv(name)
    return int(value) if value not in (None, "") else None


@dataclass(slots=True)
class Config:
    # --- Board layout ---
    PATH_LENGTH: int = 14  # per-player route, 0..13
    PIECES_PER_PLAYER: int = 7
    NUM_PLAYERS: int = 2
    SHARED_START: int = 4  # central row is [SHARED_START, SHARED_END[
    SHARED_END: int = 12
    ROSETTAS: tuple[int, ...] = (3, 7, 13)
    CENTRAL_ROSETTA: int = 7

    # --- Dice: sum of DICE_COINS fair coins ---
    DICE_COINS: int = 4

    MAX_TURNS: int = int(os.getenv("UR_MAX_TURNS", 2000))

    # Derived (populated in __post_init__ due to slots)
    ENTER: int = 0
    MAX_ROLL: int = 0

    def __post_init__(self):
        # The sentinel for "bring a new piece in" sits just past the route
        self.ENTER = self.PATH_LENGTH
        self.MAX_ROLL = self.DICE_COINS

        if not 0 <= self.SHARED_START < self.SHARED_END <= self.PATH_LENGTH:
            raise ValueError("Shared track must lie inside the path")
        if self.CENTRAL_ROSETTA not in self.ROSETTAS:
            raise ValueError("CENTRAL_ROSETTA must be one of ROSETTAS")
        if self.MAX_TURNS <= 0:
            raise ValueError("MAX_TURNS must be positive")


@dataclass(slots=True)
class SearchConfig:
    depth: int = int(os.getenv("UR_SEARCH_DEPTH", 3))

    def __post_init__(self):
        if self.depth < 1:
            raise ValueError("Search depth must be at least 1")


@dataclass(slots=True)
class TrainingConfig:
    alpha: float = float(os.getenv("UR_ALPHA", 1e-4))
    games: int = int(os.getenv("UR_TRAIN_GAMES", 10_000))
    log_every: int = int(os.getenv("UR_LOG_EVERY", 1000))
    seed: int | None = field(default_factory=lambda: _optional_int("UR_SEED"))

    def __post_init__(self):
        if self.alpha <= 0:
            raise ValueError("alpha must be positive")
        if self.games < 0:
            raise ValueError("games must be non-negative")


config = Config()
search_config = SearchConfig()
training_config = TrainingConfig()
