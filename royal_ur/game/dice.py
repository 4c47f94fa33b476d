from __future__ import annotations

import random
from math import comb

import numpy as np

from .config import config

# P[k] of rolling k with DICE_COINS fair coins: [1, 4, 6, 4, 1] / 16.
PROBABILITIES: np.ndarray = np.array(
    [comb(config.DICE_COINS, k) for k in range(config.DICE_COINS + 1)],
    dtype=np.float64,
) / float(2**config.DICE_COINS)
PROBABILITIES.setflags(write=False)


def roll_dice(rng: random.Random | None = None) -> int:
    """Sum of DICE_COINS independent fair coin flips."""
    rng = rng or random
    return bin(rng.getrandbits(config.DICE_COINS)).count("1")
