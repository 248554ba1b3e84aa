"""Seeded randomness for tile spawns.

The visible seed is not the generator state: a fresh generator is built from
the stored seed before every draw, and the next seed is one more draw from it.
"""

import time

import numpy as np

SEED_BOUND = 2 ** 31
_SEED_MASK = (1 << 64) - 1


def generator(seed: int) -> np.random.Generator:
    return np.random.default_rng(int(seed) & _SEED_MASK)


def next_seed(seed: int) -> int:
    return int(generator(seed).integers(SEED_BOUND))


def wall_clock_seed() -> int:
    return int(time.time())


def pick_spawn(seed: int, empty_count: int):
    """Return ``(cell index, exponent)`` for a spawn among ``empty_count`` cells.

    The exponent is 1 nine times out of ten and 2 otherwise.
    """
    rng = generator(seed)
    index = int(rng.integers(empty_count))
    value = int(rng.integers(10)) // 9 + 1
    return index, value


__all__ = ["SEED_BOUND", "generator", "next_seed", "pick_spawn", "wall_clock_seed"]
