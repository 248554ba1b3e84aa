"""Core 2048 board mechanics shared by the game session, the self test and tests.

Cells hold exponents: 0 is an empty cell and ``v`` is a tile worth ``2 ** v``.
Every direction is reduced to "move up" by rotating the grid clockwise.
"""

from typing import Iterable, List, NamedTuple, Sequence, Tuple

import numpy as np

SIZE = 4
DIRECTION_NAMES: Sequence[str] = ("UP", "LEFT", "DOWN", "RIGHT")
# clockwise quarter turns that bring a direction onto "up"
ROTATIONS = {name: turns for turns, name in enumerate(DIRECTION_NAMES)}


class SlideResult(NamedTuple):
    changed: bool
    score: int


def new_grid() -> np.ndarray:
    return np.zeros((SIZE, SIZE), dtype=np.uint8)


def as_grid(grid: Iterable[Iterable[int]]) -> np.ndarray:
    board = np.array(grid, dtype=np.uint8)
    if board.shape != (SIZE, SIZE):
        raise ValueError(f"Expected {SIZE}x{SIZE} grid, received shape {board.shape}")
    return board


def _find_target(line, x: int, stop: int) -> int:
    if x == 0:
        return x
    for t in range(x - 1, -1, -1):
        if line[t] != 0:
            if line[t] != line[x]:
                # blocked by a different tile, stop right after it
                return t + 1
            return t
        if t == stop:
            return t
    return x


def slide_line(line) -> SlideResult:
    """Slide and merge one line toward index 0, in place.

    A single left-to-right sweep. After a merge the ``stop`` boundary moves
    past the merged cell so it cannot absorb a second tile in the same pass,
    which is why ``[1, 1, 1, 1]`` becomes ``[2, 2, 0, 0]`` and not ``[3, 0, 0, 0]``.
    """
    changed = False
    score = 0
    stop = 0
    for x in range(len(line)):
        if line[x] == 0:
            continue
        t = _find_target(line, x, stop)
        if t == x:
            continue
        if line[t] == 0:
            line[t] = line[x]
        elif line[t] == line[x]:
            line[t] += 1
            score += 1 << int(line[t])
            stop = t + 1
        line[x] = 0
        changed = True
    return SlideResult(changed, score)


def rotate(grid: np.ndarray) -> np.ndarray:
    """Rotate ``grid`` a quarter turn clockwise in place, ring by ring."""
    n = len(grid)
    for i in range(n // 2):
        for j in range(i, n - i - 1):
            tmp = grid[i, j]
            grid[i, j] = grid[n - j - 1, i]
            grid[n - j - 1, i] = grid[n - i - 1, n - j - 1]
            grid[n - i - 1, n - j - 1] = grid[j, n - i - 1]
            grid[j, n - i - 1] = tmp
    return grid


def _rotate_times(grid: np.ndarray, turns: int) -> None:
    for _ in range(turns % 4):
        rotate(grid)


def move_up(grid: np.ndarray) -> SlideResult:
    changed = False
    score = 0
    for col in range(grid.shape[1]):
        result = slide_line(grid[:, col])
        changed |= result.changed
        score += result.score
    return SlideResult(changed, score)


def apply_move(grid: np.ndarray, direction: str) -> SlideResult:
    """Apply ``direction`` to ``grid`` in place."""
    try:
        turns = ROTATIONS[direction]
    except KeyError:
        raise ValueError(f"Unknown direction: {direction}") from None
    _rotate_times(grid, turns)
    result = move_up(grid)
    _rotate_times(grid, 4 - turns)
    return result


def simulate_move(grid: Sequence[Sequence[int]], direction: str) -> Tuple[np.ndarray, SlideResult]:
    next_board = as_grid(grid)
    result = apply_move(next_board, direction)
    return next_board, result


def valid_moves(grid: Sequence[Sequence[int]]) -> List[str]:
    allowed: List[str] = []
    for direction in DIRECTION_NAMES:
        _, result = simulate_move(grid, direction)
        if result.changed:
            allowed.append(direction)
    return allowed


def count_empty(grid: np.ndarray) -> int:
    return int(np.count_nonzero(grid == 0))


def _has_pair_across(grid: np.ndarray) -> bool:
    return bool(np.any(grid[:, :-1] == grid[:, 1:]))


def game_over(grid: np.ndarray) -> bool:
    """True when the grid is full and no two neighbours are equal.

    The vertical check rotates ``grid`` and always rotates it back.
    """
    if count_empty(grid) > 0:
        return False
    if _has_pair_across(grid):
        return False
    rotate(grid)
    try:
        return not _has_pair_across(grid)
    finally:
        _rotate_times(grid, 3)


__all__ = [
    "DIRECTION_NAMES",
    "ROTATIONS",
    "SIZE",
    "SlideResult",
    "apply_move",
    "as_grid",
    "count_empty",
    "game_over",
    "move_up",
    "new_grid",
    "rotate",
    "simulate_move",
    "slide_line",
    "valid_moves",
]
