"""Game state, single-level snapshots and the engine operations on them."""

import logging
from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Tuple

import numpy as np

from console2048 import board_rules, seeding

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class GameState:
    grid: np.ndarray = field(default_factory=board_rules.new_grid)
    score: int = 0
    seed: int = 0

    def __post_init__(self) -> None:
        self.grid = board_rules.as_grid(self.grid)

    def copy(self) -> "GameState":
        return GameState(self.grid.copy(), self.score, self.seed)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (
            np.array_equal(self.grid, other.grid)
            and self.score == other.score
            and self.seed == other.seed
        )


class Snapshot(NamedTuple):
    grid: np.ndarray
    score: int
    seed: int

    @classmethod
    def of(cls, state: GameState) -> "Snapshot":
        return cls(state.grid.copy(), state.score, state.seed)


def spawn_tile(state: GameState) -> GameState:
    """Put a 2 (or rarely a 4) in a random empty cell chosen from ``state.seed``.

    Does nothing on a full grid. The seed itself is left alone, see
    :func:`advance_seed`.
    """
    empty = np.argwhere(state.grid == 0)
    if len(empty) == 0:
        return state
    index, value = seeding.pick_spawn(state.seed, len(empty))
    row, col = empty[index]
    state.grid[row, col] = value
    return state


def advance_seed(state: GameState) -> GameState:
    state.seed = seeding.next_seed(state.seed)
    return state


def new_game(seed: Optional[int] = None) -> GameState:
    if seed is None:
        seed = seeding.next_seed(seeding.wall_clock_seed())
    state = GameState(seed=seed)
    for _ in range(2):
        spawn_tile(state)
        advance_seed(state)
    logger.debug(f"New game with seed {seed}")
    return state


def move(state: GameState, direction: str) -> Tuple[bool, GameState]:
    """Slide ``state`` toward ``direction`` in place and credit merge points."""
    result = board_rules.apply_move(state.grid, direction)
    state.score += result.score
    return result.changed, state


def is_game_over(grid: np.ndarray) -> bool:
    return board_rules.game_over(grid)


def undo(state: GameState, snapshot: Snapshot, reseed: bool = False) -> GameState:
    """Restore ``snapshot`` into ``state``.

    With ``reseed`` the seed comes from the wall clock rather than the
    snapshot, so the next spawn differs from the one being undone.
    """
    state.grid[...] = snapshot.grid
    state.score = snapshot.score
    state.seed = seeding.wall_clock_seed() if reseed else snapshot.seed
    return state


__all__ = [
    "GameState",
    "Snapshot",
    "advance_seed",
    "is_game_over",
    "move",
    "new_game",
    "spawn_tile",
    "undo",
]
