"""A running session: one live state plus the one-move undo buffer."""

import logging
from typing import Optional

from console2048 import state as engine
from console2048.state import GameState, Snapshot

logger = logging.getLogger(__name__)


class Game:
    def __init__(self, state: Optional[GameState] = None, seed_hacking: bool = False):
        self.state = state if state is not None else engine.new_game()
        self.seed_hacking = seed_hacking
        self.snapshot = Snapshot.of(self.state)

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def grid(self):
        return self.state.grid

    @property
    def over(self) -> bool:
        return engine.is_game_over(self.state.grid)

    def backup(self) -> None:
        self.snapshot = Snapshot.of(self.state)

    def slide(self, direction: str) -> bool:
        """Back up, then slide. The backup happens even when nothing moves."""
        self.backup()
        changed, _ = engine.move(self.state, direction)
        return changed

    def spawn(self) -> None:
        engine.spawn_tile(self.state)
        engine.advance_seed(self.state)

    def move(self, direction: str) -> bool:
        changed = self.slide(direction)
        if changed:
            self.spawn()
        return changed

    def undo(self) -> None:
        engine.undo(self.state, self.snapshot, reseed=self.seed_hacking)

    def restart(self) -> None:
        logger.info(f"Restarting after score {self.state.score}")
        seed = engine.advance_seed(self.state).seed
        self.state = engine.new_game(seed)
        self.backup()
