"""Console version of the sliding-tile puzzle 2048."""

from console2048.game import Game
from console2048.state import GameState, Snapshot

__all__ = ["Game", "GameState", "Snapshot"]
