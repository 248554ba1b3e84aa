"""Interactive input loop driving a :class:`~console2048.game.Game`."""

import logging
import time
from pathlib import Path
from typing import TextIO, Tuple

from console2048 import keys, persistence
from console2048.game import Game
from console2048.render import draw_board

logger = logging.getLogger(__name__)

ANIMATION_DELAY = 0.15


class Session:
    def __init__(
        self,
        game: Game,
        stdin: TextIO,
        stdout: TextIO,
        state_file: Path,
        score_file: Path,
        scheme: str = "standard",
        delay: float = ANIMATION_DELAY,
    ):
        self.game = game
        self.stdin = stdin
        self.stdout = stdout
        self.state_file = state_file
        self.score_file = score_file
        self.scheme = scheme
        self.delay = delay

    def draw(self) -> None:
        self.stdout.write(draw_board(self.game.grid, self.game.score, self.scheme))
        self.stdout.flush()

    def say(self, message: str) -> None:
        self.stdout.write(message.center(28) + "\n")
        self.stdout.flush()

    def confirm(self, question: str) -> bool:
        self.say(f"{question} (y/N)")
        return keys.read_key(self.stdin) == keys.YES

    def _ask_undo(self) -> bool:
        self.say("GAME OVER, UNDO? (y/N)")
        while True:
            key = keys.read_key(self.stdin)
            if key == keys.YES:
                return True
            if key in ("n", "\n", ""):
                return False

    def _after_move(self) -> bool:
        """Spawn and check for the end. Returns False when the session is over."""
        self.draw()
        if self.delay:
            time.sleep(self.delay)
        self.game.spawn()
        self.draw()
        if not self.game.over:
            return True
        logger.info(f"Game over with score {self.game.score}")
        if self._ask_undo():
            self.game.undo()
            self.draw()
            return True
        return False

    def run(self, loaded: bool = False) -> bool:
        """Play until the player quits or the game ends.

        Returns True when the session ended by saving state, in which case no
        score is logged.
        """
        self.draw()
        if loaded:
            self.say("State loaded.")
        while True:
            key = keys.read_key(self.stdin)
            if key == "":
                self.stdout.write("\nError! Cannot read keyboard input!\n")
                break

            direction = keys.direction_for(key)
            if direction is not None and self.game.slide(direction):
                if not self._after_move():
                    break
            elif key == keys.UNDO:
                self.game.undo()
                self.draw()
            elif key == keys.QUIT:
                if self.confirm("QUIT?"):
                    break
                self.draw()
            elif key == keys.RESTART:
                if self.confirm("RESTART?"):
                    persistence.append_score(self.game.score, self.score_file)
                    self.game.restart()
                self.draw()
            elif key == keys.SAVE_AND_EXIT:
                if persistence.save_state(self.game.state, self.state_file):
                    self.say("State written.")
                else:
                    self.say("Could not write state!")
                return True

        persistence.append_score(self.game.score, self.score_file)
        return False


def load_or_new(state_file: Path, seed_hacking: bool = False) -> Tuple[Game, bool]:
    """Resume from ``state_file`` if possible, otherwise start fresh."""
    try:
        state = persistence.load_state(state_file)
    except persistence.CorruptStateError as exc:
        logger.warning(f"Ignoring corrupt state file {state_file}: {exc}")
        state = None
    return Game(state, seed_hacking=seed_hacking), state is not None
