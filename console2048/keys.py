from typing import Optional, TextIO

ESCAPE = "\x1b"

# arrow keys arrive as ESC [ A..D; the final letter is enough
MOVE_KEYS = {
    "a": "LEFT", "h": "LEFT", "D": "LEFT",
    "d": "RIGHT", "l": "RIGHT", "C": "RIGHT",
    "w": "UP", "k": "UP", "A": "UP",
    "s": "DOWN", "j": "DOWN", "B": "DOWN",
}

UNDO = "u"
QUIT = "q"
RESTART = "r"
SAVE_AND_EXIT = "x"
YES = "y"


def read_key(stream: TextIO) -> str:
    """Read one keystroke, collapsing arrow escape sequences. '' means end of input."""
    ch = stream.read(1)
    if ch == ESCAPE:
        if stream.read(1) == "[":
            return stream.read(1)
    return ch


def direction_for(key: str) -> Optional[str]:
    return MOVE_KEYS.get(key)
