import os
from pathlib import Path
from typing import Mapping, Optional

GAME_DIR_ENV = "CONSOLE2048_DIR"
STATE_FILE = "state"
SCORE_FILE = "score.txt"
LOG_FILE = "2048.log"


class GameDirError(RuntimeError):
    """No directory could be resolved for the game's files."""


def resolve_game_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if environ is None else environ

    override = env.get(GAME_DIR_ENV)
    if override:
        game_dir = Path(override).expanduser()
    elif env.get("XDG_CONFIG_HOME"):
        game_dir = Path(env["XDG_CONFIG_HOME"]) / "2048"
    elif env.get("HOME"):
        game_dir = Path(env["HOME"]) / ".config" / "2048"
    else:
        raise GameDirError(f"Set HOME, XDG_CONFIG_HOME or {GAME_DIR_ENV}")

    game_dir.mkdir(parents=True, exist_ok=True)
    return game_dir


def state_path(game_dir: Path) -> Path:
    return game_dir / STATE_FILE


def score_path(game_dir: Path) -> Path:
    return game_dir / SCORE_FILE


def log_path(game_dir: Path) -> Path:
    return game_dir / LOG_FILE
