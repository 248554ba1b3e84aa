import argparse
import logging
import os
import signal
import sys
from typing import List, Optional

from console2048 import paths, selftest
from console2048.game import Game
from console2048.play import Session, load_or_new
from console2048.render import SCHEME_NAMES
from console2048.terminal import RawTerminal

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "CONSOLE2048_LOG_LEVEL"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="console2048", description="Console version of the game 2048")
    parser.add_argument("-t", "--test", action="store_true", help="Run the slide/merge self test and exit")
    parser.add_argument("-l", "--load", action="store_true", help="Resume the game saved with 'x'")
    parser.add_argument(
        "-s", "--seed-hacking", action="store_true", help="Reseed from the clock on undo"
    )
    parser.add_argument(
        "-c", "--color-scheme", choices=SCHEME_NAMES, default="standard", help="Tile color scheme"
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, "INFO"),
        help=f"Logging level (default from {LOG_LEVEL_ENV}, else INFO)",
    )
    return parser.parse_args(argv)


def configure_logging(level: str, game_dir) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.FileHandler(paths.log_path(game_dir))],
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.test:
        return 0 if selftest.run(sys.stdout) else 1

    try:
        game_dir = paths.resolve_game_dir()
    except (paths.GameDirError, OSError) as exc:
        print(f"Error! {exc}", file=sys.stderr)
        return 1
    configure_logging(args.log_level, game_dir)

    state_file = paths.state_path(game_dir)
    if args.load:
        game, loaded = load_or_new(state_file, seed_hacking=args.seed_hacking)
    else:
        game, loaded = Game(seed_hacking=args.seed_hacking), False

    session = Session(
        game,
        sys.stdin,
        sys.stdout,
        state_file=state_file,
        score_file=paths.score_path(game_dir),
        scheme=args.color_scheme,
    )
    try:
        with RawTerminal(sys.stdin, sys.stdout):
            session.run(loaded=loaded)
    except KeyboardInterrupt:
        print("         TERMINATED         ")
        logger.info(f"Interrupted with score {game.score}")
        return int(signal.SIGINT)
    return 0


if __name__ == "__main__":
    sys.exit(main())
