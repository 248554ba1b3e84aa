"""Suspend/resume files and the score log.

A state file is the raw bytes of one packed record in native byte order:
16 grid bytes (row-major), a uint32 score and an int64 seed. It is read at
most once; a successful load deletes it.
"""

import logging
import os
import time
from pathlib import Path
from typing import Optional, Union

import numpy as np

from console2048.board_rules import SIZE
from console2048.state import GameState

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

STATE_DTYPE = np.dtype(
    [
        ("grid", "=u1", (SIZE, SIZE)),
        ("score", "=u4"),
        ("seed", "=i8"),
    ]
)


class CorruptStateError(ValueError):
    """Persisted state bytes do not form exactly one record."""


def encode_state(state: GameState) -> bytes:
    record = np.zeros((), dtype=STATE_DTYPE)
    record["grid"] = state.grid
    record["score"] = state.score
    record["seed"] = state.seed
    return record.tobytes()


def decode_state(data: bytes) -> GameState:
    if len(data) != STATE_DTYPE.itemsize:
        raise CorruptStateError(
            f"Expected {STATE_DTYPE.itemsize} bytes of state, received {len(data)}"
        )
    record = np.frombuffer(data, dtype=STATE_DTYPE)[0]
    return GameState(
        grid=record["grid"].copy(),
        score=int(record["score"]),
        seed=int(record["seed"]),
    )


def save_state(state: GameState, path: PathLike) -> bool:
    try:
        Path(path).write_bytes(encode_state(state))
    except OSError as exc:
        logger.warning(f"Failed to write state file {path}: {exc}")
        return False
    logger.info(f"State written to {path}")
    return True


def load_state(path: PathLike) -> Optional[GameState]:
    """Read and consume a state file.

    Returns ``None`` when there is nothing readable at ``path``. Raises
    :class:`CorruptStateError` when the file is there but malformed; the file
    is then kept.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError:
        return None

    state = decode_state(data)
    try:
        path.unlink()
    except OSError as exc:
        logger.warning(f"Loaded state but could not remove {path}: {exc}")
    logger.info(f"State loaded from {path}")
    return state


def append_score(score: int, path: PathLike, timestamp: Optional[int] = None) -> bool:
    if timestamp is None:
        timestamp = int(time.time())
    try:
        with open(path, "a") as fh:
            fh.write(f"{timestamp}\t{score}\n")
    except OSError as exc:
        logger.warning(f"Failed to append score to {path}: {exc}")
        return False
    logger.info(f"Score {score} recorded")
    return True
