"""Slide/merge vectors checked by ``console2048 --test``."""

import sys
from typing import TextIO

import numpy as np

from console2048.board_rules import slide_line

# (in, out, points) in exponent notation
VECTORS = (
    ((0, 0, 0, 1), (1, 0, 0, 0), 0),
    ((0, 0, 1, 1), (2, 0, 0, 0), 4),
    ((0, 1, 0, 1), (2, 0, 0, 0), 4),
    ((1, 0, 0, 1), (2, 0, 0, 0), 4),
    ((1, 0, 1, 0), (2, 0, 0, 0), 4),
    ((1, 1, 1, 0), (2, 1, 0, 0), 4),
    ((1, 0, 1, 1), (2, 1, 0, 0), 4),
    ((1, 1, 0, 1), (2, 1, 0, 0), 4),
    ((1, 1, 1, 1), (2, 2, 0, 0), 8),
    ((2, 2, 1, 1), (3, 2, 0, 0), 12),
    ((1, 1, 2, 2), (2, 3, 0, 0), 12),
    ((3, 0, 1, 1), (3, 2, 0, 0), 4),
    ((2, 0, 1, 1), (2, 2, 0, 0), 4),
)


def _fmt(values) -> str:
    return " ".join(str(int(v)) for v in values)


def run(out: TextIO = sys.stdout) -> bool:
    for line_in, line_out, points in VECTORS:
        line = np.array(line_in, dtype=np.uint8)
        result = slide_line(line)
        if tuple(int(v) for v in line) != line_out or result.score != points:
            out.write(
                f"{_fmt(line_in)} => {_fmt(line)} ({result.score} points) expected "
                f"{_fmt(line_in)} => {_fmt(line_out)} ({points} points)\n"
            )
            return False
    out.write(f"All {len(VECTORS)} tests executed successfully\n")
    return True
