"""ANSI rendering of the board."""

from typing import Dict, NamedTuple, Sequence

SCHEME_NAMES = ("standard", "blackwhite", "bluered")

# (background, foreground) per exponent, 256-color palette indices
_SCHEMES: Dict[str, Sequence[int]] = {
    "standard": (
        8, 255, 1, 255, 2, 255, 3, 255, 4, 255, 5, 255, 6, 255, 7, 255,
        9, 0, 10, 0, 11, 0, 12, 0, 13, 0, 14, 0, 255, 0, 255, 0,
    ),
    "blackwhite": (
        232, 255, 234, 255, 236, 255, 238, 255, 240, 255, 242, 255, 244, 255, 246, 0,
        248, 0, 249, 0, 250, 0, 251, 0, 252, 0, 253, 0, 254, 0, 255, 0,
    ),
    "bluered": (
        235, 255, 63, 255, 57, 255, 93, 255, 129, 255, 165, 255, 201, 255, 200, 255,
        199, 255, 198, 255, 197, 255, 196, 255, 196, 255, 196, 255, 196, 255, 196, 255,
    ),
}

CELL_WIDTH = 7
HOME = "\033[H"
RESET = "\033[m"
LINE_UP = "\033[A"
HIDE_CURSOR_AND_CLEAR = "\033[?25l\033[2J"
SHOW_CURSOR_AND_RESET = "\033[?25h\033[m"
LEGEND = "     ←,↑,→,↓,u,x or q       "


class Colors(NamedTuple):
    foreground: int
    background: int


def tile_colors(value: int, scheme: str = "standard") -> Colors:
    table = _SCHEMES[scheme]
    return Colors(
        foreground=table[(1 + value * 2) % len(table)],
        background=table[(value * 2) % len(table)],
    )


def _paint(value: int, scheme: str, text: str) -> str:
    fg, bg = tile_colors(value, scheme)
    return f"\033[1;38;5;{fg};48;5;{bg}m{text}{RESET}"


def _label(value: int) -> str:
    if value == 0:
        return "·".center(CELL_WIDTH)
    number = str(1 << value)
    pad = CELL_WIDTH - len(number)
    return " " * (pad - pad // 2) + number + " " * (pad // 2)


def draw_board(grid, score: int, scheme: str = "standard") -> str:
    lines = [f"{HOME}2048.py {score:17d} pts", ""]
    blank = " " * CELL_WIDTH
    for row in grid:
        values = [int(v) for v in row]
        lines.append("".join(_paint(v, scheme, blank) for v in values))
        lines.append("".join(_paint(v, scheme, _label(v)) for v in values))
        lines.append("".join(_paint(v, scheme, blank) for v in values))
    lines.append("")
    lines.append(LEGEND)
    return "\n".join(lines) + "\n" + LINE_UP
