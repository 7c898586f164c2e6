"""Box-drawing rendering of the board, the layout used by the terminal version.

Each cell is six characters wide and three lines tall; the value sits on the
middle line. A 4x4 board therefore renders as 29 columns by 17 lines.
"""
from __future__ import annotations

from typing import Iterable, List

from twenty48.components.board import Board, Position

CELL_WIDTH = 6
CELL_HEIGHT = 3


def _rule(size: int, left: str, fill: str, joint: str, right: str) -> str:
    return left + joint.join([fill * CELL_WIDTH] * size) + right


def _cell_text(value: int, fresh: bool) -> str:
    if value == 0:
        return " " * CELL_WIDTH
    label = f"{value}*" if fresh else str(value)
    return label.center(CELL_WIDTH)


def render_board_text(board: Board, fresh: Iterable[Position] = ()) -> str:
    """Render ``board`` as a framed grid; cells listed in ``fresh`` get a ``*`` marker."""
    fresh_cells = set(fresh)
    size = board.size
    blank = "║" + "│".join([" " * CELL_WIDTH] * size) + "║"
    lines: List[str] = [_rule(size, "╔", "═", "╤", "╗")]
    for row in range(size):
        if row > 0:
            lines.append(_rule(size, "╟", "─", "┼", "╢"))
        values = [
            _cell_text(board.get(row, col), (row, col) in fresh_cells)
            for col in range(size)
        ]
        middle = CELL_HEIGHT // 2
        for offset in range(CELL_HEIGHT):
            lines.append("║" + "│".join(values) + "║" if offset == middle else blank)
    lines.append(_rule(size, "╚", "═", "╧", "╝"))
    return "\n".join(lines)
