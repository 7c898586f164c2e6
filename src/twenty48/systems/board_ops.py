"""Slide-and-merge engine shared by every move direction.

A direction is turned into a set of *lines*: ordered lists of board positions
that start at the edge tiles travel toward. Separation and merging are written
once against those lines, so the four directions cannot drift apart.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from twenty48.components.board import Board, Position
from twenty48.components.direction import Direction
from twenty48.components.score import Score


@dataclass(slots=True)
class MoveOutcome:
    direction: Direction
    cells: List[List[int]]
    changed: bool
    merged: bool
    score_delta: int
    max_merged: int


def line_positions(size: int, direction: Direction) -> List[List[Position]]:
    """Return one position list per line, each starting at the target edge."""
    steps = list(range(size - 1, -1, -1)) if direction.toward_end else list(range(size))
    lines: List[List[Position]] = []
    for index in range(size):
        if direction.axis == "row":
            lines.append([(index, step) for step in steps])
        else:
            lines.append([(step, index) for step in steps])
    return lines


def separate_line(values: Sequence[int]) -> List[int]:
    """Stable compaction of tiles toward index 0 (the target edge)."""
    tiles = [value for value in values if value != 0]
    return tiles + [0] * (len(values) - len(tiles))


def merge_line(values: Sequence[int]) -> Tuple[List[int], int, bool, int]:
    """Merge equal neighbours scanning away from the target edge.

    Returns ``(line, score_delta, merged, max_merged)``. A merged cell is never
    compared again in the same pass, so ``[2, 2, 2]`` yields ``[4, 0, 2]``.
    """
    line = list(values)
    score_delta = 0
    merged = False
    max_merged = 0
    index = 0
    while index < len(line) - 1:
        current = line[index]
        behind = line[index + 1]
        if current != 0 and current == behind:
            total = current + behind
            line[index] = total
            line[index + 1] = 0
            score_delta += total
            merged = True
            max_merged = max(max_merged, total)
            index += 2
        else:
            index += 1
    return line, score_delta, merged, max_merged


def _read_line(board: Board, positions: Sequence[Position]) -> List[int]:
    return [board.get(row, col) for row, col in positions]


def _write_line(board: Board, positions: Sequence[Position], values: Sequence[int]) -> None:
    for (row, col), value in zip(positions, values):
        board.set(row, col, value)


def separate_board(board: Board, direction: Direction) -> Board:
    """Return a copy of ``board`` with every line compacted toward ``direction``."""
    result = board.copy()
    for positions in line_positions(board.size, direction):
        _write_line(result, positions, separate_line(_read_line(result, positions)))
    return result


def compute_move(board: Board, direction: Direction) -> MoveOutcome:
    """Run separation, merging and re-separation on a scratch copy of ``board``."""
    scratch = board.copy()
    score_delta = 0
    merged = False
    max_merged = 0
    for positions in line_positions(board.size, direction):
        values = separate_line(_read_line(scratch, positions))
        values, line_delta, line_merged, line_max = merge_line(values)
        values = separate_line(values)
        _write_line(scratch, positions, values)
        score_delta += line_delta
        merged = merged or line_merged
        max_merged = max(max_merged, line_max)
    changed = scratch.snapshot() != board.snapshot()
    return MoveOutcome(
        direction=direction,
        cells=scratch.cells,
        changed=changed,
        merged=merged,
        score_delta=score_delta,
        max_merged=max_merged,
    )


def try_move(board: Board, score: Score, direction: Direction) -> MoveOutcome:
    """Apply a move in place, touching board and score only when something changed."""
    outcome = compute_move(board, direction)
    if outcome.changed:
        board.load(outcome.cells)
        score.add(outcome.score_delta)
        score.observe_tile(outcome.max_merged)
    return outcome


def legal_directions(board: Board) -> List[Direction]:
    return [direction for direction in Direction if compute_move(board, direction).changed]
