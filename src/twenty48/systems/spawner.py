from __future__ import annotations

import random
from typing import List

from twenty48.components.board import Board, Position
from twenty48.components.score import Score
from twenty48.constants import (
    SPAWN_HIGH_VALUE,
    SPAWN_LOW_VALUE,
    SPAWN_ROLL_SIDES,
    SPAWN_TWO_MAX_ROLL,
)


def draw_tile_value(rng: random.Random) -> int:
    """Return 2 with probability 3/4 and 4 with probability 1/4."""
    if rng.randrange(SPAWN_ROLL_SIDES) <= SPAWN_TWO_MAX_ROLL:
        return SPAWN_LOW_VALUE
    return SPAWN_HIGH_VALUE


def try_spawn(board: Board, rng: random.Random) -> List[Position]:
    """Place one new tile on a random empty cell.

    Cells are sampled uniformly and occupied ones rejected until an empty cell
    turns up. Returns the spawned positions; an empty list means the board was
    already full and has not been touched.
    """
    if board.is_full():
        return []
    while True:
        row = rng.randrange(board.size)
        col = rng.randrange(board.size)
        if board.get(row, col) == 0:
            board.set(row, col, draw_tile_value(rng))
            return [(row, col)]


def spawn_tile(board: Board, score: Score, rng: random.Random) -> List[Position]:
    positions = try_spawn(board, rng)
    for row, col in positions:
        score.observe_tile(board.get(row, col))
    return positions
