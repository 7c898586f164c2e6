from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

Position = Tuple[int, int]


@dataclass(slots=True)
class Board:
    """Square grid of tile values; 0 marks an empty cell.

    Indices are produced by the engine itself and are never validated here.
    """
    size: int
    cells: List[List[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [[0] * self.size for _ in range(self.size)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Board":
        return cls(size=len(rows), cells=[list(row) for row in rows])

    def get(self, row: int, col: int) -> int:
        return self.cells[row][col]

    def set(self, row: int, col: int, value: int) -> None:
        self.cells[row][col] = value

    def is_full(self) -> bool:
        return all(value != 0 for row in self.cells for value in row)

    def has_adjacent_equal_pair(self) -> bool:
        for r in range(self.size):
            for c in range(self.size):
                value = self.cells[r][c]
                if value == 0:
                    continue
                if c + 1 < self.size and self.cells[r][c + 1] == value:
                    return True
                if r + 1 < self.size and self.cells[r + 1][c] == value:
                    return True
        return False

    def empty_cells(self) -> List[Position]:
        return [
            (r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.cells[r][c] == 0
        ]

    def max_value(self) -> int:
        return max((value for row in self.cells for value in row), default=0)

    def snapshot(self) -> Tuple[Tuple[int, ...], ...]:
        return tuple(tuple(row) for row in self.cells)

    def copy(self) -> "Board":
        return Board(size=self.size, cells=[list(row) for row in self.cells])

    def load(self, rows: Sequence[Sequence[int]]) -> None:
        """Overwrite every cell in place; dimensions stay as they are."""
        if len(rows) != self.size or any(len(row) != self.size for row in rows):
            raise ValueError(f"expected {self.size}x{self.size} rows")
        for r in range(self.size):
            for c in range(self.size):
                self.cells[r][c] = rows[r][c]
