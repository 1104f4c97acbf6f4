"""Square cell matrix holding one symbol per cell.

Pure storage: no movement or placement rules live here. Row-major addressing
(``grid[row][col]``) matches the order cells are rendered in.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

from .tiles import EMPTY

Coord = Tuple[int, int]


class Grid:
    __slots__ = ("size", "_cells")

    def __init__(self, size: int):
        if size < 1:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self._cells: List[List[str]] = [[EMPTY for _ in range(size)] for _ in range(size)]

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Grid":
        """Build a grid from equal-length strings, one per row (handy for fixtures)."""
        grid = cls(len(rows))
        for r, line in enumerate(rows):
            if len(line) != grid.size:
                raise ValueError(f"Row {r} has {len(line)} cells, expected {grid.size}")
            for c, ch in enumerate(line):
                grid._cells[r][c] = ch
        return grid

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def at(self, row: int, col: int) -> str:
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell {(row, col)} outside {self.size}x{self.size} grid")
        return self._cells[row][col]

    def set(self, row: int, col: int, symbol: str) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell {(row, col)} outside {self.size}x{self.size} grid")
        self._cells[row][col] = symbol

    def is_empty(self, row: int, col: int) -> bool:
        return self.at(row, col) == EMPTY

    def cells(self) -> Iterator[Tuple[Coord, str]]:
        for r, line in enumerate(self._cells):
            for c, ch in enumerate(line):
                yield (r, c), ch

    def empty_cells(self) -> List[Coord]:
        return [pos for pos, ch in self.cells() if ch == EMPTY]

    def count(self, symbol: str) -> int:
        return sum(line.count(symbol) for line in self._cells)

    def find(self, symbol: str) -> Optional[Coord]:
        for pos, ch in self.cells():
            if ch == symbol:
                return pos
        return None

    def rows(self) -> Tuple[Tuple[str, ...], ...]:
        """Read-only snapshot of the matrix for renderers."""
        return tuple(tuple(line) for line in self._cells)

    def __repr__(self) -> str:
        return f"Grid(size={self.size})"


__all__ = ["Coord", "Grid"]
