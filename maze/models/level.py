from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from maze.grid.grid import Grid

from .entities import MonsterSet

Coord = Tuple[int, int]


@dataclass
class Level:
    """One generated maze: grid, goal coordinate and the monsters living in it."""

    number: int
    grid: Grid
    goal: Coord
    monsters: MonsterSet = field(default_factory=MonsterSet)
    seed: Optional[int] = None
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def size(self) -> int:
        return self.grid.size


__all__ = ["Level"]
