"""Player and monster records.

Entities cache their own position; the grid marker at that position must always
agree with the cache. Every mutation in ``maze.services`` updates both.

Players belong to the session and outlive levels (health and sword persist).
Monsters belong to one level's ``MonsterSet`` and are dropped with it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Tuple

from maze.grid.tiles import MONSTER

Coord = Tuple[int, int]

MAX_HEALTH = 100


@dataclass
class Player:
    symbol: str
    position: Coord = (0, 0)
    health: int = MAX_HEALTH
    has_sword: bool = False
    max_health: int = MAX_HEALTH

    def __post_init__(self):
        self.health = max(0, min(self.health, self.max_health))

    @property
    def inventory(self) -> str:
        return "Sword" if self.has_sword else "None"

    def to_dict(self):
        return {
            "symbol": self.symbol,
            "position": list(self.position),
            "health": self.health,
            "inventory": self.inventory,
        }


@dataclass
class Monster:
    id: int
    position: Coord
    health: int = 50
    symbol: str = MONSTER

    @property
    def alive(self) -> bool:
        return self.health > 0


@dataclass
class MonsterSet:
    """Live monsters of one level keyed by id."""

    _monsters: Dict[int, Monster] = field(default_factory=dict)
    _next_id: int = 1

    def spawn(self, position: Coord, health: int = 50) -> Monster:
        monster = Monster(id=self._next_id, position=position, health=health)
        self._monsters[monster.id] = monster
        self._next_id += 1
        return monster

    def remove(self, monster_id: int) -> Monster:
        return self._monsters.pop(monster_id)

    def get(self, monster_id: int) -> Optional[Monster]:
        return self._monsters.get(monster_id)

    def at(self, position: Coord) -> Optional[Monster]:
        for monster in self._monsters.values():
            if monster.position == position and monster.alive:
                return monster
        return None

    def positions(self):
        return {m.position for m in self._monsters.values()}

    def __iter__(self) -> Iterator[Monster]:
        return iter(list(self._monsters.values()))

    def __len__(self) -> int:
        return len(self._monsters)

    def __contains__(self, monster_id: object) -> bool:
        return monster_id in self._monsters


__all__ = ["MAX_HEALTH", "Monster", "MonsterSet", "Player"]
