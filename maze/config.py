"""Game configuration.

All tunables of a session live on ``GameConfig``. Defaults reproduce the classic
game (two players, three levels, 10x10 first maze). ``GameConfig.from_env`` applies
``MAZE_*`` environment overrides so a ``.env`` file (loaded by ``run.py``) or the
test suite can adjust a session without touching code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Optional

PLAYER_SYMBOLS = "123456789"


@dataclass
class GameConfig:
    players: int = 2
    max_levels: int = 3
    min_size: int = 10
    max_size: int = 15
    num_teleports: int = 5
    num_obstacles: int = 15
    wall_divisor: int = 4  # wall draws per level = size * size // wall_divisor
    monster_probability: float = 0.2
    player_max_health: int = 100
    monster_health: int = 50
    attack_damage: int = 20
    regen_amount: int = 40
    starting_sword: bool = False
    color: bool = True
    seed: Optional[int] = None

    def size_for_level(self, level: int) -> int:
        """Grid side length for ``level`` (1-based)."""
        if level < 1:
            raise ValueError(f"Level numbers start at 1, got {level}")
        return self.min_size + level - 1

    def validate(self) -> "GameConfig":
        if not 1 <= self.players <= len(PLAYER_SYMBOLS):
            raise ValueError(f"players must be between 1 and {len(PLAYER_SYMBOLS)}, got {self.players}")
        if self.max_levels < 1:
            raise ValueError("max_levels must be at least 1")
        if self.min_size < 2 or self.max_size < self.min_size:
            raise ValueError(f"invalid size range {self.min_size}..{self.max_size}")
        if self.size_for_level(self.max_levels) > self.max_size:
            raise ValueError(
                f"{self.max_levels} levels would grow the maze to {self.size_for_level(self.max_levels)}, "
                f"beyond max_size={self.max_size}"
            )
        if not 0.0 <= self.monster_probability <= 1.0:
            raise ValueError("monster_probability must be within [0, 1]")
        if self.wall_divisor < 1:
            raise ValueError("wall_divisor must be positive")
        # Players, goal, obstacles and teleporters are placed resample-until-empty
        # and need a free cell each on the smallest maze.
        claimed = self.players + 1 + self.num_obstacles + self.num_teleports
        if claimed > self.min_size * self.min_size:
            raise ValueError(f"{claimed} fixed placements do not fit a {self.min_size}x{self.min_size} maze")
        return self

    @property
    def player_symbols(self) -> str:
        return PLAYER_SYMBOLS[: self.players]

    @classmethod
    def from_env(cls, environ=None, **overrides) -> "GameConfig":
        """Build a config from ``MAZE_<FIELD>`` variables, then apply ``overrides``.

        Overrides with value ``None`` are ignored so CLI flags that were not given
        fall back to the environment.
        """
        env = os.environ if environ is None else environ
        values = {}
        for f in fields(cls):
            raw = env.get(f"MAZE_{f.name.upper()}")
            if raw is None or raw == "":
                continue
            values[f.name] = _coerce(f.name, f.type, raw)
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values).validate()


def _coerce(name: str, type_name, raw: str):
    # Annotations are strings under ``from __future__ import annotations``.
    type_name = str(type_name)
    try:
        if "bool" in type_name:
            return raw.strip().lower() not in {"0", "false", "no", "off", ""}
        if "float" in type_name:
            return float(raw)
        if "int" in type_name:
            return int(raw)
    except ValueError as exc:
        raise ValueError(f"MAZE_{name.upper()}={raw!r} is not a valid {type_name}") from exc
    return raw


__all__ = ["GameConfig", "PLAYER_SYMBOLS"]
