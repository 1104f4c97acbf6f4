# Model package init
from .entities import Monster, MonsterSet, Player  # noqa: F401 re-export
from .level import Level  # noqa: F401 re-export

__all__ = [
    "Level",
    "Monster",
    "MonsterSet",
    "Player",
]
