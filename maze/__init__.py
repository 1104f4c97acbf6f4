"""
project: Maze Navigator
module: __init__.py
License: MIT

Turn-based, text-rendered maze game for co-located players.

Package layout:
    grid/        cell symbols, storage-only ``Grid`` and the ``MazeGenerator``
    models/      ``Player``, ``Monster``/``MonsterSet`` and ``Level`` records
    services/    movement (collision, teleport) and combat (attack, regeneration)
    controller   ``GameSession``: level lifecycle, turn policy, game loop
    render       text rendering of the grid and player status
    shell        interactive prompt wiring ``input()`` to a session
"""

from .config import GameConfig
from .controller import GameSession, TurnResult

__all__ = ["GameConfig", "GameSession", "TurnResult"]
