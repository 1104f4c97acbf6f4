"""Text rendering of the maze and player status.

Pure consumers of game state: nothing here mutates a level or a player. Colour
is applied with colorama when requested; plain output is byte-for-byte the
classic layout (dashed dividers, every cell right-aligned in two columns).
"""

from __future__ import annotations

from typing import Sequence

from colorama import Fore, Style

from maze.grid.grid import Grid
from maze.grid.tiles import GOAL, MONSTER, OBSTACLE, TELEPORT, WALL
from maze.models.entities import Player

DIVIDER = "-" * 21

CELL_COLORS = {
    WALL: Fore.WHITE + Style.DIM,
    OBSTACLE: Fore.YELLOW,
    TELEPORT: Fore.MAGENTA,
    GOAL: Fore.GREEN + Style.BRIGHT,
    MONSTER: Fore.RED + Style.BRIGHT,
}
PLAYER_COLOR = Fore.CYAN + Style.BRIGHT


def _paint(symbol: str, cell: str) -> str:
    color = PLAYER_COLOR if symbol.isdigit() else CELL_COLORS.get(symbol)
    return f"{color}{cell}{Style.RESET_ALL}" if color else cell


def render_rows(rows: Sequence[Sequence[str]], color: bool = False) -> str:
    lines = [DIVIDER]
    for row in rows:
        cells = [f"{symbol:>2}" for symbol in row]
        if color:
            cells = [_paint(symbol, cell) for symbol, cell in zip(row, cells)]
        lines.append("".join(cells))
    lines.append(DIVIDER)
    return "\n".join(lines)


def render_grid(grid: Grid, color: bool = False) -> str:
    return render_rows(grid.rows(), color=color)


def render_status(player: Player) -> str:
    return "\n".join(
        [
            f"Player {player.symbol} status:",
            f" - Health: {player.health}",
            f" - Inventory: {player.inventory}",
        ]
    )


__all__ = ["DIVIDER", "render_grid", "render_rows", "render_status"]
