"""Movement resolution: bounds/collision validation and teleport handling.

A move mutates two places that must stay in sync: the grid markers and the
mover's cached ``position``. Both are written together or not at all.
"""

from __future__ import annotations

import random
from typing import Dict, Iterable, Tuple

from maze.grid.generator import random_empty_cell
from maze.grid.tiles import BLOCKING, EMPTY, MONSTER, TELEPORT
from maze.logging_utils import get_logger
from maze.models.entities import Player
from maze.models.level import Level

log = get_logger("maze.movement")

DIRECTION_DELTAS: Dict[str, Tuple[int, int]] = {
    "up": (-1, 0),
    "left": (0, -1),
    "down": (1, 0),
    "right": (0, 1),
}


def can_enter(level: Level, players: Iterable[Player], row: int, col: int) -> bool:
    """True if a player may step onto ``(row, col)``.

    Players block each other, the mover included.
    """
    if not level.grid.in_bounds(row, col):
        return False
    symbol = level.grid.at(row, col)
    if symbol in BLOCKING:
        return False
    return all(symbol != p.symbol for p in players)


def _vacate(level: Level, player: Player) -> None:
    # A live monster shared the cell with the player; it shows again once the player leaves.
    marker = MONSTER if level.monsters.at(player.position) else EMPTY
    level.grid.set(*player.position, marker)


def apply_move(level: Level, players: Iterable[Player], player: Player, direction: str, rng: random.Random) -> bool:
    """Attempt to move ``player`` one step; returns True if the move happened.

    ``direction`` must be one of ``DIRECTION_DELTAS``; anything else is a caller bug.
    Landing on a teleporter consumes the pad and relocates the player to a random
    empty cell within the same call.
    """
    if direction not in DIRECTION_DELTAS:
        raise ValueError(f"Not a movement direction: {direction!r}")
    players = list(players)
    dr, dc = DIRECTION_DELTAS[direction]
    row, col = player.position
    nr, nc = row + dr, col + dc
    if not can_enter(level, players, nr, nc):
        log.debug(event="move_blocked", player=player.symbol, frm=(row, col), to=(nr, nc))
        return False
    landed_on = level.grid.at(nr, nc)
    _vacate(level, player)
    player.position = (nr, nc)
    level.grid.set(nr, nc, player.symbol)
    log.debug(event="move", player=player.symbol, frm=(row, col), to=(nr, nc), cell=landed_on)
    if landed_on == TELEPORT:
        if level.grid.count(EMPTY) == 0:
            log.warn(event="teleport_no_target", player=player.symbol, pad=(nr, nc))
            return True
        tr, tc = random_empty_cell(level.grid, rng)
        level.grid.set(nr, nc, EMPTY)
        player.position = (tr, tc)
        level.grid.set(tr, tc, player.symbol)
        log.info(event="teleport", player=player.symbol, pad=(nr, nc), to=(tr, tc))
    return True


__all__ = ["DIRECTION_DELTAS", "apply_move", "can_enter"]
