"""Encounter detection, player attacks and health regeneration.

Monsters are stationary and never strike back; combat is a fixed-damage hit from
the player on the monster sharing its cell. A monster at or below zero health is
removed from the level's ``MonsterSet`` by id and its marker cleared.
"""

from __future__ import annotations

from typing import Optional

from maze.grid.tiles import EMPTY, MONSTER
from maze.logging_utils import get_logger
from maze.models.entities import Player
from maze.models.level import Level

log = get_logger("maze.combat")

ATTACK_DAMAGE = 20
REGEN_AMOUNT = 40


def check_encounter(level: Level, player: Player) -> bool:
    return any(m.alive and m.position == player.position for m in level.monsters)


def attack(level: Level, player: Player, damage: int = ATTACK_DAMAGE) -> Optional[int]:
    """Hit the monster on the player's cell.

    Returns the monster's new health, or ``None`` when there is nothing to hit
    (no state is touched in that case).
    """
    monster = level.monsters.at(player.position)
    if monster is None:
        return None
    monster.health -= damage
    log.info(event="attack", player=player.symbol, monster=monster.id, health=monster.health)
    if monster.health <= 0:
        level.monsters.remove(monster.id)
        # The attacker normally stands on the cell; only a bare monster marker is cleared.
        if level.grid.at(*monster.position) == MONSTER:
            level.grid.set(*monster.position, EMPTY)
        log.info(event="monster_defeated", player=player.symbol, monster=monster.id, pos=monster.position)
    return monster.health


def regenerate(player: Player, amount: int = REGEN_AMOUNT) -> bool:
    """Restore ``amount`` health, capped at the player's maximum. False if already full."""
    if player.health >= player.max_health:
        return False
    player.health = min(player.max_health, player.health + amount)
    log.debug(event="regenerate", player=player.symbol, health=player.health)
    return True


__all__ = ["ATTACK_DAMAGE", "REGEN_AMOUNT", "attack", "check_encounter", "regenerate"]
