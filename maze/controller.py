"""
project: Maze Navigator
module: controller.py
License: MIT

Level controller and turn policy.

``GameSession`` owns the players for the whole session and one ``Level`` at a
time. It walks levels 1..max_levels: generate, run round-robin turns until a
player stands on the goal, advance. Every command goes through ``play_turn``,
which never raises for game-rule violations; it returns a ``TurnResult`` whose
``code`` names the recoverable error (see ``maze.errors``).

Turn policy after a successful move:
    1. Goal reached -> turn ends, the level is complete.
    2. Monster on the new cell -> automatic attack (no sword needed).
    3. Automatic regeneration attempt, then the mover's status is reported.
The explicit attack command, by contrast, requires the sword.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from maze import commands
from maze.config import GameConfig
from maze.errors import InvalidDirection, MazeError, NoEquipmentForAttack, NoMonsterPresent, UnknownCommand
from maze.grid.generator import MazeGenerator
from maze.logging_utils import get_logger
from maze.models.entities import Player
from maze.models.level import Level
from maze.render import render_grid, render_status
from maze.services import combat_service, movement

log = get_logger("maze.controller")

GAME_OVER_MESSAGE = "You completed all levels. Game over!"


@dataclass
class TurnResult:
    ok: bool
    command: Optional[str] = None
    code: Optional[str] = None
    messages: List[str] = field(default_factory=list)
    moved: bool = False
    reached_goal: bool = False
    # False when the token was not understood; the same player is asked again.
    consumed: bool = True
    monster_health: Optional[int] = None


class GameSession:
    def __init__(self, config: GameConfig | None = None, rng: Optional[random.Random] = None):
        self.config = (config or GameConfig()).validate()
        self.generator = MazeGenerator(self.config, rng)
        self.rng = self.generator.rng
        self.players: List[Player] = [
            Player(
                symbol=symbol,
                health=self.config.player_max_health,
                max_health=self.config.player_max_health,
                has_sword=self.config.starting_sword,
            )
            for symbol in self.config.player_symbols
        ]
        self.level_number = 1
        self.level: Optional[Level] = None

    # ------------------------------------------------------------------
    # Level lifecycle
    # ------------------------------------------------------------------
    @property
    def is_over(self) -> bool:
        return self.level_number > self.config.max_levels

    def start_level(self) -> Level:
        if self.is_over:
            raise RuntimeError("Session is over; no level left to start")
        self.level = self.generator.generate(self.level_number, self.players)
        log.info(event="level_start", level_no=self.level_number, size=self.level.size, goal=self.level.goal)
        return self.level

    def is_level_complete(self) -> bool:
        if self.level is None:
            return False
        return any(p.position == self.level.goal for p in self.players)

    def winner(self) -> Optional[Player]:
        if self.level is None:
            return None
        return next((p for p in self.players if p.position == self.level.goal), None)

    def advance_level(self) -> Optional[Level]:
        """Move to the next level. Returns the new level, or None once the session is over."""
        log.info(event="level_complete", level_no=self.level_number)
        self.level_number += 1
        self.level = None
        if self.is_over:
            log.info(event="session_end", levels=self.config.max_levels)
            return None
        return self.start_level()

    def _require_level(self) -> Level:
        if self.level is None:
            raise RuntimeError("No active level; call start_level() first")
        return self.level

    # ------------------------------------------------------------------
    # Turn resolution
    # ------------------------------------------------------------------
    def play_turn(self, player: Player, token: str) -> TurnResult:
        try:
            command = commands.parse_command(token)
        except UnknownCommand as exc:
            log.debug(event="unknown_command", player=player.symbol, token=token)
            return TurnResult(ok=False, code=exc.code, messages=[exc.message], consumed=False)
        try:
            if commands.is_move(command):
                return self._move(player, command)
            if command == commands.ATTACK:
                return self._attack(player)
            if command == commands.REGENERATE:
                result = TurnResult(ok=True, command=command)
                self._regenerate(player, result)
                return result
            return TurnResult(ok=True, command=command, messages=[render_status(player)])
        except MazeError as exc:
            return TurnResult(ok=False, command=command, code=exc.code, messages=[exc.message])

    def _move(self, player: Player, direction: str) -> TurnResult:
        level = self._require_level()
        if not movement.apply_move(level, self.players, player, direction, self.rng):
            raise InvalidDirection("Invalid move. Try again.")
        result = TurnResult(ok=True, command=direction, moved=True)
        if player.position == level.goal:
            result.reached_goal = True
            result.messages.append(f"Player {player.symbol} reached the goal ('G'). Move to the next level.")
            return result
        if combat_service.check_encounter(level, player):
            self._hit(level, player, result)
        self._regenerate(player, result)
        result.messages.append(render_status(player))
        return result

    def _attack(self, player: Player) -> TurnResult:
        level = self._require_level()
        if not player.has_sword:
            raise NoEquipmentForAttack("You need a sword to attack the monster ('k').")
        result = TurnResult(ok=True, command=commands.ATTACK)
        if not self._hit(level, player, result):
            raise NoMonsterPresent("There is no monster here to attack.")
        return result

    def _hit(self, level: Level, player: Player, result: TurnResult) -> bool:
        health = combat_service.attack(level, player, self.config.attack_damage)
        if health is None:
            return False
        result.monster_health = health
        result.messages.append(
            f"Player {player.symbol} attacked the monster ('M'). Monster health reduced to {health}."
        )
        if health <= 0:
            result.messages.append(f"Player {player.symbol} defeated the monster ('M').")
        return True

    def _regenerate(self, player: Player, result: TurnResult) -> None:
        if combat_service.regenerate(player, self.config.regen_amount):
            result.messages.append(f"Player {player.symbol} regenerated health. Current health: {player.health}")

    # ------------------------------------------------------------------
    # Read-only views for renderers
    # ------------------------------------------------------------------
    def status(self, player: Player) -> dict:
        return player.to_dict()

    def snapshot(self):
        return self._require_level().grid.rows()

    # ------------------------------------------------------------------
    # Game loop
    # ------------------------------------------------------------------
    def run(self, read_command: Callable[[Player], Optional[str]], emit: Callable[[str], None]) -> bool:
        """Play the remaining levels.

        ``read_command(player)`` returns the next token for ``player`` or ``None``
        to stop. Returns True if every level was completed.
        """
        while not self.is_over:
            level = self.level or self.start_level()
            emit(f"Level {level.number}")
            emit(render_grid(level.grid, color=self.config.color))
            while not self.is_level_complete():
                for player in self.players:
                    result = self._read_turn(player, read_command, emit)
                    if result is None:
                        log.info(event="session_abandoned", level_no=self.level_number)
                        return False
                    if self.is_level_complete():
                        break
            self.advance_level()
        emit(GAME_OVER_MESSAGE)
        return True

    def _read_turn(self, player, read_command, emit) -> Optional[TurnResult]:
        while True:
            token = read_command(player)
            if token is None:
                return None
            result = self.play_turn(player, token)
            if result.moved:
                emit(render_grid(self._require_level().grid, color=self.config.color))
            for message in result.messages:
                emit(message)
            if result.consumed:
                return result


__all__ = ["GAME_OVER_MESSAGE", "GameSession", "TurnResult"]
