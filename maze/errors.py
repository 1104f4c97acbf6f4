"""Recoverable game errors.

None of these end a session. Lower layers raise them; ``GameSession.play_turn``
catches and turns them into a failed ``TurnResult`` carrying the same ``code``,
so callers only ever see status values.
"""

from __future__ import annotations


class MazeError(Exception):
    code = "error"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class InvalidDirection(MazeError):
    code = "invalid_direction"


class UnknownCommand(MazeError):
    code = "unknown_command"

    def __init__(self, token: str):
        super().__init__(f"Invalid command {token!r}. Use 'w', 'a', 's', 'd', 'k', 'r', or 'p'.")
        self.token = token


class NoEquipmentForAttack(MazeError):
    code = "no_equipment"


class NoMonsterPresent(MazeError):
    code = "no_monster"


class GenerationError(RuntimeError):
    """Raised when a resample-until-empty placement has no empty cell left."""


__all__ = [
    "GenerationError",
    "InvalidDirection",
    "MazeError",
    "NoEquipmentForAttack",
    "NoMonsterPresent",
    "UnknownCommand",
]
