"""Command token parsing.

Accepts the classic single-key controls (w/a/s/d/k/r/p) and their long names,
case-insensitively. Anything else raises ``UnknownCommand``.
"""

from __future__ import annotations

from maze.errors import UnknownCommand

UP, LEFT, DOWN, RIGHT = "up", "left", "down", "right"
ATTACK = "attack"
REGENERATE = "regenerate"
STATUS = "status"

MOVES = (UP, LEFT, DOWN, RIGHT)

KEY_MAP = {
    "w": UP,
    "a": LEFT,
    "s": DOWN,
    "d": RIGHT,
    "k": ATTACK,
    "r": REGENERATE,
    "p": STATUS,
}
COMMANDS = frozenset(KEY_MAP.values())


def parse_command(token: str) -> str:
    key = (token or "").strip().lower()
    if key in KEY_MAP:
        return KEY_MAP[key]
    if key in COMMANDS:
        return key
    raise UnknownCommand(token)


def is_move(command: str) -> bool:
    return command in MOVES


__all__ = [
    "ATTACK",
    "COMMANDS",
    "DOWN",
    "KEY_MAP",
    "LEFT",
    "MOVES",
    "REGENERATE",
    "RIGHT",
    "STATUS",
    "UP",
    "is_move",
    "parse_command",
]
