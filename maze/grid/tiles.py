# Cell symbols centralized for modular imports
EMPTY = " "
WALL = "#"
OBSTACLE = "X"
TELEPORT = "T"
GOAL = "G"
MONSTER = "M"

# Symbols that stop movement regardless of who moves; player symbols are added per session.
BLOCKING = frozenset({WALL, OBSTACLE})


def char_to_type(ch: str) -> str:
    if ch == EMPTY:
        return "empty"
    if ch == WALL:
        return "wall"
    if ch == OBSTACLE:
        return "obstacle"
    if ch == TELEPORT:
        return "teleporter"
    if ch == GOAL:
        return "goal"
    if ch == MONSTER:
        return "monster"
    if ch.isdigit():
        return "player"
    return "unknown"


__all__ = ["EMPTY", "WALL", "OBSTACLE", "TELEPORT", "GOAL", "MONSTER", "BLOCKING", "char_to_type"]
