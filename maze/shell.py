"""Interactive command prompt for a local game session.

Reads one token per turn from ``input()`` and feeds it to ``GameSession.run``.
Meta commands handled here, never reaching the session:
  help    Show the controls
  quit    Leave the game (also: exit, EOF, Ctrl+C)
"""

from __future__ import annotations

from typing import Callable, Optional

from maze.controller import GameSession
from maze.logging_utils import get_logger
from maze.models.entities import Player

log = get_logger("maze.shell")

WELCOME = """Welcome to the Complicated Maze Game!
Navigate through the maze to find the goal ('G').
Commands: 'w' (up), 'a' (left), 's' (down), 'd' (right)
Commands: 'k' (kill the monster), 'r' (regenerate health), 'p' (player status)"""

HELP = """
Available commands:
  w / up           Move up
  a / left         Move left
  s / down         Move down
  d / right        Move right
  k / attack       Attack the monster on your cell (needs a sword)
  r / regenerate   Regenerate health
  p / status       Show your health and inventory
  help             Show this help message
  quit             Leave the game
Legend: '#' wall, 'X' obstacle, 'T' teleporter, 'M' monster, 'G' goal, digits are players
"""

QUIT_WORDS = {"quit", "exit"}


def prompt_for(player: Player) -> str:
    return f"Player {player.symbol}, enter your move (w/a/s/d/k/r/p): "


def make_reader(
    input_fn: Callable[[str], str] = input, emit: Callable[[str], None] = print
) -> Callable[[Player], Optional[str]]:
    def read_command(player: Player) -> Optional[str]:
        while True:
            try:
                raw = input_fn(prompt_for(player))
            except (EOFError, KeyboardInterrupt):
                emit("\nExiting game.")
                return None
            token = raw.strip()
            if not token:
                continue
            if token.lower() in QUIT_WORDS:
                emit("Exiting game.")
                return None
            if token.lower() == "help":
                emit(HELP)
                continue
            return token

    return read_command


def play(
    session: GameSession, input_fn: Callable[[str], str] = input, emit: Callable[[str], None] = print
) -> bool:
    emit(WELCOME)
    completed = session.run(make_reader(input_fn, emit), emit)
    log.info(event="shell_exit", completed=completed, level_no=session.level_number)
    return completed


__all__ = ["HELP", "WELCOME", "make_reader", "play", "prompt_for"]
