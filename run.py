"""Maze Navigator CLI entry point.

Provides subcommands for playing a local game and previewing generated levels.
Accepts configuration via flags and environment variables, with optional .env
loading.

Run `python run.py --help` for details.
"""

import argparse
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

_color_init()
_COLOR_ENABLED = sys.stdout.isatty()


def _load_version() -> str:
    try:
        with open("VERSION", "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "1.0.0"


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Maze Navigator

    Play the turn-based maze game in this terminal, or preview a generated level.
    Configuration can be provided via CLI flags or MAZE_* environment variables.
    If both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          MAZE_SEED             Random seed for maze generation (default: random)
          MAZE_PLAYERS          Number of players (default: 2)
          MAZE_MAX_LEVELS       Number of levels (default: 3)
          MAZE_STARTING_SWORD   Players start with a sword (default: 0)
          MAZE_COLOR            Colour the maze (default: 1)
          MAZE_LOG_LEVEL        debug|info|warn|error (default: warn)
          MAZE_LOG_JSON         Emit JSON log lines (default: 0)

        Examples:
          # Play the default two-player game
          python run.py play

          # Solo game with a fixed layout and a sword from the start
          python run.py play --players 1 --seed 42 --sword

          # Print level 2 of seed 42 with its generation metrics
          python run.py preview --seed 42 --level 2

          # Load variables from .env then play
          python run.py --env-file .env play

        In-game commands:
          w/a/s/d   Move up/left/down/right
          k         Attack the monster on your cell (needs a sword)
          r         Regenerate health
          p         Show player status
          help      Show help inside the game
          quit      Leave the game
        """
    )

    parser = argparse.ArgumentParser(
        prog="maze-navigator",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Maze Navigator {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    # play subcommand
    play_parser = subparsers.add_parser(
        "play",
        help="Play a game in this terminal",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the interactive turn-based game",
    )
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed (default: env MAZE_SEED or random)")
    play_parser.add_argument("--players", type=int, default=None, help="Number of players (default: env or 2)")
    play_parser.add_argument("--levels", type=int, default=None, help="Number of levels (default: env or 3)")
    play_parser.add_argument(
        "--sword",
        action="store_true",
        default=None,
        help="Players start with a sword, enabling the 'k' attack command",
    )
    play_parser.add_argument("--no-color", dest="no_color", action="store_true", help="Disable coloured output")
    play_parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=["debug", "info", "warn", "error"],
        default=None,
        help="Log threshold (default: env MAZE_LOG_LEVEL or warn)",
    )
    play_parser.add_argument("--log-file", dest="log_file", default=None, help="Append log lines to this file")
    play_parser.set_defaults(command="play")

    # preview subcommand
    preview_parser = subparsers.add_parser(
        "preview",
        help="Generate and print a level without playing",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Print one generated level and its generation metrics.",
    )
    preview_parser.add_argument("--seed", type=int, default=None, help="Random seed (default: env or random)")
    preview_parser.add_argument("--level", type=int, default=1, help="Level number to print (default: 1)")
    preview_parser.add_argument("--players", type=int, default=None, help="Number of players (default: env or 2)")
    preview_parser.add_argument("--no-color", dest="no_color", action="store_true", help="Disable coloured output")
    preview_parser.set_defaults(command="preview")

    # If no subcommand provided, default to play
    if len(argv) == 0:
        argv = ["play"]

    args = parser.parse_args(argv)
    return args


def _build_config(args: argparse.Namespace):
    from maze.config import GameConfig

    overrides = {
        "seed": getattr(args, "seed", None),
        "players": getattr(args, "players", None),
        "max_levels": getattr(args, "levels", None),
        "starting_sword": getattr(args, "sword", None),
    }
    if getattr(args, "no_color", False) or not _COLOR_ENABLED:
        overrides["color"] = False
    return GameConfig.from_env(**overrides)


def _preview(config, level_number: int) -> int:
    from maze.controller import GameSession
    from maze.render import render_grid

    if not 1 <= level_number <= config.max_levels:
        print(f"[ERROR] Level must be between 1 and {config.max_levels}")
        return 1
    session = GameSession(config)
    # Levels are generated in order so a seed reproduces the layouts seen in play
    # (as long as no teleporter fired on an earlier level).
    for number in range(1, level_number + 1):
        level = session.generator.generate(number, session.players)
    print(f"Level {level.number} (seed {level.seed})")
    print(render_grid(level.grid, color=config.color))
    print(f"Goal: {level.goal}")
    for p in session.players:
        print(f"Player {p.symbol} start: {p.position}")
    for key, val in level.metrics.items():
        print(f"  {key}: {val}")
    return 0


def main(argv: list[str]) -> int:
    # Load .env if requested
    args = parse_args(argv)
    if args and getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    def handle_sigint(sig, frame):
        print("\n[INFO] Leaving the maze...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    mode = (getattr(args, "command", None) or "play").lower()

    from maze import logging_utils

    log_file = getattr(args, "log_file", None)
    log_stream = open(log_file, "a", encoding="utf-8") if log_file else None
    try:
        logging_utils.configure(level=getattr(args, "log_level", None), stream=log_stream)
        try:
            config = _build_config(args)
        except ValueError as exc:
            print(f"[ERROR] {exc}")
            return 1

        # Startup banner
        # Build colored banner lines
        title = f"{Fore.CYAN}{Style.BRIGHT}Maze Navigator{Style.RESET_ALL}" if config.color else "Maze Navigator"

        def label(text: str) -> str:
            return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if config.color else text

        def value(val: str | int) -> str:
            return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if config.color else str(val)

        divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if config.color else "=" * 40
        lines = [
            divider,
            f"  {title}",
            divider,
            f"  {label('Mode:'):12} {value(mode.upper())}",
            f"  {label('Players:'):12} {value(config.players)}",
            f"  {label('Levels:'):12} {value(config.max_levels)}",
            f"  {label('Seed:'):12} {value('random' if config.seed is None else config.seed)}",
            f"  {label('Sword:'):12} {value('YES' if config.starting_sword else 'NO')}",
            divider,
            "",
        ]
        print("\n".join(lines))
        logging_utils.log.info(event="startup", mode=mode, players=config.players, seed=config.seed)

        if mode == "preview":
            return _preview(config, getattr(args, "level", 1))

        from maze.controller import GameSession
        from maze.shell import play

        play(GameSession(config))
        return 0
    finally:
        if log_stream is not None:
            logging_utils.reset_stream()
            log_stream.close()


def _console_main() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
