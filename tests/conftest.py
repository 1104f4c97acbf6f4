import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from maze.config import GameConfig  # noqa: E402
from maze.controller import GameSession  # noqa: E402
from maze.grid.grid import Grid  # noqa: E402
from maze.grid.tiles import GOAL, MONSTER  # noqa: E402
from maze.models.entities import MonsterSet, Player  # noqa: E402
from maze.models.level import Level  # noqa: E402


def make_level(rows, players=None, number=1):
    """Build a ``Level`` from row strings.

    Digits become players (bound to ``players`` by symbol when given, else new
    ``Player`` objects), 'M' cells get a 50-health monster and 'G' is the goal.
    Returns ``(level, players)`` with players sorted by symbol.
    """
    grid = Grid.from_rows(rows)
    by_symbol = {p.symbol: p for p in (players or [])}
    monsters = MonsterSet()
    goal = (-1, -1)
    for (r, c), ch in grid.cells():
        if ch.isdigit():
            player = by_symbol.setdefault(ch, Player(symbol=ch))
            player.position = (r, c)
        elif ch == MONSTER:
            monsters.spawn((r, c))
        elif ch == GOAL:
            goal = (r, c)
    level = Level(number=number, grid=grid, goal=goal, monsters=monsters)
    return level, sorted(by_symbol.values(), key=lambda p: p.symbol)


@pytest.fixture(autouse=True)
def _isolate_maze_env():
    """Hide MAZE_* variables from tests and drop any a test (or load_dotenv) sets."""
    saved = {k: v for k, v in os.environ.items() if k.startswith("MAZE_")}
    for k in saved:
        del os.environ[k]
    yield
    for k in [k for k in os.environ if k.startswith("MAZE_")]:
        del os.environ[k]
    os.environ.update(saved)


@pytest.fixture()
def config():
    return GameConfig(seed=1234, color=False)


@pytest.fixture()
def session(config):
    s = GameSession(config)
    s.start_level()
    return s


@pytest.fixture()
def level_factory():
    return make_level


@pytest.fixture()
def staged_session(config):
    """Session whose current level is replaced by a hand-built layout.

    Usage: ``sess = staged_session(rows)``; session players are bound to the
    digits in ``rows``.
    """

    def _stage(rows, number=1, **overrides):
        cfg = GameConfig(**{**config.__dict__, **overrides}) if overrides else config
        sess = GameSession(cfg)
        sess.level_number = number
        level, _ = make_level(rows, players=sess.players, number=number)
        sess.level = level
        return sess

    return _stage


def pytest_configure(config):  # register custom marker
    config.addinivalue_line("markers", "structure: generated maze layout invariants")
