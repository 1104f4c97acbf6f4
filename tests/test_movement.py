import random

import pytest

from maze.grid.tiles import EMPTY, MONSTER, TELEPORT
from maze.services.movement import DIRECTION_DELTAS, apply_move, can_enter


@pytest.fixture()
def rng():
    return random.Random(0)


def test_direction_deltas():
    assert DIRECTION_DELTAS == {"up": (-1, 0), "left": (0, -1), "down": (1, 0), "right": (0, 1)}


def test_successful_move_updates_grid_and_cache(level_factory, rng):
    level, (p1,) = level_factory(["   ", " 1 ", "   "])
    assert apply_move(level, [p1], p1, "up", rng) is True
    assert p1.position == (0, 1)
    assert level.grid.at(0, 1) == "1"
    assert level.grid.at(1, 1) == EMPTY
    assert level.grid.count("1") == 1


@pytest.mark.parametrize(
    "rows,direction",
    [
        (["1#", "  "], "right"),  # wall
        (["1X", "  "], "right"),  # obstacle
        (["12", "  "], "right"),  # other player
        (["1 ", "  "], "up"),  # out of bounds
        (["1 ", "  "], "left"),  # out of bounds
    ],
)
def test_blocked_moves_change_nothing(level_factory, rng, rows, direction):
    level, players = level_factory(rows)
    mover = players[0]
    before_rows = level.grid.rows()
    before_positions = [p.position for p in players]
    assert apply_move(level, players, mover, direction, rng) is False
    assert level.grid.rows() == before_rows
    assert [p.position for p in players] == before_positions


def test_player_cannot_enter_own_symbol(level_factory):
    level, (p1,) = level_factory(["1 ", "  "])
    assert can_enter(level, [p1], 0, 0) is False
    assert can_enter(level, [p1], 0, 1) is True


def test_monster_goal_and_teleport_cells_are_enterable(level_factory):
    level, (p1,) = level_factory(["1MG", "T  ", "   "])
    assert can_enter(level, [p1], 0, 1)
    assert can_enter(level, [p1], 0, 2)
    assert can_enter(level, [p1], 1, 0)


def test_unknown_direction_is_a_caller_error(level_factory, rng):
    level, (p1,) = level_factory(["1 ", "  "])
    with pytest.raises(ValueError):
        apply_move(level, [p1], p1, "attack", rng)


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4, 5])
def test_teleport_lands_on_empty_cell(level_factory, seed):
    rows = ["1T  #", "  X  ", "# 2 M", "     ", "  X  "]
    level, players = level_factory(rows)
    p1 = players[0]
    allowed = set(level.grid.empty_cells()) | {(0, 0)}  # the vacated start cell is empty again
    assert apply_move(level, players, p1, "right", random.Random(seed)) is True
    assert p1.position in allowed
    assert p1.position != (0, 1)
    assert level.grid.at(*p1.position) == "1"
    assert level.grid.count("1") == 1
    # Pad is consumed
    assert level.grid.at(0, 1) == EMPTY
    assert level.grid.count(TELEPORT) == 0


def test_teleport_can_return_to_vacated_cell(level_factory, rng):
    level, (p1,) = level_factory(["1T", "##"])
    assert apply_move(level, [p1], p1, "right", rng) is True
    assert p1.position == (0, 0)
    assert level.grid.rows() == (("1", " "), ("#", "#"))


def test_leaving_monster_cell_restores_marker(level_factory, rng):
    level, (p1,) = level_factory(["1M ", "   ", "   "])
    assert apply_move(level, [p1], p1, "right", rng)
    assert level.grid.at(0, 1) == "1"
    assert len(level.monsters) == 1
    assert apply_move(level, [p1], p1, "down", rng)
    assert level.grid.at(0, 1) == MONSTER
    assert level.grid.at(1, 1) == "1"
