"""Maze generation invariant tests.

Invariants covered:
1. Grid side is min_size + level - 1.
2. Goal, obstacles and teleporters occupy distinct cells, never a player's start cell.
3. Exact counts for resample-until-empty placements; walls never exceed the draw count.
4. Every monster sits on its own 'M' marker with full health; markers and the set agree.
5. No level is complete at generation time.
6. A seed fully determines the layout.
"""

from __future__ import annotations

import random

import pytest

from maze.config import GameConfig
from maze.errors import GenerationError
from maze.grid.generator import MazeGenerator, random_empty_cell
from maze.grid.grid import Grid
from maze.grid.tiles import EMPTY, GOAL, MONSTER, OBSTACLE, TELEPORT, WALL
from maze.models.entities import Player

SEEDS = [7, 19, 42, 73, 2025]


def _players(n=2):
    return [Player(symbol=str(i + 1)) for i in range(n)]


def gen(seed: int, level: int = 1, **overrides):
    cfg = GameConfig(seed=seed, color=False, **overrides)
    players = _players(cfg.players)
    return MazeGenerator(cfg).generate(level, players), players, cfg


@pytest.mark.structure
@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("level_number", [1, 2, 3])
def test_placement_invariants(seed, level_number):
    level, players, cfg = gen(seed, level_number)
    grid = level.grid
    assert grid.size == 10 + level_number - 1

    obstacles = [pos for pos, ch in grid.cells() if ch == OBSTACLE]
    teleports = [pos for pos, ch in grid.cells() if ch == TELEPORT]
    assert len(obstacles) == cfg.num_obstacles
    assert len(teleports) == cfg.num_teleports
    assert grid.count(GOAL) == 1 and grid.at(*level.goal) == GOAL

    claimed = obstacles + teleports + [level.goal]
    assert len(set(claimed)) == len(claimed)
    starts = [p.position for p in players]
    assert len(set(starts)) == len(starts)
    assert not set(starts) & set(claimed)
    for p in players:
        assert grid.at(*p.position) == p.symbol


@pytest.mark.structure
@pytest.mark.parametrize("seed", SEEDS)
def test_walls_best_effort(seed):
    level, _players_, cfg = gen(seed, 3)
    draws = level.size * level.size // cfg.wall_divisor
    walls = level.grid.count(WALL)
    assert 0 < walls <= draws
    assert level.metrics["walls"] == walls
    assert level.metrics["wall_draws_skipped"] == draws - walls


@pytest.mark.structure
@pytest.mark.parametrize("seed", SEEDS)
def test_monsters_match_markers(seed):
    level, _players_, _cfg = gen(seed, 2)
    positions = [m.position for m in level.monsters]
    assert len(set(positions)) == len(positions)
    assert level.grid.count(MONSTER) == len(level.monsters)
    for m in level.monsters:
        assert m.health == 50
        assert level.grid.at(*m.position) == MONSTER
    assert level.metrics["monsters"] == len(level.monsters)


@pytest.mark.parametrize("seed", SEEDS)
def test_goal_not_reached_at_start(seed):
    level, players, _cfg = gen(seed)
    assert all(p.position != level.goal for p in players)


def test_same_seed_same_layout():
    a, pa, _ = gen(314159, 2)
    b, pb, _ = gen(314159, 2)
    assert a.grid.rows() == b.grid.rows()
    assert a.goal == b.goal
    assert [p.position for p in pa] == [p.position for p in pb]


def test_different_seeds_differ():
    a, _, _ = gen(1)
    b, _, _ = gen(2)
    assert a.grid.rows() != b.grid.rows()


def test_monster_probability_extremes():
    none_level, _, _ = gen(5, monster_probability=0.0)
    assert len(none_level.monsters) == 0
    full_level, _, _ = gen(5, monster_probability=1.0)
    assert full_level.grid.count(EMPTY) == 0
    assert len(full_level.monsters) == full_level.grid.count(MONSTER)


def test_player_state_survives_generation():
    cfg = GameConfig(seed=11, color=False)
    players = _players()
    players[0].health = 60
    players[1].has_sword = True
    MazeGenerator(cfg).generate(1, players)
    assert players[0].health == 60
    assert players[1].has_sword is True


def test_injected_rng_is_used():
    cfg = GameConfig(color=False)
    a = MazeGenerator(cfg, rng=random.Random(99)).generate(1, _players())
    b = MazeGenerator(cfg, rng=random.Random(99)).generate(1, _players())
    assert a.grid.rows() == b.grid.rows()


def test_level_beyond_max_size_rejected():
    cfg = GameConfig(seed=3, color=False)
    with pytest.raises(GenerationError):
        MazeGenerator(cfg).generate(7, _players())


def test_random_empty_cell_on_full_grid():
    g = Grid.from_rows(["##", "##"])
    with pytest.raises(GenerationError):
        random_empty_cell(g, random.Random(0))


def test_random_empty_cell_finds_only_gap():
    g = Grid.from_rows(["###", "# #", "###"])
    assert random_empty_cell(g, random.Random(0)) == (1, 1)
