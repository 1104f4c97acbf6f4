"""Maze generation phases: grid init, player/goal placement, obstacle, wall and
teleporter scattering, monster seeding.

Phase order matters: every later phase only claims cells that are still empty,
so nothing placed earlier is ever overwritten.

Two placement strategies are used:
    * resample-until-empty (players, goal, obstacles, teleporters): draw uniform
      cells until an empty one turns up. Exact counts.
    * best-effort (walls, monsters): a fixed number of draws / a single roll per
      cell; occupied draws are skipped so final counts are probabilistic.

Randomness comes from an explicit ``random.Random`` owned by the generator (or
injected by the caller); module-level ``random`` state is never touched so a seed
fully determines the layout sequence.
"""

from __future__ import annotations

import random
import time
from typing import Iterable, List, Optional

from maze.config import GameConfig
from maze.errors import GenerationError
from maze.logging_utils import get_logger
from maze.models.entities import MonsterSet, Player
from maze.models.level import Level

from .grid import Coord, Grid
from .tiles import EMPTY, GOAL, MONSTER, OBSTACLE, TELEPORT, WALL

log = get_logger("maze.generator")


def random_empty_cell(grid: Grid, rng: random.Random) -> Coord:
    """Resample uniform cells until an empty one is found.

    Raises ``GenerationError`` up front when the grid has no empty cell, which
    would otherwise loop forever.
    """
    if grid.count(EMPTY) == 0:
        raise GenerationError(f"No empty cell left in {grid.size}x{grid.size} grid")
    while True:
        row = rng.randrange(grid.size)
        col = rng.randrange(grid.size)
        if grid.is_empty(row, col):
            return row, col


class MazeGenerator:
    def __init__(self, config: GameConfig, rng: Optional[random.Random] = None):
        self.config = config
        if rng is None:
            self.seed = config.seed if config.seed is not None else random.randint(0, 2**31 - 1)
            rng = random.Random(self.seed)
        else:
            self.seed = config.seed
        self.rng = rng

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------
    def init_grid(self, size: int) -> Grid:
        return Grid(size)

    def place_players(self, grid: Grid, players: Iterable[Player]) -> None:
        for player in players:
            player.position = random_empty_cell(grid, self.rng)
            grid.set(*player.position, player.symbol)

    def place_goal(self, grid: Grid) -> Coord:
        goal = random_empty_cell(grid, self.rng)
        grid.set(*goal, GOAL)
        return goal

    def scatter(self, grid: Grid, symbol: str, count: int) -> List[Coord]:
        placed = []
        for _ in range(count):
            pos = random_empty_cell(grid, self.rng)
            grid.set(*pos, symbol)
            placed.append(pos)
        return placed

    def place_walls(self, grid: Grid) -> int:
        """Best-effort walls: ``size*size // wall_divisor`` draws, occupied draws skipped."""
        draws = grid.size * grid.size // self.config.wall_divisor
        placed = 0
        for _ in range(draws):
            row = self.rng.randrange(grid.size)
            col = self.rng.randrange(grid.size)
            if grid.is_empty(row, col):
                grid.set(row, col, WALL)
                placed += 1
        return placed

    def seed_monsters(self, grid: Grid) -> MonsterSet:
        monsters = MonsterSet()
        for row in range(grid.size):
            for col in range(grid.size):
                if grid.is_empty(row, col) and self.rng.random() < self.config.monster_probability:
                    monsters.spawn((row, col), health=self.config.monster_health)
                    grid.set(row, col, MONSTER)
        return monsters

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------
    def generate(self, level: int, players: Iterable[Player]) -> Level:
        """Build the maze for ``level`` and move ``players`` onto their start cells.

        Player health and equipment are untouched; only positions are reset.
        """
        size = self.config.size_for_level(level)
        if size > self.config.max_size:
            raise GenerationError(f"Level {level} needs a {size}x{size} maze, above max_size={self.config.max_size}")
        start = time.perf_counter()
        grid = self.init_grid(size)
        self.place_players(grid, players)
        goal = self.place_goal(grid)
        self.scatter(grid, OBSTACLE, self.config.num_obstacles)
        draws = size * size // self.config.wall_divisor
        walls = self.place_walls(grid)
        self.scatter(grid, TELEPORT, self.config.num_teleports)
        monsters = self.seed_monsters(grid)
        metrics = {
            "size": size,
            "walls": walls,
            "wall_draws_skipped": draws - walls,
            "obstacles": grid.count(OBSTACLE),
            "teleporters": grid.count(TELEPORT),
            "monsters": len(monsters),
            "runtime_ms": int((time.perf_counter() - start) * 1000),
        }
        log.info(event="level_generated", level_no=level, seed=self.seed, goal=goal, **metrics)
        return Level(number=level, grid=grid, goal=goal, monsters=monsters, seed=self.seed, metrics=metrics)


__all__ = ["MazeGenerator", "random_empty_cell"]
