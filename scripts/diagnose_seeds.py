#!/usr/bin/env python3
"""Maze placement diagnostics for specific seeds.

Usage:
  python scripts/diagnose_seeds.py 292372 730727

If no seeds are provided as CLI args, a default list is used. Every level of the
default session is generated for each seed and checked for placement problems.
Exits with non-zero status if any issue is detected.
"""

from __future__ import annotations

import json
import os
import sys
from typing import List

# Ensure project root on path if executed directly
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from maze.config import GameConfig  # noqa: E402 import after path fix
from maze.controller import GameSession  # noqa: E402 import after path fix
from maze.grid.tiles import GOAL, OBSTACLE, TELEPORT  # noqa: E402 import after path fix

DEFAULT_SEEDS = [292372, 730727]


def analyze(session: GameSession) -> dict:
    level = session.level
    grid = level.grid
    cfg = session.config
    starts = [p.position for p in session.players]
    monster_cells = [m.position for m in level.monsters]
    return {
        "shared_start_cells": len(starts) - len(set(starts)),
        "player_marker_mismatch": sum(1 for p in session.players if grid.at(*p.position) != p.symbol),
        "goal_marker_missing": int(grid.at(*level.goal) != GOAL),
        "obstacle_count_off": abs(grid.count(OBSTACLE) - cfg.num_obstacles),
        "teleport_count_off": abs(grid.count(TELEPORT) - cfg.num_teleports),
        "monster_marker_mismatch": sum(1 for pos in monster_cells if grid.at(*pos) != "M"),
        "complete_at_start": int(session.is_level_complete()),
    }


def run_for_seed(seed: int) -> dict:
    session = GameSession(GameConfig(seed=seed, color=False))
    levels = []
    for number in range(1, session.config.max_levels + 1):
        session.level_number = number
        session.start_level()
        issues = analyze(session)
        levels.append({"level": number, "metrics": session.level.metrics, "issues": issues})
    ok = all(v == 0 for lv in levels for v in lv["issues"].values())
    return {"seed": seed, "levels": levels, "ok": ok}


def main(argv: List[str]) -> int:
    seeds = [int(a) for a in argv] if argv else DEFAULT_SEEDS
    results = [run_for_seed(s) for s in seeds]
    print(json.dumps({"results": results}, indent=2))
    # Non-zero exit if any failure
    if not all(r["ok"] for r in results):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
