# maze_lab/benchmarks/run_all.py
# Runs every solver strategy on one maze and records cost, tiles, expansions, time and memory.
#   python -m maze_lab.benchmarks.run_all path/to/maze.txt
from __future__ import annotations

import json
import os
import sys
import time
from pathlib import Path
from typing import Any, Callable, List, Optional, Tuple

from ..algorithms.bidirectional import best_path_tiles
from ..algorithms.branch_bound import branch_and_bound_tiles
from ..algorithms.ucs import uniform_cost_search
from ..core.config import SolverConfig
from ..plots.plotting import bar_compare
from ..problems.maze import MazeProblem, load_grid_file

# ---- Tunables (overridable via environment variables) -----------------------
MAZE_FILE = os.getenv("MAZE_FILE", "maze.txt")
SKIP_ENUMERATION = os.getenv("MAZE_SKIP_ENUMERATION", "0") == "1"   # branch & bound can be slow on open mazes
RESULTS_JSON = Path(os.getenv("MAZE_RESULTS", str(Path(__file__).with_name("results.json"))))


def _fmt_time(x):
    if x is None:
        return "n/a"
    return f"{float(x):.4f}"


def _load_algos() -> List[Tuple[str, Callable[[Any], Any]]]:
    algos: List[Tuple[str, Callable[[Any], Any]]] = [
        ("UCS", uniform_cost_search),
        ("Bidirectional UCS", best_path_tiles),
    ]
    if not SKIP_ENUMERATION:
        algos.append(("Branch&Bound", branch_and_bound_tiles))
    return algos


def run(problem: MazeProblem, max_expansions: Optional[int] = None) -> List[dict]:
    rows = []
    for name, fn in _load_algos():
        print(f"→ Running {name} ...")
        r = fn(problem, max_expansions=max_expansions)
        print(
            f"  {r.algo}: "
            f"{'OK' if r.success else 'FAIL'} "
            f"cost={r.cost} "
            f"tiles={len(r.tiles) if r.tiles else 'n/a'} "
            f"expanded={r.nodes_expanded}, "
            f"time={_fmt_time(r.time_s)}s"
        )
        rows.append({
            "algo": r.algo,
            "success": r.success,
            "cost": r.cost,
            "tiles": len(r.tiles) if r.tiles else None,
            "nodes_expanded": r.nodes_expanded,
            "time_s": r.time_s,
            "peak_kb": r.peak_kb,
            "error": r.error,
        })
    return rows


def main(argv: List[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    path = Path(argv[0] if argv else MAZE_FILE)
    grid = load_grid_file(path)
    config = SolverConfig.from_env()
    problem = MazeProblem.from_config(grid, config)

    rows = run(problem, max_expansions=config.max_expansions)
    out = {"maze": str(path), "results": rows, "ts": time.time()}
    print(json.dumps(out, indent=2))
    RESULTS_JSON.write_text(json.dumps(out, indent=2))
    print(f"Wrote {RESULTS_JSON}")

    # chart next to the JSON
    png_path = RESULTS_JSON.with_suffix(".png")
    fig = bar_compare(rows, title=f"Strategy Comparison: {path.name}")
    fig.savefig(png_path, dpi=160)
    print(f"Wrote {png_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
