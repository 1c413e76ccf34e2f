from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List

from .api import best_tiles, solve
from .core.config import SolverConfig
from .core.errors import MazeError
from .problems.maze import load_grid_file

logger = logging.getLogger("maze_lab")


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Lowest score through a turn-penalised maze, and how many tiles lie on a best path.")
    parser.add_argument("maze", nargs="?", default="maze.txt", help="Path to maze file (default: maze.txt)")
    parser.add_argument("--turn-penalty", type=int, default=None, help="Cost of each 90 degree turn")
    parser.add_argument("--no-reversal", action="store_true",
                        help="Forbid turning around in place as a single move")
    parser.add_argument("--plot", type=Path, default=None, help="Save a picture of the best-path tiles")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        config = SolverConfig.from_env().with_overrides(
            turn_penalty=args.turn_penalty,
            allow_reversal=False if args.no_reversal else None,
        )
        grid = load_grid_file(args.maze)
        cost = solve(grid, config)
        tiles = best_tiles(grid, config)
    except (MazeError, OSError, ValueError) as e:
        logger.error("%s: %s", args.maze, e)
        return 1

    print(f"Lowest score: {cost}")
    print(f"Tiles: {len(tiles)}")

    if args.plot is not None:
        from .plots.plotting import draw_maze
        fig = draw_maze(grid, tiles, title=Path(args.maze).name)
        fig.savefig(args.plot, dpi=160)
        logger.info("wrote %s", args.plot)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
