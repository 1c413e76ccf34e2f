# maze_lab/plots/plotting.py
# Figures for a solved maze: the obstacle map with the best-path tiles overlaid, and
# a bar comparison of the strategies run by the benchmark.
from __future__ import annotations
from typing import Iterable, List, Mapping

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap

from ..problems.maze import Coord, Grid

# 0 floor, 1 wall, 2 best-path tile, 3 start, 4 end
_CMAP = ListedColormap(["#f4f4f4", "#3a3a3a", "#f2c14e", "#3c9d5d", "#c0392b"])


def maze_layers(grid: Grid, tiles: Iterable[Coord] = ()) -> np.ndarray:
    layers = grid.walls.astype(np.int8)
    for x, y in tiles:
        layers[y, x] = 2
    layers[grid.start[1], grid.start[0]] = 3
    layers[grid.end[1], grid.end[0]] = 4
    return layers


def draw_maze(grid: Grid, tiles: Iterable[Coord] = (), title: str = "Best-path tiles"):
    tiles = list(tiles)
    fig, ax = plt.subplots(figsize=(max(4, grid.width / 4), max(4, grid.height / 4)))
    ax.imshow(maze_layers(grid, tiles), cmap=_CMAP, vmin=0, vmax=4, interpolation="nearest")
    ax.set_xticks([]); ax.set_yticks([])
    ax.set_title(f"{title} ({len(tiles)} tiles)")
    fig.tight_layout()
    return fig


def bar_compare(rows: List[Mapping], title: str = "Strategy Comparison"):
    rows = [r for r in rows if r.get("success")]
    names = [r["algo"] for r in rows]
    nodes = [r.get("nodes_expanded") or 0 for r in rows]
    times = [r.get("time_s") or 0 for r in rows]
    mems  = [r.get("peak_kb") or 0 for r in rows]

    fig, axs = plt.subplots(1, 3, figsize=(12, 4))
    axs[0].bar(names, nodes); axs[0].set_title("States Expanded"); axs[0].tick_params(axis='x', rotation=20)
    axs[1].bar(names, times); axs[1].set_title("Time (s)"); axs[1].tick_params(axis='x', rotation=20)
    axs[2].bar(names, mems); axs[2].set_title("Peak Memory (KB)"); axs[2].tick_params(axis='x', rotation=20)
    fig.suptitle(title)
    fig.tight_layout(rect=[0, 0, 1, 0.93])
    return fig
