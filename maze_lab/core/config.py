# maze_lab/core/config.py
# Solver tunables. Defaults match the classic puzzle; every field can be overridden
# through the environment, the same way the benchmark runner reads its knobs.
from __future__ import annotations
import os
from dataclasses import dataclass, replace
from typing import Optional

from ..problems.maze import Direction

DEFAULT_TURN_PENALTY = 1000

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name}={raw!r} is not a boolean")


@dataclass(frozen=True)
class SolverConfig:
    turn_penalty: int = DEFAULT_TURN_PENALTY
    start_facing: Direction = Direction.RIGHT
    allow_reversal: bool = True
    max_expansions: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.turn_penalty, bool) or not isinstance(self.turn_penalty, int):
            raise ValueError(f"turn_penalty must be an int, got {self.turn_penalty!r}")
        if self.turn_penalty < 0:
            raise ValueError(f"turn_penalty must be >= 0, got {self.turn_penalty}")
        if not isinstance(self.start_facing, Direction):
            object.__setattr__(self, "start_facing", Direction.parse(self.start_facing))
        if self.max_expansions is not None and self.max_expansions < 0:
            raise ValueError(f"max_expansions must be >= 0, got {self.max_expansions}")

    @classmethod
    def from_env(cls) -> "SolverConfig":
        cap = os.getenv("MAZE_MAX_EXPANSIONS")
        return cls(
            turn_penalty=int(os.getenv("MAZE_TURN_PENALTY", str(DEFAULT_TURN_PENALTY))),
            start_facing=Direction.parse(os.getenv("MAZE_START_FACING", Direction.RIGHT.name)),
            allow_reversal=_env_bool("MAZE_ALLOW_REVERSAL", True),
            max_expansions=int(cap) if cap else None,
        )

    def with_overrides(self, **changes) -> "SolverConfig":
        changes = {k: v for k, v in changes.items() if v is not None}
        return replace(self, **changes)
