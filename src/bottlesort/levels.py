from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class LevelConfig:
    containers: int
    colors: int


# 1-indexed by level; anything past the end reuses the last row
LEVEL_TABLE: Tuple[LevelConfig, ...] = (
    LevelConfig(containers=2, colors=2),
    LevelConfig(containers=3, colors=3),
    LevelConfig(containers=4, colors=3),
    LevelConfig(containers=4, colors=4),
    LevelConfig(containers=5, colors=4),
)


def config_for(level: int) -> LevelConfig:
    if level < 1:
        raise ValueError(f"level must be >= 1, got {level}")
    return LEVEL_TABLE[min(level, len(LEVEL_TABLE)) - 1]
