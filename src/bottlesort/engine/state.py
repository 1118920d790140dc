# src/bottlesort/engine/state.py
# Immutable puzzle snapshot. Every operation hands back a new PuzzleState;
# the controller holding the current one is the only writer.

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..palette import Color

Bottle = Tuple[Color, ...]


def freeze_bottles(bottles: Sequence[Sequence[Color]]) -> Tuple[Bottle, ...]:
    return tuple(tuple(b) for b in bottles)


@dataclass(frozen=True)
class PuzzleState:
    bottles: Tuple[Bottle, ...]
    colors: Tuple[Color, ...] = ()
    level: int = 1
    score: int = 0
    selected: Optional[Color] = None

    @classmethod
    def from_lists(
        cls,
        bottles: Sequence[Sequence[Color]],
        colors: Sequence[Color] = (),
        *,
        level: int = 1,
        score: int = 0,
        selected: Optional[Color] = None,
    ) -> "PuzzleState":
        return cls(
            bottles=freeze_bottles(bottles),
            colors=tuple(colors),
            level=level,
            score=score,
            selected=selected,
        )

    @property
    def bottle_count(self) -> int:
        return len(self.bottles)

    def has_bottle(self, index: int) -> bool:
        return 0 <= index < len(self.bottles)

    def fill_of(self, index: int) -> int:
        return len(self.bottles[index])

    def top_of(self, index: int) -> Optional[Color]:
        b = self.bottles[index]
        return b[-1] if b else None

    def as_lists(self) -> List[List[Color]]:
        """Mutable copy for renderers and tools."""
        return [list(b) for b in self.bottles]
