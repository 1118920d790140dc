# src/bottlesort/engine/win.py
from __future__ import annotations

from typing import Sequence, Union

from ..config import RULES
from ..palette import Color
from .state import PuzzleState


def is_solved_bottle(bottle: Sequence[Color], capacity: int = RULES.capacity) -> bool:
    return len(bottle) == capacity and len(set(bottle)) == 1


def is_win(
    puzzle: Union[PuzzleState, Sequence[Sequence[Color]]],
    capacity: int = RULES.capacity,
) -> bool:
    """
    Every non-empty bottle must be full and a single colour. Empty bottles are
    ignored, so a board with no layers at all counts as won.
    """
    bottles = puzzle.bottles if isinstance(puzzle, PuzzleState) else puzzle
    return all(is_solved_bottle(b, capacity) for b in bottles if len(b) > 0)
