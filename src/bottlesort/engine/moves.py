# src/bottlesort/engine/moves.py
# Selection + pour rules. Rejections come back as a MoveStatus with the input
# state returned untouched (same object).

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple

from ..config import RULES, Rules
from ..palette import Color
from .state import PuzzleState
from .win import is_win

logger = logging.getLogger(__name__)


class MoveStatus(Enum):
    OK = "ok"
    NO_COLOR_SELECTED = "no_color_selected"
    INVALID_CONTAINER_INDEX = "invalid_container_index"
    CONTAINER_FULL = "container_full"


@dataclass(frozen=True)
class MoveOut:
    status: MoveStatus
    points_gained: int = 0
    won: bool = False

    @property
    def applied(self) -> bool:
        return self.status is MoveStatus.OK


def select_color(state: PuzzleState, color: Color) -> PuzzleState:
    """Arm `color` for the next pour. Replaces any earlier selection."""
    return replace(state, selected=color)


def apply_move(state: PuzzleState, index: int, rules: Rules = RULES) -> Tuple[PuzzleState, MoveOut]:
    """
    Pour the armed colour onto bottle `index`.

    Any non-full bottle accepts any colour; there is no matching-top rule.
    """
    if state.selected is None:
        return state, MoveOut(MoveStatus.NO_COLOR_SELECTED)
    if not state.has_bottle(index):
        return state, MoveOut(MoveStatus.INVALID_CONTAINER_INDEX)
    if state.fill_of(index) >= rules.capacity:
        return state, MoveOut(MoveStatus.CONTAINER_FULL)

    bottles = list(state.bottles)
    bottles[index] = bottles[index] + (state.selected,)
    new_state = replace(
        state,
        bottles=tuple(bottles),
        score=state.score + rules.points_per_pour,
        selected=None,
    )
    won = is_win(new_state, rules.capacity)
    logger.debug("poured %s into bottle %d (score=%d won=%s)", state.selected, index, new_state.score, won)
    return new_state, MoveOut(MoveStatus.OK, points_gained=rules.points_per_pour, won=won)
