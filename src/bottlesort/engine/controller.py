# src/bottlesort/engine/controller.py
# Level lifecycle + command dispatch. One LevelController owns the current
# PuzzleState; input events map to exactly one command each.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

from ..config import RULES, Rules
from ..levels import config_for
from ..mapgen.generator import generate
from ..palette import Color
from ..rng import ShuffleSource, default_source
from .moves import MoveOut, apply_move, select_color
from .state import PuzzleState
from .win import is_win

logger = logging.getLogger(__name__)

Sink = Callable[[PuzzleState], None]


def initialize_level(
    level: int,
    rng: Optional[ShuffleSource] = None,
    *,
    score: int = 0,
    rules: Rules = RULES,
) -> PuzzleState:
    cfg = config_for(level)
    bottles, colors = generate(cfg.containers, cfg.colors, default_source() if rng is None else rng, rules)
    logger.info("level %d: %d bottles, %d colors", level, len(bottles), len(colors))
    return PuzzleState.from_lists(bottles, colors, level=level, score=score)


def advance_level(state: PuzzleState, rng: Optional[ShuffleSource] = None, rules: Rules = RULES) -> PuzzleState:
    return initialize_level(state.level + 1, rng, score=state.score, rules=rules)


def restart_level(state: PuzzleState, rng: Optional[ShuffleSource] = None, rules: Rules = RULES) -> PuzzleState:
    # Same level, fresh deal; score carries over
    return initialize_level(state.level, rng, score=state.score, rules=rules)


# ---- Commands ----

@dataclass(frozen=True)
class SelectColor:
    color: Color


@dataclass(frozen=True)
class Pour:
    index: int


@dataclass(frozen=True)
class Restart:
    pass


@dataclass(frozen=True)
class NextLevel:
    pass


Command = Union[SelectColor, Pour, Restart, NextLevel]


class LevelController:
    def __init__(
        self,
        level: int = 1,
        *,
        rng: Optional[ShuffleSource] = None,
        rules: Rules = RULES,
        sink: Optional[Sink] = None,
    ) -> None:
        self.rng = default_source() if rng is None else rng
        self.rules = rules
        self.sink = sink
        self.state = initialize_level(level, self.rng, rules=rules)
        self._publish()

    # ---- Lifecycle helpers ----
    def _publish(self) -> None:
        if self.sink is not None:
            self.sink(self.state)

    def _set(self, state: PuzzleState) -> None:
        if state is self.state:
            return
        self.state = state
        self._publish()

    @property
    def won(self) -> bool:
        return is_win(self.state, self.rules.capacity)

    # ---- Commands ----
    def select(self, color: Color) -> PuzzleState:
        self._set(select_color(self.state, color))
        return self.state

    def pour(self, index: int) -> MoveOut:
        state, out = apply_move(self.state, index, self.rules)
        if not out.applied:
            logger.debug("pour into %d rejected: %s", index, out.status.value)
        self._set(state)
        return out

    def restart(self) -> PuzzleState:
        self._set(restart_level(self.state, self.rng, self.rules))
        return self.state

    def advance(self) -> PuzzleState:
        self._set(advance_level(self.state, self.rng, self.rules))
        return self.state

    def dispatch(self, command: Command) -> Optional[MoveOut]:
        """Apply one command. Returns the MoveOut for Pour, None otherwise."""
        if isinstance(command, SelectColor):
            self.select(command.color)
        elif isinstance(command, Pour):
            return self.pour(command.index)
        elif isinstance(command, Restart):
            self.restart()
        elif isinstance(command, NextLevel):
            self.advance()
        else:
            raise TypeError(f"unknown command: {command!r}")
        return None
