# src/bottlesort/mapgen/generator.py
# Canonical puzzle generator: palette draw -> multiset -> shuffle -> deal -> empties.

from __future__ import annotations

import logging
from typing import List, Tuple

from ..config import RULES, Rules
from ..palette import Color, InvalidColorCount, draw_colors
from ..rng import ShuffleSource
from .deal import build_distribution, deal

logger = logging.getLogger(__name__)


def generate(
    container_count: int,
    color_count: int,
    rng: ShuffleSource,
    rules: Rules = RULES,
) -> Tuple[List[List[Color]], List[Color]]:
    """
    Return (bottles, colors) for one level.

    The first `container_count` bottles are full; one empty bottle follows, and a
    second one when container_count > rules.extra_empty_after. `colors` are the
    colours drawn for the level, in draw order.
    """
    if container_count < 0:
        raise ValueError(f"container_count must be >= 0, got {container_count}")
    if container_count > 0 and color_count < 1:
        raise InvalidColorCount(color_count)

    colors = draw_colors(color_count, rng)
    distribution = build_distribution(colors, container_count, rules.capacity)
    rng.shuffle(distribution)
    bottles = deal(distribution, container_count, rules.capacity)

    bottles.append([])
    if container_count > rules.extra_empty_after:
        bottles.append([])

    logger.debug("generated %d bottles with colors %s", len(bottles), colors)
    return bottles, colors
