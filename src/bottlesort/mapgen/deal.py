# src/bottlesort/mapgen/deal.py
# Builds the colour multiset for a level and deals it into bottles.
# Bottle lists are bottom-to-top (index 0 is the first layer poured in).

from itertools import cycle, islice
from typing import List, Sequence

from ..palette import Color


def build_distribution(colors: Sequence[Color], container_count: int, capacity: int) -> List[Color]:
    """
    Repeat the chosen colours in order (interleaved, not grouped) and cut the run
    at exactly container_count * capacity layers.

    When there are fewer colours than bottles the cut leaves per-colour counts
    uneven, so some colours can never fill a bottle on their own. That is how
    the game has always dealt; no solvability check is made.
    """
    if not colors:
        return []
    return list(islice(cycle(colors), container_count * capacity))


def deal(distribution: List[Color], container_count: int, capacity: int) -> List[List[Color]]:
    """Pop `capacity` layers off the front for each bottle, in order. Consumes `distribution`."""
    bottles: List[List[Color]] = []
    for _ in range(container_count):
        bottles.append(distribution[:capacity])
        del distribution[:capacity]
    return bottles
