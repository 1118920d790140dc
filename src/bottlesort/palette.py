# src/bottlesort/palette.py
from typing import List, Tuple

from .rng import ShuffleSource

Color = str

PALETTE: Tuple[Color, ...] = (
    "#FF5733",
    "#33FF57",
    "#3357FF",
    "#FF33A1",
    "#A133FF",
    "#33FFA1",
    "#FFC300",
    "#C70039",
)


class InvalidColorCount(ValueError):
    """Requested more colours than the palette holds (or a negative count)."""

    def __init__(self, count: int, available: int = len(PALETTE)) -> None:
        super().__init__(f"color count must be 0..{available}, got {count}")
        self.count = count
        self.available = available


def draw_colors(count: int, rng: ShuffleSource) -> List[Color]:
    """
    Pick `count` distinct colours: shuffle a copy of the whole palette, then take
    the first `count`. Out-of-range counts are rejected rather than truncated.
    """
    if not (0 <= count <= len(PALETTE)):
        raise InvalidColorCount(count)
    colors = list(PALETTE)
    rng.shuffle(colors)
    return colors[:count]
