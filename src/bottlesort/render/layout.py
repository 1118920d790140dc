# src/bottlesort/render/layout.py
# Board geometry and hit-testing (no pygame). Bottles sit in one row, evenly
# spaced across the width, with a fixed top margin.

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

BOTTLE_W = 60
BOTTLE_H = 150
TOP_MARGIN = 20
NECK_H = 20  # rounded shoulder drawn above the first layer

Rect = Tuple[float, float, float, float]  # x, y, w, h


@dataclass
class BoardLayout:
    width: int
    bottle_count: int
    capacity: int = 4
    spacing: float = 0.0

    @classmethod
    def for_width(cls, width: int, bottle_count: int, capacity: int = 4) -> "BoardLayout":
        spacing = (width - bottle_count * BOTTLE_W) / (bottle_count + 1)
        return cls(width=width, bottle_count=bottle_count, capacity=capacity, spacing=spacing)

    @property
    def height(self) -> int:
        return BOTTLE_H + 2 * TOP_MARGIN

    @property
    def layer_h(self) -> float:
        return BOTTLE_H / self.capacity

    def bottle_origin(self, index: int) -> Tuple[float, float]:
        x = self.spacing + index * (BOTTLE_W + self.spacing)
        return x, TOP_MARGIN

    def bottle_rect(self, index: int) -> Rect:
        x, y = self.bottle_origin(index)
        return (x, y, BOTTLE_W, BOTTLE_H)

    def bottle_rects(self) -> List[Rect]:
        return [self.bottle_rect(i) for i in range(self.bottle_count)]

    def layer_rect(self, index: int, layer: int, inset: float = 1.5) -> Rect:
        """Layer 0 is the bottom of the bottle."""
        x, y = self.bottle_origin(index)
        ly = y + BOTTLE_H - (layer + 1) * self.layer_h
        return (x + inset, ly, BOTTLE_W - 2 * inset, self.layer_h)

    def bottle_at(self, px: float, py: float) -> Optional[int]:
        """Map a click to a bottle index (edges inclusive), or None."""
        for i in range(self.bottle_count):
            x, y, w, h = self.bottle_rect(i)
            if x <= px <= x + w and y <= py <= y + h:
                return i
        return None
