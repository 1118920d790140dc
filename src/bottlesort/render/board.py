# src/bottlesort/render/board.py
from __future__ import annotations

import pygame

from ..engine.state import PuzzleState
from .layout import BOTTLE_H, BOTTLE_W, NECK_H, BoardLayout

BG_COLOR = (30, 30, 36)
BOTTLE_STROKE = (220, 220, 230)
STROKE_W = 3


def _bottle_outline(x: float, y: float):
    # Straight sides, open-shouldered top approximated by a short taper
    return [
        (x, y + BOTTLE_H),
        (x, y + NECK_H),
        (x + BOTTLE_W * 0.2, y),
        (x + BOTTLE_W * 0.8, y),
        (x + BOTTLE_W, y + NECK_H),
        (x + BOTTLE_W, y + BOTTLE_H),
    ]


def draw_board(screen: "pygame.Surface", state: PuzzleState, layout: BoardLayout, origin_y: int = 0) -> None:
    """Draw every bottle with its layers. Reads the state only."""
    for i, bottle in enumerate(state.bottles):
        for layer, color in enumerate(bottle):
            lx, ly, lw, lh = layout.layer_rect(i, layer, inset=STROKE_W / 2)
            pygame.draw.rect(screen, pygame.Color(color), pygame.Rect(lx, ly + origin_y, lw, lh))
        x, y = layout.bottle_origin(i)
        pts = [(px, py + origin_y) for px, py in _bottle_outline(x, y)]
        pygame.draw.lines(screen, BOTTLE_STROKE, True, pts, STROKE_W)
