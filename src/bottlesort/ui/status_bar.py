from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..engine.state import PuzzleState
from .hud import status_text

SWATCH = 32
SWATCH_GAP = 10
SWATCH_STEP = SWATCH + SWATCH_GAP
PICKER_RIGHT = 8   # gap to the right window edge
PICKER_TOP = 12    # offset below the top of the status bar


@dataclass
class PickerLayout:
    origin_xy: Tuple[int, int]
    count: int

    @classmethod
    def for_state(cls, width: int, bar_y: int, state: PuzzleState) -> "PickerLayout":
        """Right-aligned row of swatches, one per colour of the current level."""
        count = len(state.colors)
        return cls(origin_xy=(width - count * SWATCH_STEP - PICKER_RIGHT, bar_y + PICKER_TOP), count=count)

    def swatch_rect(self, i: int) -> Tuple[int, int, int, int]:
        ox, oy = self.origin_xy
        return (ox + i * SWATCH_STEP, oy, SWATCH, SWATCH)


def picker_hit(px: int, py: int, picker: PickerLayout, colors: Sequence[str]) -> Optional[str]:
    """Return the colour whose swatch contains (px, py), if any."""
    for i, color in enumerate(colors[: picker.count]):
        x, y, w, h = picker.swatch_rect(i)
        if x <= px < x + w and y <= py < y + h:
            return color
    return None


def render_status_bar(screen, origin_xy: Tuple[int, int], width: int, height: int,
                      state: PuzzleState, picker: PickerLayout) -> None:
    """
    Draw the level/score readout and the colour picker. The armed colour gets a
    white frame. Does not mutate the state.
    """
    import pygame  # local import to avoid hard dep when not used
    ox, oy = origin_xy
    pygame.draw.rect(screen, (24, 24, 24), pygame.Rect(ox, oy, width, height))
    font = pygame.font.SysFont(None, 24)
    img = font.render(status_text(state), True, (220, 220, 220))
    screen.blit(img, (ox + 8, oy + (height - img.get_height()) // 2))

    for i, color in enumerate(state.colors[: picker.count]):
        x, y, w, h = picker.swatch_rect(i)
        r = pygame.Rect(x, y, w, h)
        pygame.draw.rect(screen, pygame.Color(color), r)
        if color == state.selected:
            pygame.draw.rect(screen, (255, 255, 255), r.inflate(6, 6), 3)
