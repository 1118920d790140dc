# tools/run_game.py
# Interactive pygame runner. Every input event becomes exactly one controller
# command; the window only ever reads the controller's state.
#   click swatch  -> SelectColor
#   click bottle  -> Pour
#   R             -> Restart
#   N             -> NextLevel (once solved)

from __future__ import annotations

import argparse
import logging
from typing import Optional

import pygame

try:
    from bottlesort.engine.controller import LevelController, NextLevel, Pour, Restart, SelectColor
    from bottlesort.engine.state import PuzzleState
    from bottlesort.render.board import BG_COLOR, draw_board
    from bottlesort.render.layout import BoardLayout
    from bottlesort.rng import PMRandom
    from bottlesort.ui.hud import status_text
    from bottlesort.ui.status_bar import PickerLayout, picker_hit, render_status_bar
except Exception as e:  # pragma: no cover
    print("[run_game] Failed to import project modules:", e)
    print("Ensure you installed the package in editable mode: pip install -e .")
    raise

BAR_H = 56


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(description="Bottle sort")
    parser.add_argument("--level", type=int, default=1)
    parser.add_argument("--seed", type=int, default=None, help="replayable deal (Park-Miller seed)")
    parser.add_argument("--width", type=int, default=640)
    parser.add_argument("--fps", type=int, default=30)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if not pygame.get_init():
        pygame.init()
    if not pygame.font.get_init():
        pygame.font.init()

    layout: Optional[BoardLayout] = None
    picker: Optional[PickerLayout] = None
    dirty = True

    def on_change(state: PuzzleState) -> None:
        # Geometry follows the state so drawing and hit-testing always agree
        nonlocal layout, picker, dirty
        layout = BoardLayout.for_width(args.width, state.bottle_count)
        picker = PickerLayout.for_state(args.width, layout.height, state)
        dirty = True

    rng = PMRandom.from_seed(args.seed) if args.seed is not None else None
    ctl = LevelController(args.level, rng=rng, sink=on_change)

    screen = pygame.display.set_mode((args.width, layout.height + BAR_H))
    clock = pygame.time.Clock()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r:
                    ctl.dispatch(Restart())
                elif event.key == pygame.K_n and ctl.won:
                    ctl.dispatch(NextLevel())
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mx, my = event.pos
                color = picker_hit(mx, my, picker, ctl.state.colors)
                if color is not None:
                    ctl.dispatch(SelectColor(color))
                    continue
                idx = layout.bottle_at(mx, my)
                if idx is not None:
                    out = ctl.dispatch(Pour(idx))
                    if out is not None and out.won:
                        print(f"Solved level {ctl.state.level} with score {ctl.state.score}; press N")

        if dirty:
            screen.fill(BG_COLOR)
            draw_board(screen, ctl.state, layout)
            render_status_bar(screen, (0, layout.height), args.width, BAR_H, ctl.state, picker)
            caption = status_text(ctl.state)
            if ctl.won:
                caption += "  - solved! N for next level"
            pygame.display.set_caption(f"Bottle sort: {caption}")
            pygame.display.flip()
            dirty = False

        clock.tick(args.fps)

    pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
