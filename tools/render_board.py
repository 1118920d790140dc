#!/usr/bin/env python3
# Render seeded deals to PNGs using Pillow (one image per level).

import argparse, os
from PIL import Image, ImageDraw

from bottlesort.engine.controller import initialize_level
from bottlesort.render.layout import BoardLayout
from bottlesort.rng import PMRandom
from bottlesort.ui.hud import status_text

BG = (30, 30, 36, 255)
STROKE = (220, 220, 230, 255)

def render_state(state, out_png, width=480):
    layout = BoardLayout.for_width(width, state.bottle_count)
    canvas = Image.new("RGBA", (width, layout.height + 20), BG)
    draw = ImageDraw.Draw(canvas)
    for i, bottle in enumerate(state.bottles):
        for layer, color in enumerate(bottle):
            x, y, w, h = layout.layer_rect(i, layer)
            draw.rectangle([x, y, x + w, y + h], fill=color)
        x, y, w, h = layout.bottle_rect(i)
        draw.rectangle([x, y, x + w, y + h], outline=STROKE, width=3)
    draw.text((6, layout.height + 4), status_text(state), fill=STROKE)
    d = os.path.dirname(out_png)
    if d:
        os.makedirs(d, exist_ok=True)
    canvas.save(out_png)

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, required=True, help="Park-Miller seed")
    ap.add_argument("--levels", type=int, default=5, help="Render levels 1..N")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where to write PNGs")
    ap.add_argument("--width", type=int, default=480)
    args = ap.parse_args()

    for lvl in range(1, args.levels + 1):
        state = initialize_level(lvl, PMRandom.from_seed(args.seed))
        render_state(state, os.path.join(args.outdir, str(args.seed), f"{lvl:02d}.png"), width=args.width)
    print(f"Wrote PNGs to {os.path.join(args.outdir, str(args.seed))}")

if __name__ == "__main__":
    main()
