#!/usr/bin/env python3
# endless_knot.py
# Endless-knot lattice along a Hilbert polyline: render parameters + command line.
# Interactive control ranges: degree 0..4, scale 1..5 in 0.1 steps.

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional

from hilbert_path import generate, grid_side
from knot_compositor import TILINGS, board_size, render

logger = logging.getLogger(__name__)

# =========================
# Render parameters
# =========================
MIN_DEPTH, MAX_DEPTH = 0, 4
MIN_SCALE, MAX_SCALE = 1.0, 5.0
SCALE_STEP = 0.1


@dataclass
class RenderConfig:
    depth: int = 2
    scale: float = 3.0
    tiling: str = "auto"
    show_path: bool = False
    out: Optional[str] = None

    def validate(self) -> "RenderConfig":
        if isinstance(self.depth, bool) or not isinstance(self.depth, int):
            raise ValueError(f"depth must be an integer, got {self.depth!r}")
        if not MIN_DEPTH <= self.depth <= MAX_DEPTH:
            raise ValueError(f"depth must be in [{MIN_DEPTH}, {MAX_DEPTH}], got {self.depth}")
        if isinstance(self.scale, bool) or not isinstance(self.scale, (int, float)):
            raise ValueError(f"scale must be a number, got {self.scale!r}")
        if not MIN_SCALE <= self.scale <= MAX_SCALE:
            raise ValueError(f"scale must be in [{MIN_SCALE}, {MAX_SCALE}], got {self.scale}")
        steps = round(self.scale / SCALE_STEP)
        if abs(steps * SCALE_STEP - self.scale) > 1e-9:
            raise ValueError(f"scale must be a multiple of {SCALE_STEP}, got {self.scale}")
        if self.tiling not in TILINGS:
            raise ValueError(f"tiling must be one of {TILINGS}, got {self.tiling!r}")
        if self.tiling == "copy" and not float(self.scale).is_integer():
            raise ValueError(f"copy tiling needs a whole-number scale, got {self.scale}")
        return self


def grid_label(depth: int) -> str:
    n = grid_side(depth)
    return f"{n} × {n}"


# =========================
# CLI
# =========================
def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Endless-knot lattice stitched along a Hilbert polyline")
    ap.add_argument("--depth", type=int, default=RenderConfig.depth,
                    help=f"curve degree, {MIN_DEPTH}..{MAX_DEPTH} (grid is 2^depth tiles square)")
    ap.add_argument("--scale", type=float, default=RenderConfig.scale,
                    help=f"pixels per motif cell, {MIN_SCALE}..{MAX_SCALE} in steps of {SCALE_STEP}")
    ap.add_argument("--tiling", type=str, default=RenderConfig.tiling, choices=list(TILINGS),
                    help="copy pre-rendered tiles or redraw every cell (auto copies for whole scales)")
    ap.add_argument("--show-path", action="store_true", help="overlay the Hilbert polyline in green")
    ap.add_argument("--print-path", action="store_true", help="print the lattice path and exit")
    ap.add_argument("--out", type=str, default=None, help="PNG path (opens a viewer if omitted)")
    ap.add_argument("--verbose", action="store_true")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    cfg = RenderConfig(depth=args.depth, scale=args.scale, tiling=args.tiling,
                       show_path=args.show_path, out=args.out)
    try:
        cfg.validate()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    logger.debug("%s", cfg)
    if args.print_path:
        for x, y in generate(cfg.depth):
            print(x, y)
        return 0

    size = board_size(cfg.depth, cfg.scale)
    print(f"degree {cfg.depth}: {grid_label(cfg.depth)} knots, {size}x{size} px")
    canvas = render(cfg.depth, cfg.scale, tiling=cfg.tiling, show_path=cfg.show_path)
    img = canvas.to_image()
    if cfg.out:
        img.save(cfg.out)
        print(f"Wrote {cfg.out}")
    else:
        img.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
