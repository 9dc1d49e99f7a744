"""
Endless-knot compositor.

Phase 1 stamps the 27x27 motif into every slot of an N x N tile grid, base
and quarter-turned variants alternating by checkerboard parity. Phase 2 walks
the Hilbert polyline and, at every step, overlays a small three-layer patch
across the shared tile edge so neighbouring knots read as one strand.

Board units: one motif cell == 1 unit; everything is multiplied by `scale`
only at the moment it reaches the canvas.
"""

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import List, Mapping, Optional, Sequence, Tuple

from hilbert_path import Point, generate, grid_side, path_steps
from knot_canvas import Canvas, pixel_edge
from knot_motif import (BACKGROUND, BASE_MOTIF, MOTIF_SIZE, PALETTE, RGB,
                        ROTATED_MOTIF, WALL, WEAVE_A, Motif, validate_motif)

logger = logging.getLogger(__name__)

# =========================
# Connector layout (board units)
# =========================
PARITY_OFFSET = 3
CONNECTOR_BASE = 10      # across-step start of the outer band, before parity
OUTER_LONG = 7
INNER_LONG = 5
GAP_LONG = 3
BAND_START = 11.5        # along-step start of the weave/wall bands
BAND_WIDTH = 4
GAP_START = 10.5
GAP_WIDTH = 6

# (symbol, across-step inset, across length, along start, along length), drawn in order
CONNECTOR_LAYERS = (
    (WEAVE_A, 0, OUTER_LONG, BAND_START, BAND_WIDTH),
    (WALL, 1, INNER_LONG, BAND_START, BAND_WIDTH),
    (BACKGROUND, 2, GAP_LONG, GAP_START, GAP_WIDTH),
)

# debug overlay of the polyline itself
TRACE_INSET = 13.1
TRACE_WIDTH = 0.8
TRACE_COLOR = "#8f8"

TILINGS = ("auto", "copy", "direct")

Rect = Tuple[str, float, float, float, float]


class StitchError(RuntimeError):
    """Path step the connector layout cannot handle: path and compositor are out of sync."""


@dataclass(frozen=True)
class Connector:
    start: Point
    end: Point
    vertical: bool
    offset: int
    midpoint: Tuple[float, float]

    def rects(self) -> List[Rect]:
        mx, my = self.midpoint
        out = []
        for sym, inset, across, along_start, along in CONNECTOR_LAYERS:
            a = CONNECTOR_BASE + inset + self.offset
            if self.vertical:
                out.append((sym, mx + a, my + along_start, across, along))
            else:
                out.append((sym, mx + along_start, my + a, along, across))
        return out


def make_connector(old: Point, new: Point) -> Connector:
    (xo, yo), (xn, yn) = old, new
    vertical = xn == xo
    horizontal = yn == yo
    if vertical == horizontal or abs(xn - xo) + abs(yn - yo) != 1:
        raise StitchError(
            f"internal: connections should be unit horizontal or vertical steps, got {old} -> {new}")
    odd = (min(xo, xn) + min(yo, yn)) % 2 == 1
    return Connector(
        start=old,
        end=new,
        vertical=vertical,
        offset=-PARITY_OFFSET if odd else PARITY_OFFSET,
        midpoint=((xo + xn) / 2 * MOTIF_SIZE, (yo + yn) / 2 * MOTIF_SIZE),
    )


def connectors(path: Sequence[Point]) -> List[Connector]:
    return [make_connector(a, b) for a, b in path_steps(path)]


def tile_layout(depth: int) -> Tuple[Tuple[Motif, ...], ...]:
    """Slot (r, c) holds BASE_MOTIF when r+c is even, ROTATED_MOTIF otherwise."""
    n = grid_side(depth)
    return tuple(
        tuple(BASE_MOTIF if (r + c) % 2 == 0 else ROTATED_MOTIF for c in range(n))
        for r in range(n)
    )


def _check_scale(scale) -> float:
    if isinstance(scale, bool) or not isinstance(scale, Real):
        raise ValueError(f"scale must be a number, got {scale!r}")
    if not math.isfinite(scale) or scale <= 0:
        raise ValueError(f"scale must be a positive finite number, got {scale}")
    return float(scale)


def board_size(depth: int, scale: float) -> int:
    return int(grid_side(depth) * MOTIF_SIZE * _check_scale(scale))


class KnotCompositor:
    def __init__(self, palette: Mapping[str, RGB] = PALETTE):
        validate_motif(BASE_MOTIF, palette)
        validate_motif(ROTATED_MOTIF, palette)
        self.palette = palette

    # ---- Phase 1 ----
    def _draw_tile(self, canvas: Canvas, motif: Motif, bx: int, by: int, scale: float) -> None:
        # both edges of a cell come from its integer index, so neighbours share
        # an edge and fractional scales leave no unpainted seams
        xs = [pixel_edge((bx + k) * scale) for k in range(MOTIF_SIZE + 1)]
        ys = [pixel_edge((by + k) * scale) for k in range(MOTIF_SIZE + 1)]
        for i in range(MOTIF_SIZE):
            row = motif[i]
            for j in range(MOTIF_SIZE):
                canvas.fill_rect(self.palette[row[j]],
                                 xs[i], ys[j], xs[i + 1] - xs[i], ys[j + 1] - ys[j])

    def stamp_direct(self, canvas: Canvas, depth: int, scale: float) -> None:
        for r, slots in enumerate(tile_layout(depth)):
            for c, motif in enumerate(slots):
                self._draw_tile(canvas, motif, c * MOTIF_SIZE, r * MOTIF_SIZE, scale)

    def stamp_copy(self, canvas: Canvas, depth: int, scale: float) -> None:
        """Render each variant once off-board, then copy it into every slot."""
        if not float(scale).is_integer():
            raise ValueError(f"copy tiling needs a whole-number scale, got {scale}")
        s = int(scale)
        pitch = MOTIF_SIZE * s
        blocks = {}
        for motif in (BASE_MOTIF, ROTATED_MOTIF):
            scratch = Canvas(pitch, pitch)
            self._draw_tile(scratch, motif, 0, 0, s)
            blocks[id(motif)] = scratch.read_block(0, 0, pitch, pitch)
        for r, slots in enumerate(tile_layout(depth)):
            for c, motif in enumerate(slots):
                canvas.write_block(blocks[id(motif)], c * pitch, r * pitch)

    # ---- Phase 2 ----
    def _draw_connectors(self, canvas: Canvas, joins: Sequence[Connector], scale: float) -> None:
        for conn in joins:
            for sym, x, y, w, h in conn.rects():
                canvas.fill_rect(self.palette[sym], x * scale, y * scale, w * scale, h * scale)

    def stitch(self, canvas: Canvas, path: Sequence[Point], scale: float) -> int:
        joins = connectors(path)
        self._draw_connectors(canvas, joins, scale)
        return len(joins)

    def trace_path(self, canvas: Canvas, path: Sequence[Point], scale: float) -> None:
        for (xo, yo), (xn, yn) in path_steps(path):
            canvas.fill_rect(
                TRACE_COLOR,
                (min(xo, xn) * MOTIF_SIZE + TRACE_INSET) * scale,
                (min(yo, yn) * MOTIF_SIZE + TRACE_INSET) * scale,
                (abs(xn - xo) * MOTIF_SIZE + TRACE_WIDTH) * scale,
                (abs(yn - yo) * MOTIF_SIZE + TRACE_WIDTH) * scale,
            )

    def render(self, depth: int, scale: float, canvas: Optional[Canvas] = None,
               tiling: str = "auto", show_path: bool = False) -> Canvas:
        """
        Full redraw of the knot lattice.

        Everything that can fail (depth, scale, canvas size, path steps) is
        checked before the first pixel is written, so a failed render leaves
        a caller-supplied canvas as it was.
        """
        if tiling not in TILINGS:
            raise ValueError(f"tiling must be one of {TILINGS}, got {tiling!r}")
        size = board_size(depth, scale)
        if canvas is None:
            canvas = Canvas(size, size)
        elif canvas.size != (size, size):
            raise ValueError(f"canvas is {canvas.width}x{canvas.height}, render needs {size}x{size}")

        path = generate(depth)
        joins = connectors(path)

        if tiling == "auto":
            tiling = "copy" if float(scale).is_integer() else "direct"
        logger.debug("render depth=%d scale=%s size=%d tiling=%s tiles=%d connectors=%d",
                     depth, scale, size, tiling, 4 ** depth, len(joins))

        if tiling == "copy":
            self.stamp_copy(canvas, depth, scale)
        else:
            self.stamp_direct(canvas, depth, scale)
        self._draw_connectors(canvas, joins, scale)
        if show_path:
            self.trace_path(canvas, path, scale)
        return canvas


_DEFAULT = KnotCompositor()


def render(depth: int, scale: float, canvas: Optional[Canvas] = None, **kwargs) -> Canvas:
    return _DEFAULT.render(depth, scale, canvas=canvas, **kwargs)
