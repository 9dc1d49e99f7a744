"""
Hilbert polyline by turtle traversal.

The two Lindenmayer variants (A/B) are one recursive procedure taking a turn
sign: +1 is variant A, -1 is variant B. A positive turn maps the heading
(dx, dy) -> (-dy, dx); a negative turn maps it to (dy, -dx).
"""

import logging
from numbers import Integral
from typing import Iterable, Iterator, List, Tuple

logger = logging.getLogger(__name__)

Point = Tuple[int, int]


def _check_depth(depth) -> int:
    if isinstance(depth, bool) or not isinstance(depth, Integral):
        raise ValueError(f"depth must be an integer, got {depth!r}")
    if depth < 0:
        raise ValueError(f"depth must be >= 0, got {depth}")
    return int(depth)


def grid_side(depth: int) -> int:
    return 1 << _check_depth(depth)


def generate(depth: int) -> List[Point]:
    """
    Ordered lattice points of the depth-`depth` Hilbert curve.

    Starts at (0, 0) heading +x; every forward step appends the new position.
    The result visits each cell of the 2^depth x 2^depth grid exactly once.
    """
    depth = _check_depth(depth)

    pos = [0, 0]
    heading = [1, 0]
    points: List[Point] = [(0, 0)]

    def forward():
        pos[0] += heading[0]
        pos[1] += heading[1]
        points.append((pos[0], pos[1]))

    def turn(sign):
        dx, dy = heading
        if sign > 0:
            heading[0], heading[1] = -dy, dx
        else:
            heading[0], heading[1] = dy, -dx

    def hilbert(level, sign):
        if level == 0:
            return
        turn(sign)
        hilbert(level - 1, -sign)
        forward()
        turn(-sign)
        hilbert(level - 1, sign)
        forward()
        hilbert(level - 1, sign)
        turn(-sign)
        forward()
        hilbert(level - 1, -sign)
        turn(sign)

    hilbert(depth, +1)
    logger.debug("hilbert depth=%d -> %d points", depth, len(points))
    return points


def path_steps(points: Iterable[Point]) -> Iterator[Tuple[Point, Point]]:
    """Consecutive (old, new) pairs; the first point has no predecessor."""
    it = iter(points)
    try:
        prev = next(it)
    except StopIteration:
        return
    for cur in it:
        yield prev, cur
        prev = cur
