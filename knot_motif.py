# knot_motif.py
# The 27x27 "endless knot" tile: symbol alphabet, canonical motif, rotated variant, palette.

from types import MappingProxyType
from typing import Dict, Mapping, Set, Tuple

from PIL import ImageColor

MOTIF_SIZE = 27

# =========================
# Symbols
# =========================
BACKGROUND = "."
WALL = "#"
WEAVE_A = "~"   # amber strand
WEAVE_B = "*"   # red strand

SYMBOLS = (BACKGROUND, WALL, WEAVE_A, WEAVE_B)

Motif = Tuple[str, ...]
RGB = Tuple[int, int, int]


class MotifError(ValueError):
    pass


# =========================
# Palette
# =========================
DEFAULT_COLORS = {
    BACKGROUND: "#cdf",  # light blue
    WALL: "#000",        # black
    WEAVE_A: "#fc0",     # amber
    WEAVE_B: "#f00",     # red
}


def build_palette(colors: Dict[str, str]) -> Mapping[str, RGB]:
    """Resolve CSS-style color strings once; the result is read-only."""
    resolved = {}
    for sym, css in colors.items():
        rgb = ImageColor.getrgb(css)
        resolved[sym] = tuple(rgb[:3])
    return MappingProxyType(resolved)


PALETTE = build_palette(DEFAULT_COLORS)


# =========================
# Canonical definition
# =========================
# Upper half only (rows 0..13). The knot is symmetric under a half turn, so
# row 26-i is row i read backwards; row 13 maps onto itself.
_UPPER_HALF = (
    "......#########...#########",
    "......#~~~~~~~#...#~~~~~~~#",
    "......#~#####~#...#~#####~#",
    "...##########~###########~#",
    "...#********#~#********##~#",
    "...#*########~########*##~#",
    "#######~###########~#####~#",
    "#~~~~~#~#~~~~~~~~~#~#~~~~~#",
    "#~#####~###########~#######",
    "#~##*##~###########~##*#...",
    "#~##*##~##*******##~##*#...",
    "#~##*##~##*#####*##~##*#...",
    "#~##*########~########*####",
    "#~~#*#~~~~~~#~#~~~~~~#*#~~#",
)


def _complete_half_turn(upper: Tuple[str, ...]) -> Motif:
    middle = upper[-1]
    if middle != middle[::-1]:
        raise MotifError("middle row must read the same backwards")
    lower = tuple(row[::-1] for row in reversed(upper[:-1]))
    return tuple(upper) + lower


def rotate_motif(motif: Motif) -> Motif:
    """Quarter turn: rotated[i][j] = motif[j][n-1-i]."""
    n = len(motif)
    return tuple("".join(motif[j][n - 1 - i] for j in range(n)) for i in range(n))


def unrotate_motif(motif: Motif) -> Motif:
    """Inverse of rotate_motif: base[i][j] = rotated[n-1-j][i]."""
    n = len(motif)
    return tuple("".join(motif[n - 1 - j][i] for j in range(n)) for i in range(n))


def motif_symbols(motif: Motif) -> Set[str]:
    return {ch for row in motif for ch in row}


def validate_motif(motif: Motif, palette: Mapping[str, RGB]) -> None:
    if len(motif) != MOTIF_SIZE or any(len(row) != MOTIF_SIZE for row in motif):
        raise MotifError(f"motif must be {MOTIF_SIZE}x{MOTIF_SIZE}")
    missing = motif_symbols(motif) - set(palette)
    if missing:
        raise MotifError(f"no color bound to symbol(s): {''.join(sorted(missing))}")


BASE_MOTIF: Motif = _complete_half_turn(_UPPER_HALF)
ROTATED_MOTIF: Motif = rotate_motif(BASE_MOTIF)

validate_motif(BASE_MOTIF, PALETTE)
validate_motif(ROTATED_MOTIF, PALETTE)
