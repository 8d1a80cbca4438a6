"""
Non-premultiplied HSV + alpha → alpha-premultiplied RGBA64.

All three precisions share :func:`unit_hsv_to_unit_rgb`; the integer
variants only differ in how they widen their channels to unit floats and in
their exact integer gray path.
"""

import math
from typing import Tuple
import numpy as np
from numpy import ndarray as NDArray

from .numbers import (
    clamp01,
    wrap360,
    to16,
    scale8_to_16,
    np_clamp01,
    np_wrap360,
    np_to16,
    np_scale8_to_16,
)
from ..types.color_types import RGBA64Tuple

# Positions in (c + m, x + m, m) of the r, g, b channels, by 60° sector.
_SECTORS: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),  # (c, x, 0)
    (1, 0, 2),  # (x, c, 0)
    (2, 0, 1),  # (0, c, x)
    (2, 1, 0),  # (0, x, c)
    (1, 2, 0),  # (x, 0, c)
    (0, 2, 1),  # (c, 0, x)
)


def _sector_error(h6) -> RuntimeError:
    if not math.isfinite(h6):
        return RuntimeError(f"non-finite hue (sector {h6}); hue must be a finite number of degrees")
    return RuntimeError(
        f"hue sector {h6} outside [0, 6); hue was not wrapped into [0, 360)"
    )


def unit_hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Textbook HSV → RGB.

    Args:
        h: hue in [0, 360)
        s, v: saturation and value in [0, 1]

    Returns:
        Non-premultiplied (r, g, b) in [0, 1]

    Raises:
        RuntimeError: if ``h`` is not finite or was not wrapped into [0, 360)
            by the caller.
    """
    c = v * s
    h6 = h / 60.0
    x = c * (1.0 - abs(h6 % 2.0 - 1.0))
    if not 0.0 <= h6 < 6.0:
        raise _sector_error(h6)
    sector = int(h6)
    m = v - c
    parts = (c + m, x + m, m)
    i, j, k = _SECTORS[sector]
    return parts[i], parts[j], parts[k]


def np_unit_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized :func:`unit_hsv_to_unit_rgb`.

    Returns:
        Array of shape (..., 3) holding non-premultiplied (r, g, b).
    """
    h, s, v = np.broadcast_arrays(
        np.asarray(h, dtype=float), np.asarray(s, dtype=float), np.asarray(v, dtype=float)
    )
    c = v * s
    h6 = h / 60.0
    x = c * (1.0 - np.abs(np.mod(h6, 2.0) - 1.0))
    bad = ~((h6 >= 0.0) & (h6 < 6.0))
    if np.any(bad):
        raise _sector_error(h6[bad].flat[0])
    sector = np.floor(h6).astype(np.int64)
    m = v - c
    cm, xm = c + m, x + m
    r = np.choose(sector, [cm, xm, m, m, xm, cm])
    g = np.choose(sector, [xm, cm, cm, xm, m, m])
    b = np.choose(sector, [m, m, xm, cm, cm, xm])
    return np.stack([r, g, b], axis=-1)


# ---------------------------------------------------------------------------
# 16-bit
# ---------------------------------------------------------------------------

def nhsva16_to_rgba64(h: int, s: int, v: int, a: int) -> RGBA64Tuple:
    """Convert 16-bit NHSVA channels (hue spans [0, 65535]) to RGBA64."""
    if s == 0:
        v16pm = (v * a + 32768) // 65535
        return v16pm, v16pm, v16pm, a

    hf = wrap360(h * 360.0 / 65535.0)
    af = a / 65535.0
    rf, gf, bf = unit_hsv_to_unit_rgb(hf, s / 65535.0, v / 65535.0)
    return to16(rf * af), to16(gf * af), to16(bf * af), a


def np_nhsva16_to_rgba64(h: NDArray, s: NDArray, v: NDArray, a: NDArray) -> NDArray:
    h, s, v, a = np.broadcast_arrays(*(np.asarray(c, dtype=np.int64) for c in (h, s, v, a)))
    gray = s == 0
    v16pm = (v * a + 32768) // 65535

    hf = np_wrap360(h * 360.0 / 65535.0)
    af = a / 65535.0
    rgb = np_unit_hsv_to_unit_rgb(hf, s / 65535.0, v / 65535.0)
    out = [np.where(gray, v16pm, np_to16(rgb[..., i] * af)) for i in range(3)]
    return np.stack(out + [a], axis=-1).astype(np.uint16)


# ---------------------------------------------------------------------------
# 8-bit
# ---------------------------------------------------------------------------

def nhsva8_to_rgba64(h: int, s: int, v: int, a: int) -> RGBA64Tuple:
    """Convert 8-bit NHSVA channels (hue spans [0, 255]) to RGBA64."""
    a16 = scale8_to_16(a)
    if s == 0:
        v16pm = (scale8_to_16(v) * a16 + 32768) // 65535
        return v16pm, v16pm, v16pm, a16

    hf = wrap360(h * 360.0 / 255.0)
    af = a / 255.0
    rf, gf, bf = unit_hsv_to_unit_rgb(hf, s / 255.0, v / 255.0)
    return to16(rf * af), to16(gf * af), to16(bf * af), a16


def np_nhsva8_to_rgba64(h: NDArray, s: NDArray, v: NDArray, a: NDArray) -> NDArray:
    h, s, v, a = np.broadcast_arrays(*(np.asarray(c, dtype=np.int64) for c in (h, s, v, a)))
    gray = s == 0
    a16 = np_scale8_to_16(a)
    v16pm = (np_scale8_to_16(v) * a16 + 32768) // 65535

    hf = np_wrap360(h * 360.0 / 255.0)
    af = a / 255.0
    rgb = np_unit_hsv_to_unit_rgb(hf, s / 255.0, v / 255.0)
    out = [np.where(gray, v16pm, np_to16(rgb[..., i] * af)) for i in range(3)]
    return np.stack(out + [a16], axis=-1).astype(np.uint16)


# ---------------------------------------------------------------------------
# float64
# ---------------------------------------------------------------------------

def unit_nhsva_to_rgba64(h: float, s: float, v: float, a: float) -> RGBA64Tuple:
    """
    Convert float NHSVA channels to RGBA64.

    Hue is in degrees and wraps modulo 360; saturation, value and alpha are
    clamped into [0, 1].
    """
    hf = wrap360(h)
    sf = clamp01(s)
    vf = clamp01(v)
    af = clamp01(a)

    if sf == 0.0:
        v16pm = to16(vf * af)
        return v16pm, v16pm, v16pm, to16(af)

    rf, gf, bf = unit_hsv_to_unit_rgb(hf, sf, vf)
    return to16(rf * af), to16(gf * af), to16(bf * af), to16(af)


def np_unit_nhsva_to_rgba64(h: NDArray, s: NDArray, v: NDArray, a: NDArray) -> NDArray:
    h, s, v, a = np.broadcast_arrays(*(np.asarray(c, dtype=float) for c in (h, s, v, a)))
    hf = np_wrap360(h)
    sf = np_clamp01(s)
    vf = np_clamp01(v)
    af = np_clamp01(a)

    gray = sf == 0.0
    v16pm = np_to16(vf * af)
    rgb = np_unit_hsv_to_unit_rgb(hf, sf, vf)
    out = [np.where(gray, v16pm, np_to16(rgb[..., i] * af)) for i in range(3)]
    return np.stack(out + [np_to16(af)], axis=-1).astype(np.uint16)
