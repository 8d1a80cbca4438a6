"""
Alpha-premultiplied RGBA64 → non-premultiplied HSV + alpha.

The 16-bit conversion works in integers and yields whole-degree hues; the
8-bit conversion is the 16-bit one reduced channel by channel; the float
conversion mirrors the same steps in float64.
"""

from typing import Tuple
import numpy as np
from numpy import ndarray as NDArray

from .numbers import trunc_div, scale16_to_8, np_trunc_div, np_scale16_to_8
from ..types.color_types import HSVAIntTuple, HSVAFloatTuple


def rgba64_to_nhsva16(r: int, g: int, b: int, a: int) -> HSVAIntTuple:
    """
    Convert premultiplied RGBA64 to 16-bit NHSVA.

    Returns:
        (h, s, v, a), each in [0, 65535]; hue 65535 would be 360°.
    """
    if a == 0:
        return 0, 0, 0, 0

    # Un-premultiply
    r = min(r * 65535 // a, 65535)
    g = min(g * 65535 // a, 65535)
    b = min(b * 65535 // a, 65535)

    c_min = min(r, g, b)
    c_max = max(r, g, b)
    delta = c_max - c_min
    v = c_max
    s = 65535 * delta // c_max if c_max > 0 else 0

    if delta == 0:
        return 0, 0, v, a  # gray + alpha

    if c_max == r:
        h360 = trunc_div(60 * (g - b), delta)
    elif c_max == g:
        h360 = trunc_div(60 * (b - r), delta) + 120
    else:
        h360 = trunc_div(60 * (r - g), delta) + 240
    h360 = (h360 + 360) % 360
    h = (h360 * 65535 + 180) // 360
    return h, s, v, a


def np_rgba64_to_nhsva16(r: NDArray, g: NDArray, b: NDArray, a: NDArray) -> NDArray:
    """
    Vectorized :func:`rgba64_to_nhsva16`.

    Returns:
        uint16 array of shape (..., 4)
    """
    r, g, b, a = np.broadcast_arrays(*(np.asarray(c, dtype=np.int64) for c in (r, g, b, a)))
    transparent = a == 0
    safe_a = np.where(transparent, 1, a)
    r = np.minimum(r * 65535 // safe_a, 65535)
    g = np.minimum(g * 65535 // safe_a, 65535)
    b = np.minimum(b * 65535 // safe_a, 65535)

    c_min = np.minimum(np.minimum(r, g), b)
    c_max = np.maximum(np.maximum(r, g), b)
    delta = c_max - c_min
    v = c_max
    s = np.where(c_max > 0, 65535 * delta // np.where(c_max > 0, c_max, 1), 0)

    safe_delta = np.where(delta == 0, 1, delta)
    h360 = np.where(
        c_max == r,
        np_trunc_div(60 * (g - b), safe_delta),
        np.where(
            c_max == g,
            np_trunc_div(60 * (b - r), safe_delta) + 120,
            np_trunc_div(60 * (r - g), safe_delta) + 240,
        ),
    )
    h360 = (h360 + 360) % 360
    h = np.where(delta == 0, 0, (h360 * 65535 + 180) // 360)

    out = np.stack([h, s, v, a], axis=-1)
    out[transparent] = 0
    return out.astype(np.uint16)


def rgba64_to_nhsva8(r: int, g: int, b: int, a: int) -> HSVAIntTuple:
    """Convert premultiplied RGBA64 to 8-bit NHSVA via the 16-bit result."""
    h, s, v, a = rgba64_to_nhsva16(r, g, b, a)
    return scale16_to_8(h), scale16_to_8(s), scale16_to_8(v), scale16_to_8(a)


def np_rgba64_to_nhsva8(r: NDArray, g: NDArray, b: NDArray, a: NDArray) -> NDArray:
    hsva16 = np_rgba64_to_nhsva16(r, g, b, a)
    return np_scale16_to_8(hsva16).astype(np.uint8)


def rgba64_to_unit_nhsva(r: int, g: int, b: int, a: int) -> HSVAFloatTuple:
    """
    Convert premultiplied RGBA64 to float NHSVA.

    Returns:
        (h, s, v, a) with h in [0, 360) degrees and s, v, a in [0, 1].
    """
    if a == 0:
        return 0.0, 0.0, 0.0, 0.0

    af = a / 65535.0
    rf = r / 65535.0 / af
    gf = g / 65535.0 / af
    bf = b / 65535.0 / af

    c_min = min(rf, gf, bf)
    c_max = max(rf, gf, bf)
    delta = c_max - c_min
    vf = c_max
    sf = delta / c_max if c_max > 0.0 else 0.0

    if delta == 0.0:
        return 0.0, 0.0, vf, af  # gray + alpha

    if c_max == rf:
        hf = (gf - bf) / delta + 0.0
    elif c_max == gf:
        hf = (bf - rf) / delta + 2.0
    else:
        hf = (rf - gf) / delta + 4.0
    hf = (hf * 60.0 + 360.0) % 360.0
    return hf, sf, vf, af


def np_rgba64_to_unit_nhsva(r: NDArray, g: NDArray, b: NDArray, a: NDArray) -> NDArray:
    """
    Vectorized :func:`rgba64_to_unit_nhsva`.

    Returns:
        float64 array of shape (..., 4)
    """
    r, g, b, a = np.broadcast_arrays(*(np.asarray(c, dtype=np.int64) for c in (r, g, b, a)))
    transparent = a == 0
    af = a / 65535.0
    with np.errstate(divide="ignore", invalid="ignore"):
        rf = r / 65535.0 / af
        gf = g / 65535.0 / af
        bf = b / 65535.0 / af

        c_min = np.minimum(np.minimum(rf, gf), bf)
        c_max = np.maximum(np.maximum(rf, gf), bf)
        delta = c_max - c_min
        vf = c_max
        sf = np.where(c_max > 0.0, delta / c_max, 0.0)

        hf = np.where(
            c_max == rf,
            (gf - bf) / delta + 0.0,
            np.where(c_max == gf, (bf - rf) / delta + 2.0, (rf - gf) / delta + 4.0),
        )
        hf = np.mod(hf * 60.0 + 360.0, 360.0)

    gray = delta == 0.0
    hf = np.where(gray, 0.0, hf)
    sf = np.where(gray, 0.0, sf)

    out = np.stack([hf, sf, vf, af], axis=-1)
    out[transparent] = 0.0
    return out


def split_channels(rgba: NDArray) -> Tuple[NDArray, NDArray, NDArray, NDArray]:
    """Split a (..., 4) array into its four channel arrays."""
    rgba = np.asarray(rgba)
    if rgba.shape[-1] != 4:
        raise ValueError(f"expected last dimension to be 4, got shape {rgba.shape}")
    return rgba[..., 0], rgba[..., 1], rgba[..., 2], rgba[..., 3]
