import numpy as np
from typing import Callable, Dict, Tuple, cast

from ..types.precision import Precision
from ..types.color_types import HSVATuple, RGBA64Tuple, element_to_array

from .to_rgba import (
    nhsva8_to_rgba64,
    nhsva16_to_rgba64,
    unit_nhsva_to_rgba64,
    np_nhsva8_to_rgba64,
    np_nhsva16_to_rgba64,
    np_unit_nhsva_to_rgba64,
)
from .to_hsv import (
    rgba64_to_nhsva8,
    rgba64_to_nhsva16,
    rgba64_to_unit_nhsva,
    np_rgba64_to_nhsva8,
    np_rgba64_to_nhsva16,
    np_rgba64_to_unit_nhsva,
    split_channels,
)

TO_RGBA64: Dict[Precision, Callable[..., RGBA64Tuple]] = {
    Precision.UINT8: nhsva8_to_rgba64,
    Precision.UINT16: nhsva16_to_rgba64,
    Precision.FLOAT64: unit_nhsva_to_rgba64,
}

FROM_RGBA64: Dict[Precision, Callable[[int, int, int, int], HSVATuple]] = {
    Precision.UINT8: rgba64_to_nhsva8,
    Precision.UINT16: rgba64_to_nhsva16,
    Precision.FLOAT64: rgba64_to_unit_nhsva,
}

NP_TO_RGBA64: Dict[Precision, Callable[..., np.ndarray]] = {
    Precision.UINT8: np_nhsva8_to_rgba64,
    Precision.UINT16: np_nhsva16_to_rgba64,
    Precision.FLOAT64: np_unit_nhsva_to_rgba64,
}

NP_FROM_RGBA64: Dict[Precision, Callable[..., np.ndarray]] = {
    Precision.UINT8: np_rgba64_to_nhsva8,
    Precision.UINT16: np_rgba64_to_nhsva16,
    Precision.FLOAT64: np_rgba64_to_unit_nhsva,
}


def _precision(p) -> Precision:
    try:
        return Precision(p)
    except ValueError:
        raise ValueError(f"Unknown precision: {p!r}") from None


def _channels(hsva) -> Tuple:
    hsva = tuple(hsva)
    if len(hsva) != 4:
        raise ValueError(f"expected 4 channels (h, s, v, a), got {len(hsva)}")
    return hsva


def to_rgba64(hsva: HSVATuple, precision: Precision) -> RGBA64Tuple:
    """Convert one (h, s, v, a) tuple of the given precision to RGBA64."""
    return TO_RGBA64[_precision(precision)](*_channels(hsva))


def from_rgba64(rgba: RGBA64Tuple, precision: Precision) -> HSVATuple:
    """Convert one premultiplied RGBA64 tuple to (h, s, v, a) of the given precision."""
    r, g, b, a = (int(c) for c in _channels(rgba))
    return FROM_RGBA64[_precision(precision)](r, g, b, a)


def np_to_rgba64(hsva: np.ndarray, precision: Precision) -> np.ndarray:
    """Convert a (..., 4) HSVA array to a (..., 4) uint16 RGBA64 array."""
    return NP_TO_RGBA64[_precision(precision)](*split_channels(hsva))


def np_from_rgba64(rgba: np.ndarray, precision: Precision) -> np.ndarray:
    """Convert a (..., 4) RGBA64 array to a (..., 4) HSVA array."""
    return NP_FROM_RGBA64[_precision(precision)](*split_channels(rgba))


def convert(
    hsva: HSVATuple,
    from_precision: Precision,
    to_precision: Precision,
) -> HSVATuple:
    """
    Re-express an (h, s, v, a) tuple at another precision.

    The conversion goes through premultiplied RGBA64, so a fully
    transparent color becomes the zero color and a gray loses its hue.
    """
    from_precision = _precision(from_precision)
    to_precision = _precision(to_precision)
    if from_precision == to_precision:
        return cast(HSVATuple, tuple(hsva))  # No conversion needed
    return from_rgba64(to_rgba64(hsva, from_precision), to_precision)


def np_convert(
    hsva: np.ndarray,
    from_precision: Precision,
    to_precision: Precision,
) -> np.ndarray:
    from_precision = _precision(from_precision)
    to_precision = _precision(to_precision)
    if from_precision == to_precision:
        return hsva  # No conversion needed
    return np_from_rgba64(np_to_rgba64(element_to_array(hsva), from_precision), to_precision)
