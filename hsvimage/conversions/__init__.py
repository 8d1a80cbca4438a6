"""
HSV + Alpha Conversions
=======================

Conversions between non-premultiplied HSV + alpha ("NHSVA") and
alpha-premultiplied 16-bit RGBA ("RGBA64"), at three precisions.

Precisions
----------
- UINT8:   h, s, v, a in [0, 255]; hue spans the whole range (255 ↔ 360°)
- UINT16:  h, s, v, a in [0, 65535]; hue spans the whole range
- FLOAT64: h in [0, 360) degrees, s, v, a in [0, 1]

Each conversion has a scalar form working on plain Python numbers and a
vectorized ``np_`` form working on channel arrays; both give identical
results.

NHSVA → RGBA64:
    nhsva8_to_rgba64, nhsva16_to_rgba64, unit_nhsva_to_rgba64
    np_nhsva8_to_rgba64, np_nhsva16_to_rgba64, np_unit_nhsva_to_rgba64

RGBA64 → NHSVA:
    rgba64_to_nhsva8, rgba64_to_nhsva16, rgba64_to_unit_nhsva
    np_rgba64_to_nhsva8, np_rgba64_to_nhsva16, np_rgba64_to_unit_nhsva

High-Level API
--------------
    to_rgba64(hsva, precision) / from_rgba64(rgba, precision)
    convert(hsva, from_precision, to_precision)
    np_to_rgba64, np_from_rgba64, np_convert

Examples
--------
>>> from hsvimage.conversions import nhsva8_to_rgba64, rgba64_to_nhsva8
>>> nhsva8_to_rgba64(85, 255, 255, 255)
(0, 65535, 0, 65535)
>>> rgba64_to_nhsva8(0, 0, 65535, 65535)
(170, 255, 255, 255)
"""

from .to_rgba import (
    unit_hsv_to_unit_rgb,
    np_unit_hsv_to_unit_rgb,
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
)
from .wrapper import (
    TO_RGBA64,
    FROM_RGBA64,
    NP_TO_RGBA64,
    NP_FROM_RGBA64,
    to_rgba64,
    from_rgba64,
    np_to_rgba64,
    np_from_rgba64,
    convert,
    np_convert,
)
from ..types.precision import Precision

__all__ = [
    # NHSVA → RGBA64
    'unit_hsv_to_unit_rgb',
    'np_unit_hsv_to_unit_rgb',
    'nhsva8_to_rgba64',
    'nhsva16_to_rgba64',
    'unit_nhsva_to_rgba64',
    'np_nhsva8_to_rgba64',
    'np_nhsva16_to_rgba64',
    'np_unit_nhsva_to_rgba64',

    # RGBA64 → NHSVA
    'rgba64_to_nhsva8',
    'rgba64_to_nhsva16',
    'rgba64_to_unit_nhsva',
    'np_rgba64_to_nhsva8',
    'np_rgba64_to_nhsva16',
    'np_rgba64_to_unit_nhsva',

    # High-level API
    'TO_RGBA64',
    'FROM_RGBA64',
    'NP_TO_RGBA64',
    'NP_FROM_RGBA64',
    'to_rgba64',
    'from_rgba64',
    'np_to_rgba64',
    'np_from_rgba64',
    'convert',
    'np_convert',

    # Types
    'Precision',
]
