"""
Color Classes
=============

Immutable color values. Every class answers ``rgba64()`` with
alpha-premultiplied 16-bit channels, which is the one thing the HSV color
models need from a color.

HSV + alpha (non-premultiplied):
    - ColorNHSVA8:   h, s, v, a in [0, 255]
    - ColorNHSVA16:  h, s, v, a in [0, 65535]
    - ColorNHSVAF64: h in degrees, s, v, a in [0, 1]

RGB family:
    - ColorRGBA, ColorRGBA64: premultiplied RGBA
    - ColorNRGBA, ColorNRGBA64: non-premultiplied RGBA
    - ColorGray, ColorGray16: opaque gray
    - ColorAlpha, ColorAlpha16: alpha only

Usage
-----
>>> from hsvimage.colors import ColorRGBA, ColorNHSVA8
>>> ColorNHSVA8.from_color(ColorRGBA(0, 0, 255, 255))
ColorNHSVA8(h=170, s=255, v=255, a=255)
>>> ColorRGBA(255, 0, 0, 255).convert("uint8")
ColorNHSVA8(h=0, s=255, v=255, a=255)
"""

from .color_base import ColorBase, WithAlpha, rgba64_of
from .hsv import ColorNHSVABase, ColorNHSVA8, ColorNHSVA16, ColorNHSVAF64, NHSVA_CLASSES
from .rgb import (
    ColorRGBA,
    ColorRGBA64,
    ColorNRGBA,
    ColorNRGBA64,
    ColorGray,
    ColorGray16,
    ColorAlpha,
    ColorAlpha16,
    BLACK,
    WHITE,
    TRANSPARENT,
    OPAQUE,
)
from .color import (
    ColorModel,
    NHSVA8_MODEL,
    NHSVA16_MODEL,
    NHSVAF64_MODEL,
    COLOR_MODELS,
    color_model,
    color_convert,
)

__all__ = [
    'ColorBase',
    'WithAlpha',
    'rgba64_of',
    'ColorNHSVABase',
    'ColorNHSVA8',
    'ColorNHSVA16',
    'ColorNHSVAF64',
    'NHSVA_CLASSES',
    'ColorRGBA',
    'ColorRGBA64',
    'ColorNRGBA',
    'ColorNRGBA64',
    'ColorGray',
    'ColorGray16',
    'ColorAlpha',
    'ColorAlpha16',
    'BLACK',
    'WHITE',
    'TRANSPARENT',
    'OPAQUE',
    'ColorModel',
    'NHSVA8_MODEL',
    'NHSVA16_MODEL',
    'NHSVAF64_MODEL',
    'COLOR_MODELS',
    'color_model',
    'color_convert',
]
