"""
hsvimage - HSV + alpha colors and images
========================================

HSV (hue, saturation, value) colors with a separate, non-premultiplied
alpha channel, at three precisions, and in-memory images that store their
pixels that way.

Key Features
------------
- Conversion to and from alpha-premultiplied 16-bit RGBA (``rgba64()``)
- 8-bit, 16-bit and float64 channels sharing one conversion algorithm
- Scalar and vectorized (numpy) conversion functions with identical results
- Images with bounds, point get/set, shared-storage sub-images and an
  opacity scan; out-of-bounds reads return transparent, writes are ignored
- Immutable color instances for safe sharing

Quick Start
-----------
>>> from hsvimage import ImageNHSVA8, ColorNHSVA8, ColorRGBA, rect
>>> img = ImageNHSVA8(rect(0, 0, 10, 10))
>>> img.set(6, 3, ColorRGBA(0, 0, 255, 255))
>>> img.nhsva_at(6, 3)
ColorNHSVA8(h=170, s=255, v=255, a=255)
>>> sub = img.sub_image(rect(3, 2, 9, 8))
>>> sub.set_nhsva(3, 3, ColorNHSVA8(0, 255, 255, 255))
>>> img.at(3, 3).rgba64()
(65535, 0, 0, 65535)

Modules
-------
- colors: HSV and RGB-family color classes, color models
- conversions: NHSVA ↔ RGBA64 conversion functions
- images: NHSVA image types
- geometry: Point and Rectangle
"""

from .types.precision import Precision
from .types.color_types import Color
from .geometry import Point, Rectangle, ZP, ZR, rect, pt
from .colors import (
    ColorBase,
    ColorNHSVA8,
    ColorNHSVA16,
    ColorNHSVAF64,
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
    ColorModel,
    NHSVA8_MODEL,
    NHSVA16_MODEL,
    NHSVAF64_MODEL,
    COLOR_MODELS,
    color_model,
    color_convert,
)
from .images import ImageBase, ImageNHSVA8, ImageNHSVA16, ImageNHSVAF64
from .conversions import (
    nhsva8_to_rgba64,
    nhsva16_to_rgba64,
    unit_nhsva_to_rgba64,
    rgba64_to_nhsva8,
    rgba64_to_nhsva16,
    rgba64_to_unit_nhsva,
    np_nhsva8_to_rgba64,
    np_nhsva16_to_rgba64,
    np_unit_nhsva_to_rgba64,
    np_rgba64_to_nhsva8,
    np_rgba64_to_nhsva16,
    np_rgba64_to_unit_nhsva,
    convert,
    np_convert,
)

__version__ = "1.0.0"

__all__ = [
    # precision and contracts
    "Precision",
    "Color",
    # geometry
    "Point",
    "Rectangle",
    "ZP",
    "ZR",
    "rect",
    "pt",
    # colors
    "ColorBase",
    "ColorNHSVA8",
    "ColorNHSVA16",
    "ColorNHSVAF64",
    "ColorRGBA",
    "ColorRGBA64",
    "ColorNRGBA",
    "ColorNRGBA64",
    "ColorGray",
    "ColorGray16",
    "ColorAlpha",
    "ColorAlpha16",
    "BLACK",
    "WHITE",
    "TRANSPARENT",
    "OPAQUE",
    # color models
    "ColorModel",
    "NHSVA8_MODEL",
    "NHSVA16_MODEL",
    "NHSVAF64_MODEL",
    "COLOR_MODELS",
    "color_model",
    "color_convert",
    # images
    "ImageBase",
    "ImageNHSVA8",
    "ImageNHSVA16",
    "ImageNHSVAF64",
    # conversions
    "nhsva8_to_rgba64",
    "nhsva16_to_rgba64",
    "unit_nhsva_to_rgba64",
    "rgba64_to_nhsva8",
    "rgba64_to_nhsva16",
    "rgba64_to_unit_nhsva",
    "np_nhsva8_to_rgba64",
    "np_nhsva16_to_rgba64",
    "np_unit_nhsva_to_rgba64",
    "np_rgba64_to_nhsva8",
    "np_rgba64_to_nhsva16",
    "np_rgba64_to_unit_nhsva",
    "convert",
    "np_convert",
    "__version__",
]
