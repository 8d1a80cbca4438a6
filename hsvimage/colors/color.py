from __future__ import annotations
from typing import Any, Callable, Dict

from ..types.precision import Precision
from .color_base import ColorBase
from .hsv import ColorNHSVABase, ColorNHSVA8, ColorNHSVA16, ColorNHSVAF64


class ColorModel:
    """
    Converts arbitrary colors to one fixed color class.

    A model is what an image hands to generic code so it can turn any color
    into the image's native pixel type.
    """
    __slots__ = ("name", "precision", "color_class", "_convert")

    def __init__(
        self,
        name: str,
        precision: Precision,
        color_class: type[ColorNHSVABase],
        convert: Callable[[Any], ColorNHSVABase],
    ) -> None:
        self.name = name
        self.precision = precision
        self.color_class = color_class
        self._convert = convert

    def convert(self, color: Any) -> ColorNHSVABase:
        return self._convert(color)

    __call__ = convert

    def __repr__(self) -> str:
        return f"ColorModel({self.name!r}, {self.color_class.__name__})"


NHSVA8_MODEL = ColorModel("nhsva8", Precision.UINT8, ColorNHSVA8, ColorNHSVA8.from_color)
NHSVA16_MODEL = ColorModel("nhsva16", Precision.UINT16, ColorNHSVA16, ColorNHSVA16.from_color)
NHSVAF64_MODEL = ColorModel("nhsvaf64", Precision.FLOAT64, ColorNHSVAF64, ColorNHSVAF64.from_color)

COLOR_MODELS: Dict[Precision, ColorModel] = {
    Precision.UINT8: NHSVA8_MODEL,
    Precision.UINT16: NHSVA16_MODEL,
    Precision.FLOAT64: NHSVAF64_MODEL,
}

ColorNHSVA8.model = NHSVA8_MODEL
ColorNHSVA16.model = NHSVA16_MODEL
ColorNHSVAF64.model = NHSVAF64_MODEL


def color_model(precision: Precision | str) -> ColorModel:
    try:
        return COLOR_MODELS[Precision(precision)]
    except ValueError:
        raise ValueError(f"Unsupported precision: {precision!r}") from None


def color_convert(self: Any, precision: Precision | str = Precision.FLOAT64) -> ColorNHSVABase:
    """
    Convert a color to the HSV + alpha class of the given precision.

    Args:
        precision: Target precision (UINT8, UINT16, FLOAT64)

    Returns:
        New ColorNHSVA8 / ColorNHSVA16 / ColorNHSVAF64 instance
    """
    return color_model(precision).convert(self)

ColorBase.convert = color_convert
