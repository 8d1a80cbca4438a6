from __future__ import annotations
from typing import Any, ClassVar, Optional, Tuple

from ..types.precision import Precision
from ..types.color_types import RGBA64Tuple
from ..conversions.wrapper import TO_RGBA64, FROM_RGBA64
from .color_base import ColorBase, WithAlpha, channel, rgba64_of


class ColorNHSVABase(ColorBase, WithAlpha):
    """
    Non-alpha-premultiplied HSV + alpha.

    Alpha is stored separately and never folded into h, s or v. The zero
    value is fully transparent.
    """
    __slots__ = ()
    channel_names: ClassVar[Tuple[str, ...]] = ("h", "s", "v", "a")
    precision:  ClassVar[Precision]
    # assigned in colors.color once the models exist
    model:      ClassVar[Any]

    h = channel(0, "Hue")
    s = channel(1, "Saturation")
    v = channel(2, "Value")
    a = channel(3, "Alpha (not premultiplied)")

    def rgba64(self) -> RGBA64Tuple:
        return TO_RGBA64[self.precision](*self._value)

    @classmethod
    def from_color(cls, color: Any) -> ColorNHSVABase:
        """
        Convert an arbitrary color to this class.

        Colors already of this class are returned unchanged; anything else
        goes through its premultiplied ``rgba64()`` channels.
        """
        if isinstance(color, cls):
            return color
        return cls(*FROM_RGBA64[cls.precision](*rgba64_of(color)))

    @property
    def is_transparent(self) -> bool:
        return self._value[3] == 0

    @property
    def is_opaque(self) -> bool:
        return self._value[3] == self.alpha_max

    @property
    def alpha_max(self) -> Any:
        maxima = self.maxima if self.maxima is not None else (1.0,) * 4
        return maxima[3]


class ColorNHSVA8(ColorNHSVABase):
    """
    32-bit NHSVA: every channel, hue included, spans [0, 255].

    Hue is scaled linearly over the channel range (255 ↔ 360°) rather than
    the usual [0, 360).
    """
    __slots__ = ()
    _type:      ClassVar[type] = int
    maxima:     ClassVar[Tuple[int, int, int, int]] = (0xFF, 0xFF, 0xFF, 0xFF)
    null_value: ClassVar[Tuple[int, int, int, int]] = (0, 0, 0, 0)
    precision:  ClassVar[Precision] = Precision.UINT8


class ColorNHSVA16(ColorNHSVABase):
    """64-bit NHSVA: every channel, hue included, spans [0, 65535]."""
    __slots__ = ()
    _type:      ClassVar[type] = int
    maxima:     ClassVar[Tuple[int, int, int, int]] = (0xFFFF, 0xFFFF, 0xFFFF, 0xFFFF)
    null_value: ClassVar[Tuple[int, int, int, int]] = (0, 0, 0, 0)
    precision:  ClassVar[Precision] = Precision.UINT16


class ColorNHSVAF64(ColorNHSVABase):
    """
    NHSVA with float channels: hue in degrees [0, 360), the rest in [0, 1].

    Values are stored as given. Converting to RGBA wraps the hue modulo 360
    and clamps the other channels into [0, 1].
    """
    __slots__ = ()
    _type:      ClassVar[type] = float
    maxima:     ClassVar[Optional[Tuple[float, float, float, float]]] = None
    null_value: ClassVar[Tuple[float, float, float, float]] = (0.0, 0.0, 0.0, 0.0)
    precision:  ClassVar[Precision] = Precision.FLOAT64


NHSVA_CLASSES = {
    Precision.UINT8: ColorNHSVA8,
    Precision.UINT16: ColorNHSVA16,
    Precision.FLOAT64: ColorNHSVAF64,
}
