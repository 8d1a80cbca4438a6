"""
Standard RGB-family colors.

These are the colors the rest of an image pipeline typically hands to an HSV
image. Each one answers ``rgba64()`` with alpha-premultiplied 16-bit
channels, which is all the HSV color models need from them.
"""

from typing import ClassVar, Tuple

from ..conversions.numbers import scale8_to_16
from ..types.color_types import RGBA64Tuple
from .color_base import ColorBase, WithAlpha, channel


class ColorRGBA(ColorBase, WithAlpha):
    """Alpha-premultiplied 32-bit RGBA."""
    __slots__ = ()
    channel_names: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "a")
    _type:      ClassVar[type] = int
    maxima:     ClassVar[Tuple[int, int, int, int]] = (0xFF, 0xFF, 0xFF, 0xFF)
    null_value: ClassVar[Tuple[int, int, int, int]] = (0, 0, 0, 0)

    r = channel(0)
    g = channel(1)
    b = channel(2)
    a = channel(3)

    def rgba64(self) -> RGBA64Tuple:
        r, g, b, a = self._value
        return scale8_to_16(r), scale8_to_16(g), scale8_to_16(b), scale8_to_16(a)


class ColorRGBA64(ColorBase, WithAlpha):
    """Alpha-premultiplied 64-bit RGBA."""
    __slots__ = ()
    channel_names: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "a")
    _type:      ClassVar[type] = int
    maxima:     ClassVar[Tuple[int, int, int, int]] = (0xFFFF, 0xFFFF, 0xFFFF, 0xFFFF)
    null_value: ClassVar[Tuple[int, int, int, int]] = (0, 0, 0, 0)

    r = channel(0)
    g = channel(1)
    b = channel(2)
    a = channel(3)

    def rgba64(self) -> RGBA64Tuple:
        r, g, b, a = self._value
        return r, g, b, a


class ColorNRGBA(ColorBase, WithAlpha):
    """Non-alpha-premultiplied 32-bit RGBA."""
    __slots__ = ()
    channel_names: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "a")
    _type:      ClassVar[type] = int
    maxima:     ClassVar[Tuple[int, int, int, int]] = (0xFF, 0xFF, 0xFF, 0xFF)
    null_value: ClassVar[Tuple[int, int, int, int]] = (0, 0, 0, 0)

    r = channel(0)
    g = channel(1)
    b = channel(2)
    a = channel(3)

    def rgba64(self) -> RGBA64Tuple:
        r, g, b, a = (scale8_to_16(c) for c in self._value)
        return r * a // 0xFFFF, g * a // 0xFFFF, b * a // 0xFFFF, a


class ColorNRGBA64(ColorBase, WithAlpha):
    """Non-alpha-premultiplied 64-bit RGBA."""
    __slots__ = ()
    channel_names: ClassVar[Tuple[str, ...]] = ("r", "g", "b", "a")
    _type:      ClassVar[type] = int
    maxima:     ClassVar[Tuple[int, int, int, int]] = (0xFFFF, 0xFFFF, 0xFFFF, 0xFFFF)
    null_value: ClassVar[Tuple[int, int, int, int]] = (0, 0, 0, 0)

    r = channel(0)
    g = channel(1)
    b = channel(2)
    a = channel(3)

    def rgba64(self) -> RGBA64Tuple:
        r, g, b, a = self._value
        return r * a // 0xFFFF, g * a // 0xFFFF, b * a // 0xFFFF, a


class ColorGray(ColorBase):
    """8-bit opaque gray."""
    __slots__ = ()
    num_channels: ClassVar[int] = 1
    channel_names: ClassVar[Tuple[str, ...]] = ("y",)
    _type:      ClassVar[type] = int
    maxima:     ClassVar[Tuple[int]] = (0xFF,)
    null_value: ClassVar[Tuple[int]] = (0,)

    y = channel(0)

    def rgba64(self) -> RGBA64Tuple:
        y = scale8_to_16(self._value[0])
        return y, y, y, 0xFFFF


class ColorGray16(ColorBase):
    """16-bit opaque gray."""
    __slots__ = ()
    num_channels: ClassVar[int] = 1
    channel_names: ClassVar[Tuple[str, ...]] = ("y",)
    _type:      ClassVar[type] = int
    maxima:     ClassVar[Tuple[int]] = (0xFFFF,)
    null_value: ClassVar[Tuple[int]] = (0,)

    y = channel(0)

    def rgba64(self) -> RGBA64Tuple:
        y = self._value[0]
        return y, y, y, 0xFFFF


class ColorAlpha(ColorBase):
    """8-bit alpha-only color (white at the given opacity, premultiplied)."""
    __slots__ = ()
    num_channels: ClassVar[int] = 1
    channel_names: ClassVar[Tuple[str, ...]] = ("a",)
    _type:      ClassVar[type] = int
    maxima:     ClassVar[Tuple[int]] = (0xFF,)
    null_value: ClassVar[Tuple[int]] = (0,)

    a = channel(0)

    def rgba64(self) -> RGBA64Tuple:
        a = scale8_to_16(self._value[0])
        return a, a, a, a


class ColorAlpha16(ColorBase):
    """16-bit alpha-only color."""
    __slots__ = ()
    num_channels: ClassVar[int] = 1
    channel_names: ClassVar[Tuple[str, ...]] = ("a",)
    _type:      ClassVar[type] = int
    maxima:     ClassVar[Tuple[int]] = (0xFFFF,)
    null_value: ClassVar[Tuple[int]] = (0,)

    a = channel(0)

    def rgba64(self) -> RGBA64Tuple:
        a = self._value[0]
        return a, a, a, a


BLACK = ColorGray16(0)
WHITE = ColorGray16(0xFFFF)
TRANSPARENT = ColorAlpha16(0)
OPAQUE = ColorAlpha16(0xFFFF)
