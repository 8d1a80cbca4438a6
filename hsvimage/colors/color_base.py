from __future__ import annotations
from typing import Any, Callable, ClassVar, Iterator, Optional, Tuple, cast, Self

from ..types.color_types import RGBA64Tuple, Scalar, is_color
from ..types.precision import Precision


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # no instance __dict__ → immutability

    num_channels: ClassVar[int] = 4
    channel_names: ClassVar[Tuple[str, ...]]
    _type:      ClassVar[type]
    maxima:     ClassVar[Optional[Tuple[Scalar, ...]]]
    null_value: ClassVar[Tuple[Scalar, ...]]
    # def color_convert(self: ColorBase, precision: Precision) -> ColorBase:
    convert: Callable[[ColorBase, Precision], ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *channels: Any) -> None:
        # Accept Color(h, s, v, a), Color((h, s, v, a)) and Color() for the zero color
        if len(channels) == 1 and isinstance(channels[0], (tuple, list)):
            channels = tuple(channels[0])
        if not channels:
            channels = self.null_value

        if len(channels) != self.num_channels:
            raise ValueError(
                f"{self.__class__.__name__} expects {self.num_channels} channels "
                f"{self.channel_names}, got {len(channels)}"
            )

        # type enforcement
        value = tuple(self._type(c) for c in channels)

        # clamp value
        if self.maxima is not None:
            value = tuple(
                max(0, min(v, m)) for v, m in zip(value, self.maxima)
            )

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance: no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Scalar, ...]:
        return self._value

    def rgba64(self) -> RGBA64Tuple:
        """Alpha-premultiplied (r, g, b, a), each channel in [0, 65535]."""
        raise NotImplementedError(f"{self.__class__.__name__} does not define rgba64()")

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index):
        return self._value[index]

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == cast(ColorBase, other)._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{n}={v!r}" for n, v in zip(self.channel_names, self._value))
        return f"{self.__class__.__name__}({fields})"

    def __reduce__(self):
        return (self.__class__, self._value)


def channel(index: int, doc: str | None = None) -> property:
    """Read-only property exposing one channel of a ColorBase value."""
    def getter(self: ColorBase):
        return self._value[index]
    return property(getter, doc=doc)


class WithAlpha:
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """
    __slots__ = ()

    # Tell static checkers these come from the real subclass (ColorBase)
    maxima: ClassVar[Optional[Tuple[Scalar, ...]]]
    value: Tuple[Scalar, ...]

    alpha_index: ClassVar[int] = -1

    @property
    def alpha(self) -> Scalar:
        return self.value[self.alpha_index]

    def with_alpha(self, alpha: Scalar) -> Self:
        """Return a new instance with the alpha channel replaced."""
        return self.__class__(self.value[:-1] + (alpha,))  # type: ignore[call-arg]


def rgba64_of(color: Any) -> RGBA64Tuple:
    """
    Fetch the premultiplied RGBA64 channels of an arbitrary color.

    Raises:
        TypeError: if ``color`` has no ``rgba64()`` method
        ValueError: if ``rgba64()`` does not return four channels
    """
    if not is_color(color):
        raise TypeError(f"{type(color).__name__} is not a color: it has no rgba64() method")
    rgba = tuple(int(c) for c in color.rgba64())
    if len(rgba) != 4:
        raise ValueError(f"{type(color).__name__}.rgba64() returned {len(rgba)} channels, expected 4")
    return cast(RGBA64Tuple, rgba)
