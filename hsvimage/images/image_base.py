"""
In-memory rectangular pixel buffers.

An image is a header over a flat, one-dimensional numpy sample array
(``pix``), a row ``stride`` counted in samples, and a bounding rectangle
(``rect``). The pixel at (x, y) starts at::

    (y - rect.min.y) * stride + (x - rect.min.x) * samples_per_pixel

Sub-images are new headers over a numpy view of the same array, so writes
through either handle are visible through the other. Reads outside ``rect``
return the transparent zero color and writes outside it are ignored.

Buffers do no locking. A parent and its sub-images alias one allocation, so
callers writing from several threads must synchronize themselves or hand
out disjoint regions.
"""

from __future__ import annotations
import warnings
from typing import Any, ClassVar, Optional, Sequence, Tuple, Union

import numpy as np
from numpy import ndarray as NDArray
from numpy.lib.stride_tricks import as_strided

from ..geometry import Point, Rectangle, ZR, rect as make_rect
from ..types.precision import (
    Precision,
    channel_max,
    channel_dtypes,
    sample_dtypes,
    samples_per_pixel,
)
from ..colors.hsv import ColorNHSVABase
from ..colors.color import ColorModel, color_model
from ..conversions.wrapper import np_to_rgba64

RectLike = Union[Rectangle, Sequence[int]]


def as_rect(r: RectLike) -> Rectangle:
    """Accept a Rectangle or an (x0, y0, x1, y1) sequence."""
    if isinstance(r, Rectangle):
        return r
    if len(r) == 2 and all(isinstance(p, tuple) for p in r):
        return Rectangle(Point(*r[0]), Point(*r[1]))
    if len(r) != 4:
        raise ValueError(f"expected a Rectangle or (x0, y0, x1, y1), got {r!r}")
    return make_rect(*(int(c) for c in r))


class ImageBase:
    """
    Shared implementation of the NHSVA image types.

    Subclasses fix the precision and supply the per-pixel sample codec
    (``_read`` / ``_write``) and its array form
    (``_encode_array`` / ``_decode_array``).
    """

    precision:   ClassVar[Precision]
    color_class: ClassVar[type[ColorNHSVABase]]

    def __init__(
        self,
        r: RectLike = ZR,
        pix: Optional[NDArray] = None,
        stride: Optional[int] = None,
    ) -> None:
        r = as_rect(r)
        w, h = r.dx, r.dy
        if w < 0 or h < 0:
            raise ValueError(f"{self.__class__.__name__}: negative image size {w}x{h}")

        spp = self.samples_per_pixel
        dtype = sample_dtypes[self.precision]

        if pix is None:
            if stride is not None:
                raise ValueError("stride given without pix")
            pix = np.zeros(spp * w * h, dtype=dtype)
            stride = spp * w
        else:
            if not isinstance(pix, np.ndarray) or pix.ndim != 1:
                raise ValueError("pix must be a one-dimensional numpy array")
            if pix.dtype != dtype:
                raise ValueError(
                    f"{self.__class__.__name__} expects pix of dtype {np.dtype(dtype)}, got {pix.dtype}"
                )
            if stride is None:
                stride = spp * w
            if not r.empty():
                if stride < spp * w:
                    raise ValueError(f"stride {stride} is shorter than one row ({spp * w} samples)")
                needed = (h - 1) * stride + spp * w
                if len(pix) < needed:
                    raise ValueError(
                        f"pix holds {len(pix)} samples but {r} needs at least {needed}"
                    )

        self.pix: NDArray = pix
        self.stride: int = stride
        self.rect: Rectangle = r

    @classmethod
    def new(cls, r: RectLike):
        """Return a new, fully transparent image with the given bounds."""
        return cls(r)

    # ------------------ image contract ------------------
    @property
    def samples_per_pixel(self) -> int:
        return samples_per_pixel[self.precision]

    @property
    def color_model(self) -> ColorModel:
        return color_model(self.precision)

    def bounds(self) -> Rectangle:
        return self.rect

    def pix_offset(self, x: int, y: int) -> int:
        """Index of the first sample of the pixel at (x, y)."""
        return (y - self.rect.min.y) * self.stride + (x - self.rect.min.x) * self.samples_per_pixel

    def at(self, x: int, y: int) -> ColorNHSVABase:
        """Color at (x, y); usable anywhere a generic color is expected."""
        return self.nhsva_at(x, y)

    def nhsva_at(self, x: int, y: int) -> ColorNHSVABase:
        """Color at (x, y) as this image's native color class."""
        if not Point(x, y).in_rect(self.rect):
            return self.color_class()
        return self._read(self.pix_offset(x, y))

    def set(self, x: int, y: int, c: Any) -> None:
        """Store an arbitrary color at (x, y), converting it first."""
        if not Point(x, y).in_rect(self.rect):
            return
        c1 = self.color_model.convert(c)
        self._write(self.pix_offset(x, y), c1.value)

    def set_nhsva(self, x: int, y: int, c: ColorNHSVABase) -> None:
        """Store a color of this image's native class at (x, y) as is."""
        if not isinstance(c, self.color_class):
            raise TypeError(
                f"{self.__class__.__name__}.set_nhsva expects {self.color_class.__name__}, "
                f"got {type(c).__name__}"
            )
        if not Point(x, y).in_rect(self.rect):
            return
        self._write(self.pix_offset(x, y), c.value)

    def sub_image(self, r: RectLike):
        """
        Image of the part of this one visible through ``r``.

        The result shares pixels with this image. When ``r`` does not
        overlap the bounds the result is empty and owns no storage.
        """
        r = as_rect(r).intersect(self.rect)
        # An empty intersection need not lie inside self.rect, so no offset
        # may be derived from it.
        if r.empty():
            return self.__class__(ZR)
        i = self.pix_offset(r.min.x, r.min.y)
        return self.__class__(r, pix=self.pix[i:], stride=self.stride)

    def opaque(self) -> bool:
        """Scan the whole image and report whether every pixel is fully opaque."""
        if self.rect.empty():
            return True
        return bool(np.all(self._alpha_is_max(self._pixels())))

    # ------------------ bulk access ------------------
    def _pixels(self, writeable: bool = False) -> NDArray:
        """(height, width, samples_per_pixel) view of the pixels inside rect."""
        spp = self.samples_per_pixel
        if self.rect.empty():
            return np.zeros((max(self.rect.dy, 0), max(self.rect.dx, 0), spp), dtype=self.pix.dtype)
        # pix may itself be a strided or reversed view
        step = self.pix.strides[0]
        return as_strided(
            self.pix,
            shape=(self.rect.dy, self.rect.dx, spp),
            strides=(self.stride * step, spp * step, step),
            writeable=writeable,
        )

    def hsva_array(self) -> NDArray:
        """
        Copy of the native channel values.

        Returns:
            Array of shape (height, width, 4): uint8 for ImageNHSVA8, uint16
            for ImageNHSVA16, float64 for ImageNHSVAF64.
        """
        return self._decode_array(self._pixels())

    def rgba64_array(self) -> NDArray:
        """Premultiplied RGBA64 of every pixel, as a (height, width, 4) uint16 array."""
        return np_to_rgba64(self.hsva_array(), self.precision)

    def fill(self, c: Any) -> None:
        """Store one color in every pixel of the image."""
        if self.rect.empty():
            return
        c1 = c if isinstance(c, self.color_class) else self.color_model.convert(c)
        encoded = self._encode_array(np.array(c1.value, dtype=channel_dtypes[self.precision]))
        self._pixels(writeable=True)[...] = encoded

    @classmethod
    def from_hsva_array(cls, array: NDArray, origin: Tuple[int, int] = (0, 0)):
        """
        Build an image from a (height, width, 4) array of native channel values.

        Integer precisions round non-integer input and clip values outside
        the channel range, warning with ``RuntimeWarning`` when either
        happens. NaN has no integer value and raises ``ValueError``.
        """
        array = np.asarray(array)
        if array.ndim != 3 or array.shape[-1] != 4:
            raise ValueError(f"expected an array of shape (height, width, 4), got {array.shape}")

        target = channel_dtypes[cls.precision]
        if cls.precision != Precision.FLOAT64:
            if not np.issubdtype(array.dtype, np.integer):
                if np.issubdtype(array.dtype, np.floating) and np.isnan(array).any():
                    raise ValueError(f"{cls.__name__}.from_hsva_array: NaN has no {target.__name__} value")
                warnings.warn(
                    f"{cls.__name__}.from_hsva_array: {array.dtype} values rounded to integers",
                    RuntimeWarning,
                    stacklevel=2,
                )
                array = np.rint(array)
            top = channel_max[cls.precision]
            if array.size and (array.min() < 0 or array.max() > top):
                warnings.warn(
                    f"{cls.__name__}.from_hsva_array: values clipped to [0, {top}]",
                    RuntimeWarning,
                    stacklevel=2,
                )
                array = np.clip(array, 0, top)
        array = array.astype(target)

        h, w = array.shape[:2]
        ox, oy = origin
        img = cls(make_rect(ox, oy, ox + w, oy + h))
        if not img.rect.empty():
            img._pixels(writeable=True)[...] = cls._encode_array(array)
        return img

    # ------------------ codec ------------------
    def _read(self, i: int) -> ColorNHSVABase:
        raise NotImplementedError

    def _write(self, i: int, value: Tuple) -> None:
        raise NotImplementedError

    @classmethod
    def _encode_array(cls, channels: NDArray) -> NDArray:
        raise NotImplementedError

    @classmethod
    def _decode_array(cls, samples: NDArray) -> NDArray:
        raise NotImplementedError

    @classmethod
    def _alpha_is_max(cls, samples: NDArray) -> NDArray:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(bounds={self.rect}, stride={self.stride})"
