from typing import ClassVar, Tuple

import numpy as np
from numpy import ndarray as NDArray

from ..types.precision import Precision
from ..colors.hsv import ColorNHSVA8, ColorNHSVA16, ColorNHSVAF64
from .image_base import ImageBase


class ImageNHSVA8(ImageBase):
    """
    Image whose pixels are ColorNHSVA8 values.

    ``pix`` is uint8 in h, s, v, a order, 4 samples per pixel.
    """

    precision:   ClassVar[Precision] = Precision.UINT8
    color_class: ClassVar[type] = ColorNHSVA8

    def nhsva_at(self, x: int, y: int) -> ColorNHSVA8:
        return super().nhsva_at(x, y)  # type: ignore[return-value]

    def _read(self, i: int) -> ColorNHSVA8:
        s = self.pix[i:i + 4]
        return ColorNHSVA8(int(s[0]), int(s[1]), int(s[2]), int(s[3]))

    def _write(self, i: int, value: Tuple) -> None:
        self.pix[i:i + 4] = value

    @classmethod
    def _encode_array(cls, channels: NDArray) -> NDArray:
        return channels.astype(np.uint8)

    @classmethod
    def _decode_array(cls, samples: NDArray) -> NDArray:
        return np.array(samples, dtype=np.uint8)

    @classmethod
    def _alpha_is_max(cls, samples: NDArray) -> NDArray:
        return samples[..., 3] == 0xFF


class ImageNHSVA16(ImageBase):
    """
    Image whose pixels are ColorNHSVA16 values.

    ``pix`` is uint8 holding each channel as a big-endian byte pair in
    h, s, v, a order, 8 samples per pixel.
    """

    precision:   ClassVar[Precision] = Precision.UINT16
    color_class: ClassVar[type] = ColorNHSVA16

    def nhsva_at(self, x: int, y: int) -> ColorNHSVA16:
        return super().nhsva_at(x, y)  # type: ignore[return-value]

    def _read(self, i: int) -> ColorNHSVA16:
        s = [int(b) for b in self.pix[i:i + 8]]
        return ColorNHSVA16(
            s[0] << 8 | s[1],
            s[2] << 8 | s[3],
            s[4] << 8 | s[5],
            s[6] << 8 | s[7],
        )

    def _write(self, i: int, value: Tuple) -> None:
        h, s, v, a = value
        self.pix[i:i + 8] = (
            h >> 8, h & 0xFF,
            s >> 8, s & 0xFF,
            v >> 8, v & 0xFF,
            a >> 8, a & 0xFF,
        )

    @classmethod
    def _encode_array(cls, channels: NDArray) -> NDArray:
        channels = channels.astype(np.uint16)
        out = np.empty(channels.shape[:-1] + (8,), dtype=np.uint8)
        out[..., 0::2] = channels >> 8
        out[..., 1::2] = channels & 0xFF
        return out

    @classmethod
    def _decode_array(cls, samples: NDArray) -> NDArray:
        hi = samples[..., 0::2].astype(np.uint16)
        lo = samples[..., 1::2].astype(np.uint16)
        return (hi << 8) | lo

    @classmethod
    def _alpha_is_max(cls, samples: NDArray) -> NDArray:
        return (samples[..., 6] == 0xFF) & (samples[..., 7] == 0xFF)


class ImageNHSVAF64(ImageBase):
    """
    Image whose pixels are ColorNHSVAF64 values.

    ``pix`` is float64 in h, s, v, a order, 4 samples per pixel; the stride
    counts float64 samples.
    """

    precision:   ClassVar[Precision] = Precision.FLOAT64
    color_class: ClassVar[type] = ColorNHSVAF64

    def nhsva_at(self, x: int, y: int) -> ColorNHSVAF64:
        return super().nhsva_at(x, y)  # type: ignore[return-value]

    def _read(self, i: int) -> ColorNHSVAF64:
        s = self.pix[i:i + 4]
        return ColorNHSVAF64(float(s[0]), float(s[1]), float(s[2]), float(s[3]))

    def _write(self, i: int, value: Tuple) -> None:
        self.pix[i:i + 4] = value

    @classmethod
    def _encode_array(cls, channels: NDArray) -> NDArray:
        return channels.astype(np.float64)

    @classmethod
    def _decode_array(cls, samples: NDArray) -> NDArray:
        return np.array(samples, dtype=np.float64)

    @classmethod
    def _alpha_is_max(cls, samples: NDArray) -> NDArray:
        return samples[..., 3] == 1.0


IMAGE_CLASSES = {
    Precision.UINT8: ImageNHSVA8,
    Precision.UINT16: ImageNHSVA16,
    Precision.FLOAT64: ImageNHSVAF64,
}
