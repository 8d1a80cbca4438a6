import numpy as np
from numpy import ndarray as NDArray
# No dependencies on the color classes


def clamp01(x: float) -> float:
    """Clamp a float into [0, 1]."""
    return max(0.0, min(1.0, x))


def wrap360(h: float) -> float:
    """
    Wrap a hue in degrees into [0, 360).

    ``h % 360.0`` can round to exactly 360.0 for tiny negative inputs, which
    is folded back to 0.0.
    """
    h = h % 360.0
    return 0.0 if h >= 360.0 else h


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero. ``b`` must be positive."""
    q = abs(a) // b
    return q if a >= 0 else -q


def to16(x: float) -> int:
    """Scale a unit float to [0, 65535], rounding half up."""
    return int(x * 65535.0 + 0.5)


def scale16_to_8(n16: int) -> int:
    """Reduce a 16-bit channel to 8 bits with rounding."""
    return (n16 * 255 + 32768) // 65535


def scale8_to_16(n8: int) -> int:
    """Widen an 8-bit channel to 16 bits by byte replication."""
    return (n8 << 8) | n8


def np_clamp01(x: NDArray) -> NDArray:
    return np.clip(np.asarray(x, dtype=float), 0.0, 1.0)


def np_wrap360(h: NDArray) -> NDArray:
    h = np.mod(np.asarray(h, dtype=float), 360.0)
    return np.where(h >= 360.0, 0.0, h)


def np_trunc_div(a: NDArray, b: NDArray) -> NDArray:
    a = np.asarray(a, dtype=np.int64)
    q = np.abs(a) // b
    return np.where(a >= 0, q, -q)


def np_to16(x: NDArray) -> NDArray:
    return np.floor(np.asarray(x, dtype=float) * 65535.0 + 0.5).astype(np.int64)


def np_scale16_to_8(n16: NDArray) -> NDArray:
    return (np.asarray(n16, dtype=np.int64) * 255 + 32768) // 65535


def np_scale8_to_16(n8: NDArray) -> NDArray:
    n8 = np.asarray(n8, dtype=np.int64)
    return (n8 << 8) | n8
