from __future__ import annotations
from typing import Protocol, Tuple, Union, runtime_checkable
import numpy as np
from numpy import ndarray

Scalar = int | float
RGBA64Tuple = Tuple[int, int, int, int]
HSVAIntTuple = Tuple[int, int, int, int]
HSVAFloatTuple = Tuple[float, float, float, float]
HSVATuple = Union[HSVAIntTuple, HSVAFloatTuple]


@runtime_checkable
class Color(Protocol):
    """
    Anything that can report itself as alpha-premultiplied RGBA.

    ``rgba64`` returns ``(r, g, b, a)`` with every channel in [0, 65535]
    and r, g, b not exceeding a.
    """

    def rgba64(self) -> RGBA64Tuple: ...


def is_color(value: object) -> bool:
    """True if ``value`` satisfies the :class:`Color` contract."""
    return callable(getattr(value, "rgba64", None))


def element_to_array(element: Union[HSVATuple, ndarray], dtype=None) -> np.ndarray:
    """
    Convert a channel tuple to a numpy array.

    Args:
        element: 4-tuple or already an ndarray
        dtype: Optional dtype for the result

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element if dtype is None else element.astype(dtype, copy=False)
    return np.array(element, dtype=dtype)
