from .precision import (
    Precision,
    channel_max,
    samples_per_pixel,
    sample_dtypes,
    channel_dtypes,
)
from .color_types import Color, RGBA64Tuple, HSVATuple, is_color

__all__ = [
    "Precision",
    "channel_max",
    "samples_per_pixel",
    "sample_dtypes",
    "channel_dtypes",
    "Color",
    "RGBA64Tuple",
    "HSVATuple",
    "is_color",
]
