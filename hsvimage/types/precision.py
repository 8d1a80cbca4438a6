# No dependencies
from enum import Enum
import numpy as np


class Precision(str, Enum):
    UINT8 = "uint8"
    UINT16 = "uint16"
    FLOAT64 = "float64"


# Largest value of a non-hue channel (and of the hue channel for the
# integer precisions, where hue spans the whole channel range).
channel_max = {
    Precision.UINT8: 0xFF,
    Precision.UINT16: 0xFFFF,
    Precision.FLOAT64: 1.0,
}

# Samples of ``pix`` occupied by one pixel. UINT16 stores each channel as a
# big-endian byte pair.
samples_per_pixel = {
    Precision.UINT8: 4,
    Precision.UINT16: 8,
    Precision.FLOAT64: 4,
}

# dtype of the flat ``pix`` sample storage
sample_dtypes = {
    Precision.UINT8: np.uint8,
    Precision.UINT16: np.uint8,
    Precision.FLOAT64: np.float64,
}

# dtype of a decoded (..., 4) channel array
channel_dtypes = {
    Precision.UINT8: np.uint8,
    Precision.UINT16: np.uint16,
    Precision.FLOAT64: np.float64,
}
