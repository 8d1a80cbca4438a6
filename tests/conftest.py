import numpy as np
import pytest

from hsvimage import ImageNHSVA8, ImageNHSVA16, ImageNHSVAF64


@pytest.fixture(params=[ImageNHSVA8, ImageNHSVA16, ImageNHSVAF64], ids=["nhsva8", "nhsva16", "nhsvaf64"])
def image_class(request):
    return request.param


@pytest.fixture
def rng():
    return np.random.default_rng(0)


@pytest.fixture
def premultiplied_rgba64(rng):
    """(64, 4) int64 array of valid premultiplied RGBA64 samples."""
    a = rng.integers(0, 65536, size=64)
    a[:4] = (0, 1, 65535, 32768)
    rgb = np.stack([rng.integers(0, a + 1) for _ in range(3)], axis=-1)
    return np.concatenate([rgb, a[:, None]], axis=-1)
