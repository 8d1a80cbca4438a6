import numpy as np
import pytest

from hsvimage import (
    ImageNHSVA8,
    ImageNHSVA16,
    ImageNHSVAF64,
    ColorNHSVA8,
    ColorNHSVA16,
    ColorNHSVAF64,
    ColorRGBA,
    ColorGray,
    TRANSPARENT,
    OPAQUE,
    NHSVA8_MODEL,
    NHSVA16_MODEL,
    NHSVAF64_MODEL,
    Point,
    Rectangle,
    rect,
)
from hsvimage.images import IMAGE_CLASSES
from hsvimage.types import Precision


def cmp(model, c0, c1):
    return model.convert(c0).rgba64() == model.convert(c1).rgba64()


def test_image(image_class):
    m = image_class(rect(0, 0, 10, 10))
    assert m.bounds() == rect(0, 0, 10, 10)
    assert cmp(m.color_model, TRANSPARENT, m.at(6, 3))

    m.set(6, 3, OPAQUE)
    assert cmp(m.color_model, OPAQUE, m.at(6, 3))
    assert m.sub_image(rect(6, 3, 7, 4)).opaque()

    m = m.sub_image(rect(3, 2, 9, 8))
    assert m.bounds() == rect(3, 2, 9, 8)
    assert cmp(m.color_model, OPAQUE, m.at(6, 3))
    assert cmp(m.color_model, TRANSPARENT, m.at(3, 3))

    m.set(3, 3, OPAQUE)
    assert cmp(m.color_model, OPAQUE, m.at(3, 3))

    # empty sub-images
    m.sub_image(rect(0, 0, 0, 0))
    m.sub_image(rect(10, 0, 10, 0))
    m.sub_image(rect(0, 10, 0, 10))
    m.sub_image(rect(10, 10, 10, 10))


def test_simple_colors():
    cases = [
        (ImageNHSVA8, ColorRGBA(0xFF, 0, 0, 0xFF), ColorNHSVA8(0, 0xFF, 0xFF, 0xFF)),
        (ImageNHSVA8, ColorRGBA(0, 0xFF, 0, 0xFF), ColorNHSVA8(85, 0xFF, 0xFF, 0xFF)),
        (ImageNHSVA8, ColorRGBA(0, 0, 0xFF, 0xFF), ColorNHSVA8(170, 0xFF, 0xFF, 0xFF)),
        (ImageNHSVA16, ColorRGBA(0xFF, 0, 0, 0xFF), ColorNHSVA16(0, 0xFFFF, 0xFFFF, 0xFFFF)),
        (ImageNHSVA16, ColorRGBA(0, 0xFF, 0, 0xFF), ColorNHSVA16(21845, 0xFFFF, 0xFFFF, 0xFFFF)),
        (ImageNHSVAF64, ColorRGBA(0, 0, 0xFF, 0xFF), ColorNHSVAF64(240.0, 1.0, 1.0, 1.0)),
    ]
    for cls, rgba, hsva in cases:
        m = cls(rect(0, 0, 10, 10))
        m.set(6, 3, rgba)
        assert m.nhsva_at(6, 3) == hsva
        assert m.at(6, 3).rgba64() == rgba.rgba64()


def test_default_model(image_class):
    models = {ImageNHSVA8: NHSVA8_MODEL, ImageNHSVA16: NHSVA16_MODEL, ImageNHSVAF64: NHSVAF64_MODEL}
    assert image_class(rect(0, 0, 1, 1)).color_model is models[image_class]


def test_new_is_transparent(image_class):
    m = image_class.new(rect(2, 3, 5, 7))
    assert m.bounds() == rect(2, 3, 5, 7)
    assert m.stride == 3 * m.samples_per_pixel
    assert len(m.pix) == 4 * m.stride
    assert not np.any(m.pix)
    assert m.nhsva_at(2, 3) == m.color_class()


def test_new_accepts_coordinates():
    assert ImageNHSVA8((0, 0, 4, 4)).bounds() == rect(0, 0, 4, 4)
    assert ImageNHSVA8(((1, 1), (2, 3))).bounds() == rect(1, 1, 2, 3)
    with pytest.raises(ValueError):
        ImageNHSVA8((0, 0, 4))


def test_pix_offset():
    m = ImageNHSVA16(rect(2, 3, 5, 7))
    assert m.samples_per_pixel == 8
    assert m.pix_offset(2, 3) == 0
    assert m.pix_offset(3, 4) == 24 + 8
    assert ImageNHSVA8(rect(0, 0, 10, 10)).pix_offset(6, 3) == 3 * 40 + 6 * 4


def test_out_of_bounds_reads_and_writes(image_class):
    m = image_class(rect(0, 0, 4, 4))
    m.fill(OPAQUE)
    for x, y in [(-1, 0), (0, -1), (4, 0), (0, 4), (100, 100)]:
        assert m.nhsva_at(x, y) == m.color_class()
        assert m.at(x, y).rgba64() == (0, 0, 0, 0)
        m.set(x, y, TRANSPARENT)
        m.set_nhsva(x, y, m.color_class())
    assert m.opaque()


def test_set_nhsva_stores_as_is():
    m = ImageNHSVA8(rect(0, 0, 2, 2))
    # transparent but with channels
    c = ColorNHSVA8(12, 34, 56, 0)
    m.set_nhsva(1, 1, c)
    assert m.nhsva_at(1, 1) == c
    m.set(0, 1, c)
    assert m.nhsva_at(0, 1) == c
    # other classes go through rgba64(), which drops them to the zero color
    m.set(0, 0, ColorNHSVA16(12, 34, 56, 0))
    assert m.nhsva_at(0, 0) == ColorNHSVA8()


def test_set_nhsva_rejects_other_classes():
    m = ImageNHSVA8(rect(0, 0, 2, 2))
    with pytest.raises(TypeError):
        m.set_nhsva(0, 0, ColorNHSVA16(0, 0, 0, 0xFFFF))


def test_set_converts_generic_colors():
    m = ImageNHSVA16(rect(0, 0, 2, 2))
    m.set(1, 0, ColorGray(7))
    assert m.nhsva_at(1, 0) == ColorNHSVA16(0, 0, 1799, 0xFFFF)


def test_float_image_keeps_values_as_given():
    m = ImageNHSVAF64(rect(0, 0, 1, 1))
    m.set_nhsva(0, 0, ColorNHSVAF64(480.0, 1.5, 2.0, 1.0))
    assert m.nhsva_at(0, 0) == ColorNHSVAF64(480.0, 1.5, 2.0, 1.0)
    assert m.at(0, 0).rgba64() == (0, 65535, 0, 65535)


def test_nhsva16_byte_layout():
    m = ImageNHSVA16(rect(0, 0, 2, 1))
    m.set_nhsva(1, 0, ColorNHSVA16(0x1234, 0x5678, 0x9ABC, 0xDEF0))
    assert list(m.pix[8:16]) == [0x12, 0x34, 0x56, 0x78, 0x9A, 0xBC, 0xDE, 0xF0]
    assert m.nhsva_at(1, 0) == ColorNHSVA16(0x1234, 0x5678, 0x9ABC, 0xDEF0)


def test_invalid_buffers():
    with pytest.raises(ValueError):
        ImageNHSVA8(Rectangle(Point(5, 5), Point(0, 0)))
    with pytest.raises(ValueError):
        ImageNHSVA8(rect(0, 0, 2, 2), pix=np.zeros(15, dtype=np.uint8))
    with pytest.raises(ValueError):
        ImageNHSVA8(rect(0, 0, 2, 2), pix=np.zeros(16, dtype=np.uint8), stride=4)
    with pytest.raises(ValueError):
        ImageNHSVA8(rect(0, 0, 2, 2), pix=np.zeros(16, dtype=np.float64))
    with pytest.raises(ValueError):
        ImageNHSVAF64(rect(0, 0, 2, 2), pix=np.zeros((2, 8)))
    with pytest.raises(ValueError):
        ImageNHSVA8(rect(0, 0, 2, 2), stride=8)


def test_existing_buffer_with_padding():
    pix = np.zeros(2 * 12, dtype=np.uint8)
    m = ImageNHSVA8(rect(0, 0, 2, 2), pix=pix, stride=12)
    m.set_nhsva(1, 1, ColorNHSVA8(1, 2, 3, 4))
    assert list(pix[16:20]) == [1, 2, 3, 4]


def test_strided_buffer_bulk_access_matches_point_access():
    backing = np.zeros(32, dtype=np.uint8)
    m = ImageNHSVA8(rect(0, 0, 2, 2), pix=backing[::2])
    m.fill(ColorNHSVA8(1, 2, 3, 255))
    for y in range(2):
        for x in range(2):
            assert m.nhsva_at(x, y) == ColorNHSVA8(1, 2, 3, 255)
    assert m.opaque()
    assert m.hsva_array().tolist() == [[[1, 2, 3, 255]] * 2] * 2
    assert not np.any(backing[1::2])


def test_reversed_buffer_bulk_access_matches_point_access():
    backing = np.zeros(16, dtype=np.uint8)
    m = ImageNHSVA8(rect(0, 0, 2, 2), pix=backing[::-1])
    m.set_nhsva(1, 1, ColorNHSVA8(1, 2, 3, 255))
    assert list(backing[:4]) == [255, 3, 2, 1]
    arr = m.hsva_array()
    assert tuple(arr[1, 1].tolist()) == (1, 2, 3, 255)
    assert not np.any(arr[0])
    assert not m.opaque()
    m.fill(OPAQUE)
    assert m.opaque()
    assert m.nhsva_at(0, 0) == ColorNHSVA8(0, 0, 255, 255)


def test_repr():
    assert repr(ImageNHSVA8(rect(0, 0, 2, 3))) == "ImageNHSVA8(bounds=(0,0)-(2,3), stride=8)"


def test_image_classes_table():
    assert IMAGE_CLASSES == {
        Precision.UINT8: ImageNHSVA8,
        Precision.UINT16: ImageNHSVA16,
        Precision.FLOAT64: ImageNHSVAF64,
    }
    for precision, cls in IMAGE_CLASSES.items():
        assert cls.precision is precision
        assert cls.color_class.precision is precision
        assert cls(rect(0, 0, 1, 1)).color_model.precision is precision
