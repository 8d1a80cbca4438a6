import pytest

from hsvimage.colors import (
    ColorModel,
    ColorNHSVA8,
    ColorNHSVA16,
    ColorNHSVAF64,
    ColorRGBA64,
    NHSVA8_MODEL,
    NHSVA16_MODEL,
    NHSVAF64_MODEL,
    COLOR_MODELS,
    color_model,
    OPAQUE,
)
from hsvimage.types import Precision


def test_color_model_lookup():
    assert color_model("uint8") is NHSVA8_MODEL
    assert color_model(Precision.UINT16) is NHSVA16_MODEL
    assert color_model("float64") is NHSVAF64_MODEL
    assert set(COLOR_MODELS) == set(Precision)


def test_color_model_unknown_precision():
    with pytest.raises(ValueError, match="Unsupported precision"):
        color_model("int32")


def test_model_attributes():
    assert NHSVA8_MODEL.color_class is ColorNHSVA8
    assert NHSVA16_MODEL.precision == Precision.UINT16
    assert repr(NHSVAF64_MODEL) == "ColorModel('nhsvaf64', ColorNHSVAF64)"


def test_models_convert_generic_colors():
    blue = ColorRGBA64(0, 0, 65535, 65535)
    assert NHSVA8_MODEL.convert(blue) == ColorNHSVA8(170, 255, 255, 255)
    assert NHSVA16_MODEL(blue) == ColorNHSVA16(43690, 65535, 65535, 65535)
    assert NHSVAF64_MODEL(blue) == ColorNHSVAF64(240.0, 1.0, 1.0, 1.0)


def test_models_convert_between_nhsva_classes():
    green8 = ColorNHSVA8(85, 255, 255, 255)
    assert NHSVA16_MODEL.convert(green8) == ColorNHSVA16(21845, 65535, 65535, 65535)
    assert NHSVA8_MODEL.convert(NHSVA16_MODEL.convert(green8)) == green8


def test_native_colors_pass_through():
    c = ColorNHSVA16(1, 2, 3, 4)
    assert NHSVA16_MODEL.convert(c) is c


def test_converted_colors_keep_rgba64():
    for model in COLOR_MODELS.values():
        assert model.convert(OPAQUE).rgba64() == OPAQUE.rgba64()


def test_custom_model():
    model = ColorModel("gray8", Precision.UINT8, ColorNHSVA8, lambda c: ColorNHSVA8(0, 0, 0, 255))
    assert model(OPAQUE) == ColorNHSVA8(0, 0, 0, 255)
