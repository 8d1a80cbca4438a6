"""Basic hsvimage usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np

from hsvimage import (
    ColorNHSVA8,
    ColorNRGBA,
    ImageNHSVA8,
    ImageNHSVAF64,
    OPAQUE,
    convert,
    rect,
)


def demonstrate_colors() -> None:
    # Typed colors report premultiplied 16-bit RGBA.
    green = ColorNHSVA8(85, 255, 255, 255)
    print("8-bit green as RGBA64:", green.rgba64())

    # Any color converts to any HSV precision.
    faded = ColorNRGBA(255, 128, 64, 128)
    print("NRGBA -> float HSVA:", faded.convert("float64"))

    print("uint8 -> float64 channels:", convert(green.value, "uint8", "float64"))


def demonstrate_images() -> None:
    img = ImageNHSVA8(rect(0, 0, 8, 8))
    img.fill(OPAQUE)
    print("Filled image opaque:", img.opaque())

    # Sub-images share storage with their parent.
    sub = img.sub_image(rect(2, 2, 6, 6))
    sub.set(3, 3, ColorNHSVA8(170, 255, 255, 128))
    print("Parent sees the write:", img.nhsva_at(3, 3))
    print("Parent still opaque:", img.opaque())

    # Bulk access through numpy.
    hue_ramp = np.zeros((1, 6, 4))
    hue_ramp[0, :, 0] = np.linspace(0.0, 300.0, 6)
    hue_ramp[0, :, 1:] = 1.0
    ramp = ImageNHSVAF64.from_hsva_array(hue_ramp)
    print("Hue ramp as RGBA64:\n", ramp.rgba64_array()[0])


if __name__ == "__main__":
    demonstrate_colors()
    demonstrate_images()
