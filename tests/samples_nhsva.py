"""Shared sample colors for the conversion and image tests."""

# 8-bit RGBA (premultiplied, opaque) → 8-bit NHSVA
samples_rgba_nhsva8 = {
    (0, 0, 0, 255): (0, 0, 0, 255),          # black
    (255, 255, 255, 255): (0, 0, 255, 255),  # white
    (255, 0, 0, 255): (0, 255, 255, 255),    # red
    (0, 255, 0, 255): (85, 255, 255, 255),   # green, 120°
    (0, 0, 255, 255): (170, 255, 255, 255),  # blue, 240°
    (0, 0, 128, 255): (170, 255, 128, 255),  # dark blue
}

# 16-bit RGBA64 → float NHSVA (h in degrees)
samples_rgba64_unit_nhsva = {
    (0, 0, 0, 65535): (0.0, 0.0, 0.0, 1.0),
    (65535, 65535, 65535, 65535): (0.0, 0.0, 1.0, 1.0),
    (65535, 0, 0, 65535): (0.0, 1.0, 1.0, 1.0),
    (0, 65535, 0, 65535): (120.0, 1.0, 1.0, 1.0),
    (0, 0, 65535, 65535): (240.0, 1.0, 1.0, 1.0),
    (65535, 65535, 0, 65535): (60.0, 1.0, 1.0, 1.0),
    (0, 65535, 65535, 65535): (180.0, 1.0, 1.0, 1.0),
    (65535, 0, 65535, 65535): (300.0, 1.0, 1.0, 1.0),
    # half-transparent red: premultiplied 32767/32767 un-premultiplies to 1.0
    (32767, 0, 0, 32767): (0.0, 1.0, 1.0, 32767 / 65535),
}

# 8-bit hues that land on exact degrees (h8 * 360 / 255)
exact_hues8 = {0: 0.0, 51: 72.0, 85: 120.0, 102: 144.0, 153: 216.0, 170: 240.0, 204: 288.0}

# (s, v, a) triples in 8-bit units
svas8 = [
    (255, 255, 255),
    (128, 200, 255),
    (255, 64, 128),
    (10, 255, 77),
    (200, 130, 1),
]
