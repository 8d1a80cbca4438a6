from .image_base import ImageBase, as_rect
from .nhsva import ImageNHSVA8, ImageNHSVA16, ImageNHSVAF64, IMAGE_CLASSES

__all__ = [
    "ImageBase",
    "as_rect",
    "ImageNHSVA8",
    "ImageNHSVA16",
    "ImageNHSVAF64",
    "IMAGE_CLASSES",
]
