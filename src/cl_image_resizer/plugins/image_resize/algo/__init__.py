"""Image resize algorithms."""

from .geometry import Rect, ResizePlan, SourceDimensions, compute_plan
from .image_resize import (
    encode_image,
    image_resize,
    load_image,
    resample,
    resize_image,
    save_image,
)

__all__ = [
    "Rect",
    "ResizePlan",
    "SourceDimensions",
    "compute_plan",
    "encode_image",
    "image_resize",
    "load_image",
    "resample",
    "resize_image",
    "save_image",
]
