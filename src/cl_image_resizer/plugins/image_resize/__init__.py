"""Image resize plugin."""

from .schema import ImageFormat, ImageResizeOutput, ImageResizeParams, ResizeConfig, ResizeMode
from .task import ImageResizeTask

__all__ = [
    "ImageFormat",
    "ImageResizeOutput",
    "ImageResizeParams",
    "ImageResizeTask",
    "ResizeConfig",
    "ResizeMode",
]
