"""cl_image_resizer - cover / shrink / stretch image resizing with Pillow."""

from .common.compute_module import ComputeModule
from .common.errors import (
    DecodeError,
    EncodeError,
    ImageResizerError,
    InvalidConfigurationError,
    InvalidValueError,
)
from .common.schemas import BaseJobParams, TaskOutput, TaskResult
from .plugins.image_resize.algo.geometry import Rect, ResizePlan, SourceDimensions, compute_plan
from .plugins.image_resize.algo.image_resize import (
    encode_image,
    image_resize,
    load_image,
    resample,
    save_image,
)
from .plugins.image_resize.schema import ImageFormat, ResizeConfig, ResizeMode
from .plugins.image_resize.task import ImageResizeTask

__version__ = "0.1.0"

__all__ = [
    "BaseJobParams",
    "ComputeModule",
    "DecodeError",
    "EncodeError",
    "ImageFormat",
    "ImageResizeTask",
    "ImageResizerError",
    "InvalidConfigurationError",
    "InvalidValueError",
    "Rect",
    "ResizeConfig",
    "ResizeMode",
    "ResizePlan",
    "SourceDimensions",
    "TaskOutput",
    "TaskResult",
    "__version__",
    "compute_plan",
    "encode_image",
    "image_resize",
    "load_image",
    "resample",
    "save_image",
]
