from .compute_module import ComputeModule
from .errors import (
    DecodeError,
    EncodeError,
    ImageResizerError,
    InvalidConfigurationError,
    InvalidValueError,
)
from .schemas import BaseJobParams, TaskOutput, TaskResult

__all__ = [
    "ComputeModule",
    "BaseJobParams",
    "TaskOutput",
    "TaskResult",
    "ImageResizerError",
    "InvalidValueError",
    "InvalidConfigurationError",
    "DecodeError",
    "EncodeError",
]
