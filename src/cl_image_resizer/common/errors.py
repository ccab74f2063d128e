"""Exceptions raised by cl_image_resizer."""

from typing import override


class ImageResizerError(Exception):
    """
    Base class for every error raised by this package.

    Not a ValueError subclass, so pydantic validators propagate it unwrapped
    instead of folding it into a ValidationError.
    """

    def __init__(self, message: str = "An unknown image resizer error occurred."):
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return f"{type(self).__name__}: {self.message}"


class InvalidValueError(ImageResizerError):
    """A configuration value (format, mode, width or height) was rejected."""


class InvalidConfigurationError(ImageResizerError):
    """A configuration reached the geometry stage in an unusable state."""


class DecodeError(ImageResizerError):
    """The source could not be read or is not a supported image format."""


class EncodeError(ImageResizerError):
    """The resized image could not be written in the requested format."""
