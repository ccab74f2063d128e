"""Image resize configuration and task schemas."""

from collections.abc import Mapping
from enum import StrEnum
from typing import Annotated, ClassVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from ...common.errors import InvalidValueError
from ...common.schemas import BaseJobParams, TaskOutput

DEFAULT_WIDTH = 300
DEFAULT_HEIGHT = 200


class ImageFormat(StrEnum):
    """Output encodings the resizer can write."""

    PNG = "png"
    JPEG = "jpeg"
    GIF = "gif"

    @classmethod
    def _missing_(cls, value: object) -> "ImageFormat | None":
        if isinstance(value, str):
            key = value.strip().lower()
            if key == "jpg":
                key = "jpeg"
            for member in cls:
                if member.value == key:
                    return member
        return None

    @property
    def pil_format(self) -> str:
        """Format name understood by Pillow's Image.save()."""
        return self.value.upper()


class ResizeMode(StrEnum):
    # Crop the scaled source so it covers the whole target box
    COVER = "cover"
    # Scale preserving aspect ratio, never crop
    SHRINK = "shrink"
    # Scale both axes independently to the exact target box
    STRETCH = "stretch"

    @classmethod
    def _missing_(cls, value: object) -> "ResizeMode | None":
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        return None


# ─────────────────────────────────────────────────────────────
# Field parsers
# ─────────────────────────────────────────────────────────────


def parse_format(value: object) -> ImageFormat:
    try:
        return ImageFormat(value)
    except (ValueError, TypeError) as exc:
        raise InvalidValueError(
            f"Invalid format `{value!r}` passed; must be one of: {', '.join(ImageFormat)}"
        ) from exc


def parse_mode(value: object) -> ResizeMode:
    try:
        return ResizeMode(value)
    except (ValueError, TypeError) as exc:
        raise InvalidValueError(
            f"Invalid mode `{value!r}` passed; must be one of: {', '.join(ResizeMode)}"
        ) from exc


def parse_dimension(name: str, value: object) -> int:
    """Accept only a real int > 0; bools, floats and numeric strings are rejected."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidValueError(f"Invalid {name} `{value!r}` passed; must be an integer > 0")
    return value


def parse_width(value: object) -> int:
    return parse_dimension("width", value)


def parse_height(value: object) -> int:
    return parse_dimension("height", value)


FormatField = Annotated[ImageFormat, BeforeValidator(parse_format)]
ModeField = Annotated[ResizeMode, BeforeValidator(parse_mode)]
WidthField = Annotated[int, BeforeValidator(parse_width)]
HeightField = Annotated[int, BeforeValidator(parse_height)]


# ─────────────────────────────────────────────────────────────
# Resize configuration
# ─────────────────────────────────────────────────────────────


class ResizeConfig(BaseModel):
    """Validated, immutable resize configuration.

    Every "setter" returns a new instance; the receiver never changes.
    Invalid values raise InvalidValueError at the point they are supplied.
    """

    format: FormatField = ImageFormat.PNG
    mode: ModeField = ResizeMode.COVER
    width: WidthField = DEFAULT_WIDTH
    height: HeightField = DEFAULT_HEIGHT

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @classmethod
    def from_mapping(cls, config: Mapping[str, object] | None = None) -> "ResizeConfig":
        """Build a config from a loose mapping laid over the defaults."""
        return cls().merge_overrides(config)

    def set_format(self, format: ImageFormat | str) -> "ResizeConfig":
        return self._replace(format=format)

    def set_mode(self, mode: ResizeMode | str) -> "ResizeConfig":
        return self._replace(mode=mode)

    def set_width(self, width: int) -> "ResizeConfig":
        return self._replace(width=width)

    def set_height(self, height: int) -> "ResizeConfig":
        return self._replace(height=height)

    def merge_overrides(self, overrides: Mapping[str, object] | None = None) -> "ResizeConfig":
        """
        Return a copy with the fields present in ``overrides`` replaced.

        Keys mapped to None count as absent. Unknown keys are rejected.
        """
        if not overrides:
            return self.model_copy()

        unknown = sorted(set(overrides) - set(type(self).model_fields))
        if unknown:
            raise InvalidValueError(
                f"Unknown configuration key(s) {unknown}; "
                + f"must be among: {', '.join(type(self).model_fields)}"
            )

        present = {key: value for key, value in overrides.items() if value is not None}
        return self._replace(**present)

    def _replace(self, **changes: object) -> "ResizeConfig":
        return type(self).model_validate({**self.model_dump(), **changes})


# ─────────────────────────────────────────────────────────────
# Task schemas
# ─────────────────────────────────────────────────────────────


class ImageResizeParams(BaseJobParams):
    """Parameters for the image resize task.

    Attributes:
        input_path: Path or http(s) URI of the source image
        output_path: Path of the encoded output image
        format: Output encoding (png, jpeg, gif)
        mode: cover, shrink or stretch
        width: Target width in pixels
        height: Target height in pixels
    """

    format: FormatField = ImageFormat.PNG
    mode: ModeField = ResizeMode.COVER
    width: WidthField = DEFAULT_WIDTH
    height: HeightField = DEFAULT_HEIGHT

    def to_config(self) -> ResizeConfig:
        return ResizeConfig(
            format=self.format,
            mode=self.mode,
            width=self.width,
            height=self.height,
        )


class ImageResizeOutput(TaskOutput):
    width: int = Field(description="Width of the written image")
    height: int = Field(description="Height of the written image")
    format: ImageFormat
    mode: ResizeMode
    source_width: int = Field(description="Width of the decoded source")
    source_height: int = Field(description="Height of the decoded source")
