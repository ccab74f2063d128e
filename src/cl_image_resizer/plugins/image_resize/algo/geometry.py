"""Pure resize geometry: which source rectangle maps to which destination rectangle.

No pixels are touched here. Given the decoded source size and a ResizeConfig,
compute_plan() returns a ResizePlan that any resampling primitive can execute.

All arithmetic is done on integers. Aspect ratios are compared by
cross-multiplication and every offset or extent is truncated toward zero, so
identical inputs always give bit-identical plans.
"""

from typing import ClassVar

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, model_validator

from ....common.errors import InvalidConfigurationError, InvalidValueError
from ..schema import ResizeConfig, ResizeMode


class Rect(BaseModel):
    """Axis-aligned pixel rectangle."""

    x: int = Field(0, ge=0)
    y: int = Field(0, ge=0)
    width: int = Field(ge=1)
    height: int = Field(ge=1)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @property
    def box(self) -> tuple[int, int, int, int]:
        """(left, upper, right, lower), the box convention used by Pillow."""
        return (self.x, self.y, self.right, self.bottom)


class SourceDimensions(BaseModel):
    width: int
    height: int

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_positive(self) -> "SourceDimensions":
        if self.width < 1 or self.height < 1:
            raise InvalidValueError(
                f"Invalid source dimensions {self.width}x{self.height}; both must be > 0"
            )
        return self

    @classmethod
    def from_size(cls, size: tuple[int, int]) -> "SourceDimensions":
        width, height = size
        return cls(width=width, height=height)


class ResizePlan(BaseModel):
    """Everything a resampler needs to produce the output buffer."""

    source_rect: Rect
    dest_rect: Rect
    canvas_width: int = Field(ge=1)
    canvas_height: int = Field(ge=1)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_dest_within_canvas(self) -> "ResizePlan":
        if self.dest_rect.right > self.canvas_width or self.dest_rect.bottom > self.canvas_height:
            raise ValueError(
                f"Destination {self.dest_rect.box} exceeds canvas "
                + f"{self.canvas_width}x{self.canvas_height}"
            )
        return self

    @property
    def canvas_size(self) -> tuple[int, int]:
        return (self.canvas_width, self.canvas_height)

    def fits_source(self, source: SourceDimensions) -> bool:
        """True when the sampling rectangle lies entirely inside the source."""
        return self.source_rect.right <= source.width and self.source_rect.bottom <= source.height


def compute_plan(source: SourceDimensions, config: ResizeConfig) -> ResizePlan:
    """
    Compute the sampling and destination rectangles for one resize.

    Args:
        source: Width and height of the decoded source image
        config: Validated resize configuration

    Returns:
        ResizePlan whose canvas always equals the destination rectangle

    Raises:
        InvalidValueError: If any source or target dimension is < 1
        InvalidConfigurationError: If config.mode is not a known ResizeMode
    """
    src_w, src_h = source.width, source.height
    dst_w, dst_h = config.width, config.height

    if min(src_w, src_h, dst_w, dst_h) < 1:
        raise InvalidValueError(
            f"Cannot plan resize of {src_w}x{src_h} to {dst_w}x{dst_h}; "
            + "all dimensions must be > 0"
        )

    # sourceAspect > destAspect  <=>  src_w / src_h > dst_w / dst_h
    source_is_wider = src_w * dst_h > dst_w * src_h

    match config.mode:
        case ResizeMode.STRETCH:
            source_rect = Rect(width=src_w, height=src_h)
            dest_rect = Rect(width=dst_w, height=dst_h)

        case ResizeMode.SHRINK:
            if source_is_wider:
                out_h = dst_h
                out_w = (dst_h * src_w) // src_h
            else:
                out_w = dst_w
                out_h = (dst_w * src_h) // src_w
            source_rect = Rect(width=src_w, height=src_h)
            dest_rect = Rect(width=out_w, height=out_h)

        case ResizeMode.COVER:
            source_rect = _cover_source_rect(src_w, src_h, dst_w, dst_h, source_is_wider)
            dest_rect = Rect(width=dst_w, height=dst_h)

        case _:
            raise InvalidConfigurationError(f"Unknown processing mode `{config.mode!r}` requested.")

    logger.debug(
        f"{config.mode} {src_w}x{src_h} -> {dst_w}x{dst_h}: "
        + f"sample {source_rect.box}, write {dest_rect.box}"
    )

    return ResizePlan(
        source_rect=source_rect,
        dest_rect=dest_rect,
        canvas_width=dest_rect.width,
        canvas_height=dest_rect.height,
    )


def _cover_source_rect(
    src_w: int,
    src_h: int,
    dst_w: int,
    dst_h: int,
    source_is_wider: bool,
) -> Rect:
    """
    Sampling rectangle for COVER: same aspect ratio as the target box.

    The offset is half the overflow of the scaled source measured in target
    pixels, floor(((dst_h * src_w / src_h) - dst_w) / 2) or its vertical twin.
    It is clamped so the rectangle never leaves the source; that only bites
    when the source is upscaled by more than 2x.
    """
    if source_is_wider:
        crop_w = min(src_w, max(1, (src_h * dst_w) // dst_h))
        offset = (dst_h * src_w - dst_w * src_h) // (2 * src_h)
        return Rect(x=min(offset, src_w - crop_w), y=0, width=crop_w, height=src_h)

    crop_h = min(src_h, max(1, (src_w * dst_h) // dst_w))
    offset = (dst_w * src_h - dst_h * src_w) // (2 * src_w)
    return Rect(x=0, y=min(offset, src_h - crop_h), width=src_w, height=crop_h)
