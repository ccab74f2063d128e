"""Pillow-backed decode, resample and encode around the geometry planner."""

from io import BytesIO
from pathlib import Path

from loguru import logger
from PIL import Image, UnidentifiedImageError

from ....common.errors import DecodeError, EncodeError
from ....utils.source_uri import is_remote_uri, read_source_bytes
from ..schema import ImageFormat, ResizeConfig
from .geometry import ResizePlan, SourceDimensions, compute_plan

# Pillow format names accepted as input; MPO is how Pillow reports multi-picture JPEGs
SUPPORTED_SOURCE_FORMATS = frozenset({*(fmt.pil_format for fmt in ImageFormat), "MPO"})


def load_image(source: str | Path | bytes) -> Image.Image:
    """
    Decode a source image from a path, an http(s) URI or raw bytes.

    Args:
        source: Local path, remote URI, or encoded image bytes

    Returns:
        Fully loaded Pillow image

    Raises:
        DecodeError: If the source is missing, unreadable, or not PNG/JPEG/GIF
    """
    if isinstance(source, bytes):
        label = "<bytes>"
        fp: Path | BytesIO = BytesIO(source)
    elif isinstance(source, str) and is_remote_uri(source):
        label = source
        fp = BytesIO(read_source_bytes(source))
    else:
        label = str(source)
        fp = Path(source)
        if not fp.is_file():
            raise DecodeError(f"Unable to get image info for `{label}`: file not found")

    try:
        img = Image.open(fp)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        raise DecodeError(f"Unable to get image info for `{label}`: {exc}") from exc

    if img.format not in SUPPORTED_SOURCE_FORMATS:
        detected = img.format
        img.close()
        raise DecodeError(f"Unknown image type `{detected}` provided for `{label}`")

    try:
        img.load()
    except (Image.DecompressionBombError, OSError) as exc:
        img.close()
        raise DecodeError(f"Unable to decode `{label}`: {exc}") from exc

    return img


def resample(
    image: Image.Image,
    plan: ResizePlan,
    resample_filter: Image.Resampling = Image.Resampling.LANCZOS,
) -> Image.Image:
    """Scale plan.source_rect of ``image`` into plan.dest_rect of a new canvas."""
    # Palette images would otherwise be forced to nearest-neighbour
    if image.mode == "P":
        image = image.convert("RGBA" if "transparency" in image.info else "RGB")

    scaled = image.resize(
        plan.dest_rect.size,
        resample=resample_filter,
        box=plan.source_rect.box,
    )

    if plan.canvas_size == plan.dest_rect.size:
        return scaled

    canvas = Image.new(scaled.mode, plan.canvas_size)
    canvas.paste(scaled, (plan.dest_rect.x, plan.dest_rect.y))
    return canvas


def resize_image(image: Image.Image, config: ResizeConfig) -> tuple[Image.Image, ResizePlan]:
    """Plan and execute the resize of an already decoded image."""
    plan = compute_plan(SourceDimensions.from_size(image.size), config)
    return resample(image, plan), plan


# Modes each encoder can write directly; anything else (CMYK, YCbCr, LAB...) goes through RGB
WRITABLE_MODES: dict[ImageFormat, frozenset[str]] = {
    # JPEG does not support alpha channel
    ImageFormat.JPEG: frozenset({"RGB", "L", "CMYK"}),
    ImageFormat.PNG: frozenset({"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"}),
    ImageFormat.GIF: frozenset({"1", "L", "LA", "P", "RGB", "RGBA"}),
}


def _prepare_for_format(image: Image.Image, fmt: ImageFormat) -> Image.Image:
    if image.mode not in WRITABLE_MODES[fmt]:
        return image.convert("RGB")
    return image


def encode_image(image: Image.Image, format: ImageFormat | str) -> bytes:
    """Encode ``image`` in memory.

    Raises:
        EncodeError: If the format is unsupported or Pillow fails to encode
    """
    buffer = BytesIO()
    _write(image, buffer, format)
    return buffer.getvalue()


def save_image(image: Image.Image, output_path: str | Path, format: ImageFormat | str) -> str:
    """Encode ``image`` to ``output_path``; the parent directory must exist.

    Raises:
        EncodeError: If the format is unsupported, the directory is missing,
            or Pillow fails to write the file
    """
    output_path = Path(output_path)
    if not output_path.parent.exists():
        raise EncodeError(f"Output directory does not exist: {output_path.parent}")

    _write(image, output_path, format)
    return str(output_path)


def _write(image: Image.Image, target: Path | BytesIO, format: ImageFormat | str) -> None:
    try:
        fmt = ImageFormat(format)
    except ValueError as exc:
        raise EncodeError(f"Unknown destination image format `{format!r}` requested.") from exc

    save_kwargs: dict[str, object] = {}
    if fmt is ImageFormat.PNG:
        save_kwargs["optimize"] = True

    try:
        _prepare_for_format(image, fmt).save(target, format=fmt.pil_format, **save_kwargs)
    except (OSError, ValueError) as exc:
        raise EncodeError(f"Failed to encode image as {fmt.pil_format}: {exc}") from exc


def image_resize(
    *,
    input_path: str | Path,
    output_path: str | Path,
    config: ResizeConfig | None = None,
    overrides: dict[str, object] | None = None,
) -> str:
    """
    Resize a single image and write output.

    Framework-agnostic, single-responsibility function.

    Args:
        input_path: Path or http(s) URI of the input image
        output_path: Path to output image
        config: Resize configuration (defaults apply when None)
        overrides: Per-call values merged over ``config``

    Returns:
        Output file path as string

    Raises:
        InvalidValueError: If an override is invalid
        DecodeError: If the input cannot be decoded
        EncodeError: If the output cannot be written
    """
    config = (config or ResizeConfig()).merge_overrides(overrides)

    with load_image(input_path) as img:
        resized, plan = resize_image(img, config)

    output = save_image(resized, output_path, config.format)

    logger.info(
        f"Resized {input_path} ({config.mode}) -> {output} "
        + f"{plan.canvas_width}x{plan.canvas_height} {config.format.pil_format}"
    )
    return output
