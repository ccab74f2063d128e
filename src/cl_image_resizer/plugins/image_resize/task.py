"""Image resize task implementation."""

import logging
from typing import Callable, override

from ...common.compute_module import ComputeModule
from .algo.image_resize import load_image, resize_image, save_image
from .schema import ImageResizeOutput, ImageResizeParams

logger = logging.getLogger(__name__)


class ImageResizeTask(ComputeModule[ImageResizeParams, ImageResizeOutput]):
    """Compute module for resizing an image under a cover/shrink/stretch policy."""

    schema: type[ImageResizeParams] = ImageResizeParams

    @property
    @override
    def task_type(self) -> str:
        return "image_resize"

    @override
    async def run(
        self,
        params: ImageResizeParams,
        progress_callback: Callable[[int], None] | None = None,
    ) -> ImageResizeOutput:
        config = params.to_config()

        with load_image(params.input_path) as img:
            source_width, source_height = img.size
            if progress_callback:
                progress_callback(30)

            resized, plan = resize_image(img, config)

        if progress_callback:
            progress_callback(80)

        _ = save_image(resized, params.output_path, config.format)
        logger.debug(f"image_resize wrote {params.output_path}")

        if progress_callback:
            progress_callback(100)

        return ImageResizeOutput(
            width=plan.canvas_width,
            height=plan.canvas_height,
            format=config.format,
            mode=config.mode,
            source_width=source_width,
            source_height=source_height,
        )
