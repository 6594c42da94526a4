"""Batch image conversion task."""

from pathlib import Path
from typing import Callable

from loguru import logger

from ...common.errors import ConversionFailed
from ...common.schemas import ConversionRequest, ConversionResult
from ...common.upload_storage import UploadStorage
from .algo.image_convert import image_convert, read_metadata
from .algo.resize_plan import compute_resize_plan


class ImageConversionTask:
    """Converts a batch of images sequentially, all-or-nothing.

    Outputs already written for a batch are removed when a later image
    fails, so a failed request leaves nothing behind in the output
    directory.
    """

    def __init__(self, storage: UploadStorage, output_format: str = "webp"):
        self.storage: UploadStorage = storage
        self.output_format: str = output_format.lower()

    @property
    def output_extension(self) -> str:
        return "jpg" if self.output_format == "jpeg" else self.output_format

    def run(
        self,
        request: ConversionRequest,
        url_for: Callable[[str], str],
    ) -> ConversionResult:
        """
        Convert every image of ``request`` in order.

        Args:
            request: Source paths plus validated parameters
            url_for: Maps an output file name to its public URL

        Returns:
            ConversionResult with one URL per source image, in input order

        Raises:
            ConversionFailed: On the first image that cannot be processed
        """
        params = request.params
        written: list[Path] = []
        urls: list[str] = []
        total_files = len(request.images)
        input_path: Path | None = None

        try:
            for input_path in request.images:
                metadata = read_metadata(input_path)
                plan = compute_resize_plan(
                    metadata,
                    params.width,
                    params.height,
                    params.maintain_aspect_ratio,
                )

                output_path = self.storage.allocate_output(self.output_extension)
                written.append(output_path)
                _ = image_convert(
                    input_path=input_path,
                    output_path=output_path,
                    plan=plan,
                    format=self.output_format,
                    quality=params.quality,
                    metadata=metadata,
                )

                urls.append(url_for(output_path.name))

        except Exception as exc:
            logger.error(f"Image conversion failed on {input_path}: {exc}")
            removed = self.storage.discard(written)
            if removed:
                logger.info(f"Rolled back {removed} output file(s) of failed batch")
            raise ConversionFailed() from exc

        logger.info(f"Converted {total_files} image(s) to {self.output_format}")
        return ConversionResult(urls=urls)
