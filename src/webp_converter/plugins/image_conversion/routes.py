"""Image conversion route factory."""

from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, File, Query, Request, UploadFile
from fastapi.concurrency import run_in_threadpool

from ...common.errors import TooManyFiles, UnsupportedFileType
from ...common.schemas import ConversionRequest, ConversionResult, ErrorResponse
from ...common.upload_storage import UploadStorage
from ...config import Settings
from ...utils.media_types import is_image_upload
from .task import ImageConversionTask
from .validation import parse_conversion_params, validate_batch_size


def create_router(settings: Settings, storage: UploadStorage) -> APIRouter:
    """Create router with injected dependencies.

    Args:
        settings: Service settings (limits, output format, public URL)
        storage: UploadStorage owning the upload and output directories

    Returns:
        Configured APIRouter with the upload endpoint
    """
    router = APIRouter()
    task = ImageConversionTask(storage, output_format=settings.output_format)

    def public_base(request: Request) -> str:
        base = settings.public_base_url or str(request.base_url)
        return base.rstrip("/")

    @router.post(
        "/upload",
        response_model=ConversionResult,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def upload_images(
        request: Request,
        images: Annotated[
            list[UploadFile] | None,
            File(description=f"Up to {settings.max_files} image files"),
        ] = None,
        width: Annotated[str | None, Query(description="Target width in pixels")] = None,
        height: Annotated[str | None, Query(description="Target height in pixels")] = None,
        quality: Annotated[str | None, Query(description="Output quality (1-100)")] = None,
        maintain_aspect_ratio: Annotated[
            str | None,
            Query(alias="maintainAspectRatio", description="'true' to fit inside width x height"),
        ] = None,
    ) -> ConversionResult:
        """Convert a batch of uploaded images and return their public URLs.

        Images are processed in order; the response lists one URL per
        uploaded file. Any failure aborts the whole batch.
        """
        files = images or []

        # Upload intake: reject before anything is written to disk
        if len(files) > settings.max_files:
            raise TooManyFiles(settings.max_files)
        for file in files:
            if not is_image_upload(file.content_type):
                raise UnsupportedFileType()

        params = parse_conversion_params(
            width,
            height,
            quality,
            maintain_aspect_ratio,
            max_dimension=settings.max_dimension,
            default_quality=settings.default_quality,
        )
        validate_batch_size(files, settings.max_files)

        saved: list[Path] = []
        try:
            for file in files:
                saved.append(await storage.save_upload(file, file.filename))

            base = public_base(request)
            return await run_in_threadpool(
                task.run,
                ConversionRequest(images=saved, params=params),
                lambda name: f"{base}/images/{name}",
            )
        finally:
            if not settings.keep_uploads:
                _ = storage.discard(saved)

    _ = upload_images
    return router
