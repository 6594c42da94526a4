"""FastAPI application factory."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger

from . import __version__
from .common.errors import ConverterError
from .common.upload_storage import UploadStorage
from .config import Settings
from .plugins.image_conversion import create_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the conversion service.

    Args:
        settings: Service settings; defaults to one read from the environment

    Returns:
        FastAPI app serving POST /upload, GET /images/<name> and GET /health

    Example:
        import uvicorn
        from webp_converter import Settings, create_app

        app = create_app(Settings(output_dir="./public/images"))
        uvicorn.run(app, port=3000)
    """
    settings = settings or Settings()
    storage = UploadStorage(settings.upload_dir, settings.output_dir)

    app = FastAPI(
        title="WebP Converter",
        version=__version__,
        description="Batch image resize and re-encode service",
    )
    app.state.settings = settings
    app.state.storage = storage

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ConverterError)
    async def converter_error_handler(request: Request, exc: ConverterError):
        if exc.status_code < 500:
            logger.warning(f"Rejected {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Malformed request to {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": "Malformed request"})

    # Prevents unhandled errors from leaking details to clients
    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "ok"}

    app.include_router(create_router(settings, storage))
    app.mount("/images", StaticFiles(directory=storage.output_dir), name="images")

    _ = (converter_error_handler, validation_error_handler, unhandled_error_handler, health)
    return app
