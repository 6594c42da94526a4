"""Image conversion plugin."""

from .routes import create_router
from .task import ImageConversionTask
from .validation import parse_conversion_params, validate_batch_size

__all__ = [
    "ImageConversionTask",
    "create_router",
    "parse_conversion_params",
    "validate_batch_size",
]
