"""Common module - errors, schemas, and storage."""

from .errors import (
    ConversionFailed,
    ConverterError,
    InvalidParameters,
    NoFiles,
    TooManyFiles,
    UnsupportedFileType,
)
from .schemas import (
    ConversionParams,
    ConversionRequest,
    ConversionResult,
    ErrorResponse,
    ImageMetadata,
    ResizePlan,
)
from .upload_storage import UploadStorage, generate_name

__all__ = [
    "ConversionFailed",
    "ConversionParams",
    "ConversionRequest",
    "ConversionResult",
    "ConverterError",
    "ErrorResponse",
    "ImageMetadata",
    "InvalidParameters",
    "NoFiles",
    "ResizePlan",
    "TooManyFiles",
    "UnsupportedFileType",
    "UploadStorage",
    "generate_name",
]
