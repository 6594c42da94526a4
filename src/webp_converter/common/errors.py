"""Error taxonomy for the conversion service.

Every error carries the HTTP status and the client-facing message it is
reported with. Handlers registered in ``create_app`` translate them into
``{"error": message}`` bodies.
"""

from __future__ import annotations

from typing import ClassVar


class ConverterError(Exception):
    """Base class for errors reported to the client."""

    status_code: ClassVar[int] = 500
    default_message: ClassVar[str] = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message: str = message or self.default_message
        super().__init__(self.message)


class InvalidParameters(ConverterError):
    status_code: ClassVar[int] = 400
    default_message: ClassVar[str] = "Invalid width, height, or quality"


class UnsupportedFileType(ConverterError):
    status_code: ClassVar[int] = 400
    default_message: ClassVar[str] = "Only image files are allowed"


class NoFiles(ConverterError):
    status_code: ClassVar[int] = 400
    default_message: ClassVar[str] = "No images provided"


class TooManyFiles(ConverterError):
    status_code: ClassVar[int] = 400

    def __init__(self, limit: int):
        self.limit: int = limit
        super().__init__(f"Maximum {limit} images allowed")


class ConversionFailed(ConverterError):
    """Any decode/resize/encode/write failure inside a batch."""

    status_code: ClassVar[int] = 500
    default_message: ClassVar[str] = "Image conversion failed"
