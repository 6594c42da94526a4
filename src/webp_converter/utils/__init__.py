"""Utility helpers."""

from .log_config import configure_logging
from .media_types import MediaType, is_image_upload

__all__ = ["MediaType", "configure_logging", "is_image_upload"]
