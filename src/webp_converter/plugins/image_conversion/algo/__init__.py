"""Image conversion algorithms."""

from .image_convert import get_pil_format, image_convert, read_metadata
from .resize_plan import compute_resize_plan, resolve_dimensions, round_half_up

__all__ = [
    "compute_resize_plan",
    "get_pil_format",
    "image_convert",
    "read_metadata",
    "resolve_dimensions",
    "round_half_up",
]
