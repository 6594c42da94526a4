"""webp_converter - batch image resize and re-encode service."""

__version__ = "0.1.0"

from .app import create_app  # noqa: E402
from .config import Settings, get_settings  # noqa: E402

__all__ = [
    "Settings",
    "__version__",
    "create_app",
    "get_settings",
]
