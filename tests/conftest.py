"""Test configuration and fixtures for webp_converter.

This module provides:
- Function-scoped fixtures (temp dirs, synthetic images, settings)
- API fixtures (FastAPI app and TestClient)
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from PIL import Image, ImageDraw

from webp_converter.common.upload_storage import UploadStorage
from webp_converter.config import Settings
from webp_converter.app import create_app

ImageFactory = Callable[..., Path]


# ============================================================================
# Image Fixtures
# ============================================================================


@pytest.fixture
def make_image(tmp_path: Path) -> ImageFactory:
    """Factory writing a synthetic image of a given size and format."""
    sources = tmp_path / "sources"
    sources.mkdir(exist_ok=True)
    counter = {"n": 0}

    def _make(
        width: int = 800,
        height: int = 600,
        fmt: str = "JPEG",
        mode: str = "RGB",
        name: str | None = None,
    ) -> Path:
        counter["n"] += 1
        ext = {"JPEG": "jpg", "PNG": "png", "WEBP": "webp", "GIF": "gif"}.get(fmt, fmt.lower())
        path = sources / (name or f"image_{counter['n']}.{ext}")

        colors: dict[str, int | tuple[int, ...]] = {
            "RGB": (73, 109, 137),
            "RGBA": (0, 0, 0, 0),
            "CMYK": (80, 20, 0, 40),
        }
        img = Image.new(mode, (width, height), color=colors.get(mode, 120))
        if mode in ("RGB", "RGBA"):
            draw = ImageDraw.Draw(img)
            fill = (200, 100, 100, 255) if mode == "RGBA" else (200, 100, 100)
            draw.ellipse([width // 4, height // 4, 3 * width // 4, 3 * height // 4], fill=fill)
        img.save(path, fmt)
        return path

    return _make


@pytest.fixture
def synthetic_image(make_image: ImageFactory) -> Path:
    """800x600 JPEG with a simple pattern."""
    return make_image(800, 600)


# ============================================================================
# Service Fixtures
# ============================================================================


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings isolated to the test's temporary directory."""
    return Settings(
        upload_dir=tmp_path / "uploads",
        output_dir=tmp_path / "public" / "images",
        public_base_url=None,
    )


@pytest.fixture
def storage(settings: Settings) -> UploadStorage:
    return UploadStorage(settings.upload_dir, settings.output_dir)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def api_client(app: FastAPI) -> TestClient:
    """Provide FastAPI TestClient for route testing."""
    return TestClient(app)


@pytest.fixture
def upload_files() -> Callable[..., list[tuple[str, tuple[str, bytes, str]]]]:
    """Build the multipart ``files`` argument for TestClient.post."""

    def _build(*paths: Path, content_type: str = "image/jpeg") -> list[tuple[str, tuple[str, bytes, str]]]:
        return [("images", (p.name, p.read_bytes(), content_type)) for p in paths]

    return _build
