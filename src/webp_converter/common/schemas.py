"""Pydantic models shared by the conversion pipeline and its routes."""

from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

# ─────────────────────────────────────────────────────────────
# Request parameters
# ─────────────────────────────────────────────────────────────


class ConversionParams(BaseModel):
    """Validated query parameters of an upload request."""

    width: int | None = Field(default=None, ge=1, description="Requested width in pixels")
    height: int | None = Field(default=None, ge=1, description="Requested height in pixels")
    quality: int = Field(default=80, ge=1, le=100, description="Output quality (1-100)")
    maintain_aspect_ratio: bool = Field(default=False, description="Fit inside width x height")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")


class ConversionRequest(BaseModel):
    """A batch of source images plus the parameters to apply to each."""

    images: list[Path] = Field(..., description="Source image paths, in request order")
    params: ConversionParams

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)


# ─────────────────────────────────────────────────────────────
# Per-image geometry
# ─────────────────────────────────────────────────────────────


class ImageMetadata(BaseModel):
    """Intrinsic dimensions of a source image."""

    original_width: int = Field(..., gt=0)
    original_height: int = Field(..., gt=0)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @property
    def aspect_ratio(self) -> float:
        return self.original_width / self.original_height


class ResizePlan(BaseModel):
    """Target dimensions for one image. Unset means "derive from the other"."""

    target_width: int | None = Field(default=None, gt=0)
    target_height: int | None = Field(default=None, gt=0)

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    @property
    def is_empty(self) -> bool:
        return self.target_width is None and self.target_height is None


# ─────────────────────────────────────────────────────────────
# Responses
# ─────────────────────────────────────────────────────────────


class ConversionResult(BaseModel):
    """Successful batch: one URL per source image, in input order."""

    urls: list[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str
