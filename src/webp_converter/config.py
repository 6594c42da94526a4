"""Service configuration loaded from the environment or a ``.env`` file."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import ClassVar, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

OutputFormat = Literal["webp", "jpeg", "png"]


class Settings(BaseSettings):
    """Runtime settings, built once at startup and passed to ``create_app``.

    Every field can be overridden with a ``WEBP_CONVERTER_<FIELD>``
    environment variable.
    """

    # Storage
    upload_dir: Path = Field(Path("uploads"), description="Temporary location for received files")
    output_dir: Path = Field(
        Path("public/images"), description="Directory served under /images"
    )
    keep_uploads: bool = Field(False, description="Keep received files after the request")

    # Public URLs
    public_base_url: str | None = Field(
        None,
        description="Prefix for result URLs, e.g. https://cdn.example.com. "
        "Defaults to the base URL of the incoming request.",
    )

    # Server
    host: str = Field("0.0.0.0", description="Bind address")
    port: int = Field(3000, ge=1, le=65535, description="Bind port")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Conversion limits
    max_files: int = Field(20, ge=1, description="Maximum images per batch")
    max_dimension: int = Field(5000, ge=1, description="Upper bound for width/height")
    default_quality: int = Field(80, ge=1, le=100, description="Quality used when omitted")
    output_format: OutputFormat = Field("webp", description="Encoding of produced files")

    # Logging
    log_level: str = Field("INFO", description="loguru sink level")

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_prefix="WEBP_CONVERTER_",
        env_file=".env",
        case_sensitive=False,
    )

    @property
    def output_extension(self) -> str:
        return "jpg" if self.output_format == "jpeg" else self.output_format


@lru_cache()
def get_settings() -> Settings:  # pragma: no cover
    """Return a cached Settings instance for the CLI entrypoint."""

    return Settings()
