"""Typed parsing of raw upload query parameters."""

import re
from collections.abc import Sequence
from functools import lru_cache
from typing import Annotated

from pydantic import Field, TypeAdapter

from ...common.errors import InvalidParameters, NoFiles, TooManyFiles
from ...common.schemas import ConversionParams
from ...config import Settings

MAX_FILES: int = Settings.model_fields["max_files"].default
MAX_DIMENSION: int = Settings.model_fields["max_dimension"].default
DEFAULT_QUALITY: int = Settings.model_fields["default_quality"].default

# Plain decimal digits only; pydantic's lax int parsing also accepts "1.0" and "1_000"
_INTEGER = re.compile(r"-?[0-9]+")


@lru_cache(maxsize=None)
def _bounded_int(low: int, high: int) -> TypeAdapter[int]:
    return TypeAdapter(Annotated[int, Field(ge=low, le=high)])


def _parse_int(raw: str | None, *, low: int, high: int) -> int | None:
    """Parse an optional base-10 integer within [low, high].

    Empty or missing values yield None; anything else that is not an
    integer in range raises InvalidParameters.
    """
    if raw is None or raw.strip() == "":
        return None

    raw = raw.strip()
    if not _INTEGER.fullmatch(raw):
        raise InvalidParameters()

    # ValidationError subclasses ValueError; oversized digit strings raise either
    try:
        return _bounded_int(low, high).validate_python(raw)
    except ValueError as exc:
        raise InvalidParameters() from exc


def parse_conversion_params(
    width: str | None = None,
    height: str | None = None,
    quality: str | None = None,
    maintain_aspect_ratio: str | None = None,
    *,
    max_dimension: int = MAX_DIMENSION,
    default_quality: int = DEFAULT_QUALITY,
) -> ConversionParams:
    """
    Validate the raw query strings of an upload request.

    Args:
        width: Requested width, 1..max_dimension, optional
        height: Requested height, 1..max_dimension, optional
        quality: Encoder quality, 1..100, default_quality when absent
        maintain_aspect_ratio: Exactly "true" enables aspect-ratio fitting
        max_dimension: Upper bound for width and height
        default_quality: Quality applied when none is given

    Returns:
        Validated ConversionParams

    Raises:
        InvalidParameters: If any value is non-numeric or out of range
    """
    parsed_quality = _parse_int(quality, low=1, high=100)

    return ConversionParams(
        width=_parse_int(width, low=1, high=max_dimension),
        height=_parse_int(height, low=1, high=max_dimension),
        quality=default_quality if parsed_quality is None else parsed_quality,
        maintain_aspect_ratio=maintain_aspect_ratio == "true",
    )


def validate_batch_size(images: Sequence[object] | None, max_files: int = MAX_FILES) -> None:
    """
    Raises:
        NoFiles: If no images were provided
        TooManyFiles: If more than ``max_files`` images were provided
    """
    if not images:
        raise NoFiles()
    if len(images) > max_files:
        raise TooManyFiles(max_files)
