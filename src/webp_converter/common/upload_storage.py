from __future__ import annotations

import time
from collections.abc import Iterable
from os import PathLike
from pathlib import Path
from typing import Final, Protocol
from uuid import uuid4

import aiofiles
from loguru import logger


class AsyncFileLike(Protocol):
    """Minimal async file-like interface (UploadFile, aiofiles, ...)."""

    async def read(self, size: int = -1, /) -> bytes: ...


def generate_name(ext: str) -> str:
    """Collision-resistant file name: epoch millis plus a random suffix."""
    ext = ext.lstrip(".").lower()
    stem = f"{int(time.time() * 1000)}-{uuid4().hex[:12]}"
    return f"{stem}.{ext}" if ext else stem


class UploadStorage:
    """
    Local filesystem storage for received uploads and produced outputs.

    Layout:
        upload_dir/
            <generated>.<original ext>
        output_dir/
            <generated>.<output ext>     (served under /images)
    """

    _CHUNK_SIZE: Final[int] = 1024 * 1024  # 1 MB

    def __init__(self, upload_dir: str | PathLike[str], output_dir: str | PathLike[str]):
        self._upload_dir: Path = Path(upload_dir).expanduser().resolve()
        self._output_dir: Path = Path(output_dir).expanduser().resolve()
        self._upload_dir.mkdir(parents=True, exist_ok=True)
        self._output_dir.mkdir(parents=True, exist_ok=True)

    @property
    def upload_dir(self) -> Path:
        return self._upload_dir

    @property
    def output_dir(self) -> Path:
        return self._output_dir

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    async def save_upload(self, file: AsyncFileLike, filename: str | None = None) -> Path:
        """Stream an uploaded file into the upload directory."""
        dst = self._upload_dir / generate_name(Path(filename or "").suffix)

        async with aiofiles.open(dst, "wb") as f:
            while True:
                chunk = await file.read(self._CHUNK_SIZE)
                if not chunk:
                    break
                _ = await f.write(chunk)

        return dst

    def allocate_output(self, ext: str) -> Path:
        """Reserve a fresh path in the output directory.

        Intended for libraries that require filenames (PIL).
        """
        return self._output_dir / generate_name(ext)

    # ------------------------------------------------------------------
    # Cleanup
    # ------------------------------------------------------------------

    def discard(self, paths: Iterable[str | PathLike[str]]) -> int:
        """Delete files, skipping ones that are already gone.

        Returns:
            Number of files removed.
        """
        removed = 0
        for path in paths:
            try:
                Path(path).unlink()
                removed += 1
            except FileNotFoundError:
                continue
            except OSError as e:
                logger.warning(f"Could not remove {path}: {e}")
        return removed
