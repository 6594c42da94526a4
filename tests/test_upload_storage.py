"""Tests for local upload/output storage."""

import io
import re
from pathlib import Path

from webp_converter.common.upload_storage import UploadStorage, generate_name


class FakeUpload:
    """Async file-like stand-in for UploadFile."""

    def __init__(self, data: bytes) -> None:
        self._buffer = io.BytesIO(data)

    async def read(self, size: int = -1, /) -> bytes:
        return self._buffer.read(size)


def test_generate_name_format():
    name = generate_name(".webp")

    assert re.fullmatch(r"\d{13,}-[0-9a-f]{12}\.webp", name)


def test_generate_name_unique():
    names = {generate_name("webp") for _ in range(1000)}

    assert len(names) == 1000


def test_generate_name_without_extension():
    assert "." not in generate_name("")


def test_storage_creates_directories(tmp_path: Path):
    storage = UploadStorage(tmp_path / "a" / "uploads", tmp_path / "b" / "images")

    assert storage.upload_dir.is_dir()
    assert storage.output_dir.is_dir()


async def test_save_upload_streams_bytes(storage: UploadStorage):
    data = b"x" * (3 * 1024 * 1024 + 17)

    path = await storage.save_upload(FakeUpload(data), "photo.JPG")

    assert path.parent == storage.upload_dir
    assert path.suffix == ".jpg"
    assert path.read_bytes() == data


async def test_save_upload_without_filename(storage: UploadStorage):
    path = await storage.save_upload(FakeUpload(b"abc"))

    assert path.read_bytes() == b"abc"
    assert path.suffix == ""


def test_allocate_output(storage: UploadStorage):
    first = storage.allocate_output("webp")
    second = storage.allocate_output("webp")

    assert first.parent == storage.output_dir
    assert first.suffix == ".webp"
    assert first != second
    assert not first.exists()


def test_discard(storage: UploadStorage):
    kept = storage.output_dir / "kept.webp"
    gone = storage.output_dir / "gone.webp"
    kept.write_bytes(b"1")
    gone.write_bytes(b"2")

    removed = storage.discard([gone, storage.output_dir / "never-existed.webp"])

    assert removed == 1
    assert kept.exists()
    assert not gone.exists()
