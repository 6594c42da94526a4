"""Pillow-backed decode, resize and encode of a single image."""

from pathlib import Path

from PIL import Image

from ....common.schemas import ImageMetadata, ResizePlan
from .resize_plan import resolve_dimensions


def read_metadata(input_path: str | Path) -> ImageMetadata:
    """
    Read the intrinsic dimensions of an image without decoding pixels.

    Raises:
        FileNotFoundError: If input file does not exist
        PIL.UnidentifiedImageError: If the file is not a readable image
    """
    with Image.open(input_path) as img:
        width, height = img.size
    return ImageMetadata(original_width=width, original_height=height)


def image_convert(
    *,
    input_path: str | Path,
    output_path: str | Path,
    plan: ResizePlan,
    format: str = "webp",
    quality: int = 80,
    metadata: ImageMetadata | None = None,
) -> str:
    """
    Resize (when the plan asks for it) and re-encode a single image.

    Framework-agnostic, single-image operation.

    Args:
        input_path: Path to input image
        output_path: Path to output image
        plan: Target dimensions; an empty plan keeps the source size
        format: Target image format (webp, jpeg, png)
        quality: Encoder quality (webp/jpeg)
        metadata: Source dimensions, read from the file when omitted

    Returns:
        Output file path as string

    Raises:
        FileNotFoundError: If input file or output directory does not exist
        OSError: If Pillow fails to read/write image
    """
    input_path = Path(input_path)
    output_path = Path(output_path)

    if not output_path.parent.exists():
        raise FileNotFoundError(f"Output directory does not exist: {output_path.parent}")

    with Image.open(input_path) as img:
        if metadata is None:
            metadata = ImageMetadata(original_width=img.width, original_height=img.height)

        fmt = format.lower()
        img = _normalize_mode(img, fmt)

        size = resolve_dimensions(metadata, plan)
        if size is not None:
            img = img.resize(size, Image.Resampling.LANCZOS)

        img.save(output_path, format=get_pil_format(fmt), **_save_kwargs(fmt, quality))

    return str(output_path)


def _normalize_mode(img: Image.Image, fmt: str) -> Image.Image:
    has_alpha = img.mode in ("RGBA", "LA", "PA") or (
        img.mode == "P" and "transparency" in img.info
    )

    # JPEG does not support alpha channel
    if fmt in ("jpg", "jpeg"):
        return img if img.mode in ("RGB", "L") else img.convert("RGB")

    if fmt == "webp" and img.mode not in ("RGB", "RGBA"):
        return img.convert("RGBA" if has_alpha else "RGB")

    if fmt == "png" and img.mode == "CMYK":
        return img.convert("RGB")

    return img


def _save_kwargs(fmt: str, quality: int) -> dict[str, object]:
    save_kwargs: dict[str, object] = {}

    if fmt in ("jpg", "jpeg", "webp"):
        save_kwargs["quality"] = quality

    if fmt == "png":
        save_kwargs["optimize"] = True

    return save_kwargs


def get_pil_format(format_str: str) -> str:
    """Convert format string to PIL format name."""
    format_map = {
        "jpg": "JPEG",
        "jpeg": "JPEG",
        "png": "PNG",
        "webp": "WEBP",
    }
    return format_map.get(format_str.lower(), format_str.upper())
