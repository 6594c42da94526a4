from enum import StrEnum


class MediaType(StrEnum):
    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    FILE = "file"

    @classmethod
    def from_mime(cls, file_type: str | None) -> "MediaType":
        file_type = (file_type or "").strip().lower()
        if file_type.startswith("image/"):
            return MediaType.IMAGE
        elif file_type.startswith("video/"):
            return MediaType.VIDEO
        elif file_type.startswith("audio/"):
            return MediaType.AUDIO
        elif file_type.startswith("text/"):
            return MediaType.TEXT
        else:
            return MediaType.FILE


def is_image_upload(content_type: str | None) -> bool:
    """True when a declared upload content type is an image MIME type."""
    return MediaType.from_mime(content_type) == MediaType.IMAGE
