"""Image file intake and data URL encoding."""

import base64
import mimetypes
from pathlib import Path

_SNIFF_BYTES = 16


def select_image_files(paths: list[Path]) -> list[Path]:
    """Keep only readable files whose media type is an image type."""
    return [path for path in paths if path.is_file() and _is_image(path)]


def load_data_url(path: Path) -> str:
    """Read an image file and return it as a base64 data URL."""
    return to_data_url(path.read_bytes())


def to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = detect_mime_type(image_bytes) or "image/jpeg"
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def detect_mime_type(image_bytes: bytes) -> str | None:
    """Infer an image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    if image_bytes[:6] in {b"GIF87a", b"GIF89a"}:
        return "image/gif"
    if image_bytes[4:8] == b"ftyp" and image_bytes[8:12] in {b"heic", b"heix"}:
        return "image/heic"
    return None


def _is_image(path: Path) -> bool:
    guessed, _ = mimetypes.guess_type(path.name)
    if guessed is not None:
        return guessed.startswith("image/")
    with path.open("rb") as handle:
        return detect_mime_type(handle.read(_SNIFF_BYTES)) is not None
