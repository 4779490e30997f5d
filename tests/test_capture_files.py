"""Tests for image file intake."""

import base64

from parking_signs.capture.files import (
    detect_mime_type,
    load_data_url,
    select_image_files,
    to_data_url,
)
from tests.conftest import JPEG_BYTES, PNG_BYTES


def test_select_image_files_drops_non_images(tmp_path) -> None:
    photo = tmp_path / "sign.jpg"
    photo.write_bytes(JPEG_BYTES)
    notes = tmp_path / "notes.txt"
    notes.write_text("not an image")
    missing = tmp_path / "missing.png"

    selected = select_image_files([photo, notes, missing])

    assert selected == [photo]


def test_select_image_files_sniffs_unknown_extensions(tmp_path) -> None:
    raw = tmp_path / "capture"
    raw.write_bytes(PNG_BYTES)
    blob = tmp_path / "blob"
    blob.write_bytes(b"plain bytes here")

    assert select_image_files([raw, blob]) == [raw]


def test_to_data_url_uses_png_header() -> None:
    url = to_data_url(PNG_BYTES)

    assert url.startswith("data:image/png;base64,")
    assert base64.b64decode(url.split(",", 1)[1]) == PNG_BYTES


def test_to_data_url_defaults_to_jpeg() -> None:
    assert to_data_url(b"unknown").startswith("data:image/jpeg;base64,")


def test_detect_mime_type_signatures() -> None:
    assert detect_mime_type(b"GIF89a....") == "image/gif"
    assert detect_mime_type(b"RIFF\x00\x00\x00\x00WEBPVP8 ") == "image/webp"
    assert detect_mime_type(b"\x00\x00\x00\x18ftypheic") == "image/heic"
    assert detect_mime_type(b"hello") is None


def test_load_data_url_reads_file(tmp_path) -> None:
    photo = tmp_path / "sign.png"
    photo.write_bytes(PNG_BYTES)

    assert load_data_url(photo).startswith("data:image/png;base64,")
