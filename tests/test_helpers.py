from gallery.services.image_service import ImageEntry
from gallery.utils.helpers import data_uri, format_size, mime_type


def test_mime_type_by_extension():
    assert mime_type("a.png") == "image/png"
    assert mime_type("a.JPG") == "image/jpeg"
    assert mime_type("a.jpeg") == "image/jpeg"
    assert mime_type("a.bin") == "application/octet-stream"


def test_data_uri():
    entry = ImageEntry(name="cat.png", data="aGVsbG8=")

    assert data_uri(entry) == "data:image/png;base64,aGVsbG8="


def test_format_size():
    assert format_size(512) == "512 B"
    assert format_size(2048) == "2.0 KB"
    assert format_size(3 * 1024 * 1024) == "3.0 MB"
