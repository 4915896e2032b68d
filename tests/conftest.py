"""Test configuration for the gallery server."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

PNG_HEADER = b"\x89PNG\r\n\x1a\n"


def _write(path: Path, payload: bytes) -> Path:
    path.write_bytes(payload)
    return path


@pytest.fixture
def make_image_dir(tmp_path):
    """Create a directory holding the given files; image names get PNG-ish bytes."""

    def factory(*names: str, subdir: str = "images") -> Path:
        folder = tmp_path / subdir
        folder.mkdir()
        for index, name in enumerate(names):
            _write(folder / name, PNG_HEADER + f"image-{index}-{name}".encode())
        return folder

    return factory
