import base64
import logging
import os
import random
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg"}


class ImageServiceError(Exception):
    pass


class DirectoryUnreadable(ImageServiceError):
    """The image directory is missing or cannot be listed."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot read image directory '{self.path}': {reason}")


class FileReadFailure(ImageServiceError):
    """A selected image could not be opened or read."""

    def __init__(self, name, reason):
        self.name = name
        self.reason = reason
        super().__init__(f"Cannot read image '{name}': {reason}")


@dataclass(frozen=True)
class ImageEntry:
    name: str
    data: str

    @property
    def size(self):
        """Byte size of the decoded content."""
        return len(self.data) * 3 // 4 - self.data[-2:].count("=")


@dataclass(frozen=True)
class SkippedFile:
    name: str
    reason: str


@dataclass
class LoadResult:
    images: list = field(default_factory=list)
    skipped: list = field(default_factory=list)

    @property
    def names(self):
        return [img.name for img in self.images]


def is_image_file(name):
    """Check the extension against the supported set, ignoring case."""
    return "." in name and "." + name.rsplit(".", 1)[1].lower() in IMAGE_EXTENSIONS


def scan_images(folder):
    """Return names of the regular image files in folder, in listing order.

    Raises DirectoryUnreadable if the folder does not exist or cannot be listed.
    """
    names = []
    try:
        with os.scandir(folder) as it:
            for entry in it:
                if not entry.is_file():
                    continue
                if is_image_file(entry.name):
                    names.append(entry.name)
    except OSError as e:
        raise DirectoryUnreadable(folder, e.strerror or str(e)) from e
    return names


def sample_images(files, count, rng=None):
    """Pick at most count names without replacement, in random order."""
    rng = rng or random.Random()
    shuffled = list(files)
    rng.shuffle(shuffled)
    return shuffled[:max(count, 0)]


def encode_image(path):
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise FileReadFailure(Path(path).name, e.strerror or str(e)) from e
    return base64.b64encode(raw).decode("ascii")


class ImagePipeline:
    """Scan, sample and encode images from a directory on every call.

    Nothing is cached between calls so that files added or removed while the
    server runs show up on the next request. The random source is shared by
    all requests; pass a seeded ``random.Random`` for reproducible output.
    """

    def __init__(self, image_dir, max_images=4, rng=None):
        self.image_dir = Path(image_dir)
        self.max_images = max_images
        self.rng = rng or random.Random()

    def scan(self):
        return scan_images(self.image_dir)

    def load(self, count=None):
        """Return a LoadResult with up to count images (default max_images).

        DirectoryUnreadable propagates. Files that fail to read are recorded
        in ``skipped`` and left out of ``images``.
        """
        if count is None:
            count = self.max_images

        selected = sample_images(self.scan(), count, self.rng)
        logger.debug("Selected %d image(s) from %s: %s", len(selected), self.image_dir, selected)

        result = LoadResult()
        for name in selected:
            try:
                data = encode_image(self.image_dir / name)
            except FileReadFailure as e:
                logger.warning("Skipping %s: %s", name, e.reason)
                result.skipped.append(SkippedFile(name=name, reason=e.reason))
                continue
            result.images.append(ImageEntry(name=name, data=data))
        return result


def load_random_images(folder, n, rng=None):
    """Convenience wrapper returning only the encoded images."""
    return ImagePipeline(folder, n, rng).load().images
