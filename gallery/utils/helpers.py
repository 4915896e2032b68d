import os
import socket

MIME_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
}


def hostname():
    try:
        return socket.gethostname()
    except OSError:
        return ""


def mime_type(filename):
    """Guess the image MIME type from the file extension."""
    ext = os.path.splitext(filename)[1].lower()
    return MIME_TYPES.get(ext, "application/octet-stream")


def data_uri(image):
    """Build a data: URI for an ImageEntry, for use in an <img src>."""
    return f"data:{mime_type(image.name)};base64,{image.data}"


def format_size(num_bytes):
    """Format a byte count for display."""
    for unit in ("B", "KB", "MB"):
        if num_bytes < 1024:
            return f"{num_bytes:.0f} {unit}" if unit == "B" else f"{num_bytes:.1f} {unit}"
        num_bytes /= 1024
    return f"{num_bytes:.1f} GB"
