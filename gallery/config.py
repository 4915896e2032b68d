import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

DEFAULT_PORT = 8000
DEFAULT_MAX_IMAGES = 4


def _env_int(name, default):
    """Read an integer env var, falling back to default if unset or invalid."""
    value = os.getenv(name, "").strip()
    try:
        return int(value) if value else default
    except ValueError:
        return default


def _env_log_level(name, default):
    """Read a logging level name, falling back to default if unknown."""
    level = os.getenv(name, "").strip().upper()
    return level if isinstance(logging.getLevelName(level), int) else default


@dataclass(frozen=True)
class ServerConfig:
    image_dir: Path = Path("images")
    max_images: int = DEFAULT_MAX_IMAGES
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    template_path: Optional[Path] = None
    log_level: str = "INFO"
    secret_key: str = "change-me-in-production"

    @classmethod
    def from_env(cls):
        template_path = os.getenv("TEMPLATE_PATH", "")
        return cls(
            image_dir=Path(os.getenv("IMAGE_DIR", "images")),
            max_images=max(_env_int("MAX_IMAGES", DEFAULT_MAX_IMAGES), 0),
            host=os.getenv("HOST", "0.0.0.0"),
            port=_env_int("PORT", DEFAULT_PORT),
            template_path=Path(template_path) if template_path else None,
            log_level=_env_log_level("LOG_LEVEL", "INFO"),
            secret_key=os.getenv("SECRET_KEY", "change-me-in-production"),
        )

    def with_overrides(self, **overrides):
        """Return a copy with the non-None overrides applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
