import logging
from flask import Blueprint, current_app, render_template

from gallery.services.image_service import DirectoryUnreadable
from gallery.utils.helpers import data_uri, format_size, hostname

logger = logging.getLogger(__name__)

gallery_bp = Blueprint(
    "gallery", __name__,
    template_folder="templates",
)

PAGE_TITLE = "Image server"

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


def _pipeline():
    return current_app.extensions["image_pipeline"]


@gallery_bp.route("/")
def index():
    pipeline = _pipeline()
    logger.info("Processing index request (max_images=%d)", pipeline.max_images)

    try:
        result = pipeline.load()
    except DirectoryUnreadable as e:
        logger.error("Failed to load images: %s", e)
        html = render_template("error.html", title=PAGE_TITLE, message=str(e))
        return html, 500, NO_CACHE_HEADERS

    if result.skipped:
        logger.warning("Skipped %d unreadable image(s)", len(result.skipped))
    logger.info("Serving %d image(s): %s", len(result.images), result.names)

    html = render_template(
        current_app.config["INDEX_TEMPLATE"],
        title=PAGE_TITLE,
        host=hostname(),
        images=result.images,
        data_uri=data_uri,
        format_size=format_size,
    )
    return html, 200, NO_CACHE_HEADERS


@gallery_bp.route("/healthz")
def healthz():
    return {"status": "ok"}
