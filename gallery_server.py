#!/usr/bin/env python3
"""Random image gallery server. Settings come from .env; see gallery/config.py.

Usage:
  python gallery_server.py            # port from PORT, default 8000
  python gallery_server.py 9000 --image-dir ./photos --max-images 8
"""

import argparse
import logging
import sys
from pathlib import Path

from flask import Flask
from jinja2 import ChoiceLoader, FileSystemLoader

from gallery.config import ServerConfig
from gallery.public.routes import gallery_bp
from gallery.services.image_service import DirectoryUnreadable, ImagePipeline

logger = logging.getLogger("gallery")


def create_app(config=None, pipeline=None):
    config = config or ServerConfig.from_env()
    pipeline = pipeline or ImagePipeline(config.image_dir, config.max_images)

    app = Flask(__name__)
    app.secret_key = config.secret_key
    app.config["INDEX_TEMPLATE"] = "index.html"
    app.extensions["image_pipeline"] = pipeline

    if config.template_path:
        loaders = [FileSystemLoader(str(config.template_path.parent)), app.jinja_loader]
        app.jinja_loader = ChoiceLoader([loader for loader in loaders if loader is not None])
        app.config["INDEX_TEMPLATE"] = config.template_path.name

    app.register_blueprint(gallery_bp)
    return app


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Serve a random selection of images as a web page.")
    parser.add_argument("port", nargs="?", type=int, help="port to listen on (overrides PORT)")
    parser.add_argument("--host", help="address to bind (overrides HOST)")
    parser.add_argument("--image-dir", help="directory to read images from (overrides IMAGE_DIR)")
    parser.add_argument("--max-images", type=int, help="images per page (overrides MAX_IMAGES)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    config = ServerConfig.from_env().with_overrides(
        port=args.port,
        host=args.host,
        image_dir=Path(args.image_dir) if args.image_dir else None,
        max_images=args.max_images,
    )
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pipeline = ImagePipeline(config.image_dir, config.max_images)
    try:
        found = pipeline.scan()
    except DirectoryUnreadable as e:
        logger.error("%s", e)
        return 1
    logger.info("Found %d image(s) in %s", len(found), config.image_dir)

    app = create_app(config, pipeline)
    logger.info("Listening on http://%s:%d", config.host, config.port)
    app.run(host=config.host, port=config.port, debug=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
