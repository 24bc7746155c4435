"""
Serve the catalog API with uvicorn.

Usage:
    python -m catalog_api --host 0.0.0.0 --port 8000
    python -m catalog_api --reload
"""

import argparse
import logging
from typing import Optional, Sequence

import uvicorn

from catalog_api.core.config import settings
from catalog_api.shared.logging import configure_logging

logger = logging.getLogger(__name__)

APP_PATH = "catalog_api.main:app"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Catalog API server")
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on")
    parser.add_argument(
        "--reload", action="store_true", help="Restart on code changes (development)"
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    configure_logging(level=settings.log_level)
    logger.info("Starting catalog API at http://%s:%d", args.host, args.port)
    uvicorn.run(APP_PATH, host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
