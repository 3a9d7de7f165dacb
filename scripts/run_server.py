#!/usr/bin/env python3
"""
Start the People API with uvicorn.

Uso:
  python scripts/run_server.py [--host 0.0.0.0] [--port 8080] [--db-file db.json] [--reload]
"""
from __future__ import annotations

import argparse
import os

import uvicorn

from people_api.core.config import get_settings
from people_api.core.observability import setup_logging


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    parser = argparse.ArgumentParser(description="Serve the People API.")
    parser.add_argument("--host", default=settings.host, help=f"Listen host (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Listen port (default: {settings.port})")
    parser.add_argument("--db-file", help="Backing JSON file (overrides PEOPLE_DB_FILE)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (dev only)")
    args = parser.parse_args(argv)

    if args.port <= 0 or args.port > 65535:
        parser.error("Port must be between 1 and 65535.")
    if args.db_file:
        # create_app reads PEOPLE_DB_FILE, reload workers included
        os.environ["PEOPLE_DB_FILE"] = args.db_file
        get_settings.cache_clear()

    uvicorn.run(
        "people_api.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
