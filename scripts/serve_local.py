#!/usr/bin/env python3
"""Serve the Lambda handlers over HTTP for local development.

Runs the FastAPI app from ``handlers.local_app`` under uvicorn on PORT
(default 3333). Requires the ``local`` extra.

Usage:
    python scripts/serve_local.py [--reload]
"""

import argparse
import logging
import sys
from pathlib import Path

import uvicorn

# Add src to path for core/handlers imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.config import get_config


def main():
    parser = argparse.ArgumentParser(description="Serve the plann.er API locally")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--reload", action="store_true", help="Restart on source changes")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    config = get_config()
    uvicorn.run(
        "handlers.local_app:create_app",
        factory=True,
        host=args.host,
        port=config.port,
        reload=args.reload,
        app_dir=str(Path(__file__).parent.parent / "src"),
    )


if __name__ == "__main__":
    main()
