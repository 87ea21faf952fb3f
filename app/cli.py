"""
CLI entry point for the API server.

Usage:
    # Serve on the configured port (PORT, default 3000)
    python -m app serve

    # Serve on another port with auto-reload
    python -m app serve --port 8080 --reload
"""

import argparse
import logging
from typing import Sequence

from app.core.config import get_settings

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the API under uvicorn."""
    import uvicorn

    logger.info("Starting API at http://%s:%d", args.host, args.port)
    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=args.reload)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description=f"{settings.project_name} CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=DEFAULT_HOST)
    serve_parser.add_argument("--port", type=int, default=settings.port)
    serve_parser.add_argument(
        "--reload", action="store_true", help="Restart on code changes"
    )
    serve_parser.set_defaults(func=cmd_serve)
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
