#!/usr/bin/env python3
"""
bookserver CLI

Usage:
    bookserver start                 Start the API server on 127.0.0.1:8080
    bookserver start --port 9000     Start on another port
    bookserver start --host 0.0.0.0  Listen on all interfaces
"""

import argparse
import logging
import sys

from . import __version__
from .config import load_settings, normalize_log_level
from .errors import ConfigError

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, normalize_log_level(level)),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def cmd_start(args: argparse.Namespace) -> int:
    import uvicorn

    from .main import create_app

    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    overrides = {}
    if args.host:
        overrides["host"] = args.host
    if args.port:
        overrides["port"] = args.port
    if args.log_level:
        overrides["log_level"] = normalize_log_level(args.log_level)
    if overrides:
        settings = settings.model_copy(update=overrides)

    configure_logging(settings.log_level)
    logger.info("Starting book server on %s:%s", settings.host, settings.port)

    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bookserver",
        description="A RESTful API server to store and show book information",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command")

    start = subparsers.add_parser("start", help="Start the server on a port")
    start.add_argument("-p", "--port", type=int, default=None, help="Port to listen on (default: 8080)")
    start.add_argument("--host", default=None, help="Address to bind (default: 127.0.0.1)")
    start.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    start.set_defaults(func=cmd_start)

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "func", None):
        parser.print_help()
        return 1
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
