"""
Task List CLI
=============
Entry point for running the to-do server.

Usage:
    # Start on the default port (3000)
    python -m tasklist start

    # Pick host/port and open a browser tab
    python -m tasklist start --host 0.0.0.0 --port 8080 --open-browser

    # Verbose logging
    python -m tasklist start --log-level debug
"""

from __future__ import annotations

import argparse
import logging
import sys

from tasklist import __version__
from tasklist.config import LOG_LEVELS, ServerConfig


LOG_FORMAT = "%(asctime)s %(levelname)s:%(name)s: %(message)s"


def configure_logging(level: str = "info") -> None:
    """Install one stream handler on the package logger."""
    logger = logging.getLogger("tasklist")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level.upper())


# ─────────────────────────────────────────────────────────────
#  Commands
# ─────────────────────────────────────────────────────────────

def cmd_start(args, config: ServerConfig) -> int:
    """Launch the web server."""
    try:
        import uvicorn  # noqa: F401
    except ImportError:
        print("✘ uvicorn is required to serve the task list.")
        print("  Install it with:  pip install uvicorn fastapi")
        return 1

    configure_logging(config.log_level)

    from tasklist.server import run_server
    run_server(config)
    return 0


# ─────────────────────────────────────────────────────────────
#  Main
# ─────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tasklist",
        description="Task List: single-page to-do manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  tasklist start\n"
            "  tasklist start --port 8080 --open-browser\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    p_start = subparsers.add_parser("start", help="Serve the task list page")
    p_start.add_argument("--host", default=None, help="Bind address (default: 127.0.0.1)")
    p_start.add_argument("--port", default=None, type=int, help="Port number (default: 3000)")
    p_start.add_argument("--log-level", default=None, choices=LOG_LEVELS, help="Log level (default: info)")
    p_start.add_argument("--open-browser", action="store_true", help="Open a browser tab on start")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    commands = {
        "start": cmd_start,
    }

    if args.command not in commands:
        parser.print_help()
        return 0

    try:
        config = ServerConfig.from_env().override(
            host=getattr(args, "host", None),
            port=getattr(args, "port", None),
            log_level=getattr(args, "log_level", None),
            open_browser=True if getattr(args, "open_browser", False) else None,
        )
    except ValueError as e:
        parser.error(str(e))

    return commands[args.command](args, config)


if __name__ == "__main__":
    sys.exit(main())
