"""
Command-line entry point for the User Records API server.

Starts the FastAPI application under Uvicorn.  Host, port and database
location default to the values in ``core.config`` (``HOST``, ``PORT``
and ``DATABASE_URL`` environment variables) and can be overridden on
the command line.  Installed as the ``user-records-api`` script.

Uvicorn is started with ``log_config=None`` so its loggers keep the
routing set up by ``core.logging_config``.
"""

import argparse
import asyncio
import logging

from uvicorn import Config, Server

from .core.config import settings
from .main import create_app

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Run the User Records API server.")
    ap.add_argument("--host", default=settings.host, help="Interface to bind (default: %(default)s)")
    ap.add_argument("--port", type=int, default=settings.port, help="Port to listen on (default: %(default)s)")
    ap.add_argument("--db", default=None, help="SQLite database file (default: DATABASE_URL or users.db)")
    return ap.parse_args(argv)


def build_server(args: argparse.Namespace) -> Server:
    """Create the Uvicorn server for the parsed command line."""
    app = create_app(args.db)
    config = Config(
        app=app,
        host=args.host,
        port=args.port,
        reload=False,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    return Server(config)


async def serve(argv=None) -> None:
    args = parse_args(argv)
    server = build_server(args)
    logger.info("Starting server at %s:%s", args.host, args.port)
    await server.serve()


def main(argv=None) -> None:
    try:
        asyncio.run(serve(argv))
    except (KeyboardInterrupt, SystemExit):
        pass
