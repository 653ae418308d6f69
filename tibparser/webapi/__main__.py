"""Command line entrypoint for running the FastAPI application with uvicorn."""

from __future__ import annotations

import argparse
from typing import Sequence

import uvicorn

from ..config import Config
from .application import create_app


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser for the web API runner."""

    defaults = Config.from_env().server
    parser = argparse.ArgumentParser(
        description="Run the Tibetan phrase parser API with uvicorn",
    )
    parser.add_argument(
        "--host",
        default=defaults.host,
        help="Hostname or IP address for the uvicorn server (default: %(default)s)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=defaults.port,
        help="TCP port for the uvicorn server (default: %(default)s)",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload; useful during local development.",
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["critical", "error", "warning", "info", "debug", "trace"],
        help="Log level passed to uvicorn (default: %(default)s)",
    )
    return parser


def run_server(
    host: str,
    port: int,
    reload: bool = False,
    log_level: str = "info",
    config: Config | None = None,
) -> None:
    """Launch uvicorn.

    With ``reload`` the application is rebuilt by uvicorn from the import
    string, so only the configuration named by ``TIBPARSER_CONFIG`` applies.
    """

    if reload or config is None:
        app = "tibparser.webapi.application:create_app"
    else:
        app = create_app(config)
    uvicorn.run(
        app,
        factory=isinstance(app, str),
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments and launch the uvicorn server."""

    args = build_parser().parse_args(argv)
    run_server(args.host, args.port, reload=args.reload, log_level=args.log_level)


if __name__ == "__main__":
    main()
