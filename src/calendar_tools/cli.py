from __future__ import annotations

import argparse
import logging
import sys

from .auth import CredentialsNotFoundError, InvalidCredentialsError, load_credentials
from .bootstrap import configure_logging
from .config import get_settings
from .services.http import run_local_server
from .services.mcp import run_mcp_server


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings().server
    parser = argparse.ArgumentParser(description="Calendar tools command line interface.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    api_parser = subparsers.add_parser("api", help="Start the FastAPI server exposing the calendar tools.")
    api_parser.add_argument("--host", default=settings.host)
    api_parser.add_argument("--port", type=int, default=settings.api_port)

    mcp_parser = subparsers.add_parser("mcp", help="Start the MCP server.")
    mcp_parser.add_argument("--transport", choices=("http", "stdio"), default="http")
    mcp_parser.add_argument("--host", default=settings.host)
    mcp_parser.add_argument("--port", type=int, default=settings.mcp_port)

    subparsers.add_parser("check-credentials", help="Validate the configured OAuth client credentials.")

    return parser


def check_credentials() -> int:
    try:
        credentials = load_credentials(get_settings().oauth)
    except (CredentialsNotFoundError, InvalidCredentialsError) as exc:
        logging.getLogger(__name__).error("%s", exc)
        return 1
    print(f"OAuth client credentials OK (client_id={credentials.client_id})")
    return 0


def main() -> None:
    configure_logging()
    logging.getLogger(__name__).info("Calendar tools CLI starting")
    parser = build_parser()
    args = parser.parse_args()

    if args.command == "api":
        run_local_server(host=args.host, port=args.port)
    elif args.command == "mcp":
        run_mcp_server(host=args.host, port=args.port, transport=args.transport)
    elif args.command == "check-credentials":
        sys.exit(check_credentials())
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
