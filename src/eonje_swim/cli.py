from __future__ import annotations

import argparse
import logging

from .bootstrap import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Eonje Swim team attendance calendar.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    gui_parser = subparsers.add_parser("gui", help="Launch the desktop calendar.")
    gui_parser.add_argument("--link", default=None, help="Shared calendar link or identifier to open.")

    api_parser = subparsers.add_parser("api", help="Start the HTTP API exposing calendar functions.")
    api_parser.add_argument("--host", default="127.0.0.1")
    api_parser.add_argument("--port", type=int, default=8000)

    return parser


def main(argv: list[str] | None = None) -> None:
    configure_logging()
    logging.getLogger(__name__).info("Eonje Swim CLI starting")
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "gui":
        from .ui.app import run_gui

        run_gui(link=args.link)
    elif args.command == "api":
        from .services.http import run_local_server

        run_local_server(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()


if __name__ == "__main__":
    main()
