"""CLI entry point for the KeyShorty API server."""

import argparse
import os

from keyshorty.config import settings


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="keyshorty-server",
        description="KeyShorty API server for the keyboard shortcut catalogue",
    )
    parser.add_argument("--host", default=settings.host, help=f"Bind host (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Bind port (default: {settings.port})")
    parser.add_argument(
        "--database-url",
        help=f"SQLAlchemy database URL (default: {settings.database_url})",
    )
    args = parser.parse_args(argv)

    # Settings are read when keyshorty.main is imported by uvicorn
    if args.database_url:
        os.environ["KEYSHORTY_DATABASE_URL"] = args.database_url

    import uvicorn

    uvicorn.run("keyshorty.main:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
