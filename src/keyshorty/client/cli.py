"""keyshorty CLI: browse and edit the shortcut catalogue from a terminal."""

from __future__ import annotations

import argparse
import asyncio
import sys

import httpx

from keyshorty.client.api_client import KeyShortyClient
from keyshorty.client.book import ShortcutBook
from keyshorty.client.notifications import ErrorSink, Notification
from keyshorty.client.render import render_book, render_notification
from keyshorty.config import settings


def confirm(prompt: str, assume_yes: bool = False) -> bool:
    """Ask a yes/no question on the terminal. Anything but y/yes means no."""
    if assume_yes:
        return True
    try:
        answer = input(f"{prompt} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in ("y", "yes")


def _print_notification(notification: Notification) -> None:
    print(render_notification(notification.message), file=sys.stderr)


async def cmd_list(book: ShortcutBook, args: argparse.Namespace) -> bool:
    return True


async def cmd_add_app(book: ShortcutBook, args: argparse.Namespace) -> bool:
    return await book.add_application(args.name) is not None


async def cmd_add_shortcut(book: ShortcutBook, args: argparse.Namespace) -> bool:
    created = await book.add_shortcut(args.app_id, args.key_combination, args.description)
    return created is not None


async def cmd_rm_app(book: ShortcutBook, args: argparse.Namespace) -> bool:
    app = book.store.get_application(args.app_id)
    label = f"'{app.name}'" if app else f"#{args.app_id}"
    count = len(book.store.shortcuts_for(args.app_id))
    if not confirm(f"Delete application {label} and its {count} shortcut(s)?", args.yes):
        print("Cancelled.")
        return True
    return await book.delete_application(args.app_id)


async def cmd_rm_shortcut(book: ShortcutBook, args: argparse.Namespace) -> bool:
    shortcut = book.store.find_shortcut(args.shortcut_id)
    label = f"'{shortcut.key_combination}'" if shortcut else f"#{args.shortcut_id}"
    if not confirm(f"Delete shortcut {label}?", args.yes):
        print("Cancelled.")
        return True
    return await book.delete_shortcut(args.shortcut_id)


COMMANDS = {
    "list": cmd_list,
    "add-app": cmd_add_app,
    "add-shortcut": cmd_add_shortcut,
    "rm-app": cmd_rm_app,
    "rm-shortcut": cmd_rm_shortcut,
}


async def run(args: argparse.Namespace, transport: httpx.AsyncBaseTransport | None = None) -> int:
    """Load the catalogue, apply one command, and print the resulting cards."""
    errors = ErrorSink()
    errors.subscribe(_print_notification)

    async with KeyShortyClient(args.api_url, transport=transport) as client:
        book = ShortcutBook(client, errors=errors)
        if not await book.load() and not book.store.applications:
            return 1
        ok = await COMMANDS[args.command](book, args)

    print(render_book(book.store))
    return 0 if ok else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="keyshorty",
        description="Catalogue keyboard shortcuts per application",
    )
    parser.add_argument("--api-url", default=settings.api_url, help=f"KeyShorty API URL (default: {settings.api_url})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log client activity")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("list", help="Show every application and its shortcuts")

    p_add_app = sub.add_parser("add-app", help="Register a new application")
    p_add_app.add_argument("name", help="Application name (must be unique)")

    p_add_sc = sub.add_parser("add-shortcut", help="Attach a shortcut to an application")
    p_add_sc.add_argument("app_id", type=int, help="Application id")
    p_add_sc.add_argument("key_combination", help="Key chord, e.g. Ctrl+Shift+P")
    p_add_sc.add_argument("description", help="What the shortcut does")

    p_rm_app = sub.add_parser("rm-app", help="Delete an application and all of its shortcuts")
    p_rm_app.add_argument("app_id", type=int, help="Application id")
    p_rm_app.add_argument("-y", "--yes", action="store_true", help="Skip the confirmation prompt")

    p_rm_sc = sub.add_parser("rm-shortcut", help="Delete a single shortcut")
    p_rm_sc.add_argument("shortcut_id", type=int, help="Shortcut id")
    p_rm_sc.add_argument("-y", "--yes", action="store_true", help="Skip the confirmation prompt")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    from keyshorty.logging_config import configure_logging

    # stdout carries the rendered cards
    configure_logging(log_level="debug" if args.verbose else "error", stream=sys.stderr)
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
