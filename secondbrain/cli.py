"""CLI argument parsing and dispatch for secondbrain tools."""

import argparse
import sys

from rich.markup import escape

from common.display import console
from .fetcher_utils import set_verbose
from .store import BrainFileError
from .commands import (
    add_item, ask, delete_item, health, list_items,
    note_add, note_delete, note_edit, note_list, note_pin,
    share, show_shared,
)


def _add_ask_parser(subparsers):
    """Add the 'ask' subcommand parser."""
    p = subparsers.add_parser("ask", help="Ask a question about your notes and saved content")
    p.add_argument("question", type=str, help="Question to answer")
    p.add_argument("--workers", type=int, default=None, help="Items enriched in parallel (default: BRAIN_ENRICH_WORKERS or 1)")
    p.add_argument("--json", action="store_true", help="Print answer and sources as JSON")
    p.add_argument("-v", "--verbose", action="count", default=0, help="-v for details, -vv for request logs")


def _add_content_parsers(subparsers):
    """Add the 'add', 'list' and 'delete' subcommand parsers."""
    p = subparsers.add_parser("add", help="Save a YouTube or Twitter link")
    p.add_argument("link", type=str, help="URL to save")
    p.add_argument("--title", type=str, required=True, help="Title for the link")
    p.add_argument("--type", dest="item_type", choices=["youtube", "twitter"], default=None, help="Link type (default: detected from URL)")
    p.add_argument("--description", type=str, default=None, help="Your own notes about the link")
    p.add_argument("--tag", dest="tags", action="append", default=None, help="Tag (repeatable)")

    p = subparsers.add_parser("list", help="List saved content grouped by type")
    p.add_argument("-v", "--verbose", action="count", default=0, help="-v for URLs and full titles")

    p = subparsers.add_parser("delete", help="Delete saved content")
    p.add_argument("content_id", type=str, help="Content ID")


def _add_note_parser(subparsers):
    """Add the 'note' subcommand parser with its actions."""
    p = subparsers.add_parser("note", help="Manage notes")
    actions = p.add_subparsers(dest="note_command")

    a = actions.add_parser("add", help="Create a note")
    a.add_argument("title", type=str)
    a.add_argument("content", type=str, nargs="?", default="")

    a = actions.add_parser("list", help="List notes (pinned first)")
    a.add_argument("-v", "--verbose", action="count", default=0)

    a = actions.add_parser("edit", help="Update a note")
    a.add_argument("note_id", type=str)
    a.add_argument("--title", type=str, default=None)
    a.add_argument("--content", type=str, default=None)

    for name in ("pin", "unpin", "delete"):
        a = actions.add_parser(name, help=f"{name.capitalize()} a note")
        a.add_argument("note_id", type=str)


def _add_share_parsers(subparsers):
    """Add the 'share' and 'shared' subcommand parsers."""
    p = subparsers.add_parser("share", help="Create (or show) the read-only share hash")
    p.add_argument("--off", action="store_true", help="Remove the share link")

    p = subparsers.add_parser("shared", help="Show content shared under a hash")
    p.add_argument("share_hash", type=str)
    p.add_argument("-v", "--verbose", action="count", default=0)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the main argument parser."""
    parser = argparse.ArgumentParser(
        description="Second brain: save links and notes, ask questions about them"
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_ask_parser(subparsers)
    subparsers.add_parser("health", help="Check whether the AI is reachable")
    _add_content_parsers(subparsers)
    _add_note_parser(subparsers)
    _add_share_parsers(subparsers)

    return parser


def _dispatch_note(args) -> int:
    if args.note_command == "add":
        return note_add(args.title, args.content)
    elif args.note_command == "list":
        return note_list(verbose=args.verbose)
    elif args.note_command == "edit":
        return note_edit(args.note_id, title=args.title, content=args.content)
    elif args.note_command in ("pin", "unpin"):
        return note_pin(args.note_id, pinned=args.note_command == "pin")
    elif args.note_command == "delete":
        return note_delete(args.note_id)
    console.print("[red]Missing note action (add, list, edit, pin, unpin, delete)[/red]")
    return 1


def dispatch(args) -> int:
    """Route parsed args to the appropriate command function.

    Returns:
        Exit code (0 = success, 1 = error)
    """
    if getattr(args, "verbose", 0) >= 2:
        set_verbose(True)

    try:
        return _run_command(args)
    except BrainFileError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return 1


def _run_command(args) -> int:
    if args.command == "ask":
        return ask(args.question, workers=args.workers, as_json=args.json, verbose=args.verbose)
    elif args.command == "health":
        return health()
    elif args.command == "add":
        return add_item(
            link=args.link,
            title=args.title,
            item_type=args.item_type,
            description=args.description,
            tags=args.tags,
        )
    elif args.command == "list":
        return list_items(verbose=args.verbose)
    elif args.command == "delete":
        return delete_item(args.content_id)
    elif args.command == "note":
        return _dispatch_note(args)
    elif args.command == "share":
        return share(off=args.off)
    elif args.command == "shared":
        return show_shared(args.share_hash, verbose=args.verbose)
    return 1


def main():
    """Entry point for the secondbrain CLI."""
    from dotenv import load_dotenv
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    exit_code = dispatch(args)
    sys.exit(exit_code)
