"""Share commands - toggle the read-only share link and view shared content."""

from common.display import console
from ..store import NotFoundError, get_shared_content, share_brain
from .content import print_items


def share(off: bool = False) -> int:
    share_hash = share_brain(not off)
    if share_hash is None:
        console.print("[yellow]Share link removed[/yellow]")
        return 0
    console.print(f"Share hash: [bold]{share_hash}[/bold]")
    console.print(f"[dim]View with: brainly shared {share_hash}[/dim]")
    return 0


def show_shared(share_hash: str, verbose: int = 0) -> int:
    try:
        items = get_shared_content(share_hash)
    except NotFoundError:
        console.print("[red]Sorry, invalid share link[/red]")
        return 1
    print_items(items, verbose=verbose)
    return 0
