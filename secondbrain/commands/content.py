"""Saved content commands - add, list and delete links."""

import shutil

from rich.markup import escape
from rich.text import Text

from common.display import console, format_tags_display, get_type_color
from ..prompt import ValidationError
from ..store import NotFoundError, add_content, delete_content, list_content


def add_item(
    link: str,
    title: str,
    item_type: str | None = None,
    description: str | None = None,
    tags: list[str] | None = None,
) -> int:
    try:
        item = add_content(title, link, item_type=item_type, description=description, tags=tags)
    except ValidationError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return 1

    color = get_type_color(item.type)
    console.print(f"[green]✓ Added[/green] #{item.id} [{color}]{item.type}[/{color}] [bold]{escape(item.title)}[/bold]")
    if item.tags:
        console.print(f"  {format_tags_display(item.tags)}")
    return 0


def print_items(items, verbose: int = 0) -> None:
    """Print saved items grouped by type."""
    if not items:
        console.print("[dim]No content saved.[/dim]")
        return

    terminal_width = shutil.get_terminal_size().columns or 120
    name_max = min(100, terminal_width - 24)

    for item_type in ("youtube", "twitter"):
        group = [i for i in items if i.type == item_type]
        if not group:
            continue
        color = get_type_color(item_type)
        console.print(f"\n[bold {color}]{item_type.upper()}[/bold {color}] [dim]({len(group)})[/dim]")

        for item in group:
            title = item.title
            if not verbose and len(title) > name_max:
                title = title[:name_max - 3] + "..."

            line = Text()
            line.append(f"  #{item.id} ", style="dim")
            line.append(title, style=f"link {item.link}" if item.link else "")
            console.print(line)

            if verbose:
                console.print(f"               [dim]{escape(item.link)}[/dim]")
            if item.description:
                console.print(f"               [dim]{escape(item.description)}[/dim]")
            if item.tags:
                console.print(f"               {format_tags_display(item.tags)}")

    console.print(f"\n[bold]{len(items)}[/bold] items total")


def list_items(verbose: int = 0) -> int:
    print_items(list_content(), verbose=verbose)
    return 0


def delete_item(content_id: str) -> int:
    try:
        delete_content(content_id)
    except NotFoundError:
        console.print(f"[red]Content not found: {escape(content_id)}[/red]")
        return 1
    console.print(f"[red]Deleted[/red] #{escape(content_id)}")
    return 0
