"""Note commands - add, list, edit, pin and delete notes."""

from rich.markup import escape

from common.display import console, get_note_color
from ..prompt import ValidationError
from ..store import NotFoundError, add_note, delete_note, list_notes, pin_note, update_note


def note_add(title: str, content: str = "") -> int:
    try:
        note = add_note(title, content)
    except ValidationError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return 1
    console.print(f"[green]✓ Note created[/green] #{note.id} [bold]{escape(note.title)}[/bold]")
    return 0


def note_list(verbose: int = 0) -> int:
    notes = list_notes()
    if not notes:
        console.print("[dim]No notes saved.[/dim]")
        return 0

    for note in notes:
        color = get_note_color(note.color_index)
        pin = "📌 " if note.is_pinned else ""
        console.print(f"[{color}]■[/{color}] {pin}[bold]{escape(note.title)}[/bold] [dim]#{note.id}[/dim]")
        content = note.content.strip()
        if content:
            if not verbose:
                content = content.replace("\n", " ")
                if len(content) > 100:
                    content = content[:97] + "..."
            console.print(f"  [dim]{escape(content)}[/dim]")
        if verbose:
            console.print(f"  [dim]updated {note.updated_at:%Y-%m-%d %H:%M}[/dim]")

    console.print(f"\n[bold]{len(notes)}[/bold] notes total")
    return 0


def note_edit(note_id: str, title: str | None = None, content: str | None = None) -> int:
    try:
        note = update_note(note_id, title=title, content=content)
    except NotFoundError:
        console.print(f"[red]Note not found: {escape(note_id)}[/red]")
        return 1
    console.print(f"[green]✓ Note updated[/green] #{note.id} [bold]{escape(note.title)}[/bold]")
    return 0


def note_pin(note_id: str, pinned: bool = True) -> int:
    try:
        pin_note(note_id, pinned)
    except NotFoundError:
        console.print(f"[red]Note not found: {escape(note_id)}[/red]")
        return 1
    console.print(f"{'Pinned' if pinned else 'Unpinned'} #{escape(note_id)}")
    return 0


def note_delete(note_id: str) -> int:
    try:
        delete_note(note_id)
    except NotFoundError:
        console.print(f"[red]Note not found: {escape(note_id)}[/red]")
        return 1
    console.print(f"[red]Deleted[/red] note #{escape(note_id)}")
    return 0
