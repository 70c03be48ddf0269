"""Ask command - answers a question over notes and saved content."""

from rich.markdown import Markdown
from rich.markup import escape
from rich.panel import Panel

from common.display import console
from ..ask import ask_question
from ..llm import LLMError, check_health
from ..prompt import ValidationError
from ..store import list_content, list_notes


def ask(question: str, workers: int | None = None, as_json: bool = False, verbose: int = 0) -> int:
    """Answer a question and print it with its source counts.

    Returns:
        Exit code (0 = success, 1 = error)
    """
    notes = list_notes()
    items = list_content()

    try:
        with console.status("Analyzing your content and searching latest news...", spinner="dots"):
            answer = ask_question(notes, items, question, workers=workers, verbose=verbose)
    except ValidationError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return 1
    except LLMError as e:
        if isinstance(e.__cause__, ValueError):
            # configuration problem, e.g. OPENAI_API_KEY not set
            console.print(f"[red]{escape(str(e.__cause__))}[/red]")
            return 1
        console.print("[red]Failed to process question[/red]")
        if verbose:
            console.print(f"[dim]  {escape(str(e))}[/dim]")
        return 1

    if as_json:
        console.print_json(data={"answer": answer.text, "sources": answer.sources.model_dump(by_alias=True)})
        return 0

    console.print(Panel(Markdown(answer.text), title="Answer", border_style="magenta"))
    notes_label = "note" if answer.sources.notes_count == 1 else "notes"
    items_label = "item" if answer.sources.content_count == 1 else "items"
    console.print(
        f"[dim]Sources: {answer.sources.notes_count} {notes_label}, "
        f"{answer.sources.content_count} {items_label}[/dim]"
    )
    return 0


def health() -> int:
    """Report whether the LLM is reachable."""
    with console.status("Checking AI...", spinner="dots"):
        ready = check_health()
    if ready:
        console.print("[green]AI ready[/green]")
        return 0
    console.print("[red]AI offline[/red]")
    return 1
