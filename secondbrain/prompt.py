"""Prompt assembly: notes + enriched content + question."""

from pathlib import Path
from typing import List

from .content_enricher import enrich_items, format_content_blocks
from .models import Note, SavedItem

PROMPT_PATH = Path(__file__).parent / "prompts" / "ask-brain.md"
NO_NOTES_PLACEHOLDER = "No notes saved"


class ValidationError(ValueError):
    """Raised for invalid user input, before any network call is made."""
    pass


def load_prompt(prompt_path: str | Path | None = None) -> str:
    """Load prompt template from file."""
    path = Path(prompt_path or PROMPT_PATH)
    if not path.exists():
        raise FileNotFoundError(f"Prompt file not found: {path}")
    return path.read_text(encoding="utf-8")


def validate_question(question: str | None) -> str:
    if not question or not question.strip():
        raise ValidationError("Question is required")
    return question.strip()


def format_notes(notes: List[Note]) -> str:
    if not notes:
        return NO_NOTES_PLACEHOLDER
    return "\n\n".join(f"Note: {note.title}\nContent: {note.content}" for note in notes)


def build_prompt(
    notes: List[Note],
    items: List[SavedItem],
    question: str,
    youtube_api_key: str = "",
    news_api_key: str = "",
    workers: int = 1,
    prompt_path: str | Path | None = None,
) -> str:
    """Assemble the full LLM prompt for a question.

    Args:
        notes: The user's notes
        items: The user's saved links
        question: The user's question
        youtube_api_key: YouTube Data API key ("" skips video details)
        news_api_key: NewsAPI key ("" yields a "not configured" digest)
        workers: Items enriched concurrently (1 = sequential)
        prompt_path: Override for the template file

    Raises:
        ValidationError: If the question is empty or whitespace-only
    """
    question = validate_question(question)
    template = load_prompt(prompt_path)

    notes_text = format_notes(notes)
    results = enrich_items(items, youtube_api_key, news_api_key, workers=workers)
    content_text = format_content_blocks(results)

    return template.format(notes=notes_text, content=content_text, question=question)
