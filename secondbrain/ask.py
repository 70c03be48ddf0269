"""Question answering over the saved brain."""

from typing import List

from common.display import console
from .config import get_enrich_workers, get_news_api_key, get_youtube_api_key
from .llm import generate
from .models import Answer, Note, SavedItem, SourceCounts
from .prompt import build_prompt, validate_question


def ask_question(
    notes: List[Note],
    items: List[SavedItem],
    question: str,
    youtube_api_key: str | None = None,
    news_api_key: str | None = None,
    workers: int | None = None,
    verbose: int = 0,
) -> Answer:
    """Answer a question using notes, enriched saved items and the LLM.

    API keys and worker count default to the environment configuration.

    Raises:
        ValidationError: If the question is empty (no network call is made)
        LLMError: If the LLM request fails
    """
    question = validate_question(question)

    if youtube_api_key is None:
        youtube_api_key = get_youtube_api_key()
    if news_api_key is None:
        news_api_key = get_news_api_key()
    if workers is None:
        workers = get_enrich_workers()

    prompt = build_prompt(
        notes,
        items,
        question,
        youtube_api_key=youtube_api_key,
        news_api_key=news_api_key,
        workers=workers,
    )
    if verbose >= 1:
        console.print(f"[dim]  Prompt assembled: {len(notes)} notes, {len(items)} items, {len(prompt):,} chars[/dim]")

    text = generate(prompt, verbose=verbose)
    return Answer(
        text=text,
        sources=SourceCounts(notes_count=len(notes), content_count=len(items)),
    )
