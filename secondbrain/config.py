"""Configuration utility for API credentials and local paths."""

import os
from typing import NamedTuple

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_BRAIN_PATH = "data/brain.json"


class LLMConfig(NamedTuple):
    api_key: str
    model: str
    base_url: str | None


def get_llm_config() -> LLMConfig:
    """Get OpenAI-compatible API settings from environment.

    Raises:
        ValueError: If OPENAI_API_KEY is not set
    """
    api_key = os.environ.get("OPENAI_API_KEY")
    if not api_key:
        raise ValueError("OPENAI_API_KEY environment variable must be set")

    return LLMConfig(
        api_key=api_key,
        model=os.environ.get("OPENAI_MODEL") or DEFAULT_MODEL,
        base_url=os.environ.get("OPENAI_BASE_URL") or None,
    )


def get_youtube_api_key() -> str:
    """YouTube Data API key, empty string when not configured."""
    return os.environ.get("YOUTUBE_API_KEY", "")


def get_news_api_key() -> str:
    """NewsAPI key, empty string when not configured."""
    return os.environ.get("NEWS_API_KEY", "")


def get_brain_path() -> str:
    return os.environ.get("BRAIN_PATH") or DEFAULT_BRAIN_PATH


def get_enrich_workers() -> int:
    """Number of items enriched concurrently (1 = sequential)."""
    try:
        return max(1, int(os.environ.get("BRAIN_ENRICH_WORKERS", "1")))
    except ValueError:
        return 1
