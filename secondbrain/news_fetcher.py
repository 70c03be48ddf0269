"""
Recent news lookup via NewsAPI.
"""

import time

import requests

from common.display import console
from .fetcher_utils import NEWS_TIMEOUT, format_local_date, log_request, log_response

NEWS_SEARCH_URL = "https://newsapi.org/v2/everything"
NEWS_PAGE_SIZE = 3

NEWS_NOT_CONFIGURED = "News API key not configured"
NEWS_FETCH_FAILED = "Could not fetch latest news"


def format_article(article: dict) -> str:
    """Format one NewsAPI article as a bulleted entry."""
    title = article.get("title") or ""
    source = (article.get("source") or {}).get("name") or ""
    published = format_local_date(article.get("publishedAt") or "")
    description = article.get("description") or ""
    return f'• "{title}" ({source}) - {published}\n  {description}'


def fetch_latest_news(topic: str, news_api_key: str) -> str:
    """
    Search the three most recent English articles about a topic.

    Args:
        topic: Search query (the saved item's title)
        news_api_key: NewsAPI key

    Returns:
        Bulleted digest, a "no recent news" message, or a fixed fallback string
    """
    if not news_api_key:
        return NEWS_NOT_CONFIGURED

    params = {
        "q": topic,
        "apiKey": news_api_key,
        "sortBy": "publishedAt",
        "language": "en",
        "pageSize": NEWS_PAGE_SIZE,
        "searchIn": "title,description",
    }

    try:
        log_request("News", f"{NEWS_SEARCH_URL}?q={topic}")
        t0 = time.monotonic()
        response = requests.get(NEWS_SEARCH_URL, params=params, timeout=NEWS_TIMEOUT)
        log_response("News", response, time.monotonic() - t0)
        response.raise_for_status()

        articles = response.json().get("articles") or []
        if not articles:
            return f'No recent news found about "{topic}"'

        return "\n\n".join(format_article(a) for a in articles[:NEWS_PAGE_SIZE])
    except Exception as e:
        console.print(f"[yellow]  ⚠ News API error for {topic!r}: {e}[/yellow]")
        return NEWS_FETCH_FAILED
