"""
Shared constants and helpers for content fetchers.
"""

from datetime import datetime

import requests

from common.display import console

BROWSER_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
}

YOUTUBE_TIMEOUT = 15
TWEET_TIMEOUT = 5
NEWS_TIMEOUT = 8

_verbose = False


def set_verbose(enabled: int | bool) -> None:
    """Enable or disable verbose request logging."""
    global _verbose
    _verbose = bool(enabled)


def log_request(label: str, url: str) -> None:
    """Log an outgoing request if verbose mode is enabled."""
    if _verbose:
        console.print(f"[dim]  [{label}] GET {url}[/dim]")


def log_response(label: str, response: requests.Response, elapsed: float) -> None:
    """Log a response if verbose mode is enabled."""
    if _verbose:
        console.print(f"[dim]  [{label}] {response.status_code} ({elapsed:.1f}s)[/dim]")


def format_local_date(timestamp: str) -> str:
    """Format an ISO-8601 timestamp as a short local date (e.g. 6/14/2024).

    Unparseable values are returned unchanged.
    """
    if not timestamp:
        return ""
    try:
        dt = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return timestamp
    if dt.tzinfo is not None:
        dt = dt.astimezone()
    return f"{dt.month}/{dt.day}/{dt.year}"
