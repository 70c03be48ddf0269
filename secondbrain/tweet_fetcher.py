"""
Tweet text scraping from Open Graph / description meta tags.
"""

import time

import requests
from bs4 import BeautifulSoup

from common.display import console
from .fetcher_utils import BROWSER_HEADERS, TWEET_TIMEOUT, log_request, log_response

TWEET_NOT_AVAILABLE = "Tweet content not available"
TWEET_FETCH_FAILED = "Could not fetch tweet content"


def extract_meta_description(html: str) -> str:
    """Return og:description content, falling back to the description meta tag."""
    soup = BeautifulSoup(html, "html.parser")

    og_tag = soup.find("meta", attrs={"property": "og:description"})
    if og_tag and og_tag.get("content"):
        return og_tag["content"].strip()

    desc_tag = soup.find("meta", attrs={"name": "description"})
    if desc_tag and desc_tag.get("content"):
        return desc_tag["content"].strip()

    return ""


def fetch_tweet_content(tweet_url: str) -> str:
    """
    Fetch a tweet page and pull its text from meta tags.

    Returns:
        Tweet text; TWEET_NOT_AVAILABLE when the page has no description tags;
        TWEET_FETCH_FAILED when the request or parsing fails
    """
    try:
        log_request("Twitter", tweet_url)
        t0 = time.monotonic()
        response = requests.get(tweet_url, headers=BROWSER_HEADERS, timeout=TWEET_TIMEOUT)
        log_response("Twitter", response, time.monotonic() - t0)
        response.raise_for_status()

        content = extract_meta_description(response.text)
    except Exception as e:
        console.print(f"[yellow]  ⚠ Twitter scrape error for {tweet_url}: {e}[/yellow]")
        return TWEET_FETCH_FAILED

    return content or TWEET_NOT_AVAILABLE
