"""Per-item enrichment of saved links (platform details, user notes, news)."""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, List, Optional

from common.display import console
from common.url_utils import extract_video_id
from .models import EnrichmentResult, SavedItem
from .news_fetcher import fetch_latest_news
from .tweet_fetcher import fetch_tweet_content
from .video_fetcher import fetch_youtube_content

NO_CONTENT_PLACEHOLDER = "No content saved"


def _youtube_details(item: SavedItem, youtube_api_key: str) -> Optional[str]:
    if not item.link:
        return None
    details = fetch_youtube_content(extract_video_id(item.link), youtube_api_key)
    return f"Video Details:\n{details}" if details else None


def _twitter_details(item: SavedItem, youtube_api_key: str) -> Optional[str]:
    return f"Tweet Content: {fetch_tweet_content(item.link)}"


# Item type -> platform enricher
PLATFORM_ENRICHERS: Dict[str, Callable[[SavedItem, str], Optional[str]]] = {
    "youtube": _youtube_details,
    "twitter": _twitter_details,
}


def enrich_item(item: SavedItem, youtube_api_key: str = "", news_api_key: str = "") -> EnrichmentResult:
    """Build the enrichment for one saved item.

    Each part (platform details, news) is best-effort: a failure is logged and
    that part is left out, the rest of the item is still returned.
    """
    result = EnrichmentResult(item_id=item.id, base_text=f"{item.type.upper()}: {item.title}")

    platform_enricher = PLATFORM_ENRICHERS.get(item.type)
    if platform_enricher:
        try:
            result.platform_details = platform_enricher(item, youtube_api_key)
        except Exception as e:
            console.print(f"[yellow]  ⚠ {item.type} enrichment failed for {item.title!r}: {e}[/yellow]")

    if item.description:
        result.description = item.description

    try:
        result.news_digest = fetch_latest_news(item.title, news_api_key) or None
    except Exception as e:
        console.print(f"[yellow]  ⚠ News enrichment failed for {item.title!r}: {e}[/yellow]")

    return result


def _enrich_safely(item: SavedItem, youtube_api_key: str, news_api_key: str) -> EnrichmentResult:
    try:
        return enrich_item(item, youtube_api_key, news_api_key)
    except Exception as e:
        console.print(f"[yellow]  ⚠ Enrichment failed for {item.title!r}: {e}[/yellow]")
        return EnrichmentResult(item_id=item.id, base_text=f"{item.type.upper()}: {item.title}")


def enrich_items(
    items: List[SavedItem],
    youtube_api_key: str = "",
    news_api_key: str = "",
    workers: int = 1,
) -> List[EnrichmentResult]:
    """Enrich all items, one at a time or on a bounded thread pool.

    Results are always in input order.
    """
    if workers <= 1 or len(items) <= 1:
        return [_enrich_safely(item, youtube_api_key, news_api_key) for item in items]

    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(
            lambda item: _enrich_safely(item, youtube_api_key, news_api_key),
            items,
        ))


def format_content_blocks(results: List[EnrichmentResult]) -> str:
    if not results:
        return NO_CONTENT_PLACEHOLDER
    return "\n\n".join(result.to_block() for result in results)
