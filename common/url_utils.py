"""URL normalization and link classification utilities."""

import re
from urllib.parse import urlparse

# Tracking params to always strip from URLs
TRACKING_PARAMS = {
    "utm_source", "utm_medium", "utm_campaign", "utm_term", "utm_content",
    "ref", "ref_src", "fbclid", "gclid", "mc_cid", "mc_eid", "si", "feature",
}

YOUTUBE_ID_PATTERNS = [
    re.compile(r"youtube\.com/watch\?v=([a-zA-Z0-9_-]{11})"),
    re.compile(r"youtu\.be/([a-zA-Z0-9_-]{11})"),
]

# Host suffix -> link type
LINK_TYPE_DOMAINS = {
    "youtube.com": "youtube",
    "youtu.be": "youtube",
    "twitter.com": "twitter",
    "x.com": "twitter",
}


def filter_query_params(query: str) -> str:
    """Remove tracking params from a query string (without leading ?)."""
    if not query:
        return ""

    filtered = []
    for param in query.split("&"):
        key = param.split("=")[0].lower()
        if key in TRACKING_PARAMS:
            continue
        filtered.append(param)

    return "&".join(filtered)


def normalize_url(url: str) -> str:
    """Normalize URL for storage: handle http/https, remove fragments and tracking params."""
    if not url:
        return ""

    parsed = urlparse(url.strip())
    if not parsed.netloc:
        return url.strip()

    filtered_query = filter_query_params(parsed.query)

    scheme = "https" if parsed.scheme in ("http", "https") else parsed.scheme
    normalized = f"{scheme}://{parsed.netloc}{parsed.path}"
    if filtered_query:
        normalized += f"?{filtered_query}"

    return normalized


def extract_video_id(url: str) -> str | None:
    """Extract the 11-character YouTube video id from a watch or youtu.be URL.

    Returns None when the URL matches neither shape.
    """
    if not url:
        return None

    for pattern in YOUTUBE_ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None


def detect_link_type(url: str) -> str | None:
    """Classify a URL as "youtube" or "twitter" by its host.

    Subdomains (www., m., mobile.) are accepted. Returns None for other hosts.
    """
    try:
        domain = urlparse(url.strip()).netloc.lower()
    except (AttributeError, ValueError):
        return None

    domain = domain.split(":")[0]
    for suffix, link_type in LINK_TYPE_DOMAINS.items():
        if domain == suffix or domain.endswith("." + suffix):
            return link_type
    return None
