"""
YouTube metadata fetching via the YouTube Data API.
"""

import time

import requests

from common.display import console
from .fetcher_utils import YOUTUBE_TIMEOUT, log_request, log_response

YOUTUBE_VIDEOS_URL = "https://www.googleapis.com/youtube/v3/videos"


def fetch_youtube_content(video_id: str | None, api_key: str) -> str:
    """
    Fetch title, channel, description, views and publish date for a video.

    Args:
        video_id: 11-character YouTube video id
        api_key: YouTube Data API key

    Returns:
        Multi-line summary, or "" when the id/key is missing or anything fails
    """
    if not video_id or not api_key:
        return ""

    params = {
        "key": api_key,
        "id": video_id,
        "part": "snippet,statistics",
    }

    try:
        log_request("YouTube", f"{YOUTUBE_VIDEOS_URL}?id={video_id}")
        t0 = time.monotonic()
        response = requests.get(YOUTUBE_VIDEOS_URL, params=params, timeout=YOUTUBE_TIMEOUT)
        log_response("YouTube", response, time.monotonic() - t0)
        response.raise_for_status()

        items = response.json().get("items") or []
        if not items:
            console.print(f"[dim]  ⚠ No YouTube video found for {video_id}[/dim]")
            return ""

        video = items[0]
        snippet = video["snippet"]
        statistics = video.get("statistics", {})

        return "\n".join([
            f"Title: {snippet['title']}",
            f"Channel: {snippet['channelTitle']}",
            f"Description: {snippet.get('description', '')}",
            f"Views: {statistics.get('viewCount', 'unknown')}",
            f"Published: {snippet.get('publishedAt', '')}",
        ]).strip()
    except Exception as e:
        console.print(f"[yellow]  ⚠ YouTube fetch error for {video_id}: {e}[/yellow]")
        return ""
