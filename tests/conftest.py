"""
Shared pytest fixtures for secondbrain tests

This file contains fixtures that are available to all test files.
"""

from typing import Dict, List
from unittest.mock import Mock

import pytest
import requests

from secondbrain.models import Note, SavedItem


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from real API keys and the real brain file"""
    for var in ("OPENAI_API_KEY", "OPENAI_BASE_URL", "OPENAI_MODEL",
                "YOUTUBE_API_KEY", "NEWS_API_KEY", "BRAIN_ENRICH_WORKERS"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("BRAIN_PATH", str(tmp_path / "brain.json"))


@pytest.fixture
def brain_path(tmp_path) -> str:
    return str(tmp_path / "brain.json")


@pytest.fixture
def sample_urls() -> Dict[str, str]:
    """Sample URLs for testing"""
    return {
        'youtube': 'https://www.youtube.com/watch?v=dQw4w9WgXcQ',
        'youtube_short': 'https://youtu.be/dQw4w9WgXcQ',
        'youtube_mobile': 'https://m.youtube.com/watch?v=a_B-c1D2e3F',
        'youtube_channel': 'https://www.youtube.com/@somechannel',
        'twitter': 'https://twitter.com/user/status/1234567890',
        'x': 'https://x.com/user/status/1234567890',
        'blog_post': 'https://example.com/blog/my-article',
    }


@pytest.fixture
def trip_note() -> Note:
    return Note(id="n1", title="Trip", content="Paris in June")


@pytest.fixture
def eiffel_item() -> SavedItem:
    return SavedItem(
        id="c1",
        title="Eiffel",
        link="https://youtu.be/dQw4w9WgXcQ",
        type="youtube",
        description="favorite",
    )


@pytest.fixture
def tweet_items() -> List[SavedItem]:
    return [
        SavedItem(id=f"t{i}", title=f"Tweet {i}", link=f"https://x.com/user/status/{i}", type="twitter")
        for i in range(3)
    ]


@pytest.fixture
def make_response():
    """Factory for fake requests.Response objects"""
    def _make(json_data=None, text="", status_code=200):
        response = Mock()
        response.status_code = status_code
        response.text = text
        response.json.return_value = json_data if json_data is not None else {}
        if status_code >= 400:
            response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
        else:
            response.raise_for_status = Mock()
        return response
    return _make


@pytest.fixture
def youtube_api_payload() -> dict:
    """YouTube Data API videos.list response for one video"""
    return {
        "items": [{
            "snippet": {
                "title": "Eiffel Tower at Night",
                "channelTitle": "Travel Channel",
                "description": "A walk around the tower.",
                "publishedAt": "2024-06-14T12:00:00Z",
            },
            "statistics": {"viewCount": "12345"},
        }]
    }


@pytest.fixture
def news_api_payload() -> dict:
    """NewsAPI /v2/everything response with two articles"""
    return {
        "status": "ok",
        "articles": [
            {
                "title": "Paris prepares for summer",
                "source": {"name": "Le Monde"},
                "publishedAt": "2024-06-14T12:00:00Z",
                "description": "Crowds expected.",
            },
            {
                "title": "Tower reopens",
                "source": {"name": "BBC"},
                "publishedAt": "2024-06-10T12:00:00Z",
                "description": None,
            },
        ],
    }
