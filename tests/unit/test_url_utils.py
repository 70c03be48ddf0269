"""
Unit tests for common/url_utils.py

Tests YouTube id extraction, link type detection and URL normalization.
"""

import pytest

from common.url_utils import detect_link_type, extract_video_id, normalize_url


class TestExtractVideoId:
    """Tests for extract_video_id() function"""

    @pytest.mark.unit
    def test_watch_url(self, sample_urls):
        assert extract_video_id(sample_urls['youtube']) == 'dQw4w9WgXcQ'

    @pytest.mark.unit
    def test_short_url(self, sample_urls):
        assert extract_video_id(sample_urls['youtube_short']) == 'dQw4w9WgXcQ'

    @pytest.mark.unit
    def test_id_with_underscore_and_dash(self, sample_urls):
        assert extract_video_id(sample_urls['youtube_mobile']) == 'a_B-c1D2e3F'

    @pytest.mark.unit
    def test_extra_query_params_are_ignored(self):
        url = 'https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=30s&list=PL123'
        assert extract_video_id(url) == 'dQw4w9WgXcQ'

    @pytest.mark.unit
    def test_only_first_eleven_characters_are_taken(self):
        assert extract_video_id('https://youtu.be/dQw4w9WgXcQextra') == 'dQw4w9WgXcQ'

    @pytest.mark.unit
    @pytest.mark.parametrize('url', [
        'https://www.youtube.com/@somechannel',
        'https://www.youtube.com/watch?v=short',
        'https://youtu.be/',
        'https://x.com/user/status/1234567890',
        'not a url',
        '',
    ])
    def test_returns_none_for_non_matching_urls(self, url):
        assert extract_video_id(url) is None


class TestDetectLinkType:
    """Tests for detect_link_type() function"""

    @pytest.mark.unit
    @pytest.mark.parametrize('key', ['youtube', 'youtube_short', 'youtube_mobile', 'youtube_channel'])
    def test_youtube_hosts(self, sample_urls, key):
        assert detect_link_type(sample_urls[key]) == 'youtube'

    @pytest.mark.unit
    @pytest.mark.parametrize('key', ['twitter', 'x'])
    def test_twitter_hosts(self, sample_urls, key):
        assert detect_link_type(sample_urls[key]) == 'twitter'

    @pytest.mark.unit
    def test_unknown_host(self, sample_urls):
        assert detect_link_type(sample_urls['blog_post']) is None

    @pytest.mark.unit
    def test_lookalike_host_is_not_matched(self):
        assert detect_link_type('https://notx.com/status/1') is None


class TestNormalizeUrl:
    """Tests for normalize_url() function"""

    @pytest.mark.unit
    def test_strips_tracking_params_keeps_video_id(self):
        url = 'http://www.youtube.com/watch?v=dQw4w9WgXcQ&utm_source=x&si=abc#t=1'
        assert normalize_url(url) == 'https://www.youtube.com/watch?v=dQw4w9WgXcQ'

    @pytest.mark.unit
    def test_empty(self):
        assert normalize_url('') == ''
