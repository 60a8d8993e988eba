"""Google Trends daily trending searches via the public RSS feed."""

import io

import feedparser
import requests

from ..config import EVENT_MAX_CHARS, TOPIC_MAX_CHARS, USER_AGENT
from ..retry import with_retry
from .base import (
    PartialTrends,
    SourceUnavailable,
    TrendSource,
    as_text,
    is_client_error,
    truncate,
)
from .hashtags import hashtags_from_trends

TRENDS_RSS_URL = "https://trends.google.com/trending/rss"


@with_retry(max_retries=1, base_delay=1.0, exceptions=(requests.RequestException,), giveup=is_client_error)
def _fetch_feed(url: str, geo: str) -> bytes:
    r = requests.get(url, headers={"User-Agent": USER_AGENT}, params={"geo": geo}, timeout=10)
    r.raise_for_status()
    return r.content


class GoogleTrendsSource(TrendSource):
    name = "google_trends"

    def __init__(self, config: dict = None):
        config = config or {}
        self.geo = config.get("geo", "US")
        self.feed_url = config.get("feed_url", TRENDS_RSS_URL)

    def fetch(self) -> PartialTrends:
        try:
            body = _fetch_feed(self.feed_url, self.geo)
        except requests.RequestException as e:
            raise SourceUnavailable(f"Google Trends request failed: {e}") from e
        return self.extract(body)

    @staticmethod
    def extract(body) -> PartialTrends:
        if isinstance(body, str):
            body = body.encode("utf-8")
        if not isinstance(body, bytes):
            body = b""
        # A stream is always parsed as a document; a str may be opened as a URL or path.
        # feedparser never raises on bad XML; it sets `bozo` and returns what it could read
        feed = feedparser.parse(io.BytesIO(body))
        titles = [as_text(entry.get("title")) for entry in feed.entries]
        titles = [t for t in titles if t]

        return PartialTrends(
            hashtags=hashtags_from_trends(titles),
            topics=[truncate(t, TOPIC_MAX_CHARS) for t in titles[:10]],
            current_events=[truncate(t, EVENT_MAX_CHARS) for t in titles[:5]],
        )
