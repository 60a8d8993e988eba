"""NewsAPI top-headlines source — requires NEWS_API_KEY."""

import requests

from ..config import EVENT_MAX_CHARS, TOPIC_MAX_CHARS, USER_AGENT, get_news_api_key
from ..retry import with_retry
from .base import (
    PartialTrends,
    SourceUnavailable,
    TrendSource,
    as_dict,
    as_list,
    as_text,
    is_client_error,
    truncate,
)
from .hashtags import hashtags_from_text

NEWS_API_URL = "https://newsapi.org/v2/top-headlines"


@with_retry(max_retries=1, base_delay=1.0, exceptions=(requests.RequestException,), giveup=is_client_error)
def _fetch_headlines(api_key: str, country: str) -> dict:
    r = requests.get(
        NEWS_API_URL,
        params={"country": country, "apiKey": api_key},
        headers={"User-Agent": USER_AGENT},
        timeout=10,
    )
    r.raise_for_status()
    try:
        return r.json()
    except ValueError:
        return {}


class NewsAPISource(TrendSource):
    name = "news"

    def __init__(self, config: dict = None):
        config = config or {}
        self.country = config.get("country", "us")
        self.api_key = config.get("api_key") or get_news_api_key()

    @property
    def is_available(self) -> bool:
        return bool(self.api_key)

    def fetch(self) -> PartialTrends:
        try:
            data = _fetch_headlines(self.api_key, self.country)
        except requests.RequestException as e:
            raise SourceUnavailable(f"NewsAPI request failed: {e}") from e
        return self.extract(data)

    @staticmethod
    def extract(data) -> PartialTrends:
        articles = [as_dict(a) for a in as_list(as_dict(data).get("articles"))]
        titles = [as_text(a.get("title")) for a in articles]

        topics = [
            truncate(title.split(" - ")[0], TOPIC_MAX_CHARS)
            for title in titles[:10] if title
        ]
        events = [as_text(a.get("description")) for a in articles[:5]]

        return PartialTrends(
            hashtags=hashtags_from_text(" ".join(titles)),
            topics=topics,
            current_events=[truncate(e, EVENT_MAX_CHARS) for e in events if e],
        )
