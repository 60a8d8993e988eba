"""Reddit .json API source (hot posts)."""

import requests

from ..config import EVENT_MAX_CHARS, TOPIC_MAX_CHARS, USER_AGENT
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


@with_retry(max_retries=1, base_delay=1.0, exceptions=(requests.RequestException,), giveup=is_client_error)
def _fetch_hot(subreddit: str, limit: int) -> dict:
    url = f"https://www.reddit.com/r/{subreddit}/hot.json"
    r = requests.get(url, headers={"User-Agent": USER_AGENT}, params={"limit": limit}, timeout=10)
    r.raise_for_status()
    try:
        return r.json()
    except ValueError:
        return {}


class RedditSource(TrendSource):
    name = "reddit"

    def __init__(self, config: dict = None):
        config = config or {}
        self.subreddit = config.get("subreddit", "all")
        self.limit = int(config.get("limit", 25))

    def fetch(self) -> PartialTrends:
        try:
            data = _fetch_hot(self.subreddit, self.limit)
        except requests.RequestException as e:
            raise SourceUnavailable(f"Reddit request failed: {e}") from e
        return self.extract(data)

    @staticmethod
    def extract(data) -> PartialTrends:
        children = as_list(as_dict(as_dict(data).get("data")).get("children"))
        posts = [as_dict(as_dict(child).get("data")) for child in children]
        titles = [as_text(p.get("title")) for p in posts]

        events = [as_text(p.get("selftext")) for p in posts[:5]]

        return PartialTrends(
            hashtags=hashtags_from_text(" ".join(titles)),
            topics=[truncate(t, TOPIC_MAX_CHARS) for t in titles[:10] if t],
            current_events=[truncate(e, EVENT_MAX_CHARS) for e in events if e],
        )
