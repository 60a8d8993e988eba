"""Shared test fixtures."""

from datetime import datetime, timedelta

import pytest

from postsmith.trending.base import PartialTrends, SourceUnavailable, TrendSource


class FakeClock:
    """Manually advanced wall clock."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


class StubSource(TrendSource):
    """A source that returns a canned PartialTrends or raises."""

    def __init__(self, name, partial=None, error=None, available=True):
        self.name = name
        self.partial = partial
        self.error = error
        self.available = available
        self.calls = 0

    @property
    def is_available(self) -> bool:
        return self.available

    def fetch(self) -> PartialTrends:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.partial


@pytest.fixture
def clock():
    # Monday 2026-10-19 09:00
    return FakeClock(datetime(2026, 10, 19, 9, 0))


@pytest.fixture
def make_source():
    return StubSource


@pytest.fixture
def failing_source():
    return StubSource("broken", error=SourceUnavailable("HTTP 503"))


@pytest.fixture
def news_payload():
    """A NewsAPI top-headlines response."""
    return {
        "status": "ok",
        "articles": [
            {
                "title": "Climate summit reaches landmark agreement - Reuters",
                "description": "Leaders agreed to new emissions targets.",
            },
            {
                "title": "AI startup raises record funding round - TechCrunch",
                "description": None,
            },
            {
                "title": "Markets rally after earnings - Bloomberg",
                "description": "Stocks closed higher on Tuesday.",
            },
        ],
    }


@pytest.fixture
def reddit_payload():
    """A /r/all/hot.json response."""
    return {
        "data": {
            "children": [
                {"data": {"title": "Scientists discover water on distant exoplanet", "selftext": ""}},
                {"data": {"title": "My startup just turned profitable", "selftext": "After three years of work."}},
                {"data": {"title": "Photographs from the marathon", "selftext": "Some highlights."}},
            ]
        }
    }


@pytest.fixture
def trends_rss():
    """A Google Trends daily RSS feed."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Daily Search Trends</title>
    <item><title><![CDATA[World Series]]></title></item>
    <item><title><![CDATA[hurricane update]]></title></item>
    <item><title><![CDATA[NBA opening night]]></title></item>
  </channel>
</rss>"""
