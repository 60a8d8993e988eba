"""Tests for postsmith/trending/fallback.py — time-keyed fallback snapshot."""

from datetime import datetime

import pytest

from postsmith.trending.base import FALLBACK
from postsmith.trending.fallback import (
    AFTERNOON_TOPICS,
    DAY_TOPICS,
    EVENING_TOPICS,
    FALLBACK_EVENTS,
    FALLBACK_HASHTAGS,
    MORNING_TOPICS,
    fallback_snapshot,
)

MONDAY = DAY_TOPICS[0]
FRIDAY = DAY_TOPICS[4]


class TestFallbackSnapshot:
    def test_monday_morning(self):
        snap = fallback_snapshot(datetime(2026, 10, 19, 9, 0))

        for topic in MORNING_TOPICS + MONDAY:
            assert topic in snap.topics
        for topic in FRIDAY:
            assert topic not in snap.topics
        assert snap.source == FALLBACK

    def test_friday_evening(self):
        snap = fallback_snapshot(datetime(2026, 10, 23, 20, 30))

        assert snap.topics[:6] == EVENING_TOPICS + FRIDAY
        for topic in MONDAY:
            assert topic not in snap.topics

    @pytest.mark.parametrize("hour,expected", [
        (0, MORNING_TOPICS),
        (11, MORNING_TOPICS),
        (12, AFTERNOON_TOPICS),
        (16, AFTERNOON_TOPICS),
        (17, EVENING_TOPICS),
        (23, EVENING_TOPICS),
    ])
    def test_hour_buckets(self, hour, expected):
        # Wednesday: no day-specific topics
        snap = fallback_snapshot(datetime(2026, 10, 21, hour, 0))
        assert snap.topics[:3] == expected
        assert snap.topics[3] == "AI breakthrough announcements"

    def test_curated_lists(self):
        snap = fallback_snapshot(datetime(2026, 10, 21, 9, 0))
        assert len(snap.hashtags) == 15
        assert snap.hashtags == FALLBACK_HASHTAGS
        assert len(snap.current_events) == 6
        assert snap.current_events == FALLBACK_EVENTS

    def test_deterministic(self):
        now = datetime(2026, 10, 19, 9, 0)
        assert fallback_snapshot(now) == fallback_snapshot(now)

    def test_within_caps_and_unique(self):
        snap = fallback_snapshot(datetime(2026, 10, 19, 9, 0))
        assert len(snap.topics) <= 20
        assert len(set(snap.topics)) == len(snap.topics)
        assert len(set(snap.hashtags)) == len(snap.hashtags)

    def test_stamps(self):
        now = datetime(2026, 10, 19, 9, 0)
        snap = fallback_snapshot(now)
        assert snap.timestamp == now
        assert snap.to_dict()["lastUpdated"] == "2026-10-19"
        assert snap.to_dict()["source"] == "fallback"
