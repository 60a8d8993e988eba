"""Deterministic, locally synthesized trends for when live sources are unavailable."""

from datetime import datetime

from .base import FALLBACK, TrendingSnapshot, utc_date

FALLBACK_HASHTAGS = (
    "#AI", "#TechNews", "#Innovation", "#Startup", "#Productivity",
    "#Marketing", "#SocialMedia", "#Business", "#Leadership", "#Growth",
    "#Crypto", "#Web3", "#Sustainability", "#RemoteWork", "#Success",
)

FALLBACK_TOPICS = (
    "AI breakthrough announcements",
    "Startup funding news",
    "Tech industry updates",
    "Cryptocurrency market trends",
    "Climate innovation solutions",
    "Remote work best practices",
    "Social media algorithm changes",
    "Digital transformation stories",
)

FALLBACK_EVENTS = (
    "Breaking tech industry news",
    "Market volatility updates",
    "Innovation announcements",
    "Celebrity business ventures",
    "Viral social media moments",
    "Economic policy changes",
)

MORNING_TOPICS = ("Morning productivity tips", "Coffee culture trends", "Early bird success stories")
AFTERNOON_TOPICS = ("Afternoon motivation", "Lunch break innovations", "Midday market updates")
EVENING_TOPICS = ("Evening routines", "After-work side hustles", "Night owl productivity")

# datetime.weekday(): Monday == 0, Friday == 4
DAY_TOPICS = {
    0: ("Monday motivation", "Week planning strategies", "Fresh start mindset"),
    4: ("Friday wins", "Weekend planning", "Work-life balance"),
}


def time_of_day_topics(now: datetime) -> tuple[str, ...]:
    if now.hour < 12:
        return MORNING_TOPICS
    if now.hour < 17:
        return AFTERNOON_TOPICS
    return EVENING_TOPICS


def fallback_snapshot(now: datetime) -> TrendingSnapshot:
    """Build the fallback snapshot for a given wall-clock reading."""
    topics = time_of_day_topics(now) + DAY_TOPICS.get(now.weekday(), ()) + FALLBACK_TOPICS
    return TrendingSnapshot(
        hashtags=FALLBACK_HASHTAGS,
        topics=topics,
        current_events=FALLBACK_EVENTS,
        last_updated=utc_date(now),
        timestamp=now,
        source=FALLBACK,
    )
