"""TrendingSnapshot / PartialTrends dataclasses + TrendSource ABC."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, datetime, timezone

LIVE = "live"
FALLBACK = "fallback"


def local_now() -> datetime:
    """Local wall-clock time carrying its UTC offset."""
    return datetime.now().astimezone()


def utc_date(now: datetime) -> date:
    """Calendar date of `now` in UTC; naive readings are taken as-is."""
    if now.tzinfo is None:
        return now.date()
    return now.astimezone(timezone.utc).date()


class SourceUnavailable(Exception):
    """An upstream fetch failed or returned a non-success status."""


class AggregationFailure(Exception):
    """Merging settled source results failed."""


@dataclass
class PartialTrends:
    """One source's contribution to a snapshot."""
    hashtags: list[str] = field(default_factory=list)
    topics: list[str] = field(default_factory=list)
    current_events: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class TrendingSnapshot:
    """An immutable point-in-time aggregation result."""
    hashtags: tuple[str, ...]
    topics: tuple[str, ...]
    current_events: tuple[str, ...]
    last_updated: date
    timestamp: datetime
    source: str  # LIVE or FALLBACK

    def to_dict(self) -> dict:
        """JSON-ready dict using the public wire keys."""
        return {
            "hashtags": list(self.hashtags),
            "topics": list(self.topics),
            "currentEvents": list(self.current_events),
            "lastUpdated": self.last_updated.isoformat(),
            "timestamp": self.timestamp.isoformat(),
            "source": self.source,
        }


class TrendSource(ABC):
    """Abstract base class for trending sources."""

    name: str = "unknown"

    @abstractmethod
    def fetch(self) -> PartialTrends:
        """Fetch and extract this source's trends.

        Raises SourceUnavailable only when the upstream call itself
        fails; odd payloads yield empty fields.
        """
        ...

    @property
    def is_available(self) -> bool:
        """Check if this source is configured and available."""
        return True


# ─────────────────────────────────────────────────────
# Payload helpers — tolerate missing or oddly shaped fields
# ─────────────────────────────────────────────────────
def is_client_error(exc) -> bool:
    """True for HTTP 4xx responses, which a retry will not fix."""
    response = getattr(exc, "response", None)
    status = getattr(response, "status_code", None)
    return isinstance(status, int) and 400 <= status < 500


def as_list(value) -> list:
    return value if isinstance(value, list) else []


def as_dict(value) -> dict:
    return value if isinstance(value, dict) else {}


def as_text(value) -> str:
    return value.strip() if isinstance(value, str) else ""


def truncate(text: str, max_chars: int) -> str:
    return text[:max_chars]
