"""TrendingAggregator — fan-out to all sources, merge, cache, fall back."""

import concurrent.futures
import threading
from datetime import datetime, timedelta

from ..config import MAX_EVENTS, MAX_HASHTAGS, MAX_TOPICS, get_trending_settings, load_config
from ..log import get_logger
from .base import LIVE, AggregationFailure, PartialTrends, TrendingSnapshot, local_now, utc_date
from .fallback import fallback_snapshot
from .google_trends import GoogleTrendsSource
from .news import NewsAPISource
from .reddit import RedditSource

# Declaration order is merge order
SOURCE_CLASSES = (
    ("news", NewsAPISource),
    ("reddit", RedditSource),
    ("google_trends", GoogleTrendsSource),
)


def load_sources(config: dict | None = None) -> list:
    """Instantiate the enabled sources from config.json "trending_sources"."""
    logger = get_logger()
    config = load_config() if config is None else config
    source_config = config.get("trending_sources", {})
    if not isinstance(source_config, dict):
        source_config = {}

    sources = []
    for name, cls in SOURCE_CLASSES:
        src_cfg = source_config.get(name, {})
        if not isinstance(src_cfg, dict):
            src_cfg = {}
        if not src_cfg.get("enabled", True):
            logger.debug("%s: disabled in config", name)
            continue
        try:
            sources.append(cls(src_cfg))
        except Exception as e:
            logger.warning("Failed to init source %s: %s", name, e)
    return sources


def _dedupe(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


def merge_partials(partials: list[PartialTrends | None]) -> tuple[list[str], list[str], list[str]]:
    """Concatenate per field in source order, dedupe, and cap."""
    hashtags, topics, events = [], [], []
    try:
        for partial in partials:
            if partial is None:
                continue
            hashtags.extend(partial.hashtags)
            topics.extend(partial.topics)
            events.extend(partial.current_events)
        return (
            _dedupe(hashtags)[:MAX_HASHTAGS],
            _dedupe(topics)[:MAX_TOPICS],
            _dedupe(events)[:MAX_EVENTS],
        )
    except (AttributeError, TypeError) as e:
        raise AggregationFailure(f"could not merge source results: {e}") from e


class TrendingAggregator:
    """Process-wide trending cache.

    Construct once per process and share the instance. `get_trending()` is
    total: it returns the cached snapshot while fresh, otherwise a freshly
    aggregated live snapshot, otherwise the fallback snapshot.
    """

    def __init__(self, sources=None, clock=None, ttl_seconds: float | None = None,
                 timeout_seconds: float | None = None):
        if ttl_seconds is None or timeout_seconds is None:
            settings = get_trending_settings()
            if ttl_seconds is None:
                ttl_seconds = settings["ttl_seconds"]
            if timeout_seconds is None:
                timeout_seconds = settings["timeout_seconds"]

        self._sources = list(sources) if sources is not None else load_sources()
        self._clock = clock or local_now
        self._ttl = timedelta(seconds=ttl_seconds)
        self._timeout = timeout_seconds
        self._lock = threading.Lock()
        self._snapshot = None
        self._computed_at = None

    @property
    def sources(self) -> list:
        return list(self._sources)

    def get_trending(self) -> TrendingSnapshot:
        """Return the current snapshot, refreshing it when older than the TTL."""
        logger = get_logger()
        with self._lock:
            now = self._clock()
            if self._snapshot is not None and now - self._computed_at < self._ttl:
                return self._snapshot

            try:
                snapshot = self._aggregate(now)
            except Exception as e:
                logger.warning("Trending aggregation failed: %s", e)
                snapshot = None

            if snapshot is None:
                logger.info("Using fallback trending data")
                snapshot = fallback_snapshot(now)

            self._snapshot = snapshot
            self._computed_at = now
            return snapshot

    def _aggregate(self, now: datetime) -> TrendingSnapshot | None:
        """One live pass. Returns None when no source contributed anything."""
        logger = get_logger()
        active = []
        for src in self._sources:
            if src.is_available:
                active.append(src)
            else:
                logger.debug("%s: not available, skipping", src.name)

        hashtags, topics, events = merge_partials(self._settle(active))
        if not (hashtags or topics or events):
            return None

        return TrendingSnapshot(
            hashtags=tuple(hashtags),
            topics=tuple(topics),
            current_events=tuple(events),
            last_updated=utc_date(now),
            timestamp=now,
            source=LIVE,
        )

    def _settle(self, sources: list) -> list[PartialTrends | None]:
        """Run every source concurrently and wait for all of them.

        Results come back in source order; a failed or timed-out source
        contributes None.
        """
        if not sources:
            return []

        logger = get_logger()
        pool = concurrent.futures.ThreadPoolExecutor(
            max_workers=len(sources), thread_name_prefix="trending"
        )
        try:
            futures = [pool.submit(src.fetch) for src in sources]
            done, _ = concurrent.futures.wait(futures, timeout=self._timeout)

            results = []
            for src, future in zip(sources, futures):
                if future not in done:
                    logger.warning("%s: timed out after %.1fs", src.name, self._timeout)
                    results.append(None)
                    continue
                try:
                    partial = future.result()
                except Exception as e:
                    logger.warning("%s: failed, %s", src.name, e)
                    results.append(None)
                    continue
                if not isinstance(partial, PartialTrends):
                    logger.warning("%s: returned %r, ignoring", src.name, type(partial).__name__)
                    results.append(None)
                    continue
                logger.debug(
                    "%s: %d hashtags, %d topics, %d events",
                    src.name, len(partial.hashtags), len(partial.topics), len(partial.current_events),
                )
                results.append(partial)
            return results
        finally:
            # Don't block on stragglers past the pass timeout
            pool.shutdown(wait=False, cancel_futures=True)
