"""Trending signal aggregation with caching and fallback."""

from .base import FALLBACK, LIVE, PartialTrends, TrendingSnapshot, TrendSource
from .engine import TrendingAggregator

__all__ = ["FALLBACK", "LIVE", "PartialTrends", "TrendingSnapshot", "TrendSource", "TrendingAggregator"]
