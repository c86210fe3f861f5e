"""Prometheus metrics definitions for edge-saved."""
from __future__ import annotations

from prometheus_client import Counter, Histogram

# Cookie read path
BOOKMARK_COOKIE_READS = Counter(
    "bookmark_cookie_reads_total",
    "Bookmark cookie reads by verification outcome",
    ["outcome"],  # absent/valid/invalid
)

# Write path
BOOKMARK_TOGGLES = Counter(
    "bookmark_toggles_total",
    "Bookmark toggles",
    ["action"],  # added/removed
)

BOOKMARK_COOKIE_ENCODE_FAILURES = Counter(
    "bookmark_cookie_encode_failures_total",
    "Toggles answered with a clear-cookie because signing failed",
)

BOOKMARK_SET_SIZE = Histogram(
    "bookmark_cookie_ids",
    "Number of ids in each newly signed bookmark cookie",
    buckets=[0, 1, 2, 5, 10, 25, 50, 100, 250],
)
