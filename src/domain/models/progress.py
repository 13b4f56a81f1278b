"""Aggregate solved-problem counter stored as metadata/progress.json."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

from .problem import ProblemMetadata, Site

TOTAL_SOLVED_KEY = "totalSolved"

# Upper bounds are exclusive; the last tier is open ended.
RATING_TIERS: list[tuple[float, str]] = [
    (1000, "0-1000"),
    (1200, "1000-1200"),
    (1400, "1200-1400"),
    (1600, "1400-1600"),
    (1900, "1600-1900"),
    (float("inf"), "1900+"),
]

DIFFICULTY_BUCKETS = ["easy", "medium", "hard"]
UNKNOWN_DIFFICULTY = "unknown"


def rating_tier(rating: float | None) -> str:
    """Map a numeric rating to its tier name. Missing ratings fall into the lowest tier."""
    if rating is None:
        return RATING_TIERS[0][1]
    for upper, name in RATING_TIERS:
        if rating < upper:
            return name
    return RATING_TIERS[-1][1]


def default_buckets(site: Site) -> dict[str, int]:
    """Zero-initialised bucket counts for a judge."""
    if site.uses_difficulty:
        return {name: 0 for name in DIFFICULTY_BUCKETS}
    return {name: 0 for _, name in RATING_TIERS}


def progress_bucket(meta: ProblemMetadata) -> str:
    """Bucket a solved problem is counted under."""
    if meta.site.uses_difficulty:
        return meta.difficulty.value.lower() if meta.difficulty else UNKNOWN_DIFFICULTY
    return rating_tier(meta.rating)


@dataclass
class ProgressLedger:
    """Per-judge bucket counts plus a running total.

    Only ``increment`` mutates a ledger, which keeps ``total_solved`` equal to the
    sum of increments ever applied.
    """

    sites: dict[str, dict[str, int]] = field(default_factory=dict)
    total_solved: int = 0

    @classmethod
    def empty(cls) -> ProgressLedger:
        return cls(sites={site.value: default_buckets(site) for site in Site})

    def increment(self, meta: ProblemMetadata) -> str:
        """Count one newly solved problem and return the bucket that was incremented."""
        bucket = progress_bucket(meta)
        counts = self.sites.setdefault(meta.site.value, default_buckets(meta.site))
        counts[bucket] = counts.get(bucket, 0) + 1
        self.total_solved += 1
        return bucket

    def count(self, site: Site | str, bucket: str) -> int:
        key = site.value if isinstance(site, Site) else site
        return self.sites.get(key, {}).get(bucket, 0)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = copy.deepcopy(self.sites)
        data[TOTAL_SOLVED_KEY] = self.total_solved
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProgressLedger:
        if not isinstance(data, dict):
            raise ValueError(f"Progress ledger must be a JSON object, got {type(data).__name__}")

        sites: dict[str, dict[str, int]] = {}
        for key, value in data.items():
            if key == TOTAL_SOLVED_KEY:
                continue
            if isinstance(value, dict):
                sites[key] = {bucket: int(count or 0) for bucket, count in value.items()}

        return cls(sites=sites, total_solved=int(data.get(TOTAL_SOLVED_KEY) or 0))
