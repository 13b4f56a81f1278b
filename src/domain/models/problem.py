"""Problem metadata supplied by the page scrapers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Site(str, Enum):
    """Supported judges."""

    LEETCODE = "leetcode"
    CODEFORCES = "codeforces"
    CODECHEF = "codechef"

    @property
    def uses_difficulty(self) -> bool:
        """Whether problems on this judge are classified by difficulty label instead of rating."""
        return self is Site.LEETCODE


class SubmissionType(str, Enum):
    PRACTICE = "practice"
    CONTEST = "contest"


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


# Python attribute -> JSON key used in meta.json
_JSON_KEYS = {
    "site": "site",
    "type": "type",
    "problem_name": "problemName",
    "problem_id": "problemId",
    "url": "url",
    "rating": "rating",
    "difficulty": "difficulty",
    "language": "language",
    "timestamp": "timestamp",
    "contest_name": "contestName",
    "code": "code",
    "solve_time_minutes": "solveTimeMinutes",
    "is_accepted": "isAccepted",
}


@dataclass(frozen=True)
class ProblemMetadata:
    """A single solved problem as extracted from a judge page."""

    site: Site
    type: SubmissionType
    problem_name: str
    language: str
    timestamp: str
    code: str
    url: str = ""
    problem_id: str | None = None
    rating: int | None = None
    difficulty: Difficulty | None = None
    contest_name: str | None = None
    solve_time_minutes: int | None = None
    is_accepted: bool | None = None

    @property
    def classification(self) -> str:
        """Judge specific label: rating for rating based judges, difficulty otherwise."""
        if self.rating:
            return str(self.rating)
        if self.difficulty:
            return self.difficulty.value
        return ""

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for attr, key in _JSON_KEYS.items():
            value = getattr(self, attr)
            if value is None:
                continue
            if isinstance(value, Enum):
                value = value.value
            data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProblemMetadata:
        values = {attr: data[key] for attr, key in _JSON_KEYS.items() if data.get(key) is not None}
        values["site"] = Site(values["site"])
        values["type"] = SubmissionType(values["type"])
        if "difficulty" in values:
            values["difficulty"] = Difficulty(values["difficulty"])
        return cls(**values)
