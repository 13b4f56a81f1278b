"""Tests for rating tiers, language extensions and path resolution."""

import dataclasses

import pytest

from domain.exceptions import PathResolutionError
from domain.models import Difficulty, ProblemMetadata, Site, SubmissionType, rating_tier
from domain.models.progress import RATING_TIERS
from domain.paths import file_extension, resolve_paths, submission_date

TIER_NAMES = [name for _, name in RATING_TIERS]


@pytest.mark.parametrize(
    "rating, expected",
    [
        (None, "0-1000"),
        (0, "0-1000"),
        (999, "0-1000"),
        (1000, "1000-1200"),
        (1199, "1000-1200"),
        (1200, "1200-1400"),
        (1350, "1200-1400"),
        (1400, "1400-1600"),
        (1599, "1400-1600"),
        (1600, "1600-1900"),
        (1899, "1600-1900"),
        (1900, "1900+"),
        (3500, "1900+"),
    ],
)
def test_rating_tier(rating, expected) -> None:
    assert rating_tier(rating) == expected


def test_rating_tier_is_monotonic() -> None:
    tiers = [TIER_NAMES.index(rating_tier(r)) for r in range(0, 4000, 50)]
    assert tiers == sorted(tiers)
    assert set(rating_tier(r) for r in range(0, 4000, 50)) == set(TIER_NAMES)


@pytest.mark.parametrize(
    "language, expected",
    [
        ("cpp", "cpp"),
        ("GNU C++17", "cpp"),
        ("C++", "cpp"),
        ("Java 8", "java"),
        ("python3", "py"),
        ("PyPy 3-64", "py"),
        ("TypeScript", "ts"),
        ("Kotlin 1.9", "kt"),
        ("Rust 2021", "rs"),
        ("Go", "go"),
        ("Haskell", "txt"),
        ("", "txt"),
        (None, "txt"),
    ],
)
def test_file_extension(language, expected) -> None:
    assert file_extension(language) == expected


def test_file_extension_first_match_wins() -> None:
    # Table order decides: "java" is listed before "javascript", "c" before "c#"
    assert file_extension("JavaScript") == "java"
    assert file_extension("C#") == "c"
    # "scala" contains "c" which comes earlier in the table
    assert file_extension("Scala") == "c"


def test_submission_date_uses_utc() -> None:
    assert submission_date("2024-03-01T10:00:00Z") == "2024-03-01"
    assert submission_date("2024-03-01T23:30:00-05:00") == "2024-03-02"
    assert submission_date("2024-03-01T10:00:00") == "2024-03-01"


def test_submission_date_rejects_garbage() -> None:
    with pytest.raises(PathResolutionError):
        submission_date("yesterday")


def test_resolve_leetcode_practice(leetcode_meta) -> None:
    paths = resolve_paths(leetcode_meta)

    assert paths.solution_path == "practice/leetcode/easy/Two_Sum/solution.cpp"
    assert paths.meta_path == "practice/leetcode/easy/Two_Sum/meta.json"
    assert paths.solution_dir == "practice/leetcode/easy/Two_Sum"


def test_resolve_codeforces_contest(codeforces_contest_meta) -> None:
    paths = resolve_paths(codeforces_contest_meta)

    assert paths.solution_path == "contests/codeforces/2024-03-01_Round_123/A_Watermelon.cpp"
    assert paths.meta_path == "contests/codeforces/2024-03-01_Round_123/meta.json"


def test_contest_problems_share_meta_file(codeforces_contest_meta) -> None:
    other = dataclasses.replace(codeforces_contest_meta, problem_name="B. Another")

    first = resolve_paths(codeforces_contest_meta)
    second = resolve_paths(other)

    assert first.solution_path != second.solution_path
    assert first.meta_path == second.meta_path


def test_resolve_contest_without_name(codeforces_contest_meta) -> None:
    meta = dataclasses.replace(codeforces_contest_meta, contest_name=None)
    paths = resolve_paths(meta)
    assert paths.meta_path == "contests/codeforces/2024-03-01_Unknown_Contest/meta.json"


def test_resolve_rating_practice_uses_tier() -> None:
    meta = ProblemMetadata(
        site=Site.CODECHEF,
        type=SubmissionType.PRACTICE,
        problem_name="Chef and Strings!",
        language="PYTH 3",
        timestamp="2024-01-01T00:00:00Z",
        code="print(1)",
        rating=1950,
    )
    paths = resolve_paths(meta)
    assert paths.solution_path == "practice/codechef/1900+/Chef_and_Strings/solution.txt"


def test_resolve_practice_without_rating_or_difficulty(leetcode_meta) -> None:
    leetcode = resolve_paths(dataclasses.replace(leetcode_meta, difficulty=None))
    codeforces = resolve_paths(
        dataclasses.replace(leetcode_meta, site=Site.CODEFORCES, difficulty=None)
    )

    assert leetcode.solution_path == "practice/leetcode/unknown/Two_Sum/solution.cpp"
    assert codeforces.solution_path == "practice/codeforces/0-1000/Two_Sum/solution.cpp"


def test_resolve_is_deterministic(leetcode_meta) -> None:
    copy = dataclasses.replace(leetcode_meta)
    assert resolve_paths(leetcode_meta) == resolve_paths(copy)


def test_raw_problem_name_never_appears(leetcode_meta) -> None:
    meta = dataclasses.replace(
        leetcode_meta, problem_name="../../etc/passwd", difficulty=Difficulty.HARD
    )
    paths = resolve_paths(meta)
    assert ".." not in paths.solution_path
    assert paths.solution_path == "practice/leetcode/hard/etcpasswd/solution.cpp"


def test_unicode_spaces_in_names_become_underscores(codeforces_contest_meta):
    meta = dataclasses.replace(
        codeforces_contest_meta,
        problem_name="A.\u00a0Watermelon",
        contest_name="Round\u3000#123",
    )
    paths = resolve_paths(meta)
    assert paths.solution_path == "contests/codeforces/2024-03-01_Round_123/A_Watermelon.cpp"
