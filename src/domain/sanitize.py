"""Filesystem-safe name and path normalisation."""

import re

UNKNOWN_PROBLEM = "Unknown_Problem"
MAX_NAME_LENGTH = 50

# ASCII word characters only, but any Unicode whitespace survives to become "_"
_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_\s-]")
_WHITESPACE = re.compile(r"\s+")
_REPEATED_SLASHES = re.compile(r"/{2,}")


def sanitize_name(name: str | None, fallback: str = UNKNOWN_PROBLEM) -> str:
    """
    Turn a problem or contest title into a folder/file name.

    Keeps ASCII letters, digits, underscores and hyphens, replaces whitespace
    runs (no-break and ideographic spaces included) with a single underscore
    and truncates to 50 characters.

    Examples:
        >>> sanitize_name("A. Watermelon")
        'A_Watermelon'
        >>> sanitize_name("???")
        'Unknown_Problem'
    """
    if not name:
        return fallback

    safe = _UNSAFE_CHARS.sub("", name).strip()
    safe = _WHITESPACE.sub("_", safe)
    safe = safe[:MAX_NAME_LENGTH]
    return safe or fallback


def sanitize_path(path: str) -> str:
    """Collapse duplicate separators and strip leading/trailing ones."""
    return _REPEATED_SLASHES.sub("/", path).strip("/")
