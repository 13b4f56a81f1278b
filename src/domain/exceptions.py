"""Domain level exceptions."""


class PathResolutionError(ValueError):
    """Problem metadata cannot be mapped to storage paths."""

    pass
