"""Edit-distance string similarity."""

import Levenshtein


def levenshtein_distance(a: str, b: str) -> int:
    """Unit-cost insert/delete/substitute edit distance."""
    return Levenshtein.distance(a, b)


def string_similarity(a: str, b: str) -> float:
    """
    1 - distance / max(len(a), len(b)), in [0, 1].
    Two empty strings are identical (1.0).
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein_distance(a, b) / longest
