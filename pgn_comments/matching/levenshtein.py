"""
Levenshtein distance
====================

Minimum number of single-character insertions, deletions or substitutions
needed to turn one string into another, computed by the ``Levenshtein``
C extension.
"""
from __future__ import annotations

import Levenshtein


def levenshtein_distance(a: str, b: str) -> int:
    """
    Return the edit distance between *a* and *b*.

    >>> levenshtein_distance("kitten", "sitting")
    3
    >>> levenshtein_distance("", "abc")
    3
    """
    return Levenshtein.distance(a, b)
