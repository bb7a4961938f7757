"""
Core data models for comment space recovery.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class LineMatch:
    """The source line nearest to a mangled comment."""

    index: int       # 0-based line number in the source file
    line: str        # Raw line text, spaces included
    distance: int    # Levenshtein distance to the mangled comment

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "line": self.line,
            "distance": self.distance,
        }


@dataclass(frozen=True)
class Reconstruction:
    """
    Result of recovering the spacing of one comment.

    ``text`` is the recovered comment: the nearest source line, possibly cut
    after its last closing delimiter.  ``trimmed`` is true when ``text`` is
    shorter than the source line (a line already ending in the delimiter is
    not reported as trimmed), and ``exact`` whether ``text`` equals
    ``comment`` once spaces are ignored.
    """

    comment: str
    text: str
    line_index: int
    distance: int
    trimmed: bool
    exact: bool

    def __repr__(self) -> str:
        return (
            f"Reconstruction(line={self.line_index}, distance={self.distance}, "
            f"trimmed={self.trimmed}, exact={self.exact}, text={self.text!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "comment": self.comment,
            "text": self.text,
            "line_index": self.line_index,
            "distance": self.distance,
            "trimmed": self.trimmed,
            "exact": self.exact,
        }
