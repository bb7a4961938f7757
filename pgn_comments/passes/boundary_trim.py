"""
BoundaryTrimPass
================

Corrects the nearest-line guess to the boundary of the enclosing comment.

A PGN line often carries more than the comment itself: the brace comment may
be followed by moves, a result token or the start of another comment on the
same line.  When the guess does not already equal the parsed comment once
spaces are ignored, everything after the last closing delimiter is dropped.

The equality check after trimming is informational only; the trimmed text is
returned whether or not it matches.
"""
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

COMMENT_CLOSE = "}"


def strip_spaces(text: str) -> str:
    """Remove every space character, as the PGN parser does."""
    return text.replace(" ", "")


def matches_ignoring_spaces(a: str, b: str) -> bool:
    return strip_spaces(a) == strip_spaces(b)


class BoundaryTrimPass:
    """Trims a guessed line after its last closing delimiter."""

    def __init__(self, closing_delimiter: str = COMMENT_CLOSE) -> None:
        if len(closing_delimiter) != 1:
            raise ValueError(
                f"closing delimiter must be a single character, got {closing_delimiter!r}"
            )
        self.closing_delimiter = closing_delimiter

    def run(self, comment: str, guess: str) -> str:
        """
        Apply the pass to a single guessed line.

        Parameters
        ----------
        comment:
            Comment as retrieved from the parsing process (spaces removed).
        guess:
            Nearest source line, original spacing intact.

        Returns
        -------
        str
            *guess* unchanged when it already matches or has no closing
            delimiter, otherwise *guess* cut right after its last delimiter.
        """
        same = matches_ignoring_spaces(comment, guess)
        logger.debug("Same? %s", same)
        if same:
            return guess

        last = guess.rfind(self.closing_delimiter)
        if last == -1:
            return guess

        trimmed = guess[: last + 1]
        logger.debug("Same after trim? %s", matches_ignoring_spaces(comment, trimmed))
        return trimmed
