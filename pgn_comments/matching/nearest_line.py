"""
NearestLineSearch
=================

Finds the source line closest to a mangled comment.

Every line is scored with :func:`~pgn_comments.matching.levenshtein.levenshtein_distance`
against the *raw* line text (spaces included).  The best match is only
replaced on a strictly smaller distance, so among equally distant lines the
first one in the file wins.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..errors import NoCandidateLinesError
from ..models import LineMatch
from .levenshtein import levenshtein_distance

logger = logging.getLogger(__name__)


class NearestLineSearch:
    """Selects the minimum-distance line for a comment."""

    def run(self, comment: str, lines: Sequence[str]) -> LineMatch:
        """
        Score *lines* against *comment* and return the nearest one.

        Parameters
        ----------
        comment:
            Comment text as produced by the PGN parser (spaces removed).
        lines:
            Source lines with their original spacing.

        Returns
        -------
        LineMatch
            Index, text and distance of the selected line.

        Raises
        ------
        NoCandidateLinesError
            If *lines* is empty.
        """
        best: Optional[LineMatch] = None
        for index, line in enumerate(lines):
            distance = levenshtein_distance(comment, line)
            logger.debug("line %d distance %d", index, distance)
            if best is None or distance < best.distance:
                best = LineMatch(index=index, line=line, distance=distance)

        if best is None:
            raise NoCandidateLinesError(
                "no candidate lines to match the comment against"
            )

        logger.debug("lineIndex %d (distance %d)", best.index, best.distance)
        return best
