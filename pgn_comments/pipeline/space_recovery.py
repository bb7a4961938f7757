"""
SpaceRecoverer
==============

Recovers the spaces a PGN parser stripped from brace comments.

Pipeline stages:

1. :func:`~pgn_comments.source.read_source_lines`
   – Read the original PGN file once.
2. :class:`~pgn_comments.matching.nearest_line.NearestLineSearch`
   – Pick the line with the smallest Levenshtein distance to the comment.
3. :class:`~pgn_comments.passes.boundary_trim.BoundaryTrimPass`
   – Cut trailing notation after the last ``}`` when the line does not match
   the comment as is.

The result is always one source line, possibly truncated, so the spacing it
carries is the spacing of the original file.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from ..matching.nearest_line import NearestLineSearch
from ..models import Reconstruction
from ..passes.boundary_trim import COMMENT_CLOSE, BoundaryTrimPass, matches_ignoring_spaces
from ..source import PathOrUri, read_source_lines

logger = logging.getLogger(__name__)


class SpaceRecoverer:
    """
    High-level facade for comment space recovery.

    Parameters
    ----------
    encoding:
        Text encoding of the PGN files to read.
    closing_delimiter:
        Character that closes a comment block.
    """

    def __init__(
        self,
        encoding: str = "utf-8",
        closing_delimiter: str = COMMENT_CLOSE,
    ) -> None:
        self.encoding = encoding
        self._search = NearestLineSearch()
        self._trim = BoundaryTrimPass(closing_delimiter)

    # ------------------------------------------------------------------
    # Primary API
    # ------------------------------------------------------------------

    def recover_spaces(self, mangled_comment: str, file_path: PathOrUri) -> str:
        """
        Recover spaces in a comment removed during the parsing process.

        Parameters
        ----------
        mangled_comment:
            Comment as retrieved from the parsing process.
        file_path:
            Path or ``file:`` URI of the parsed PGN file.

        Returns
        -------
        str
            The comment with its original spacing, best effort.
        """
        return self.reconstruct(mangled_comment, file_path).text

    def reconstruct(self, mangled_comment: str, file_path: PathOrUri) -> Reconstruction:
        """Like :meth:`recover_spaces` but returns the full :class:`Reconstruction`."""
        lines = read_source_lines(file_path, encoding=self.encoding)
        return self.reconstruct_lines(mangled_comment, lines)

    def reconstruct_all(
        self,
        mangled_comments: Iterable[str],
        file_path: PathOrUri,
    ) -> List[Reconstruction]:
        """
        Recover several comments taken from the **same** file.

        The file is read once; results follow the order of *mangled_comments*.
        """
        lines = read_source_lines(file_path, encoding=self.encoding)
        return [self.reconstruct_lines(c, lines) for c in mangled_comments]

    def reconstruct_lines(
        self,
        mangled_comment: str,
        lines: Sequence[str],
    ) -> Reconstruction:
        """
        Run the search and trim stages against lines already in memory.

        Raises
        ------
        NoCandidateLinesError
            If *lines* is empty.
        """
        match = self._search.run(mangled_comment, lines)
        text = self._trim.run(mangled_comment, match.line)
        result = Reconstruction(
            comment=mangled_comment,
            text=text,
            line_index=match.index,
            distance=match.distance,
            trimmed=text != match.line,
            exact=matches_ignoring_spaces(mangled_comment, text),
        )
        logger.debug("Retrieved comment is:\n%s", text)
        return result


def recover_spaces(mangled_comment: str, file_path: PathOrUri) -> str:
    """Shortcut for ``SpaceRecoverer().recover_spaces(...)`` with defaults."""
    return SpaceRecoverer().recover_spaces(mangled_comment, file_path)
