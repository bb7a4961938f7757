"""
PGN Comments
============

Recovers the spaces that a PGN (chess game record) parser strips from brace
comments, by locating the comment's line in the original file.

Quick start
-----------
>>> from pgn_comments import recover_spaces
>>> recover_spaces("{Lasblancastienendospiezas.}", "games/Partida_08.pgn")
'{Las blancas tienen dos piezas.}'

For several comments from the same file, or for the match details, use
:class:`SpaceRecoverer` directly:

>>> from pgn_comments import SpaceRecoverer
>>> for r in SpaceRecoverer().reconstruct_all(comments, "games/Partida_08.pgn"):
...     print(r.line_index, r.trimmed, r.text)
"""

from .errors import (
    NoCandidateLinesError,
    SourcePathError,
    SourceReadError,
    SpaceRecoveryError,
)
from .matching.levenshtein import levenshtein_distance
from .models import LineMatch, Reconstruction
from .pipeline.space_recovery import SpaceRecoverer, recover_spaces

__version__ = "0.1.0"
__all__ = [
    "LineMatch",
    "Reconstruction",
    "SpaceRecoverer",
    "recover_spaces",
    "levenshtein_distance",
    "SpaceRecoveryError",
    "SourcePathError",
    "SourceReadError",
    "NoCandidateLinesError",
]
