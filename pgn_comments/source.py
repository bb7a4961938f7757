"""
Source reader
=============

Resolves the location of a parsed PGN file and reads its lines.

The location may be a plain filesystem path or a ``file:`` URI such as the
ones produced by :meth:`pathlib.Path.as_uri`.  Lines keep their original
spacing; only the line terminators (``\\n``, ``\\r\\n`` or ``\\r``) are removed.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Union
from urllib.parse import urlparse
from urllib.request import url2pathname

from .errors import SourcePathError, SourceReadError

logger = logging.getLogger(__name__)

PathOrUri = Union[str, "os.PathLike[str]"]

_LOCAL_HOSTS = ("", "localhost")


def resolve_source_path(path_or_uri: PathOrUri) -> Path:
    """
    Turn *path_or_uri* into an existing filesystem :class:`~pathlib.Path`.

    Raises
    ------
    SourcePathError
        If the value is empty, uses a URI scheme other than ``file``, names a
        remote host, or does not point at an existing location.
    """
    raw = os.fspath(path_or_uri)
    if not raw:
        raise SourcePathError("empty source path")

    parsed = urlparse(raw)
    # A single-letter scheme is a Windows drive ("C:\\games\\x.pgn"), not a URI
    if len(parsed.scheme) > 1:
        if parsed.scheme.lower() != "file":
            raise SourcePathError(f"unsupported URI scheme {parsed.scheme!r}: {raw}")
        if parsed.netloc.lower() not in _LOCAL_HOSTS:
            raise SourcePathError(f"file URI names a remote host: {raw}")
        if not parsed.path:
            raise SourcePathError(f"file URI without a path: {raw}")
        path = Path(url2pathname(parsed.path))
    else:
        path = Path(raw)

    if not path.exists():
        raise SourcePathError(f"source file not found: {raw}")
    return path


def read_source_lines(path_or_uri: PathOrUri, encoding: str = "utf-8") -> List[str]:
    """
    Read every line of the source file at *path_or_uri*.

    Parameters
    ----------
    path_or_uri:
        Plain path or ``file:`` URI of the parsed PGN file.
    encoding:
        Text encoding of the file.

    Returns
    -------
    List[str]
        Lines without terminators.  A trailing newline does not produce an
        extra empty line; an empty file gives an empty list.

    Raises
    ------
    SourcePathError
        See :func:`resolve_source_path`.
    SourceReadError
        If the file cannot be opened, read or decoded, or *encoding* is not
        a known codec.
    """
    path = resolve_source_path(path_or_uri)
    try:
        # Universal newlines: "\r\n" and "\r" both arrive as "\n"
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        # LookupError: unknown codec name
        logger.error("Failed to read source %s: %s", path, exc)
        raise SourceReadError(f"cannot read {path}: {exc}") from exc

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    logger.debug("Read %d lines from %s", len(lines), path)
    return lines
