"""
Exceptions raised while recovering comment spacing.

Every error derives from :class:`SpaceRecoveryError` so callers can treat a
failed reconstruction as a single kind of failure, while still being able to
catch the built-in base (``ValueError`` / ``OSError`` / ``LookupError``) that
best describes it.
"""
from __future__ import annotations


class SpaceRecoveryError(Exception):
    """Base class for every failure of a single reconstruction attempt."""


class SourcePathError(SpaceRecoveryError, ValueError):
    """The supplied path or URI cannot be resolved to a location."""


class SourceReadError(SpaceRecoveryError, OSError):
    """The source file exists but could not be read or decoded."""


class NoCandidateLinesError(SpaceRecoveryError, LookupError):
    """The source offered no lines to match the comment against."""
