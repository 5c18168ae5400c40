"""Exception hierarchy shared by the walk, index and bundle stages.

Every failure is fatal to a run: library code raises one of these and the
command line front-end turns it into an ``Error:`` line and a non-zero exit.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

__all__ = [
    "DocsetError",
    "DirectoryReadError",
    "BundleWriteError",
    "SearchIndexError",
    "DuplicateEntryError",
    "MalformedEntryError",
    "ConfigurationError",
]


class DocsetError(RuntimeError):
    """Base exception for docset generation failures."""

    def __init__(self, message: str, *, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class DirectoryReadError(DocsetError):
    """Raised when a directory of the source tree cannot be listed."""


class BundleWriteError(DocsetError):
    """Raised when the bundle layout, copied content or descriptor cannot be written."""


class SearchIndexError(DocsetError):
    """Raised when the sqlite search index cannot be opened, created or filled."""


class DuplicateEntryError(SearchIndexError):
    """Raised when two entries share the same ``(name, type, path)`` triple."""


class MalformedEntryError(DocsetError):
    """Raised when a symbol page is found outside of any package directory."""


class ConfigurationError(DocsetError):
    """Raised when command line or configuration inputs are inconsistent."""
