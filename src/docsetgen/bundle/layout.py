"""Fixed directory layout of a ``.docset`` bundle."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from docsetgen.errors import BundleWriteError
from docsetgen.index.indexer import INDEX_FILENAME

DOCSET_SUFFIX = ".docset"


def docset_dirname(name: str) -> str:
    return f"{name}{DOCSET_SUFFIX}"


@dataclass(frozen=True, slots=True)
class DocsetLayout:
    """Paths inside a bundle rooted at ``root``::

        <root>/Contents/Info.plist
        <root>/Contents/Resources/docSet.dsidx
        <root>/Contents/Resources/Documents/...
    """

    root: Path

    @property
    def contents(self) -> Path:
        return self.root / "Contents"

    @property
    def resources(self) -> Path:
        return self.contents / "Resources"

    @property
    def documents(self) -> Path:
        return self.resources / "Documents"

    @property
    def index_path(self) -> Path:
        return self.resources / INDEX_FILENAME

    @property
    def plist_path(self) -> Path:
        return self.contents / "Info.plist"

    def create(self) -> None:
        """Create the empty directory skeleton."""
        try:
            self.documents.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise BundleWriteError(f"Cannot create {self.documents}: {exc}", path=self.documents) from exc
