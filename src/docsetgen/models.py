"""Core docsetgen data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath


class EntryKind(str, Enum):
    """Symbol kinds understood by Dash/Zeal search indexes."""

    PACKAGE = "Package"
    MODULE = "Module"
    STRUCT = "Struct"
    ENUM = "Enum"
    TRAIT = "Trait"
    FUNCTION = "Function"
    MACRO = "Macro"
    CONSTANT = "Constant"
    TYPE = "Type"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Entry:
    """One documentation symbol, as stored in the search index.

    ``page_path`` is always relative to the root of the documentation tree.
    """

    name: str
    kind: EntryKind
    page_path: PurePosixPath

    def as_row(self) -> tuple[str, str, str]:
        return (self.name, self.kind.value, self.page_path.as_posix())
