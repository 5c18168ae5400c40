"""Search index generation for a docset bundle."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from docsetgen.index.storage import SearchIndexStore
from docsetgen.models import Entry, EntryKind

LOGGER = logging.getLogger(__name__)

INDEX_FILENAME = "docSet.dsidx"


@dataclass(slots=True)
class IndexStats:
    total: int = 0
    by_kind: Counter = field(default_factory=Counter)

    def add(self, kind: EntryKind) -> None:
        self.total += 1
        self.by_kind[kind] += 1

    def summary(self) -> str:
        if not self.total:
            return "0 entries"
        parts = ", ".join(f"{count} {kind.value}" for kind, count in sorted(self.by_kind.items()))
        return f"{self.total} entries ({parts})"


def generate_search_index(resources_dir: Path, entries: Sequence[Entry]) -> IndexStats:
    """Write ``entries`` to ``resources_dir/docSet.dsidx``, replacing any previous index."""
    db_path = Path(resources_dir) / INDEX_FILENAME
    LOGGER.info("Writing %d entries to %s", len(entries), db_path)

    with SearchIndexStore(db_path) as store:
        store.insert_entries(entries)

    stats = IndexStats()
    for entry in entries:
        stats.add(entry.kind)
    return stats
