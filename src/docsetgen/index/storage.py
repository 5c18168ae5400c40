"""SQLite search index in the layout Dash and Zeal read."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path, PurePosixPath
from typing import Iterable, Iterator, List

from docsetgen.errors import DuplicateEntryError, SearchIndexError
from docsetgen.models import Entry, EntryKind


class SearchIndexStore:
    """Persistence layer for the ``searchIndex`` table of a docset.

    Opening the store always starts from an empty file: an existing index at
    ``db_path`` is removed first.
    """

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)
        try:
            self.db_path.unlink(missing_ok=True)
            self._conn = sqlite3.connect(self.db_path)
        except (OSError, sqlite3.Error) as exc:
            raise SearchIndexError(f"Cannot open search index {self.db_path}: {exc}", path=self.db_path) from exc
        self._conn.row_factory = sqlite3.Row
        self._ensure_schema()

    @property
    def connection(self) -> sqlite3.Connection:
        return self._conn

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> "SearchIndexStore":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        try:
            yield self._conn
            self._conn.commit()
        except Exception:
            self._conn.rollback()
            raise

    def _ensure_schema(self) -> None:
        try:
            with self.transaction() as conn:
                conn.execute(
                    "CREATE TABLE searchIndex(id INTEGER PRIMARY KEY, name TEXT, type TEXT, path TEXT)"
                )
                conn.execute("CREATE UNIQUE INDEX anchor ON searchIndex (name, type, path)")
        except sqlite3.Error as exc:
            self._conn.close()
            raise SearchIndexError(f"Cannot create search index schema: {exc}", path=self.db_path) from exc

    def insert_entries(self, entries: Iterable[Entry]) -> int:
        """Insert all ``entries`` in a single transaction and return the row count.

        A duplicate ``(name, type, path)`` rolls back the whole batch.
        """
        rows = [entry.as_row() for entry in entries]
        try:
            with self.transaction() as conn:
                conn.executemany(
                    "INSERT INTO searchIndex (name, type, path) VALUES (?, ?, ?)",
                    rows,
                )
        except sqlite3.IntegrityError as exc:
            raise DuplicateEntryError(f"Duplicate search index entry: {exc}", path=self.db_path) from exc
        except sqlite3.Error as exc:
            raise SearchIndexError(f"Cannot write search index: {exc}", path=self.db_path) from exc
        return len(rows)

    def count(self) -> int:
        return self._conn.execute("SELECT COUNT(*) FROM searchIndex").fetchone()[0]

    def entries(self) -> List[Entry]:
        """Read back every stored entry, ordered by name then path."""
        rows = self._conn.execute(
            "SELECT name, type, path FROM searchIndex ORDER BY name, path"
        ).fetchall()
        return [Entry(row["name"], EntryKind(row["type"]), PurePosixPath(row["path"])) for row in rows]
