"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from docsetgen.models import EntryKind

# ── Sample documentation tree ────────────────────────────────────────────

DOC_TREE_FILES = {
    "settings.html": "<html>settings</html>",
    "help.html": "<html>help</html>",
    "search-index.js": "var searchIndex = {};",
    "static.files/main.js": "// main",
    "src/mycrate/lib.rs.html": "<html>source</html>",
    "src/mycrate/fn.hidden.html": "<html>never indexed</html>",
    "implementors/mycrate/trait.Read.js": "implementors",
    "implementors/mycrate/struct.Ghost.html": "<html>never indexed</html>",
    "mycrate/index.html": "<html>mycrate</html>",
    "mycrate/all.html": "<html>all items</html>",
    "mycrate/sidebar-items.js": "window.SIDEBAR_ITEMS = {};",
    "mycrate/struct.Widget.html": "<html>Widget</html>",
    "mycrate/fn.build.html": "<html>build</html>",
    "mycrate/enum.Mode.html": "<html>Mode</html>",
    "mycrate/macro.log.html": "<html>log</html>",
    "mycrate/type.Result.html": "<html>Result</html>",
    "mycrate/io/index.html": "<html>io</html>",
    "mycrate/io/trait.Read.html": "<html>Read</html>",
    "mycrate/io/src/index.html": "<html>nested src</html>",
    "mycrate/io/src/const.MAX.html": "<html>MAX</html>",
}

EXPECTED_ENTRIES = {
    ("mycrate", EntryKind.PACKAGE, "mycrate/index.html"),
    ("mycrate::Widget", EntryKind.STRUCT, "mycrate/struct.Widget.html"),
    ("mycrate::build", EntryKind.FUNCTION, "mycrate/fn.build.html"),
    ("mycrate::Mode", EntryKind.ENUM, "mycrate/enum.Mode.html"),
    ("mycrate::log", EntryKind.MACRO, "mycrate/macro.log.html"),
    ("mycrate::Result", EntryKind.TYPE, "mycrate/type.Result.html"),
    ("mycrate::io::index", EntryKind.MODULE, "mycrate/io/index.html"),
    ("mycrate::io::Read", EntryKind.TRAIT, "mycrate/io/trait.Read.html"),
    ("mycrate::io::src::index", EntryKind.MODULE, "mycrate/io/src/index.html"),
    ("mycrate::io::src::MAX", EntryKind.CONSTANT, "mycrate/io/src/const.MAX.html"),
}


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Create ``files`` (relative path -> content) under ``root``."""
    for relative, content in files.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content)
    return root


def as_triples(entries) -> set[tuple[str, EntryKind, str]]:
    return {(entry.name, entry.kind, entry.page_path.as_posix()) for entry in entries}


@pytest.fixture
def doc_tree(tmp_path: Path) -> Path:
    """A small rustdoc-shaped documentation tree."""
    return write_tree(tmp_path / "doc", DOC_TREE_FILES)
