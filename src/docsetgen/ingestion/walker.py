"""Recursive walk of a generated documentation tree."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from docsetgen.ingestion.classifier import classify_page
from docsetgen.models import Entry
from docsetgen.utils.files import list_directory
from docsetgen.utils.text import qualify

LOGGER = logging.getLogger(__name__)

# Source listings and trait implementor tables at the top of the tree.
ROOT_SKIP_DIRS = frozenset({"src", "implementors"})


def walk_tree(root: Path) -> list[Entry]:
    """Collect every entry reachable from ``root``.

    The order of the returned list follows the traversal and carries no
    meaning; callers needing a stable order must sort it themselves.
    """
    return _walk(Path(root), Path(root), None)


def _walk(root: Path, directory: Path, qualified: Optional[str]) -> list[Entry]:
    entries: list[Entry] = []
    subdirs: list[tuple[Path, str]] = []

    for child in list_directory(directory):
        if child.is_dir() and not child.is_symlink():
            if qualified is None and child.name in ROOT_SKIP_DIRS:
                LOGGER.debug("Skipping %s", child)
                continue
            subdirs.append((child, qualify(qualified, child.name)))
            continue
        entry = classify_page(qualified, root, child)
        if entry is not None:
            entries.append(entry)

    for subdir, sub_qualified in subdirs:
        LOGGER.debug("Walking %s as %s", subdir, sub_qualified)
        entries.extend(_walk(root, subdir, sub_qualified))
    return entries
