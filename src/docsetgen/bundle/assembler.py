"""Docset assembly pipeline.

By default the bundle is rebuilt in place: an existing bundle is deleted
before anything else happens, so a failure in a later step leaves the
destination missing or half built. Pass ``atomic=True`` to build into a
staging directory next to the destination and only swap it in once the
index, copied pages and descriptor are all written.
"""

from __future__ import annotations

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from docsetgen.bundle.layout import DocsetLayout, docset_dirname
from docsetgen.bundle.plist import write_info_plist
from docsetgen.errors import BundleWriteError, ConfigurationError
from docsetgen.index.indexer import IndexStats, generate_search_index
from docsetgen.ingestion.walker import walk_tree
from docsetgen.utils.files import copy_tree, remove_tree

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class AssemblyResult:
    docset_path: Path
    stats: IndexStats
    copied_files: int


def assemble_docset(
    source_dir: Path,
    output_dir: Path,
    name: str,
    index_package: Optional[str] = None,
    platform_family: Optional[str] = None,
    *,
    atomic: bool = False,
) -> AssemblyResult:
    """Build ``output_dir/<name>.docset`` from the HTML tree at ``source_dir``."""
    source_dir = Path(source_dir)
    docset_path = Path(output_dir) / docset_dirname(name)

    if docset_path.resolve().is_relative_to(source_dir.resolve()):
        raise ConfigurationError(
            f"Docset {docset_path} would be written inside the documentation tree {source_dir}",
            path=docset_path,
        )

    if atomic:
        return _assemble_staged(source_dir, docset_path, name, index_package, platform_family)

    if remove_tree(docset_path):
        LOGGER.info("Removed previous docset at %s", docset_path)
    layout = DocsetLayout(docset_path)
    layout.create()
    stats, copied = _populate(layout, source_dir, name, index_package, platform_family)
    return AssemblyResult(docset_path, stats, copied)


def _populate(
    layout: DocsetLayout,
    source_dir: Path,
    name: str,
    index_package: Optional[str],
    platform_family: Optional[str],
) -> tuple[IndexStats, int]:
    LOGGER.info("Indexing %s", source_dir)
    entries = walk_tree(source_dir)
    stats = generate_search_index(layout.resources, entries)

    LOGGER.info("Copying documentation into %s", layout.documents)
    copied = copy_tree(source_dir, layout.documents)

    if platform_family is None:
        LOGGER.warning(
            "No docset platform family was provided and none could be derived; "
            "the docset will have no identifier or search keyword. "
            "Consider passing --platform-family."
        )
    write_info_plist(layout.plist_path, name, index_package, platform_family)
    return stats, copied


def _assemble_staged(
    source_dir: Path,
    docset_path: Path,
    name: str,
    index_package: Optional[str],
    platform_family: Optional[str],
) -> AssemblyResult:
    parent = docset_path.parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
        staging = Path(tempfile.mkdtemp(prefix=f".{docset_path.name}.", dir=parent))
        # mkdtemp creates 0700; the installed bundle gets the usual umask mode.
        os.chmod(staging, 0o777 & ~_current_umask())
    except OSError as exc:
        raise BundleWriteError(f"Cannot create staging directory in {parent}: {exc}", path=parent) from exc

    LOGGER.debug("Staging docset in %s", staging)
    try:
        layout = DocsetLayout(staging)
        layout.create()
        stats, copied = _populate(layout, source_dir, name, index_package, platform_family)
    except BaseException:
        remove_tree(staging)
        raise

    backup = staging.with_name(f"{staging.name}.old")
    try:
        if docset_path.exists():
            docset_path.rename(backup)
        staging.rename(docset_path)
    except OSError as exc:
        remove_tree(staging)
        if backup.exists() and not docset_path.exists():
            backup.rename(docset_path)
        raise BundleWriteError(f"Cannot move docset into {docset_path}: {exc}", path=docset_path) from exc
    remove_tree(backup)
    return AssemblyResult(docset_path, stats, copied)


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask
