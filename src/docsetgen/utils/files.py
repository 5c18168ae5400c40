"""Utility helpers for working with files."""

from __future__ import annotations

import shutil
from pathlib import Path

from docsetgen.errors import BundleWriteError, DirectoryReadError


def list_directory(directory: Path) -> list[Path]:
    """Return the children of ``directory``, sorted by name."""
    try:
        return sorted(directory.iterdir())
    except OSError as exc:
        raise DirectoryReadError(f"Cannot read directory {directory}: {exc}", path=directory) from exc


def copy_tree(source: Path, destination: Path) -> int:
    """Copy regular files and directories from ``source`` into ``destination``.

    Anything that is neither a regular file nor a directory (sockets, FIFOs,
    dangling links) is skipped, as are links to directories. Links to files
    are copied as files. Returns the number of files copied.
    """
    try:
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise BundleWriteError(f"Cannot create directory {destination}: {exc}", path=destination) from exc

    copied = 0
    for child in list_directory(source):
        target = destination / child.name
        if child.is_dir() and not child.is_symlink():
            copied += copy_tree(child, target)
        elif child.is_file():
            try:
                shutil.copy2(child, target)
            except OSError as exc:
                raise BundleWriteError(f"Cannot copy {child} to {target}: {exc}", path=target) from exc
            copied += 1
    return copied


def remove_tree(path: Path) -> bool:
    """Delete ``path`` recursively if it exists; return whether anything was removed."""
    if not path.exists():
        return False
    try:
        shutil.rmtree(path)
    except OSError as exc:
        raise BundleWriteError(f"Cannot remove {path}: {exc}", path=path) from exc
    return True
