"""Helpers for qualified symbol paths and page file names."""

from __future__ import annotations

from typing import Optional

PATH_SEPARATOR = "::"


def qualify(prefix: Optional[str], name: str) -> str:
    """Append ``name`` to a ``::``-joined path, or start a new one."""
    if prefix is None:
        return name
    return f"{prefix}{PATH_SEPARATOR}{name}"


def is_nested(qualified: str) -> bool:
    return PATH_SEPARATOR in qualified


def filename_tokens(filename: str) -> list[str]:
    """Split a page file name such as ``struct.Foo.html`` on dots."""
    return filename.split(".")
