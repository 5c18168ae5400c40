"""Writer for the ``Info.plist`` descriptor of a docset."""

from __future__ import annotations

import logging
import plistlib
from pathlib import Path
from typing import Any, Dict, Optional

from docsetgen.errors import BundleWriteError

LOGGER = logging.getLogger(__name__)


def build_info_plist(
    name: str,
    index_package: Optional[str] = None,
    platform_family: Optional[str] = None,
) -> Dict[str, Any]:
    """Return the descriptor fields for a docset called ``name``.

    ``dashIndexFilePath`` is relative to the Documents directory. Without a
    platform family the bundle has neither an identifier nor a search keyword.
    """
    plist: Dict[str, Any] = {
        "CFBundleName": name,
        "isDashDocset": True,
        "isJavaScriptEnabled": True,
    }
    if index_package is not None:
        plist["dashIndexFilePath"] = f"{index_package}/index.html"
    if platform_family is not None:
        plist["CFBundleIdentifier"] = platform_family
        plist["DocSetPlatformFamily"] = platform_family
    return plist


def write_info_plist(
    plist_path: Path,
    name: str,
    index_package: Optional[str] = None,
    platform_family: Optional[str] = None,
) -> None:
    plist = build_info_plist(name, index_package, platform_family)
    try:
        with open(plist_path, "wb") as fh:
            plistlib.dump(plist, fh)
    except OSError as exc:
        raise BundleWriteError(f"Cannot write {plist_path}: {exc}", path=plist_path) from exc
    LOGGER.debug("Wrote %s", plist_path)
