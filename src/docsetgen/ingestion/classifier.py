"""Turn generated HTML page file names into search index entries.

The documentation generator encodes the kind of each symbol in its page
file name:

* ``index.html`` is the page of the enclosing package or module;
* ``<kind>.<Name>.html`` is the page of a single item, where ``<kind>`` is
  one of the tokens in :data:`KIND_TOKENS`.

Every other file is ignored.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Optional

from docsetgen.errors import MalformedEntryError
from docsetgen.models import Entry, EntryKind
from docsetgen.utils.text import filename_tokens, is_nested, qualify

HTML_SUFFIX = ".html"
INDEX_TOKEN = "index"

KIND_TOKENS: dict[str, EntryKind] = {
    "const": EntryKind.CONSTANT,
    "enum": EntryKind.ENUM,
    "fn": EntryKind.FUNCTION,
    "macro": EntryKind.MACRO,
    "trait": EntryKind.TRAIT,
    "struct": EntryKind.STRUCT,
    "type": EntryKind.TYPE,
}


def relative_page_path(root: Path, file_path: Path) -> PurePosixPath:
    return PurePosixPath(file_path.relative_to(root).as_posix())


def classify_page(qualified: Optional[str], root: Path, file_path: Path) -> Optional[Entry]:
    """Classify ``file_path`` found in the directory whose qualified path is ``qualified``.

    ``qualified`` is ``None`` for files sitting directly in ``root``.
    """
    if file_path.suffix != HTML_SUFFIX:
        return None

    tokens = filename_tokens(file_path.name)
    page_path = relative_page_path(root, file_path)

    if len(tokens) == 2:
        if tokens[0] != INDEX_TOKEN or qualified is None:
            return None
        if is_nested(qualified):
            # Module pages keep the "::index" suffix.
            return Entry(qualify(qualified, tokens[0]), EntryKind.MODULE, page_path)
        return Entry(qualified, EntryKind.PACKAGE, page_path)

    if len(tokens) == 3:
        kind = KIND_TOKENS.get(tokens[0])
        if kind is None:
            return None
        if qualified is None:
            raise MalformedEntryError(
                f"{kind} page {file_path.name} is not inside a package directory",
                path=file_path,
            )
        return Entry(qualify(qualified, tokens[1]), kind, page_path)

    return None
