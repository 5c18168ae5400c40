"""Application configuration and naming defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import NamedTuple

from docsetgen.ingestion.walker import ROOT_SKIP_DIRS
from docsetgen.utils.files import list_directory

DEFAULT_OUTPUT_DIRNAME = "docset"
FALLBACK_DOCSET_NAME = "generated-docset"


class DocsetNaming(NamedTuple):
    name: str
    index_package: str | None
    platform_family: str | None


def find_packages(source_dir: Path) -> list[str]:
    """Return the top-level package directories of a documentation tree.

    A package is a directory directly below ``source_dir`` with its own
    ``index.html``.
    """
    return [
        child.name
        for child in list_directory(source_dir)
        if child.is_dir() and child.name not in ROOT_SKIP_DIRS and (child / "index.html").is_file()
    ]


@dataclass(slots=True)
class DocsetConfig:
    source_dir: Path
    output_dir: Path | None = None
    name: str | None = None
    index_package: str | None = None
    platform_family: str | None = None
    atomic: bool = False

    def __post_init__(self) -> None:
        self.source_dir = Path(self.source_dir)
        if self.output_dir is None:
            # Next to the documentation tree, like target/doc and target/docset.
            self.output_dir = self.source_dir.parent / DEFAULT_OUTPUT_DIRNAME

    def resolve_output_dir(self, base_dir: Path | None = None) -> Path:
        if Path(self.output_dir).is_absolute() or base_dir is None:
            return Path(self.output_dir)
        return base_dir / self.output_dir

    def resolve_naming(self) -> DocsetNaming:
        """Fill in unset naming values from the packages found in the source tree.

        With exactly one package, that package names the docset, provides the
        index page and the platform family. Otherwise only a descriptive name
        is derived.
        """
        if self.name is not None and self.index_package is not None and self.platform_family is not None:
            return DocsetNaming(self.name, self.index_package, self.platform_family)

        packages = find_packages(self.source_dir)
        single = packages[0] if len(packages) == 1 else None

        name = self.name
        if name is None:
            if single is not None:
                name = single
            elif packages:
                name = f"Docset for packages {', '.join(packages)}"
            else:
                name = FALLBACK_DOCSET_NAME

        return DocsetNaming(
            name,
            self.index_package if self.index_package is not None else single,
            self.platform_family if self.platform_family is not None else single,
        )
