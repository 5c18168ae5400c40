"""Tests for application configuration."""

from __future__ import annotations

from pathlib import Path

from conftest import write_tree
from docsetgen.config import DocsetConfig, DocsetNaming, find_packages


class TestFindPackages:
    """Test find_packages function."""

    def test_single_package(self, doc_tree: Path) -> None:
        assert find_packages(doc_tree) == ["mycrate"]

    def test_ignores_directories_without_index(self, tmp_path: Path) -> None:
        root = write_tree(
            tmp_path / "doc",
            {"alpha/index.html": "", "static.files/main.js": "", "beta/index.html": ""},
        )

        assert find_packages(root) == ["alpha", "beta"]

    def test_ignores_root_skip_dirs(self, tmp_path: Path) -> None:
        root = write_tree(tmp_path / "doc", {"src/index.html": "", "implementors/index.html": ""})

        assert find_packages(root) == []


class TestDocsetConfig:
    """Test DocsetConfig dataclass."""

    def test_default_output_dir(self) -> None:
        """Should place the docset next to the documentation tree."""
        config = DocsetConfig(source_dir=Path("/project/target/doc"))

        assert config.output_dir == Path("/project/target/docset")
        assert config.atomic is False

    def test_source_dir_is_path(self) -> None:
        config = DocsetConfig(source_dir="/project/target/doc")  # type: ignore[arg-type]

        assert config.source_dir == Path("/project/target/doc")

    def test_resolve_output_dir_absolute(self) -> None:
        config = DocsetConfig(source_dir=Path("/doc"), output_dir=Path("/absolute/out"))

        assert config.resolve_output_dir(Path("/base")) == Path("/absolute/out")

    def test_resolve_output_dir_relative_no_base(self) -> None:
        config = DocsetConfig(source_dir=Path("/doc"), output_dir=Path("relative/out"))

        assert config.resolve_output_dir(base_dir=None) == Path("relative/out")

    def test_resolve_output_dir_relative_with_base(self) -> None:
        config = DocsetConfig(source_dir=Path("/doc"), output_dir=Path("relative/out"))

        assert config.resolve_output_dir(Path("/base")) == Path("/base/relative/out")


class TestResolveNaming:
    """Test naming defaults."""

    def test_single_package_supplies_everything(self, doc_tree: Path) -> None:
        naming = DocsetConfig(source_dir=doc_tree).resolve_naming()

        assert naming == DocsetNaming("mycrate", "mycrate", "mycrate")

    def test_explicit_values_win(self, doc_tree: Path) -> None:
        config = DocsetConfig(source_dir=doc_tree, name="My Crate", platform_family="mc")

        assert config.resolve_naming() == DocsetNaming("My Crate", "mycrate", "mc")

    def test_all_explicit_does_not_read_tree(self, tmp_path: Path) -> None:
        config = DocsetConfig(
            source_dir=tmp_path / "missing",
            name="n",
            index_package="i",
            platform_family="p",
        )

        assert config.resolve_naming() == DocsetNaming("n", "i", "p")

    def test_multiple_packages(self, tmp_path: Path) -> None:
        root = write_tree(tmp_path / "doc", {"beta/index.html": "", "alpha/index.html": ""})

        naming = DocsetConfig(source_dir=root).resolve_naming()

        assert naming == DocsetNaming("Docset for packages alpha, beta", None, None)

    def test_no_packages(self, tmp_path: Path) -> None:
        root = tmp_path / "doc"
        root.mkdir()

        naming = DocsetConfig(source_dir=root).resolve_naming()

        assert naming == DocsetNaming("generated-docset", None, None)
