"""Tests for vplan.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from vplan.core.config import (
    BuildTypeConfig,
    Declaration,
    SplitsConfig,
    load_declaration,
    load_declaration_or_default,
)
from vplan.core.result import Err, Ok


class TestDefaults:
    def test_abi_filters(self) -> None:
        assert Declaration().abi.filters == ("arm64-v8a", "armeabi-v7a", "x86_64")

    def test_release_shrinks_and_minifies(self) -> None:
        release = Declaration().release
        assert release.minify is True
        assert release.shrink_resources is True
        assert release.debug_symbol_level == "SYMBOL_TABLE"
        assert "proguard-rules.pro" in release.proguard_files

    def test_debug_does_not_shrink(self) -> None:
        assert Declaration().debug == BuildTypeConfig()

    def test_splits(self) -> None:
        assert Declaration().splits == SplitsConfig(abi=True, universal=True, density=True, language=False)

    def test_frozen(self) -> None:
        decl = Declaration()
        with pytest.raises(AttributeError):
            decl.app = None  # type: ignore[misc,assignment]


class TestFromDict:
    def test_empty_mapping_gives_defaults(self) -> None:
        assert Declaration.from_dict({}) == Declaration()

    def test_partial_tables_keep_other_defaults(self) -> None:
        decl = Declaration.from_dict({"splits": {"universal": False}, "app": {"application_id": "com.acme.game"}})
        assert decl.splits.universal is False
        assert decl.splits.abi is True
        assert decl.app.application_id == "com.acme.game"
        assert decl.app.debug_suffix == ".debug"

    def test_empty_filters_are_kept(self) -> None:
        decl = Declaration.from_dict({"abi": {"filters": []}})
        assert decl.abi.filters == ()

    def test_empty_debug_suffix_is_kept(self) -> None:
        decl = Declaration.from_dict({"app": {"debug_suffix": ""}})
        assert decl.app.debug_suffix == ""

    def test_build_type_overrides(self) -> None:
        decl = Declaration.from_dict({"release": {"minify": False}})
        assert decl.release.minify is False
        assert decl.release.shrink_resources is True

    def test_wrong_type_raises(self) -> None:
        with pytest.raises(TypeError):
            Declaration.from_dict({"splits": {"abi": "yes"}})


class TestLoadDeclaration:
    def test_load_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "vplan.toml"
        path.write_text(
            '[abi]\nfilters = ["arm64"]\n\n[packaging]\nformats = ["bundle"]\n',
            encoding="utf-8",
        )

        result = load_declaration(path)

        assert isinstance(result, Ok)
        assert result.value.abi.filters == ("arm64",)
        assert result.value.packaging.formats == ("bundle",)
        assert result.value.project_dir == tmp_path

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_declaration(tmp_path / "vplan.toml")
        assert isinstance(result, Err)
        assert "not found" in result.error.message
        assert result.error.hint is not None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "vplan.toml"
        path.write_text("[abi\nfilters = ", encoding="utf-8")

        result = load_declaration(path)

        assert isinstance(result, Err)
        assert "Invalid TOML syntax" in result.error.message

    def test_invalid_structure(self, tmp_path: Path) -> None:
        path = tmp_path / "vplan.toml"
        path.write_text('abi = "arm64"\n', encoding="utf-8")

        result = load_declaration(path)

        assert isinstance(result, Err)
        assert "Invalid config structure" in result.error.message
        assert result.error.path == path


class TestLoadDeclarationOrDefault:
    def test_absent_file_gives_defaults(self, tmp_path: Path) -> None:
        result = load_declaration_or_default(tmp_path / "vplan.toml")
        assert result == Ok(Declaration(project_dir=tmp_path))

    def test_broken_file_is_still_an_error(self, tmp_path: Path) -> None:
        path = tmp_path / "vplan.toml"
        path.write_text("not toml [", encoding="utf-8")
        assert isinstance(load_declaration_or_default(path), Err)

    def test_directory_is_a_config_error(self, tmp_path: Path) -> None:
        path = tmp_path / "vplan.toml"
        path.mkdir()

        result = load_declaration_or_default(path)

        assert isinstance(result, Err)
        assert "is a directory" in result.error.message
        assert result.error.path == path
