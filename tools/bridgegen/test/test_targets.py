"""Tests for target selection and output directory resolution."""

from pathlib import Path

import pytest

from tools.bridgegen.schema import BridgeGenError, UnsupportedTargetError
from tools.bridgegen.targets import (
    SUPPORTED_TARGETS,
    output_filename,
    parse_targets,
    resolve_out_dir,
)


class TestParseTargets:
    def test_default_is_all(self):
        assert parse_targets() == ["ts", "js", "java", "objc", "cpp"]

    def test_all_flag_matches_default(self):
        assert parse_targets(all_targets=True) == parse_targets()

    def test_all_flag_wins_over_lang(self):
        assert parse_targets("ts", all_targets=True) == list(SUPPORTED_TARGETS)

    def test_subset(self):
        assert parse_targets("ts,java") == ["ts", "java"]

    def test_whitespace_and_empty_items(self):
        assert parse_targets(" ts , ,cpp,") == ["ts", "cpp"]

    def test_duplicates_dropped(self):
        assert parse_targets("js,js,ts") == ["js", "ts"]

    def test_empty_value_selects_nothing(self):
        assert parse_targets("") == []

    def test_unsupported(self):
        with pytest.raises(UnsupportedTargetError) as exc:
            parse_targets("foo")
        assert "foo" in str(exc.value)
        assert "ts,js,java,objc,cpp" in str(exc.value)
        assert exc.value.invalid == ["foo"]

    def test_unsupported_lists_every_bad_value(self):
        with pytest.raises(UnsupportedTargetError) as exc:
            parse_targets("ts,go,rust")
        assert exc.value.invalid == ["go", "rust"]
        assert "go, rust" in str(exc.value)


class TestResolveOutDir:
    def test_default(self, tmp_path):
        assert resolve_out_dir(None, tmp_path) == tmp_path / "generated"

    def test_blank_is_default(self, tmp_path):
        assert resolve_out_dir("  ", tmp_path) == tmp_path / "generated"

    def test_relative(self, tmp_path):
        assert resolve_out_dir("relative/dir", tmp_path) == tmp_path / "relative" / "dir"

    def test_absolute(self, tmp_path):
        target = tmp_path / "abs" / "dir"
        assert resolve_out_dir(str(target), "/somewhere/else") == target

    def test_home(self, tmp_path, monkeypatch):
        home = tmp_path / "home"
        monkeypatch.setenv("HOME", str(home))
        assert resolve_out_dir("~/out", "/project") == home / "out"

    def test_bare_tilde(self, tmp_path, monkeypatch):
        home = tmp_path / "home"
        monkeypatch.setenv("HOME", str(home))
        assert resolve_out_dir("~", "/project") == home

    def test_home_not_found(self, monkeypatch):
        def no_home():
            raise RuntimeError("Could not determine home directory.")
        monkeypatch.setattr(Path, "home", staticmethod(no_home))
        with pytest.raises(BridgeGenError, match="~/out"):
            resolve_out_dir("~/out", "/project")

    def test_home_not_needed_without_tilde(self, tmp_path, monkeypatch):
        def no_home():
            raise RuntimeError("Could not determine home directory.")
        monkeypatch.setattr(Path, "home", staticmethod(no_home))
        assert resolve_out_dir("out", tmp_path) == tmp_path / "out"

    def test_returns_path(self, tmp_path):
        assert isinstance(resolve_out_dir("x", str(tmp_path)), Path)


class TestOutputFilename:
    @pytest.mark.parametrize("target,name", [
        ("ts", "JsBridge.d.ts"),
        ("js", "JsBridge.js"),
        ("java", "JsBridge.java"),
        ("objc", "JsBridge.h"),
        ("cpp", "JsBridge.hpp"),
    ])
    def test_names(self, target, name):
        assert output_filename(target, "JsBridge") == name
