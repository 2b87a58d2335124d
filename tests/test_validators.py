"""Tests for stencil.validators — path and name checks."""

from __future__ import annotations

import pytest

from stencil.errors import InvalidInputError
from stencil.validators import (
    is_path_within_directory,
    validate_output_directory,
    validate_path,
    validate_target_name,
)


class TestValidatePath:
    @pytest.mark.parametrize("path", ["react-component", "src/components", ".", "a/b/../c"])
    def test_accepts(self, path):
        validate_path(path)

    @pytest.mark.parametrize("path", ["../secret", "a/../../b", "..", "/etc/passwd", "~/templates"])
    def test_rejects_traversal(self, path):
        with pytest.raises(InvalidInputError, match="directory traversal"):
            validate_path(path)

    def test_rejects_null_bytes(self):
        with pytest.raises(InvalidInputError, match="null bytes"):
            validate_path("a\0b")

    def test_rejects_empty(self):
        with pytest.raises(InvalidInputError):
            validate_path("")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            validate_path("../x")


class TestPathWithinDirectory:
    def test_inside(self, tmp_path):
        assert is_path_within_directory(tmp_path / "a" / "b", tmp_path)
        assert is_path_within_directory(tmp_path, tmp_path)

    def test_outside(self, tmp_path):
        assert not is_path_within_directory(tmp_path / ".." / "x", tmp_path)

    def test_sibling_with_common_prefix(self, tmp_path):
        root = tmp_path / "tpl"
        assert not is_path_within_directory(tmp_path / "tpl-other" / "x", root)


class TestValidateTargetName:
    @pytest.mark.parametrize("name", ["MyComponent", "my-component", "my_component", "My Component 2"])
    def test_accepts(self, name):
        assert validate_target_name(name) == name

    def test_trims(self):
        assert validate_target_name("  user profile  ") == "user profile"

    def test_rejects_empty(self):
        with pytest.raises(InvalidInputError, match="empty"):
            validate_target_name("   ")

    def test_rejects_too_long(self):
        with pytest.raises(InvalidInputError, match="100"):
            validate_target_name("a" * 101)

    @pytest.mark.parametrize("name", ["my/component", "comp<script>", "a.b", "name!"])
    def test_rejects_invalid_characters(self, name):
        with pytest.raises(InvalidInputError, match="letters, numbers"):
            validate_target_name(name)

    @pytest.mark.parametrize("name", ["---", "_", " - ", "_ -_"])
    def test_rejects_names_without_letters_or_digits(self, name):
        with pytest.raises(InvalidInputError, match="at least one letter or number"):
            validate_target_name(name)

    @pytest.mark.parametrize("name", ["con", "PRN", "Aux", "nul", "com1", "LPT9"])
    def test_rejects_reserved(self, name):
        with pytest.raises(InvalidInputError, match="reserved"):
            validate_target_name(name)


class TestValidateOutputDirectory:
    def test_accepts(self):
        validate_output_directory("Components", "src/components", "React components")
        validate_output_directory("Current", ".")

    @pytest.mark.parametrize("name,path", [("", "src"), ("Src", ""), ("Up", "../outside")])
    def test_rejects(self, name, path):
        with pytest.raises(InvalidInputError):
            validate_output_directory(name, path)
