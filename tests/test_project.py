"""Unit tests for project name rules and target resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from reactgen.cli._project import (
    ProjectTarget,
    TargetError,
    directory_to_project_name,
    resolve_target,
    validate_project_name,
)


class TestValidateProjectName:
    @pytest.mark.parametrize("name", ["my-app", "@scope-app", "My App", "app.v2", "ünï"])
    def test_valid(self, name: str) -> None:
        assert validate_project_name(name)

    @pytest.mark.parametrize("char", list('<>:;,?"*|/\\'))
    def test_rejects_reserved_characters(self, char: str) -> None:
        assert not validate_project_name(f"my{char}app")

    def test_rejects_empty(self) -> None:
        assert not validate_project_name("")


class TestDirectoryToProjectName:
    @pytest.mark.parametrize(
        ("directory", "expected"),
        [
            ("My App", "my-app"),
            ("--Hello__World--", "hello-world"),
            ("already-fine", "already-fine"),
            ("v2.0 release!", "v2-0-release"),
            ("!!!", ""),
        ],
    )
    def test_conversion(self, directory: str, expected: str) -> None:
        assert directory_to_project_name(directory) == expected


class TestResolveTarget:
    def test_returns_target(self, tmp_path: Path) -> None:
        result = resolve_target("my-app", tmp_path)

        assert result == ProjectTarget(folder=tmp_path / "my-app", basename="my-app")

    def test_nested_path_uses_basename(self, tmp_path: Path) -> None:
        result = resolve_target("apps/web", tmp_path)

        assert isinstance(result, ProjectTarget)
        assert result.folder == tmp_path / "apps" / "web"
        assert result.basename == "web"

    def test_missing_name(self, tmp_path: Path) -> None:
        result = resolve_target("", tmp_path)

        assert isinstance(result, TargetError)
        assert "specify the project name" in result.message

    def test_existing_folder(self, tmp_path: Path) -> None:
        (tmp_path / "taken").mkdir()

        result = resolve_target("taken", tmp_path)

        assert isinstance(result, TargetError)
        assert "already exists" in result.message
        assert result.value == str(tmp_path / "taken")

    def test_invalid_name(self, tmp_path: Path) -> None:
        result = resolve_target("bad?name", tmp_path)

        assert isinstance(result, TargetError)
        assert "naming restrictions" in result.message
        assert result.value == "bad?name"

    def test_does_not_touch_filesystem(self, tmp_path: Path) -> None:
        resolve_target("fresh", tmp_path)

        assert not (tmp_path / "fresh").exists()
