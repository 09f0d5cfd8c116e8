"""Shared fixtures for the reactgen test suite."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from reactgen.cli._errors import CommandNotFoundError
from reactgen.cli._types import Bundler, Language, PackageManager, ProjectOptions

TreeFactory = Callable[[dict[str, str]], Path]


class FakeRunner:
    """Records commands instead of spawning processes."""

    def __init__(
        self,
        failing: set[str] | None = None,
        missing: set[str] | None = None,
        outputs: dict[tuple[str, ...], str] | None = None,
    ) -> None:
        self.failing = failing or set()
        self.missing = missing or set()
        self.outputs = outputs or {}
        self.calls: list[tuple[str, list[str], Path | None]] = []

    def run(
        self,
        command: str,
        args: list[str],
        cwd: Path | None = None,
        quiet: bool = False,
    ) -> bool:
        if command in self.missing:
            raise CommandNotFoundError(command)
        self.calls.append((command, args, cwd))
        return " ".join([command, *args]) not in self.failing

    def output(self, command: str, args: list[str]) -> str:
        return self.outputs.get((command, *args), "")

    @property
    def commands(self) -> list[str]:
        return [" ".join([command, *args]) for command, args, _ in self.calls]


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def options(tmp_path: Path) -> ProjectOptions:
    return ProjectOptions(
        target_path=tmp_path / "target",
        slug="my-library",
        description="A test library",
        author_name="John Doe",
        author_email="john@example.com",
        author_url="https://johndoe.com",
        repo_url="https://github.com/johndoe/my-library",
        language=Language.TYPESCRIPT,
        bundler=Bundler.VITE,
        package_manager=PackageManager.YARN,
    )


@pytest.fixture
def make_tree(tmp_path: Path) -> TreeFactory:
    """Write ``{relative path: content}`` under a fresh template directory."""

    def _make(files: dict[str, str]) -> Path:
        root = tmp_path / "templates"
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def make_runner() -> type[FakeRunner]:
    return FakeRunner
