"""Enums and records for CLI options."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Language(str, Enum):
    """Source language of the generated project."""

    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"

    @property
    def label(self) -> str:
        labels: dict[Language, str] = {
            Language.JAVASCRIPT: "JavaScript",
            Language.TYPESCRIPT: "TypeScript",
        }
        return labels[self]


class Bundler(str, Enum):
    """Bundler wired into the generated project."""

    VITE = "vite"
    WEBPACK = "webpack"
    ROLLUP = "rollup"

    @property
    def label(self) -> str:
        labels: dict[Bundler, str] = {
            Bundler.VITE: "Vite",
            Bundler.WEBPACK: "Webpack",
            Bundler.ROLLUP: "Rollup",
        }
        return labels[self]

    @property
    def description(self) -> str:
        descriptions: dict[Bundler, str] = {
            Bundler.VITE: "Native ESM dev server with fast HMR. Builds with Rollup under the hood.",
            Bundler.WEBPACK: "Battle-tested bundler with webpack-dev-server and Babel loaders.",
            Bundler.ROLLUP: "Library-friendly bundler emitting ESM and CommonJS builds.",
        }
        return descriptions[self]


class PackageManager(str, Enum):
    """Package manager used to install dependencies."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"

    @property
    def label(self) -> str:
        labels: dict[PackageManager, str] = {
            PackageManager.NPM: "npm",
            PackageManager.YARN: "Yarn",
            PackageManager.PNPM: "pnpm",
            PackageManager.BUN: "Bun",
        }
        return labels[self]

    @property
    def run_command(self) -> str:
        if self is PackageManager.NPM:
            return "npm run"
        if self is PackageManager.YARN:
            return "yarn"
        return f"{self.value} run"

    @property
    def test_command(self) -> str:
        return f"{self.value} test"


@dataclass(frozen=True, kw_only=True)
class ProjectOptions:
    """
    Answers collected for a project, consumed read-only by the template copier.

    Attributes:
        target_path: Directory the project is generated into.
        slug: Validated project name, used as the package name.
        description: Free-form description, possibly empty.
        author_name: Optional author name.
        author_email: Optional author email address.
        author_url: Optional author homepage.
        repo_url: Optional repository URL.
        language: Source language.
        bundler: Bundler.
        package_manager: Package manager used for installation.
    """

    target_path: Path
    slug: str
    description: str = ""
    author_name: str | None = None
    author_email: str | None = None
    author_url: str | None = None
    repo_url: str | None = None
    language: Language
    bundler: Bundler
    package_manager: PackageManager

    @property
    def template_name(self) -> str:
        return f"{self.language.value}-{self.bundler.value}"
