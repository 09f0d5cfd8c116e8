"""Project name rules and destination checks."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

_INVALID_NAME_RE = re.compile(r'[<>:;,?"*|/\\]')
_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")


def validate_project_name(name: str) -> bool:
    """A project name is non-empty and free of ``<>:;,?"*|/\\``."""
    return bool(name) and _INVALID_NAME_RE.search(name) is None


def directory_to_project_name(directory: str) -> str:
    """Turn a directory name into a package-style name: ``My App!`` -> ``my-app``."""
    return _NON_ALNUM_RE.sub("-", directory.lower()).strip("-")


@dataclass(frozen=True)
class ProjectTarget:
    folder: Path
    basename: str


@dataclass(frozen=True)
class TargetError:
    message: str
    value: str = ""


def resolve_target(project_name: str, cwd: Path) -> ProjectTarget | TargetError:
    """Resolve the destination folder for *project_name* relative to *cwd*.

    Returns a ``TargetError`` instead of raising so the caller decides how to
    report it.
    """
    if not project_name:
        return TargetError("Please specify the project name")

    folder = cwd / project_name
    if folder.exists():
        return TargetError(
            "A folder already exists! Please specify another folder name or delete the existing one.",  # noqa: E501
            str(folder),
        )

    basename = Path(project_name).name
    if not validate_project_name(basename):
        return TargetError(
            "Cannot create a project with this name because of naming restrictions: "
            "name can only contain conventional characters",
            basename,
        )

    return ProjectTarget(folder=folder, basename=basename)
