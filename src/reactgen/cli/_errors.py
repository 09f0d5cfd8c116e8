"""Exception hierarchy for project generation."""

from __future__ import annotations

from pathlib import Path


class ReactgenError(Exception):
    """Base class for all errors surfaced by the CLI."""


class TemplateError(ReactgenError):
    """Base class for failures while materializing a template."""


class SourceNotFoundError(TemplateError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Template not found: {path}")
        self.path = path


class RenderError(TemplateError):
    """A placeholder or a file name could not be rendered."""

    def __init__(self, path: Path | str, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = path


class FileSystemError(TemplateError):
    """Reading, writing or creating a directory failed."""

    def __init__(self, path: Path, error: OSError) -> None:
        reason = error.strerror or str(error)
        super().__init__(f"{reason}: {path}")
        self.path = path


class CommandError(ReactgenError):
    """An external command exited with a non-zero status."""


class CommandNotFoundError(CommandError):
    def __init__(self, command: str) -> None:
        super().__init__(f"Command not found: {command}")
        self.command = command
