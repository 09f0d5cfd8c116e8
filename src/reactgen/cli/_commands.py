"""External commands run after the project files are written."""

from __future__ import annotations

import logging
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from reactgen.cli._errors import CommandError, CommandNotFoundError
from reactgen.cli._types import PackageManager

logger = logging.getLogger(__name__)


class CommandRunner(Protocol):
    """Capability for running external programs."""

    def run(
        self,
        command: str,
        args: list[str],
        cwd: Path | None = None,
        quiet: bool = False,
    ) -> bool:
        """Run *command*; True on exit status 0. Raises CommandNotFoundError if missing."""
        ...

    def output(self, command: str, args: list[str]) -> str:
        """Run *command* and return its stripped stdout, or ``""`` on any failure."""
        ...


def _build_command(command: str, args: list[str]) -> list[str]:
    if sys.platform == "win32":
        return ["cmd.exe", "/c", command, *args]
    return [command, *args]


class SubprocessRunner:
    """``CommandRunner`` backed by :mod:`subprocess`."""

    def run(
        self,
        command: str,
        args: list[str],
        cwd: Path | None = None,
        quiet: bool = False,
    ) -> bool:
        argv = _build_command(command, args)
        logger.debug("Running %s in %s", " ".join(argv), cwd or ".")
        stream = subprocess.DEVNULL if quiet else None
        try:
            result = subprocess.run(argv, cwd=cwd, stdout=stream, stderr=stream, check=False)
        except FileNotFoundError as e:
            raise CommandNotFoundError(command) from e

        if result.returncode != 0:
            logger.debug("%s exited with code %d", " ".join(argv), result.returncode)
        return result.returncode == 0

    def output(self, command: str, args: list[str]) -> str:
        try:
            result = subprocess.run(
                _build_command(command, args),
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError:
            return ""
        if result.returncode != 0:
            return ""
        return result.stdout.strip()


@dataclass(frozen=True)
class GitUser:
    name: str = ""
    email: str = ""


def get_git_user(runner: CommandRunner) -> GitUser:
    """Read ``user.name`` and ``user.email`` from the git configuration."""
    return GitUser(
        name=runner.output("git", ["config", "--get", "user.name"]),
        email=runner.output("git", ["config", "--get", "user.email"]),
    )


def is_npx_present(runner: CommandRunner) -> bool:
    try:
        runner.run("npx", ["--help"], quiet=True)
    except CommandNotFoundError:
        return False
    return True


def install_dependencies(
    runner: CommandRunner, target: Path, package_manager: PackageManager
) -> None:
    """Run ``<package manager> install`` inside *target*."""
    command = package_manager.value
    if not runner.run(command, ["install"], cwd=target, quiet=True):
        raise CommandError(f"{command} install failed")


def initialize_git(runner: CommandRunner, target: Path) -> bool:
    """Create a repository with an initial commit. Failures are logged, never raised."""
    steps: list[list[str]] = [
        ["init"],
        ["add", "."],
        ["commit", "-m", "Initial commit"],
    ]
    try:
        for args in steps:
            if not runner.run("git", args, cwd=target, quiet=True):
                logger.warning("Git initialization failed at 'git %s'", " ".join(args))
                return False
    except CommandNotFoundError:
        logger.warning("Git initialization failed: git is not installed")
        return False
    return True
