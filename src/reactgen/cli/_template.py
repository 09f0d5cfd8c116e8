"""Copies template trees to disk, rendering contents and names on the way."""

from __future__ import annotations

import importlib.resources as ilr
import logging
from pathlib import Path

from reactgen.cli._errors import FileSystemError, SourceNotFoundError
from reactgen.cli._renderer import TokenRenderer
from reactgen.cli._types import Bundler, Language, ProjectOptions

logger = logging.getLogger(__name__)

COMMON_DIR = "common"


def bundled_templates_dir() -> Path:
    """Location of the template catalog shipped with the package."""
    return Path(str(ilr.files("reactgen").joinpath("templates")))


def template_root(templates_dir: Path, language: Language, bundler: Bundler) -> Path:
    return templates_dir / f"{language.value}-{bundler.value}"


def available_combinations(templates_dir: Path) -> list[tuple[Language, Bundler]]:
    """List the language/bundler pairs that have a template directory, in enum order."""
    return [
        (language, bundler)
        for language in Language
        for bundler in Bundler
        if template_root(templates_dir, language, bundler).is_dir()
    ]


def copy_tree(
    source: Path,
    destination: Path,
    renderer: TokenRenderer,
) -> list[Path]:
    """
    Recursively copy *source* into *destination*.

    Every entry name goes through ``renderer.render_name`` and every file body
    through ``renderer.render``. Existing files are overwritten. Returns the
    written file paths in write order.
    """
    written: list[Path] = []

    try:
        entries = sorted(source.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise FileSystemError(source, e) from e

    for entry in entries:
        dest = destination / renderer.render_name(entry.name)

        if entry.is_dir():
            try:
                dest.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise FileSystemError(dest, e) from e
            written.extend(copy_tree(entry, dest, renderer))
            continue

        try:
            content = entry.read_text(encoding="utf-8")
        except OSError as e:
            raise FileSystemError(entry, e) from e

        rendered = renderer.render(content, source=entry)

        try:
            dest.write_text(rendered, encoding="utf-8")
        except OSError as e:
            raise FileSystemError(dest, e) from e

        logger.debug("Wrote %s", dest)
        written.append(dest)

    return written


def compose_template(
    specific_root: Path,
    target: Path,
    options: ProjectOptions,
) -> list[str]:
    """
    Materialize a project from the common tree and a specific tree.

    The sibling ``common`` directory is copied first when present; the
    specific tree is copied second, so on equal rendered paths the specific
    file wins. Returns the generated files relative to *target*, sorted.
    """
    if not specific_root.is_dir():
        raise SourceNotFoundError(specific_root)

    renderer = TokenRenderer(options)
    written: list[Path] = []

    common_root = specific_root.parent / COMMON_DIR
    if common_root.is_dir():
        logger.debug("Copying common template from %s", common_root)
        written.extend(copy_tree(common_root, target, renderer))
    else:
        logger.debug("No common template next to %s", specific_root)

    logger.debug("Copying template from %s", specific_root)
    written.extend(copy_tree(specific_root, target, renderer))

    return sorted({p.relative_to(target).as_posix() for p in written})


def render_project(options: ProjectOptions, templates_dir: Path) -> list[str]:
    """Render the template selected by *options* into ``options.target_path``."""
    specific_root = template_root(templates_dir, options.language, options.bundler)
    if not specific_root.is_dir():
        raise SourceNotFoundError(specific_root)

    try:
        options.target_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileSystemError(options.target_path, e) from e

    return compose_template(specific_root, options.target_path, options)
