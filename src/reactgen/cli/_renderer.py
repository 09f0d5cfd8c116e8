"""Placeholder substitution for template contents and file names.

Templates use Jinja2 with delimiters that cannot be mistaken for JSX objects
or JavaScript template literals:

- ``{{%= PACKAGE_NAME %}}`` outputs a value
- ``{{% if options.repo_url %}} ... {{% endif %}}`` is a statement
- ``{{%# ... %}}`` is a comment
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, StrictUndefined, TemplateError

from reactgen.cli._errors import RenderError
from reactgen.cli._types import ProjectOptions

SENTINEL = "$"

PLACEHOLDERS: tuple[str, ...] = (
    "PACKAGE_NAME",
    "DESCRIPTION",
    "AUTHOR_NAME",
    "AUTHOR_EMAIL",
    "AUTHOR_URL",
    "REPO_URL",
    "PACKAGE_MANAGER",
)


def _environment() -> Environment:
    return Environment(
        variable_start_string="{{%=",
        variable_end_string="%}}",
        block_start_string="{{%",
        block_end_string="%}}",
        comment_start_string="{{%#",
        comment_end_string="%}}",
        keep_trailing_newline=True,
        undefined=StrictUndefined,
        autoescape=False,
    )


def template_context(options: ProjectOptions) -> dict[str, Any]:
    """Map placeholder names to their values. Unset optional fields become ``""``."""
    return {
        "PACKAGE_NAME": options.slug,
        "DESCRIPTION": options.description or "",
        "AUTHOR_NAME": options.author_name or "",
        "AUTHOR_EMAIL": options.author_email or "",
        "AUTHOR_URL": options.author_url or "",
        "REPO_URL": options.repo_url or "",
        "PACKAGE_MANAGER": options.package_manager.value,
        "options": options,
    }


class TokenRenderer:
    """Renders template text and template entry names for one project."""

    def __init__(self, options: ProjectOptions) -> None:
        self.options = options
        self.env = _environment()
        self._context = template_context(options)

    def render(self, content: str, source: Path | str = "<string>") -> str:
        """Render file *content*. *source* is only used in error messages."""
        try:
            return self.env.from_string(content).render(self._context)
        except TemplateError as e:
            raise RenderError(source, "Failed to render template") from e

    def render_name(self, name: str) -> str:
        """Render a file or directory name, dropping a leading ``$`` sentinel."""
        stripped = name[len(SENTINEL) :] if name.startswith(SENTINEL) else name
        try:
            return self.env.from_string(stripped).render(self._context)
        except TemplateError as e:
            raise RenderError(name, "Failed to render file name") from e
