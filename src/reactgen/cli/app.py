"""Typer CLI application for reactgen."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.markup import escape
from typer import Argument, Exit, Option, Typer

import reactgen
from reactgen.cli._commands import (
    CommandRunner,
    SubprocessRunner,
    get_git_user,
    initialize_git,
    install_dependencies,
    is_npx_present,
)
from reactgen.cli._errors import ReactgenError
from reactgen.cli._github import github_profile_url
from reactgen.cli._logging import configure_logging
from reactgen.cli._project import TargetError, resolve_target
from reactgen.cli._prompts import ask, show_answer
from reactgen.cli._questions import (
    build_questions,
    collect_answers,
    to_options,
    validate_flags,
)
from reactgen.cli._template import available_combinations, bundled_templates_dir, render_project
from reactgen.cli._types import Bundler, Language

TEMPLATES_ENV = "REACTGEN_TEMPLATES_DIR"

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()
_runner: CommandRunner = SubprocessRunner()


@app.callback()
def main() -> None:
    """reactgen — scaffolding tool for React projects."""


def _print_templates(combinations: list[tuple[Language, Bundler]]) -> None:
    _console.print()
    _console.print("[bold cyan]◆[/]  Available templates")
    _console.print("[dim]│[/]")
    for language, bundler in combinations:
        name = f"{language.value}-{bundler.value}"
        _console.print(f"[dim]│[/]  [bold cyan]{name:<22}[/] [bold]{language.label} + {bundler.label}[/]")  # noqa: E501
        _console.print(f"[dim]│[/]  {' ' * 22} [dim]{bundler.description}[/]")
        _console.print("[dim]│[/]")
    _console.print()


def _fail(message: str) -> Exit:
    _console.print(f"[bold red]Error:[/] {message}")
    return Exit(code=1)


@app.command()
def create(
    project_name: Annotated[
        str | None,
        Argument(help="Name for the new project directory", show_default=False),
    ] = None,
    slug: Annotated[str | None, Option(help="Name of the project")] = None,
    description: Annotated[str | None, Option(help="Description of the project")] = None,
    author_name: Annotated[str | None, Option(help="Name of the project author")] = None,
    author_email: Annotated[
        str | None, Option(help="Email address of the project author")
    ] = None,
    author_url: Annotated[str | None, Option(help="URL for the project author")] = None,
    repo_url: Annotated[str | None, Option(help="URL for the repository")] = None,
    language: Annotated[str | None, Option(help="Language for the project")] = None,
    bundler: Annotated[str | None, Option(help="Bundler to use")] = None,
    package_manager: Annotated[str | None, Option(help="Package manager to use")] = None,
    templates_dir: Annotated[
        Path | None,
        Option(
            help="Directory holding the template catalog.",
            envvar=TEMPLATES_ENV,
            file_okay=False,
            show_default=False,
        ),
    ] = None,
    install: Annotated[
        bool, Option("--install/--no-install", help="Install dependencies after generating.")
    ] = True,
    git: Annotated[
        bool, Option("--git/--no-git", help="Initialize a git repository with an initial commit.")
    ] = True,
    verbose: Annotated[bool, Option("--verbose", "-v", help="Show debug logging.")] = False,
    list_templates: Annotated[
        bool,
        Option(
            "--list-templates",
            "-l",
            help="List all available templates and exit.",
        ),
    ] = False,
) -> None:
    """Create a new React project."""
    configure_logging(verbose)
    catalog = templates_dir or bundled_templates_dir()

    if list_templates:
        _print_templates(available_combinations(catalog))
        raise Exit()

    target = resolve_target(project_name or "", Path.cwd())
    if isinstance(target, TargetError):
        detail = f" [blue]{escape(target.value)}[/]" if target.value else ""
        _console.print(f"[bold red]Error:[/] {target.message}{detail}")
        if not project_name:
            _console.print("[dim]For example:[/] generate-react-app create my-react-app")
        raise Exit(code=1)

    combinations = available_combinations(catalog)
    if not combinations:
        raise _fail(f"No templates found in {escape(str(catalog))}")

    if install and not is_npx_present(_runner):
        _console.print(
            "Couldn't find [blue]npx[/]! Please install it by running "
            "[blue]npm install -g npx[/]"
        )
        raise Exit(code=1)

    questions = build_questions(
        target.basename, get_git_user(_runner), combinations, github_profile_url
    )
    flags = {
        "slug": slug,
        "description": description,
        "author_name": author_name,
        "author_email": author_email,
        "author_url": author_url,
        "repo_url": repo_url,
        "language": language,
        "bundler": bundler,
        "package_manager": package_manager,
    }

    errors = validate_flags(questions, flags)
    if errors:
        for message in errors:
            _console.print(f"[bold red]Error:[/] {escape(message)}")
        raise Exit(code=1)

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  reactgen v{reactgen.__version__}")
    _console.print("[dim]│[/]")

    for question in questions:
        if question.satisfied_by(flags):
            show_answer(question, flags[question.field] or "")

    answers = collect_answers(questions, flags, ask)
    options = to_options(answers, target.folder)

    try:
        with _console.status("Generating template"):
            created = render_project(options, catalog)

        _console.print(f"[bold green]◇[/]  Creating {escape(project_name or '')}/...")
        for name in created:
            _console.print(f"[dim]│[/]  {escape(name)}")
        _console.print("[dim]│[/]")

        if install:
            pm = options.package_manager
            with _console.status("Installing dependencies..."):
                install_dependencies(_runner, options.target_path, pm)
            _console.print(f"[bold green]◇[/]  Installed dependencies with {pm.label}")
            _console.print("[dim]│[/]")
    except ReactgenError as e:
        _console.print("[bold red]■[/]  Failed to generate template")
        raise _fail(escape(str(e))) from e

    if git:
        with _console.status("Initializing git repository..."):
            initialized = initialize_git(_runner, options.target_path)
        if initialized:
            _console.print("[bold green]◇[/]  Initialized git repository")
        else:
            _console.print("[yellow]▲  Warning: Git initialization failed[/]")
        _console.print("[dim]│[/]")

    pm = options.package_manager
    _console.print(
        f"[bold cyan]●[/]  Done! Created [green]{escape(options.slug)}[/] in "
        f"[blue]{escape(str(options.target_path))}[/]"
    )
    _console.print()
    _console.print("Next steps:")
    _console.print(f"  [blue]cd[/] {escape(project_name or '')}")
    if not install:
        _console.print(f"  [blue]{pm.value} install[/]")
    _console.print(f"  [blue]{pm.run_command}[/] build")
    _console.print(f"  [blue]{pm.test_command}[/]")
    _console.print()
