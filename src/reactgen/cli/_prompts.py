"""Clack-style interactive prompts using Rich + simple-term-menu."""

from __future__ import annotations

import sys
from collections.abc import Callable

from rich.console import Console
from rich.markup import escape
from simple_term_menu import TerminalMenu

from reactgen.cli._questions import Answers, Choice, Question, Validation

_console = Console()


def _print_bar() -> None:
    _console.print("[dim]│[/]")


def _clear_lines(n: int) -> None:
    """Move cursor up *n* lines and clear to end of screen."""
    sys.stdout.write(f"\033[{n}A\033[J")
    sys.stdout.flush()


def _print_pending(message: str) -> None:
    _console.print(f"[bold cyan]◆[/]  {message}")
    _print_bar()


def _print_done(message: str, value: str) -> None:
    _console.print(f"[bold green]◇[/]  {message}")
    _console.print(f"[dim]│[/]  {escape(value) if value else '[dim]—[/]'}")
    _print_bar()


def _select(message: str, choices: list[Choice], default: int = 0) -> str:
    """Show a menu of *choices* and return the value of the picked one."""
    _print_pending(message)

    menu = TerminalMenu(
        [c.title for c in choices],
        cursor_index=default,
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
    )
    picked = menu.show()
    if picked is None:
        raise SystemExit(1)

    choice = choices[int(picked)]

    # ◆ line and │ bar
    _clear_lines(2)
    _print_done(message, choice.title)
    return choice.value


def _text(
    message: str,
    initial: str = "",
    validate: Callable[[str], Validation] | None = None,
) -> str:
    """Read free text until it validates; empty input accepts *initial*."""
    _print_pending(message)

    suffix = f" ({initial}) " if initial else " "
    drawn = 3
    while True:
        _console.print("[dim]│[/]  ", end="")
        try:
            value = input(suffix).strip() or initial
        except (EOFError, KeyboardInterrupt):
            raise SystemExit(1) from None

        verdict = validate(value) if validate else True
        if verdict is True:
            break
        reason = verdict if isinstance(verdict, str) else "Invalid value"
        _console.print(f"[dim]│[/]  [bold yellow]▲[/] [yellow]{escape(reason)}[/]")
        drawn += 2

    _clear_lines(drawn)
    _print_done(message, value)
    return value


def ask(question: Question, answers: Answers) -> str:
    """Prompt for a single ``Question`` given the answers collected so far."""
    initial = question.initial_for(answers)
    if question.kind == "select":
        choices = question.choices_for(answers)
        values = [c.value for c in choices]
        default = values.index(initial) if initial in values else 0
        return _select(question.message, choices, default)
    return _text(question.message, initial, question.validate)


def show_answer(question: Question, value: str) -> None:
    """Echo an answer supplied as a flag, in the same style as a completed prompt."""
    if question.kind == "select":
        titles = {c.value: c.title for c in question.choices_for({})}
        value = titles.get(value, value)
    _print_done(question.message, value)
