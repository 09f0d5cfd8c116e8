"""Declarative question list behind the interactive prompts.

Each ``Question`` carries everything needed to decide whether it must be
asked: a flag that already answers it skips it, and a select question whose
choices collapse to one value is answered without prompting.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from reactgen.cli._commands import GitUser
from reactgen.cli._project import directory_to_project_name, validate_project_name
from reactgen.cli._types import Bundler, Language, PackageManager, ProjectOptions

Answers = dict[str, str]
Flags = dict[str, str | None]
Validation = bool | str

_EMAIL_RE = re.compile(r"^\S+@\S+$")
_URL_RE = re.compile(r"^https?://")
_GITHUB_PROFILE_RE = re.compile(r"^https?://github\.com/[^/]+")


@dataclass(frozen=True)
class Choice:
    title: str
    value: str


@dataclass(frozen=True, kw_only=True)
class Question:
    """
    A single prompt.

    Attributes:
        key: CLI flag name (without dashes) answering this question.
        field: ``ProjectOptions`` field the answer is stored under.
        message: Text shown to the user.
        kind: ``"text"`` for free input, ``"select"`` for a menu.
        choices: Static choices, or a function of the answers collected so far.
        initial: Default value, or a function of the answers collected so far.
        validate: Returns True, or an error message for an invalid value.
    """

    key: str
    field: str
    message: str
    kind: Literal["text", "select"] = "text"
    choices: list[Choice] | Callable[[Answers], list[Choice]] | None = None
    initial: str | Callable[[Answers], str] | None = None
    validate: Callable[[str], Validation] | None = None

    def choices_for(self, answers: Answers) -> list[Choice]:
        if self.choices is None:
            return []
        if callable(self.choices):
            return self.choices(answers)
        return self.choices

    def initial_for(self, answers: Answers) -> str:
        if self.initial is None:
            return ""
        if callable(self.initial):
            return self.initial(answers)
        return self.initial

    def check(self, value: str, answers: Answers) -> Validation:
        """Validate *value*, including membership in the available choices."""
        valid = self.validate(value) if self.validate else True
        if valid is not True:
            return valid

        if self.kind == "select":
            supported = [c.value for c in self.choices_for(answers)]
            if value not in supported:
                return f"Supported values are - {', '.join(supported)}"

        return True

    def satisfied_by(self, flags: Flags) -> bool:
        return flags.get(self.field) is not None


def _validate_slug(value: str) -> Validation:
    return validate_project_name(value) or "Must be a valid project name"


def _validate_email(value: str) -> Validation:
    valid = not value or bool(_EMAIL_RE.match(value))
    return valid or "Must be a valid email address if provided"


def _validate_url(value: str) -> Validation:
    return not value or bool(_URL_RE.match(value)) or "Must be a valid URL if provided"


def suggest_repo_url(answers: Answers) -> str:
    """Derive ``https://github.com/<user>/<slug>`` from a GitHub author URL."""
    author_url = answers.get("author_url") or ""
    if not _GITHUB_PROFILE_RE.match(author_url):
        return ""
    slug = re.sub(r"^@", "", answers.get("slug", "")).replace("/", "-")
    return f"{author_url}/{slug}"


def build_questions(
    basename: str,
    git_user: GitUser,
    combinations: list[tuple[Language, Bundler]],
    profile_url: Callable[[str], str],
) -> list[Question]:
    """Assemble the question list for one run.

    *combinations* restricts the language and bundler menus to the templates
    that exist; *profile_url* maps an email to a suggested author URL.
    """

    def language_choices(answers: Answers) -> list[Choice]:
        bundler = answers.get("bundler")
        languages = dict.fromkeys(lang for lang, b in combinations if bundler in (None, b.value))
        return [Choice(lang.label, lang.value) for lang in languages]

    def bundler_choices(answers: Answers) -> list[Choice]:
        language = answers.get("language")
        bundlers = dict.fromkeys(b for lang, b in combinations if language in (None, lang.value))
        return [Choice(b.label, b.value) for b in bundlers]

    return [
        Question(
            key="slug",
            field="slug",
            message="What is the name of the project?",
            initial=directory_to_project_name(basename),
            validate=_validate_slug,
        ),
        Question(
            key="description",
            field="description",
            message="What is the description for the project? (optional)",
        ),
        Question(
            key="author-name",
            field="author_name",
            message="What is the name of project author? (optional)",
            initial=git_user.name,
        ),
        Question(
            key="author-email",
            field="author_email",
            message="What is the email address for the project author? (optional)",
            initial=git_user.email,
            validate=_validate_email,
        ),
        Question(
            key="author-url",
            field="author_url",
            message="What is the URL for the project author? (optional)",
            initial=lambda answers: profile_url(answers.get("author_email", "")),
            validate=_validate_url,
        ),
        Question(
            key="repo-url",
            field="repo_url",
            message="What is the URL for the repository? (optional)",
            initial=suggest_repo_url,
            validate=_validate_url,
        ),
        Question(
            key="language",
            field="language",
            message="Which language do you prefer?",
            kind="select",
            choices=language_choices,
        ),
        Question(
            key="bundler",
            field="bundler",
            message="Which bundler would you like to use?",
            kind="select",
            choices=bundler_choices,
        ),
        Question(
            key="package-manager",
            field="package_manager",
            message="Which package manager would you like to use?",
            kind="select",
            choices=[Choice(pm.label, pm.value) for pm in PackageManager],
        ),
    ]


def validate_flags(questions: list[Question], flags: Flags) -> list[str]:
    """Check every supplied flag; returns one message per invalid value.

    Each flag is checked against the flags of the questions before it, the
    same answers it would see when prompted.
    """
    errors: list[str] = []
    earlier: Answers = {}
    for question in questions:
        if not question.satisfied_by(flags):
            continue
        value = flags[question.field]
        valid = question.check(value, earlier)
        earlier[question.field] = value
        if valid is not True:
            message = f"Invalid value {value} passed for {question.key}"
            if isinstance(valid, str):
                message += f": {valid}"
            errors.append(message)
    return errors


def pending_questions(questions: list[Question], flags: Flags) -> list[Question]:
    return [q for q in questions if not q.satisfied_by(flags)]


def collect_answers(
    questions: list[Question],
    flags: Flags,
    ask: Callable[[Question, Answers], str],
) -> Answers:
    """Merge *flags* with answers from *ask* for every question still open."""
    answers: Answers = {k: v for k, v in flags.items() if v is not None}

    for question in pending_questions(questions, flags):
        if question.kind == "select":
            choices = question.choices_for(answers)
            if len(choices) == 1:
                answers[question.field] = choices[0].value
                continue
        answers[question.field] = ask(question, answers)

    return answers


def to_options(answers: Answers, target_path: Path) -> ProjectOptions:
    return ProjectOptions(
        target_path=target_path,
        slug=answers["slug"],
        description=answers.get("description") or "",
        author_name=answers.get("author_name") or None,
        author_email=answers.get("author_email") or None,
        author_url=answers.get("author_url") or None,
        repo_url=answers.get("repo_url") or None,
        language=Language(answers["language"]),
        bundler=Bundler(answers["bundler"]),
        package_manager=PackageManager(answers["package_manager"]),
    )
