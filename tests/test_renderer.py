"""Unit tests for placeholder rendering."""

from __future__ import annotations

import dataclasses

import pytest

from reactgen.cli._errors import RenderError
from reactgen.cli._renderer import PLACEHOLDERS, TokenRenderer, template_context
from reactgen.cli._types import ProjectOptions


@pytest.fixture
def renderer(options: ProjectOptions) -> TokenRenderer:
    return TokenRenderer(options)


class TestRender:
    def test_package_name_token_yields_slug_verbatim(self, renderer: TokenRenderer) -> None:
        assert renderer.render("{{%=PACKAGE_NAME%}}") == "my-library"

    def test_whitespace_inside_delimiters_is_allowed(self, renderer: TokenRenderer) -> None:
        assert renderer.render("{{%= PACKAGE_NAME %}}") == "my-library"

    def test_all_placeholders(self, renderer: TokenRenderer) -> None:
        content = "\n".join(f"{{{{%={name}%}}}}" for name in PLACEHOLDERS)
        assert renderer.render(content).split("\n") == [
            "my-library",
            "A test library",
            "John Doe",
            "john@example.com",
            "https://johndoe.com",
            "https://github.com/johndoe/my-library",
            "yarn",
        ]

    def test_empty_description_renders_empty(self, options: ProjectOptions) -> None:
        renderer = TokenRenderer(dataclasses.replace(options, description=""))
        assert renderer.render("{{%=DESCRIPTION%}}") == ""

    def test_unset_optional_fields_render_empty(self, options: ProjectOptions) -> None:
        bare = dataclasses.replace(
            options, author_name=None, author_email=None, author_url=None, repo_url=None
        )
        rendered = TokenRenderer(bare).render(
            "[{{%=AUTHOR_NAME%}}|{{%=AUTHOR_EMAIL%}}|{{%=AUTHOR_URL%}}|{{%=REPO_URL%}}]"
        )
        assert rendered == "[|||]"
        assert "None" not in rendered
        assert "undefined" not in rendered

    def test_jsx_and_template_literals_untouched(self, renderer: TokenRenderer) -> None:
        source = "const s = <div style={{ margin: 0 }}>{`${a}`}</div>; {#x}"
        assert renderer.render(source) == source

    def test_trailing_newline_preserved(self, renderer: TokenRenderer) -> None:
        assert renderer.render("{{%=PACKAGE_NAME%}}\n") == "my-library\n"

    def test_no_html_escaping(self, options: ProjectOptions) -> None:
        renderer = TokenRenderer(dataclasses.replace(options, description="<b>&</b>"))
        assert renderer.render("{{%=DESCRIPTION%}}") == "<b>&</b>"

    def test_statements_can_use_options(self, renderer: TokenRenderer) -> None:
        content = '{{% if options.language.value == "typescript" %}}ts{{% else %}}js{{% endif %}}'
        assert renderer.render(content) == "ts"

    def test_comments_are_dropped(self, renderer: TokenRenderer) -> None:
        assert renderer.render("a{{%# hidden %}}b") == "ab"

    def test_unknown_placeholder_raises(self, renderer: TokenRenderer) -> None:
        with pytest.raises(RenderError) as exc_info:
            renderer.render("{{%=NOT_A_TOKEN%}}", source="pkg/file.txt")

        assert exc_info.value.path == "pkg/file.txt"
        assert exc_info.value.__cause__ is not None

    def test_malformed_syntax_raises(self, renderer: TokenRenderer) -> None:
        with pytest.raises(RenderError):
            renderer.render("{{% if %}}")


class TestRenderName:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("$foo", "foo"),
            ("$.github", ".github"),
            ("$.gitignore", ".gitignore"),
            ("plain.txt", "plain.txt"),
            ("$$double", "$double"),
            ("a$b", "a$b"),
        ],
    )
    def test_sentinel_stripping(self, renderer: TokenRenderer, name: str, expected: str) -> None:
        assert renderer.render_name(name) == expected

    def test_name_placeholders(self, renderer: TokenRenderer) -> None:
        assert renderer.render_name("{{%=PACKAGE_NAME%}}.config.js") == "my-library.config.js"

    def test_bad_name_raises_with_original_name(self, renderer: TokenRenderer) -> None:
        with pytest.raises(RenderError) as exc_info:
            renderer.render_name("$.{{%=MISSING%}}")

        assert exc_info.value.path == "$.{{%=MISSING%}}"


class TestTemplateContext:
    def test_package_manager_is_plain_string(self, options: ProjectOptions) -> None:
        context = template_context(options)
        assert context["PACKAGE_MANAGER"] == "yarn"
        assert type(context["PACKAGE_MANAGER"]) is str

    def test_exposes_options(self, options: ProjectOptions) -> None:
        assert template_context(options)["options"] is options
