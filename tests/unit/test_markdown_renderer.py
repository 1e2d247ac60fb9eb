#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markdown_renderer.py
"""Unit tests for MarkdownRenderer.

Tests cover:
- Rich text styling and its precedence
- Rendering of every block variant
- Overrides replacing default behaviour
- Padding and section separation

"""

import itertools
from unittest.mock import patch

import pytest
from utils import HOSTED_IMAGE_URL, bulleted, code, divider, image, paragraph, text, todo

from notion2md.context import StyledBlock, TableCell
from notion2md.exceptions import BlockTypeMismatchError, InvalidOptionsError
from notion2md.models import Block, BlockType, Page, RichText, TablePayload, parse_rich_text
from notion2md.options import ImageSaveOptions, MarkdownRendererOptions, RenderOptions
from notion2md.options.base import BaseRendererOptions
from notion2md.renderers.markdown import MarkdownRenderer, resolve_code_language


def styled(data, text_value="", **kwargs):
    return StyledBlock(text=text_value, block=Block.from_dict(data), **kwargs)


def cells(*texts, row_header=False):
    table_payload = TablePayload(table_width=len(texts), has_row_header=row_header)
    return [
        TableCell(
            text=value,
            is_row_header=row_header,
            is_column_header=False,
            row_index=0,
            column_index=index,
            table=table_payload,
        )
        for index, value in enumerate(texts)
    ]


@pytest.fixture
def renderer():
    return MarkdownRenderer()


@pytest.mark.unit
class TestRichText:
    """Tests for rich text styling."""

    def test_empty_sequence(self, renderer):
        assert renderer.render_text([]) == ""

    def test_plain(self, renderer):
        assert renderer.render_text(parse_rich_text([text("hello")])) == "hello"

    @pytest.mark.parametrize(
        "annotation,expected",
        [
            ("bold", "**x**"),
            ("italic", "_x_"),
            ("strikethrough", "~x~"),
            ("code", "`x`"),
        ],
    )
    def test_single_style(self, renderer, annotation, expected):
        assert renderer.render_text(parse_rich_text([text("x", **{annotation: True})])) == expected

    def test_link_wins_over_bold(self, renderer):
        runs = parse_rich_text([text("site", href="https://example.com", bold=True)])
        assert renderer.render_text(runs) == "[site](https://example.com)"

    def test_bold_wins_over_italic(self, renderer):
        runs = parse_rich_text([text("x", bold=True, italic=True, code=True)])
        assert renderer.render_text(runs) == "**x**"

    def test_runs_concatenated_without_separator(self, renderer):
        runs = parse_rich_text([text("a "), text("b", italic=True), text(" c")])
        assert renderer.render_text(runs) == "a _b_ c"

    def test_underline_is_plain(self, renderer):
        assert renderer.render_text(parse_rich_text([text("u", underline=True)])) == "u"

    def test_override_receives_all_runs(self, renderer):
        runs = [RichText(content="a"), RichText(content="b")]
        assert renderer.render_text(runs, lambda received: f"{len(received)} runs") == "2 runs"


@pytest.mark.unit
class TestBlocks:
    """Tests for the per-variant operations."""

    def test_headings(self, renderer):
        block = styled(paragraph(), "Title")
        assert renderer.render_heading_1(block) == "# Title"
        assert renderer.render_heading_2(block) == "## Title"
        assert renderer.render_heading_3(block) == "### Title"

    def test_paragraph_passthrough(self, renderer):
        assert renderer.render_paragraph(styled(paragraph(), "**hi**")) == "**hi**"

    def test_list_items(self, renderer):
        assert renderer.render_bulleted_list_item(styled(bulleted("a"), "a")) == "* a"
        assert renderer.render_numbered_list_item(styled(bulleted("a"), "a")) == "1. a"

    def test_todo_states(self, renderer):
        assert renderer.render_to_do(styled(todo("task"), "task")) == "* [ ] task"
        assert renderer.render_to_do(styled(todo("task", checked=True), "task")) == "* [x] task"

    def test_todo_requires_todo_block(self, renderer):
        with pytest.raises(BlockTypeMismatchError, match="to_do"):
            renderer.render_to_do(styled(paragraph("x"), "x"))

    def test_quote_and_callout_match(self, renderer):
        block = styled(paragraph(), "wise words")
        assert renderer.render_quote(block) == "> wise words"
        assert renderer.render_callout(block) == "> wise words"

    @pytest.mark.parametrize(
        "language,tag",
        [("python", "python"), ("c++", "cpp"), ("c#", "csharp"), ("f#", "fsharp"), ("plain text", "txt")],
    )
    def test_code_fence_language(self, renderer, language, tag):
        result = renderer.render_code(styled(code("x", language=language), "x"))
        assert result == f"```{tag}\nx\n```"

    def test_code_requires_code_block(self, renderer):
        with pytest.raises(BlockTypeMismatchError):
            renderer.render_code(styled(paragraph("x"), "x"))

    def test_unknown_language_passes_through(self):
        assert resolve_code_language("brainfuck") == "brainfuck"

    def test_divider_ignores_content(self, renderer):
        assert renderer.render_divider(styled(divider(), "ignored")) == "---"

    def test_page_header_and_footer(self, renderer):
        page = Page(id="p", properties={"Name": {"type": "title", "title": [text("Notes")]}})
        assert renderer.render_page_header(page) == "# Notes"
        assert renderer.render_page_footer(page) == ""
        assert renderer.render_page_footer(page, lambda p: f"\n\n[source]({p.id})") == "\n\n[source](p)"

    @pytest.mark.parametrize(
        "method",
        [
            "render_heading_1",
            "render_paragraph",
            "render_bulleted_list_item",
            "render_to_do",
            "render_code",
            "render_divider",
            "render_image",
        ],
    )
    def test_override_replaces_default(self, renderer, method):
        # Paragraph block: default to-do/code/image paths would raise
        block = styled(paragraph("x"), "x")
        assert getattr(renderer, method)(block, lambda b: f"<{b.text}>") == "<x>"


@pytest.mark.unit
class TestImages:
    """Tests for image references."""

    def test_external_image_direct_reference(self, renderer, image_dir):
        block = styled(image("https://example.com/cat.png"), options=RenderOptions(
            image_options=ImageSaveOptions(save_path=str(image_dir))
        ))
        with patch("notion2md.renderers.markdown.save_notion_image") as mock_save:
            assert renderer.render_image(block) == "![image](https://example.com/cat.png)"
        mock_save.assert_not_called()
        assert not image_dir.exists()

    def test_caption_is_alt_text(self, renderer):
        block = styled(image("https://example.com/cat.png", caption="A cat"))
        assert renderer.render_image(block) == "![A cat](https://example.com/cat.png)"

    def test_hosted_image_saved_locally(self, renderer):
        options = RenderOptions(image_options=ImageSaveOptions(save_path="assets", overwrite_existing=True))
        block = styled(image(HOSTED_IMAGE_URL, hosted=True), options=options)
        with patch("notion2md.renderers.markdown.save_notion_image", return_value="assets/abc.png") as mock_save:
            assert renderer.render_image(block) == "![image](assets/abc.png)"
        mock_save.assert_called_once_with(HOSTED_IMAGE_URL, options.image_options)

    def test_image_requires_image_block(self, renderer):
        with pytest.raises(BlockTypeMismatchError):
            renderer.render_image(styled(paragraph("x")))


@pytest.mark.unit
class TestTableRows:
    def test_plain_row(self, renderer):
        assert renderer.render_table_row(cells("a", "b")) == "| a | b |"

    def test_header_row_gets_separator(self, renderer):
        assert renderer.render_table_row(cells("a", "b", row_header=True)) == "| a | b |\n| --- | --- |"

    def test_empty_cell(self, renderer):
        assert renderer.render_table_row(cells("a", "")) == "| a |  |"

    def test_override(self, renderer):
        assert renderer.render_table_row(cells("a", "b"), lambda c: ",".join(x.text for x in c)) == "a,b"


@pytest.mark.unit
class TestPadding:
    def test_depth_zero_unchanged(self, renderer):
        assert renderer.add_padding(styled(paragraph(), "a\nb", depth=0)) == "a\nb"

    def test_every_line_padded(self, renderer):
        block = styled(code("x"), "```python\nx = 1\n```", depth=2)
        assert renderer.add_padding(block) == "        ```python\n        x = 1\n        ```"

    def test_empty_text_not_padded(self, renderer):
        assert renderer.add_padding(styled(paragraph(), "", depth=2)) == ""

    def test_custom_width(self):
        renderer = MarkdownRenderer(MarkdownRendererOptions(padding_width=2))
        assert renderer.add_padding(styled(bulleted("a"), "* a", depth=1)) == "  * a"

    def test_override(self, renderer):
        block = styled(paragraph(), "a", depth=3)
        assert renderer.add_padding(block, lambda b: f"{b.depth}:{b.text}") == "3:a"


_KNOWN_TAGS = [member.value for member in BlockType if member is not BlockType.UNSUPPORTED]
_TIGHT = {"table_row", "to_do", "numbered_list_item", "bulleted_list_item"}


@pytest.mark.unit
class TestSectionSeparation:
    def test_tight_pairs(self, renderer):
        for tag in _TIGHT:
            assert renderer.add_section_separation(tag, tag) == "\n"

    def test_mixed_list_types_get_double_break(self, renderer):
        assert renderer.add_section_separation("bulleted_list_item", "numbered_list_item") == "\n\n"

    def test_same_paragraphs_get_double_break(self, renderer):
        assert renderer.add_section_separation("paragraph", "paragraph") == "\n\n"

    def test_table_gets_nothing(self, renderer):
        assert renderer.add_section_separation("paragraph", "table") == ""
        assert renderer.add_section_separation("", "synced_block") == ""

    def test_total_over_known_tags(self, renderer):
        for previous, current in itertools.product(["", *_KNOWN_TAGS], _KNOWN_TAGS):
            result = renderer.add_section_separation(previous, current)
            assert result in ("", "\n", "\n\n")
            assert result == renderer.add_section_separation(previous, current)

    def test_override(self, renderer):
        assert renderer.add_section_separation("a", "b", lambda p, c: f"[{p}>{c}]") == "[a>b]"


@pytest.mark.unit
class TestConstruction:
    def test_rejects_foreign_options(self):
        with pytest.raises(InvalidOptionsError):
            MarkdownRenderer(BaseRendererOptions())  # type: ignore[arg-type]

    def test_default_options(self, renderer):
        assert renderer.options.padding_width == 4
