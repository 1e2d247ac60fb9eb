"""Unit tests for renderer lookup by format name."""

import pytest

from notion2md.exceptions import FormatError
from notion2md.renderers import get_renderer, list_formats
from notion2md.renderers.markdown import MarkdownRenderer


@pytest.mark.unit
class TestGetRenderer:
    @pytest.mark.parametrize("kind", ["markdown", "md", "Markdown", "MD"])
    def test_markdown_names(self, kind):
        assert isinstance(get_renderer(kind), MarkdownRenderer)

    def test_new_instance_each_call(self):
        assert get_renderer("md") is not get_renderer("md")

    def test_unknown_format(self):
        with pytest.raises(FormatError) as exc_info:
            get_renderer("html")
        assert exc_info.value.format_type == "html"
        assert "markdown" in str(exc_info.value)

    def test_list_formats(self):
        assert list_formats() == ["markdown", "md"]
