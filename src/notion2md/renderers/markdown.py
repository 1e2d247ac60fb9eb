#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2md/renderers/markdown.py
"""Markdown rendering of Notion blocks.

This module provides the MarkdownRenderer class, the default renderer of
notion2md. Each operation turns one block into its Markdown form:

- ``#``/``##``/``###`` headings
- ``* `` bullets, ``1. `` numbered items, ``* [ ] ``/``* [x] `` to-dos
- ``> `` quotes and callouts
- fenced code blocks with a language tag
- ``---`` dividers
- ``![alt](path)`` images
- pipe tables with a ``| --- |`` separator under the header row

Nested blocks are indented by four spaces per level, and consecutive list
items or table rows of the same kind are kept on adjacent lines.

"""

from __future__ import annotations

import logging
from typing import Optional

from notion2md.constants import (
    CODE_LANGUAGE_ALIASES,
    DEFAULT_IMAGE_ALT_TEXT,
    DOUBLE_BREAK,
    MD_BOLD_PATTERN,
    MD_CODE_BLOCK_DELIMITER,
    MD_DIVIDER,
    MD_HEADING_ONE_PATTERN,
    MD_HEADING_THREE_PATTERN,
    MD_HEADING_TWO_PATTERN,
    MD_IMAGE_PATTERN,
    MD_INLINE_CODE_PATTERN,
    MD_ITALIC_PATTERN,
    MD_LINK_PATTERN,
    MD_LIST_ITEM_PATTERN,
    MD_NUMBERED_ITEM_PATTERN,
    MD_QUOTE_PATTERN,
    MD_STRIKETHROUGH_PATTERN,
    MD_TABLE_CELL_PATTERN,
    MD_TABLE_HEADER_CELL,
    MD_TABLE_ROW_TERMINATOR,
    MD_TODO_CHECKED_PATTERN,
    MD_TODO_UNCHECKED_PATTERN,
    SINGLE_BREAK,
)
from notion2md.context import StyledBlock, TableCell
from notion2md.models import BlockType, CodePayload, ImagePayload, Page, RichText, TodoPayload, plain_text_of
from notion2md.options.markdown import MarkdownRendererOptions
from notion2md.options.render import (
    BlockOverride,
    PageOverride,
    RichTextOverride,
    RowOverride,
    SeparationOverride,
    resolve_image_save_options,
)
from notion2md.renderers.base import BaseRenderer
from notion2md.utils.images import save_notion_image

logger = logging.getLogger(__name__)

# Variants whose consecutive siblings are kept on adjacent lines.
_TIGHT_TYPES = frozenset(
    {
        BlockType.TABLE_ROW.value,
        BlockType.TO_DO.value,
        BlockType.NUMBERED_LIST_ITEM.value,
        BlockType.BULLETED_LIST_ITEM.value,
    }
)

# Variants that produce output of their own.
_RENDERED_TYPES = frozenset(
    {
        BlockType.HEADING_1.value,
        BlockType.HEADING_2.value,
        BlockType.HEADING_3.value,
        BlockType.TABLE_ROW.value,
        BlockType.TO_DO.value,
        BlockType.NUMBERED_LIST_ITEM.value,
        BlockType.BULLETED_LIST_ITEM.value,
        BlockType.PARAGRAPH.value,
        BlockType.DIVIDER.value,
        BlockType.CODE.value,
        BlockType.QUOTE.value,
        BlockType.CALLOUT.value,
        BlockType.IMAGE.value,
    }
)


def resolve_code_language(language: str) -> str:
    """Map a Notion code language name to the name Markdown tools expect.

    Notion uses names such as ``plain text`` or ``c++`` where most Markdown
    highlighters expect ``txt`` or ``cpp``. Names without an alias are
    returned unchanged.

    Parameters
    ----------
    language : str
        Language name reported by Notion

    Returns
    -------
    str
        Language tag for the code fence

    """
    return CODE_LANGUAGE_ALIASES.get(language, language)


class MarkdownRenderer(BaseRenderer):
    """Render Notion blocks to Markdown text.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options

    Examples
    --------
        >>> from notion2md.models import RichText
        >>> renderer = MarkdownRenderer()
        >>> renderer.render_text([RichText(content="hi", href="https://example.com")])
        '[hi](https://example.com)'

    """

    format_name = "markdown"

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options

    def render_page_header(self, page: Page, override: Optional[PageOverride] = None) -> str:
        """Return the page title as a level 1 heading."""
        if override is not None:
            return override(page)
        return MD_HEADING_ONE_PATTERN.format(page.title)

    def render_page_footer(self, page: Page, override: Optional[PageOverride] = None) -> str:
        """Return an empty footer unless overridden."""
        if override is not None:
            return override(page)
        return ""

    def render_text(self, rich_text: list[RichText], override: Optional[RichTextOverride] = None) -> str:
        """Style each run and concatenate them.

        A run gets exactly one form, chosen in this order: hyperlink, bold,
        italic, strikethrough, inline code, plain. Styles are not nested.
        """
        if override is not None:
            return override(rich_text)

        parts = []
        for run in rich_text:
            annotations = run.annotations
            if run.href:
                parts.append(MD_LINK_PATTERN.format(run.content, run.href))
            elif annotations.bold:
                parts.append(MD_BOLD_PATTERN.format(run.content))
            elif annotations.italic:
                parts.append(MD_ITALIC_PATTERN.format(run.content))
            elif annotations.strikethrough:
                parts.append(MD_STRIKETHROUGH_PATTERN.format(run.content))
            elif annotations.code:
                parts.append(MD_INLINE_CODE_PATTERN.format(run.content))
            else:
                parts.append(run.content)
        return "".join(parts)

    def render_heading_1(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        if override is not None:
            return override(block)
        return MD_HEADING_ONE_PATTERN.format(block.text)

    def render_heading_2(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        if override is not None:
            return override(block)
        return MD_HEADING_TWO_PATTERN.format(block.text)

    def render_heading_3(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        if override is not None:
            return override(block)
        return MD_HEADING_THREE_PATTERN.format(block.text)

    def render_paragraph(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        if override is not None:
            return override(block)
        return block.text

    def render_bulleted_list_item(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        if override is not None:
            return override(block)
        return MD_LIST_ITEM_PATTERN.format(block.text)

    def render_numbered_list_item(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        if override is not None:
            return override(block)
        return MD_NUMBERED_ITEM_PATTERN.format(block.text)

    def render_to_do(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        if override is not None:
            return override(block)

        self._require_block_type(block, BlockType.TO_DO)
        payload = block.block.payload
        if isinstance(payload, TodoPayload) and payload.checked:
            return MD_TODO_CHECKED_PATTERN.format(block.text)
        return MD_TODO_UNCHECKED_PATTERN.format(block.text)

    def render_quote(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        if override is not None:
            return override(block)
        return MD_QUOTE_PATTERN.format(block.text)

    def render_callout(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        """Render a callout as a quote; Markdown has no callout syntax."""
        if override is not None:
            return override(block)
        return MD_QUOTE_PATTERN.format(block.text)

    def render_code(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        if override is not None:
            return override(block)

        self._require_block_type(block, BlockType.CODE)
        payload = block.block.payload
        language = resolve_code_language(payload.language) if isinstance(payload, CodePayload) else ""
        return f"{MD_CODE_BLOCK_DELIMITER}{language}\n{block.text}\n{MD_CODE_BLOCK_DELIMITER}"

    def render_divider(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        if override is not None:
            return override(block)
        return MD_DIVIDER

    def render_image(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        """Reference an image, downloading it first when Notion hosts it.

        The caption, when present, becomes the alt text.

        Raises
        ------
        BlockTypeMismatchError
            If the block is not an image
        ImageDownloadError
            If a Notion-hosted image cannot be saved

        """
        if override is not None:
            return override(block)

        self._require_block_type(block, BlockType.IMAGE)
        payload = block.block.payload
        if not isinstance(payload, ImagePayload):
            return ""

        alt_text = plain_text_of(payload.caption) or DEFAULT_IMAGE_ALT_TEXT
        if not payload.is_hosted:
            return MD_IMAGE_PATTERN.format(alt_text, payload.url)

        image_options = resolve_image_save_options(block.options.image_options)
        file_path = save_notion_image(payload.url, image_options)
        logger.debug("Image block %s referenced as %s", block.block.id, file_path)
        return MD_IMAGE_PATTERN.format(alt_text, file_path)

    def render_table_row(self, cells: list[TableCell], override: Optional[RowOverride] = None) -> str:
        """Render a pipe-delimited row.

        When the row is the first of a table declaring a row header, a
        ``| --- |`` separator row follows it. Header cells are otherwise not
        styled differently.
        """
        if override is not None:
            return override(cells)

        row = "".join(MD_TABLE_CELL_PATTERN.format(cell.text) for cell in cells) + MD_TABLE_ROW_TERMINATOR
        if cells and cells[0].is_row_header:
            separator = MD_TABLE_HEADER_CELL * len(cells) + MD_TABLE_ROW_TERMINATOR
            row += "\n" + separator
        return row

    def add_padding(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        if override is not None:
            return override(block)

        # Blocks without output (tables, unknown variants) stay empty
        if block.depth == 0 or not block.text:
            return block.text

        padding = " " * (block.depth * self.options.padding_width)
        return padding + block.text.replace("\n", "\n" + padding)

    def add_section_separation(
        self, previous_type: str, current_type: str, override: Optional[SeparationOverride] = None
    ) -> str:
        """Return a single break between same-kind list items or rows, else a double break.

        Variants that produce no output of their own (tables, unsupported
        blocks) get no separation.
        """
        if override is not None:
            return override(previous_type, current_type)

        if previous_type == current_type and current_type in _TIGHT_TYPES:
            return SINGLE_BREAK
        if current_type in _RENDERED_TYPES:
            return DOUBLE_BREAK
        return ""
