#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2md/renderers/base.py
"""Base class for block renderers.

This module defines the abstract base class every renderer inherits from.
A renderer has one operation per block variant plus the cross-cutting steps
the exporter needs: page header and footer, rich text styling, padding by
depth and the separation emitted between neighbouring blocks.

Each operation accepts an optional override of matching signature. When an
override is given it replaces the operation entirely, which lets callers
change one step without writing a new renderer.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from notion2md.context import StyledBlock, TableCell
from notion2md.exceptions import BlockTypeMismatchError, InvalidOptionsError
from notion2md.models import BlockType, Page, RichText
from notion2md.options.base import BaseRendererOptions
from notion2md.options.render import (
    BlockOverride,
    PageOverride,
    RichTextOverride,
    RowOverride,
    SeparationOverride,
)


class BaseRenderer(ABC):
    """Abstract base class for all block renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer by extending the Markdown one:

        >>> from notion2md.renderers.markdown import MarkdownRenderer
        >>>
        >>> class ShoutingRenderer(MarkdownRenderer):
        ...     def render_paragraph(self, block, override=None):
        ...         return block.text.upper()

    """

    #: Name used in error messages and the renderer registry
    format_name: str = ""

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_page_header(self, page: Page, override: Optional[PageOverride] = None) -> str:
        """Return what goes at the top of the page, before any block."""

    @abstractmethod
    def render_page_footer(self, page: Page, override: Optional[PageOverride] = None) -> str:
        """Return what goes at the bottom of the page, after every block."""

    @abstractmethod
    def render_text(self, rich_text: list[RichText], override: Optional[RichTextOverride] = None) -> str:
        """Convert a sequence of styled runs to flat formatted text.

        Each run carries its own annotations (bold, italic, etc.), so the
        implementation styles every run and concatenates them in order.
        """

    @abstractmethod
    def render_heading_1(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        """Render a level 1 heading."""

    @abstractmethod
    def render_heading_2(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        """Render a level 2 heading."""

    @abstractmethod
    def render_heading_3(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        """Render a level 3 heading."""

    @abstractmethod
    def render_paragraph(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        """Render a paragraph."""

    @abstractmethod
    def render_bulleted_list_item(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        """Render one bulleted list item."""

    @abstractmethod
    def render_numbered_list_item(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        """Render one numbered list item."""

    @abstractmethod
    def render_to_do(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        """Render one to-do item, checked or unchecked."""

    @abstractmethod
    def render_quote(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        """Render a quote."""

    @abstractmethod
    def render_callout(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        """Render a callout."""

    @abstractmethod
    def render_code(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        """Render a code block."""

    @abstractmethod
    def render_divider(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        """Render a divider."""

    @abstractmethod
    def render_image(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        """Render a reference to an image.

        Images hosted outside Notion are referenced directly. Notion-hosted
        images are downloaded first and referenced by their local path.

        Raises
        ------
        ImageDownloadError
            If a Notion-hosted image cannot be saved

        """

    @abstractmethod
    def render_table_row(self, cells: list[TableCell], override: Optional[RowOverride] = None) -> str:
        """Render one table row from its already-styled cells.

        The cells carry the header flags and the row index, so the
        implementation can decide whether to emit header markup.
        """

    @abstractmethod
    def add_padding(self, block: StyledBlock, override: Optional[BlockOverride] = None) -> str:
        """Indent ``block.text`` according to ``block.depth``.

        Every line is prefixed, including lines that come from newlines
        inside the text (e.g. code blocks). Depth 0 leaves the text as is.
        """

    @abstractmethod
    def add_section_separation(
        self, previous_type: str, current_type: str, override: Optional[SeparationOverride] = None
    ) -> str:
        """Return the text emitted between the previous block and the current one.

        ``previous_type`` is empty for the first block of a render.
        """

    @staticmethod
    def _require_block_type(block: StyledBlock, expected: BlockType) -> None:
        """Guard a variant-specific operation against the wrong block.

        Raises
        ------
        BlockTypeMismatchError
            If the source block is not of the expected variant

        """
        if block.block.block_type is not expected:
            raise BlockTypeMismatchError(expected=expected.value, received=block.block.type)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
