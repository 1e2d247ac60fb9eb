#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2md/exporter.py
"""Traversal of Notion block trees into rendered output.

The :class:`Exporter` fetches a page, walks its blocks depth first and hands
each block to a renderer. Per block it:

1. renders the rich text and calls the renderer operation for the variant
   (with the caller's override for that variant, if any)
2. pads the result according to the block's depth
3. emits the separation chosen from the previous and current variants,
   then the padded text
4. recurses into the block's children with a copied context

Tables emit nothing themselves. They open a table scope whose rows (the
table's children) are rendered at the table's depth with a running row
counter.

Output is accumulated per call and returned; an exporter keeps no output
between calls, so one instance can serve several renders.

"""

from __future__ import annotations

import logging
from typing import Any, Optional

from notion2md.client import ContentSource, NotionClient, iter_block_children
from notion2md.config import resolve_token
from notion2md.constants import DOUBLE_BREAK
from notion2md.context import RenderContext, StyledBlock, build_table_cells
from notion2md.exceptions import SourceFetchError
from notion2md.models import Block, BlockType, Page, TablePayload, TableRowPayload
from notion2md.options.exporter import ExporterOptions
from notion2md.options.render import RenderOptions, resolve_render_options
from notion2md.renderers import get_renderer
from notion2md.renderers.base import BaseRenderer
from notion2md.renderers.markdown import MarkdownRenderer

logger = logging.getLogger(__name__)

# Text-bearing variants: renderer operation and OverrideOptions field.
_TEXT_BLOCK_OPERATIONS: dict[BlockType, tuple[str, str]] = {
    BlockType.HEADING_1: ("render_heading_1", "heading_1"),
    BlockType.HEADING_2: ("render_heading_2", "heading_2"),
    BlockType.HEADING_3: ("render_heading_3", "heading_3"),
    BlockType.PARAGRAPH: ("render_paragraph", "paragraph"),
    BlockType.BULLETED_LIST_ITEM: ("render_bulleted_list_item", "bulleted_list_item"),
    BlockType.NUMBERED_LIST_ITEM: ("render_numbered_list_item", "numbered_list_item"),
    BlockType.TO_DO: ("render_to_do", "to_do"),
    BlockType.QUOTE: ("render_quote", "quote"),
    BlockType.CALLOUT: ("render_callout", "callout"),
    BlockType.CODE: ("render_code", "code"),
}


class Exporter:
    """Render Notion pages with a renderer.

    Parameters
    ----------
    source : ContentSource
        Where pages and blocks are fetched from
    renderer : BaseRenderer, optional
        Output format; defaults to :class:`MarkdownRenderer`

    Examples
    --------
        >>> from notion2md.client import NotionClient
        >>> with Exporter(NotionClient(token)) as exporter:
        ...     markdown = exporter.render("de4d2477f3214ec98614fd46a4e1487f")

    """

    def __init__(self, source: ContentSource, renderer: Optional[BaseRenderer] = None):
        self.source = source
        self.renderer = renderer or MarkdownRenderer()
        self._owns_source = False

    def __enter__(self) -> Exporter:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Release the content source if this exporter created it."""
        close = getattr(self.source, "close", None)
        if self._owns_source and callable(close):
            close()

    def render(self, page_id: str, options: Optional[RenderOptions] = None) -> bytes:
        """Render a page, header and footer included.

        Parameters
        ----------
        page_id : str
            Notion page id (32 hex characters, dashes optional)
        options : RenderOptions, optional
            Image handling, overrides and the empty paragraph policy

        Returns
        -------
        bytes
            The rendered page, UTF-8 encoded

        Raises
        ------
        SourceFetchError
            If the page or any block's children cannot be fetched
        ImageDownloadError
            If a Notion-hosted image cannot be saved

        """
        return self.render_to_string(page_id, options).encode("utf-8")

    def render_to_string(self, page_id: str, options: Optional[RenderOptions] = None) -> str:
        """Render a page like :meth:`render`, returning text."""
        config = resolve_render_options(options)
        page = self._fetch_page(page_id)
        logger.info("Rendering page %s (%r)", page_id, page.title)

        header = self.renderer.render_page_header(page, config.overrides.page_header)
        body = self.render_blocks(page_id, RenderContext(options=config, page=page))
        footer = self.renderer.render_page_footer(page, config.overrides.page_footer)
        return header + body + footer

    def render_append(self, page_id: str, buffer: bytes, options: Optional[RenderOptions] = None) -> bytes:
        """Append the blocks of another page to already rendered output.

        A double line break separates ``buffer`` from the appended blocks.
        No header or footer is rendered for the appended page.

        Parameters
        ----------
        page_id : str
            Page whose blocks are appended
        buffer : bytes
            Output of an earlier :meth:`render` or :meth:`render_append`
        options : RenderOptions, optional
            Options for this page

        Returns
        -------
        bytes
            ``buffer`` followed by the new content

        """
        config = resolve_render_options(options)
        page = self._fetch_page(page_id)
        body = self.render_blocks(page_id, RenderContext(options=config, page=page))
        return buffer + (DOUBLE_BREAK + body).encode("utf-8")

    def render_blocks(self, container_id: str, context: RenderContext) -> str:
        """Render all children of a page or block, recursively.

        Parameters
        ----------
        container_id : str
            Id of the page or block whose children are rendered
        context : RenderContext
            State of this sibling run; updated as blocks are emitted

        Returns
        -------
        str
            Rendered children in document order

        """
        options = context.options
        overrides = options.overrides
        parts: list[str] = []

        for block in self._fetch_children(container_id):
            block_type = block.block_type

            if block_type is BlockType.TABLE:
                table = block.payload if isinstance(block.payload, TablePayload) else TablePayload()
                context.start_table(table)
                logger.debug("Table %s opened (row header=%s)", block.id, table.has_row_header)
                rendered = ""
            elif block_type is BlockType.PARAGRAPH and options.skip_empty_paragraphs and not block.rich_text:
                logger.debug("Skipping empty paragraph %s", block.id)
                continue
            elif block_type is BlockType.IMAGE and options.image_options.ignore_images:
                logger.debug("Skipping image %s", block.id)
                continue
            else:
                rendered = self._render_block(block, context)

            padded = self.renderer.add_padding(
                StyledBlock(text=rendered, block=block, options=options, depth=context.depth, page=context.page),
                overrides.padding,
            )
            parts.append(self.renderer.add_section_separation(context.previous_type, block.type, overrides.separation))
            parts.append(padded)
            context.previous_type = block.type

            if block.has_children:
                parts.append(self.render_blocks(block.id, context.child(block)))

        return "".join(parts)

    def _render_block(self, block: Block, context: RenderContext) -> str:
        """Render one non-table block without padding or separation."""
        overrides = context.options.overrides
        block_type = block.block_type

        operation = _TEXT_BLOCK_OPERATIONS.get(block_type)
        if operation is not None:
            method_name, override_name = operation
            text = self.renderer.render_text(block.rich_text, overrides.rich_text)
            render = getattr(self.renderer, method_name)
            return render(self._styled(text, block, context), getattr(overrides, override_name))

        if block_type is BlockType.DIVIDER:
            return self.renderer.render_divider(self._styled("", block, context), overrides.divider)

        if block_type is BlockType.IMAGE:
            return self.renderer.render_image(self._styled("", block, context), overrides.image)

        if block_type is BlockType.TABLE_ROW:
            return self._render_table_row(block, context)

        logger.debug("No renderer for block type %r (%s)", block.type, block.id)
        return ""

    def _render_table_row(self, block: Block, context: RenderContext) -> str:
        overrides = context.options.overrides
        state = context.table_state
        if state is None:
            logger.warning("Table row %s found outside of a table", block.id)
            state = context.start_table(TablePayload())

        payload = block.payload if isinstance(block.payload, TableRowPayload) else TableRowPayload()
        texts = [self.renderer.render_text(cell, overrides.rich_text) for cell in payload.cells]
        rendered = self.renderer.render_table_row(build_table_cells(block, texts, state), overrides.table_row)
        state.advance()
        return rendered

    @staticmethod
    def _styled(text: str, block: Block, context: RenderContext) -> StyledBlock:
        return StyledBlock(text=text, block=block, options=context.options, depth=context.depth, page=context.page)

    def _fetch_page(self, page_id: str) -> Page:
        try:
            return self.source.get_page(page_id)
        except SourceFetchError:
            raise
        except Exception as e:
            raise SourceFetchError(f"Failed getting Notion page {page_id}: {e}", resource_id=page_id, original_error=e) from e

    def _fetch_children(self, block_id: str) -> list[Block]:
        try:
            children = list(iter_block_children(self.source, block_id))
        except SourceFetchError:
            raise
        except Exception as e:
            raise SourceFetchError(
                f"Failed retrieving children of {block_id}: {e}", resource_id=block_id, original_error=e
            ) from e
        logger.debug("Fetched %d children of %s", len(children), block_id)
        return children


def create_exporter(options: Optional[ExporterOptions] = None, source: Optional[ContentSource] = None) -> Exporter:
    """Build an exporter from options.

    The renderer comes from ``options.renderer`` or, when unset, from the
    format name. Without an explicit ``source`` a :class:`NotionClient` is
    created with the resolved token; the exporter closes it on
    :meth:`Exporter.close`.

    Parameters
    ----------
    options : ExporterOptions, optional
        Token, format/renderer and client settings
    source : ContentSource, optional
        Content source to use instead of the Notion API

    Returns
    -------
    Exporter
        A ready exporter

    Raises
    ------
    FormatError
        If the format has no renderer
    ConfigurationError
        If a client is needed and no token can be found

    """
    options = options or ExporterOptions()
    renderer = options.renderer or get_renderer(options.format)

    if source is not None:
        return Exporter(source, renderer)

    token = resolve_token(options.notion_token)
    exporter = Exporter(
        NotionClient(token, timeout=options.timeout, notion_version=options.notion_version),
        renderer,
    )
    exporter._owns_source = True
    return exporter
