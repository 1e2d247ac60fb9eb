"""notion2md - export Notion pages to Markdown.

notion2md fetches a Notion page and its nested blocks through the Notion API
and renders them, depth first and in document order, into a Markdown
document. Rendering of every block variant can be replaced with a caller
supplied function, and Notion-hosted images are downloaded next to the
output.

Supported Blocks
----------------
- Headings (levels 1 to 3), paragraphs, quotes and callouts
- Bulleted, numbered and to-do list items, nested to any depth
- Code blocks with language tags
- Dividers, images and simple tables

Examples
--------
Export a page with the token from ``NOTION_TOKEN`` or the config file:

    >>> from notion2md import to_markdown
    >>> markdown = to_markdown("de4d2477f3214ec98614fd46a4e1487f")

Customize a block variant:

    >>> from notion2md import OverrideOptions, RenderOptions
    >>> overrides = OverrideOptions(divider=lambda block: "***")
    >>> markdown = to_markdown(page_id, options=RenderOptions(overrides=overrides))

Use the exporter directly:

    >>> from notion2md import NotionClient, Exporter
    >>> with NotionClient(token) as client:
    ...     content = Exporter(client).render(page_id)

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/notion2md/__init__.py

from notion2md.api import to_markdown
from notion2md.client import ContentSource, NotionClient
from notion2md.context import StyledBlock, TableCell
from notion2md.exceptions import (
    BlockTypeMismatchError,
    ConfigurationError,
    FormatError,
    ImageDownloadError,
    Notion2MdError,
    NotionAPIError,
    RenderingError,
    SourceFetchError,
    ValidationError,
)
from notion2md.exporter import Exporter, create_exporter
from notion2md.models import Block, BlockType, Page, RichText
from notion2md.options import (
    ExporterOptions,
    ImageSaveOptions,
    MarkdownRendererOptions,
    OverrideOptions,
    RenderOptions,
)
from notion2md.renderers import get_renderer, list_formats
from notion2md.renderers.base import BaseRenderer
from notion2md.renderers.markdown import MarkdownRenderer

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # API
    "to_markdown",
    "Exporter",
    "create_exporter",
    "get_renderer",
    "list_formats",
    # Sources
    "ContentSource",
    "NotionClient",
    # Models
    "Block",
    "BlockType",
    "Page",
    "RichText",
    "StyledBlock",
    "TableCell",
    # Renderers
    "BaseRenderer",
    "MarkdownRenderer",
    # Options
    "ExporterOptions",
    "ImageSaveOptions",
    "MarkdownRendererOptions",
    "OverrideOptions",
    "RenderOptions",
    # Exceptions
    "Notion2MdError",
    "BlockTypeMismatchError",
    "ConfigurationError",
    "FormatError",
    "ImageDownloadError",
    "NotionAPIError",
    "RenderingError",
    "SourceFetchError",
    "ValidationError",
]
