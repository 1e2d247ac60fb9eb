"""The main exported API functions for exporting Notion pages."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/notion2md/api.py
import logging
from pathlib import Path
from typing import IO, Optional, Sequence, Union

from notion2md.client import ContentSource
from notion2md.exceptions import ValidationError
from notion2md.exporter import create_exporter
from notion2md.options.exporter import ExporterOptions
from notion2md.options.markdown import MarkdownRendererOptions
from notion2md.options.render import RenderOptions
from notion2md.renderers.markdown import MarkdownRenderer
from notion2md.utils.io_utils import write_content

logger = logging.getLogger(__name__)


def to_markdown(
    page_ids: Union[str, Sequence[str]],
    *,
    token: Optional[str] = None,
    options: Optional[RenderOptions] = None,
    renderer_options: Optional[MarkdownRendererOptions] = None,
    source: Optional[ContentSource] = None,
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
) -> str:
    """Export one or more Notion pages to Markdown.

    The first page is rendered with its title header and footer; every
    further page has its blocks appended after a blank line.

    Parameters
    ----------
    page_ids : str or sequence of str
        Notion page id, or several ids to concatenate in order
    token : str, optional
        Notion integration token. Falls back to ``NOTION_TOKEN`` and the
        config file. Ignored when ``source`` is given.
    options : RenderOptions, optional
        Image handling, per-block overrides and the empty paragraph policy
    renderer_options : MarkdownRendererOptions, optional
        Markdown settings such as the indentation width
    source : ContentSource, optional
        Content source to read from instead of the Notion API
    output : str, Path, IO[bytes] or IO[str], optional
        Where to also write the result

    Returns
    -------
    str
        The Markdown document

    Raises
    ------
    ValidationError
        If no page id is given
    ConfigurationError
        If no token can be resolved
    SourceFetchError
        If Notion content cannot be retrieved

    Examples
    --------
        >>> markdown = to_markdown("de4d2477f3214ec98614fd46a4e1487f", token="secret_...")

    With options:
        >>> opts = RenderOptions(skip_empty_paragraphs=True)
        >>> markdown = to_markdown(page_id, options=opts, output="page.md")

    """
    ids = [page_ids] if isinstance(page_ids, str) else list(page_ids)
    if not ids:
        raise ValidationError("At least one page id is required", parameter_name="page_ids", parameter_value=page_ids)

    exporter_options = ExporterOptions(notion_token=token, renderer=MarkdownRenderer(renderer_options))
    with create_exporter(exporter_options, source=source) as exporter:
        rendered = exporter.render(ids[0], options)
        for page_id in ids[1:]:
            logger.debug("Appending page %s", page_id)
            rendered = exporter.render_append(page_id, rendered, options)

    if output is not None:
        write_content(rendered, output)
    return rendered.decode("utf-8")


__all__ = ["to_markdown"]
