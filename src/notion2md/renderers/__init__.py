#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers turning Notion blocks into text formats.

``get_renderer`` maps an export format name to a renderer instance:

    >>> from notion2md.renderers import get_renderer
    >>> renderer = get_renderer("md")
    >>> type(renderer).__name__
    'MarkdownRenderer'

"""

from __future__ import annotations

from typing import Callable

from notion2md.exceptions import FormatError
from notion2md.renderers.base import BaseRenderer
from notion2md.renderers.markdown import MarkdownRenderer

_RENDERERS: dict[str, Callable[[], BaseRenderer]] = {
    "markdown": MarkdownRenderer,
    "md": MarkdownRenderer,
}


def list_formats() -> list[str]:
    """Return the format names accepted by :func:`get_renderer`."""
    return sorted(_RENDERERS)


def get_renderer(kind: str) -> BaseRenderer:
    """Return a renderer for the given export format.

    Parameters
    ----------
    kind : str
        Format name, case-insensitive (``markdown`` or ``md``)

    Returns
    -------
    BaseRenderer
        A new renderer instance

    Raises
    ------
    FormatError
        If no renderer supports the format

    """
    factory = _RENDERERS.get(kind.lower())
    if factory is None:
        raise FormatError(format_type=kind, supported_formats=list_formats())
    return factory()


__all__ = ["BaseRenderer", "MarkdownRenderer", "get_renderer", "list_formats"]
