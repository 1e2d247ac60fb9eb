#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options used when constructing an exporter."""
# src/notion2md/options/exporter.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from notion2md.constants import DEFAULT_FORMAT, DEFAULT_NETWORK_TIMEOUT, NOTION_API_VERSION
from notion2md.options.base import CloneFrozenMixin

if TYPE_CHECKING:
    from notion2md.renderers.base import BaseRenderer


@dataclass(frozen=True)
class ExporterOptions(CloneFrozenMixin):
    """Configuration for :func:`notion2md.exporter.create_exporter`.

    Parameters
    ----------
    notion_token : str or None, default None
        Integration token. When not set, it is resolved from the
        ``NOTION_TOKEN`` environment variable, then the config file.
    format : str, default "markdown"
        Export format used to pick a renderer
    renderer : BaseRenderer or None, default None
        Renderer instance to use. When set, ``format`` is ignored.
    timeout : float, default 30.0
        Timeout in seconds for Notion API requests
    notion_version : str
        Value of the ``Notion-Version`` request header

    """

    notion_token: Optional[str] = field(
        default=None,
        metadata={"help": "Notion integration token", "importance": "core"},
    )
    format: str = field(
        default=DEFAULT_FORMAT,
        metadata={"help": "Export format for the page", "importance": "core"},
    )
    renderer: Optional["BaseRenderer"] = field(
        default=None,
        metadata={"help": "Renderer instance overriding the format lookup", "importance": "advanced"},
    )
    timeout: float = field(
        default=DEFAULT_NETWORK_TIMEOUT,
        metadata={"help": "Timeout in seconds for Notion API requests", "type": float, "importance": "advanced"},
    )
    notion_version: str = field(
        default=NOTION_API_VERSION,
        metadata={"help": "Notion-Version header sent with API requests", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
