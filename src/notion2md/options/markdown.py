#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown rendering."""
# src/notion2md/options/markdown.py

from __future__ import annotations

from dataclasses import dataclass, field

from notion2md.constants import DEFAULT_PADDING_WIDTH
from notion2md.options.base import BaseRendererOptions


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    """Configuration options for the Markdown renderer.

    Parameters
    ----------
    padding_width : int, default 4
        Number of spaces each level of nesting adds in front of a block

    """

    padding_width: int = field(
        default=DEFAULT_PADDING_WIDTH,
        metadata={"help": "Spaces of indentation per nesting level", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValueError
            If padding_width is negative.

        """
        if self.padding_width < 0:
            raise ValueError(f"padding_width must be non-negative, got {self.padding_width}")
