#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for notion2md.

Using frozen dataclasses provides type safety, default values, and a clean
API for configuring export behaviour. Use ``create_updated`` to derive a
modified copy of any options object.
"""

from __future__ import annotations

from notion2md.options.base import BaseRendererOptions, CloneFrozenMixin
from notion2md.options.exporter import ExporterOptions
from notion2md.options.markdown import MarkdownRendererOptions
from notion2md.options.render import (
    BlockOverride,
    ImageSaveOptions,
    OverrideOptions,
    PageOverride,
    RenderOptions,
    RichTextOverride,
    RowOverride,
    SeparationOverride,
    resolve_image_save_options,
    resolve_render_options,
)

__all__ = [
    "BaseRendererOptions",
    "BlockOverride",
    "CloneFrozenMixin",
    "ExporterOptions",
    "ImageSaveOptions",
    "MarkdownRendererOptions",
    "OverrideOptions",
    "PageOverride",
    "RenderOptions",
    "RichTextOverride",
    "RowOverride",
    "SeparationOverride",
    "resolve_image_save_options",
    "resolve_render_options",
]
