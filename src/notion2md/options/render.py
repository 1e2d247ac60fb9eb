#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2md/options/render.py
"""Options controlling how a page is rendered.

``RenderOptions`` is passed to :meth:`notion2md.exporter.Exporter.render`
and travels with every block through the traversal. It bundles image
handling, per-block override functions and the empty paragraph policy.

Overrides replace one rendering step for a single render call without
implementing a whole renderer:

    >>> from notion2md.options import OverrideOptions, RenderOptions
    >>> shout = OverrideOptions(paragraph=lambda block: block.text.upper())
    >>> options = RenderOptions(overrides=shout)

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional

from notion2md.constants import DEFAULT_IMAGE_SAVE_PATH
from notion2md.models import Page, RichText
from notion2md.options.base import CloneFrozenMixin

if TYPE_CHECKING:
    from notion2md.context import StyledBlock, TableCell

# Signatures of the functions accepted by OverrideOptions.
PageOverride = Callable[[Page], str]
RichTextOverride = Callable[[list[RichText]], str]
BlockOverride = Callable[["StyledBlock"], str]
RowOverride = Callable[[list["TableCell"]], str]
SeparationOverride = Callable[[str, str], str]


@dataclass(frozen=True)
class ImageSaveOptions(CloneFrozenMixin):
    """Settings for handling image blocks.

    Parameters
    ----------
    save_path : str, default "images"
        Directory where Notion-hosted images are downloaded
    ignore_images : bool, default False
        Leave image blocks out of the output entirely
    overwrite_existing : bool, default False
        Download images again even when a local copy already exists

    """

    save_path: str = field(
        default=DEFAULT_IMAGE_SAVE_PATH,
        metadata={"help": "Directory where Notion-hosted images are saved", "importance": "core"},
    )
    ignore_images: bool = field(
        default=False,
        metadata={"help": "Skip all image blocks", "importance": "core"},
    )
    overwrite_existing: bool = field(
        default=False,
        metadata={"help": "Re-download images even if a local copy exists", "importance": "advanced"},
    )


@dataclass(frozen=True)
class OverrideOptions(CloneFrozenMixin):
    """Functions that replace individual rendering steps.

    Every field is optional. When set, the function runs instead of the
    renderer's default behaviour for that step; the default is not run
    first. Block overrides receive a
    :class:`~notion2md.context.StyledBlock` whose ``text`` has already been
    through rich text rendering.
    """

    page_header: Optional[PageOverride] = None
    page_footer: Optional[PageOverride] = None
    rich_text: Optional[RichTextOverride] = None
    heading_1: Optional[BlockOverride] = None
    heading_2: Optional[BlockOverride] = None
    heading_3: Optional[BlockOverride] = None
    paragraph: Optional[BlockOverride] = None
    bulleted_list_item: Optional[BlockOverride] = None
    numbered_list_item: Optional[BlockOverride] = None
    to_do: Optional[BlockOverride] = None
    quote: Optional[BlockOverride] = None
    callout: Optional[BlockOverride] = None
    code: Optional[BlockOverride] = None
    divider: Optional[BlockOverride] = None
    image: Optional[BlockOverride] = None
    padding: Optional[BlockOverride] = None
    table_row: Optional[RowOverride] = None
    separation: Optional[SeparationOverride] = None


@dataclass(frozen=True)
class RenderOptions(CloneFrozenMixin):
    """Settings for one render call.

    Parameters
    ----------
    image_options : ImageSaveOptions
        How image blocks are handled
    overrides : OverrideOptions
        Per-step rendering overrides
    skip_empty_paragraphs : bool, default False
        Omit paragraphs without any text (and their children)

    """

    image_options: ImageSaveOptions = field(
        default_factory=ImageSaveOptions,
        metadata={"help": "Image download and inclusion settings", "importance": "core"},
    )
    overrides: OverrideOptions = field(
        default_factory=OverrideOptions,
        metadata={"help": "Functions replacing default rendering steps", "importance": "advanced"},
    )
    skip_empty_paragraphs: bool = field(
        default=False,
        metadata={"help": "Omit empty paragraph blocks from the output", "importance": "core"},
    )


def resolve_image_save_options(options: Optional[ImageSaveOptions] = None) -> ImageSaveOptions:
    """Merge caller image options with defaults.

    Parameters
    ----------
    options : ImageSaveOptions, optional
        Caller supplied options

    Returns
    -------
    ImageSaveOptions
        Defaults when nothing was given; otherwise the caller's options with
        an empty ``save_path`` replaced by the default directory

    """
    if options is None:
        return ImageSaveOptions()
    if not options.save_path:
        return options.create_updated(save_path=DEFAULT_IMAGE_SAVE_PATH)
    return options


def resolve_render_options(options: Optional[RenderOptions] = None) -> RenderOptions:
    """Merge caller render options with defaults.

    Parameters
    ----------
    options : RenderOptions, optional
        Caller supplied options

    Returns
    -------
    RenderOptions
        Fully populated options for a render call

    """
    if options is None:
        return RenderOptions()
    image_options = resolve_image_save_options(options.image_options)
    if image_options is options.image_options:
        return options
    return options.create_updated(image_options=image_options)
