#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2md/models.py
"""Data model for Notion pages, blocks and rich text.

This module defines immutable snapshots of the objects returned by the
Notion API. Each block carries a typed payload chosen by its variant tag,
so renderers read fields such as the checked state of a to-do or the
language of a code block without touching the raw JSON. The raw API
dictionary is kept on every object for overrides that need fields this
model does not surface.

Objects are built from API JSON with the ``from_dict`` class methods:

    >>> block = Block.from_dict({
    ...     "id": "b1",
    ...     "type": "to_do",
    ...     "has_children": False,
    ...     "to_do": {"rich_text": [], "checked": True},
    ... })
    >>> block.payload.checked
    True

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional, Union


class BlockType(str, Enum):
    """Block variants the renderer contract knows about.

    Values equal the Notion API ``type`` tags. Tags outside this set map to
    ``UNSUPPORTED``.
    """

    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    HEADING_3 = "heading_3"
    PARAGRAPH = "paragraph"
    BULLETED_LIST_ITEM = "bulleted_list_item"
    NUMBERED_LIST_ITEM = "numbered_list_item"
    TO_DO = "to_do"
    QUOTE = "quote"
    CALLOUT = "callout"
    CODE = "code"
    DIVIDER = "divider"
    IMAGE = "image"
    TABLE = "table"
    TABLE_ROW = "table_row"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_tag(cls, tag: str) -> BlockType:
        """Return the variant for an API tag, or ``UNSUPPORTED``."""
        try:
            return cls(tag)
        except ValueError:
            return cls.UNSUPPORTED


@dataclass(frozen=True)
class Annotations:
    """Style flags attached to a rich text run.

    Parameters
    ----------
    bold, italic, strikethrough, underline, code : bool, default False
        Independent style flags
    color : str, default "default"
        Notion color name; carried but not rendered by the Markdown renderer

    """

    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    underline: bool = False
    code: bool = False
    color: str = "default"

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> Annotations:
        if not data:
            return cls()
        return cls(
            bold=bool(data.get("bold", False)),
            italic=bool(data.get("italic", False)),
            strikethrough=bool(data.get("strikethrough", False)),
            underline=bool(data.get("underline", False)),
            code=bool(data.get("code", False)),
            color=str(data.get("color", "default")),
        )


@dataclass(frozen=True)
class RichText:
    """A contiguous run of consistently styled text.

    Parameters
    ----------
    content : str
        Text content of the run
    plain_text : str, default ""
        Plain text as reported by the API. Defaults to ``content``.
    href : str or None, default None
        Hyperlink target, if the run is a link
    annotations : Annotations
        Style flags of the run
    type : str, default "text"
        Rich text type (``text``, ``mention`` or ``equation``)

    """

    content: str
    plain_text: str = ""
    href: Optional[str] = None
    annotations: Annotations = field(default_factory=Annotations)
    type: str = "text"

    def __post_init__(self) -> None:
        if not self.plain_text:
            object.__setattr__(self, "plain_text", self.content)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RichText:
        """Build a run from a Notion rich text object.

        Mentions and equations have no ``text`` member; their ``plain_text``
        is used as content.
        """
        rt_type = data.get("type", "text")
        text = data.get("text") or {}
        plain_text = data.get("plain_text") or ""
        content = text.get("content") if rt_type == "text" else None
        if content is None:
            content = plain_text
        href = data.get("href") or (text.get("link") or {}).get("url") or None
        return cls(
            content=content,
            plain_text=plain_text,
            href=href,
            annotations=Annotations.from_dict(data.get("annotations")),
            type=rt_type,
        )


def parse_rich_text(items: Optional[list[Mapping[str, Any]]]) -> list[RichText]:
    """Parse a list of API rich text objects, tolerating ``None``."""
    return [RichText.from_dict(item) for item in items or []]


def plain_text_of(runs: list[RichText]) -> str:
    """Concatenate the plain text of a rich text sequence."""
    return "".join(run.plain_text for run in runs)


# ---------------------------------------------------------------------------
# Block payloads
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EmptyPayload:
    """Payload of blocks without content the renderer reads (divider, unknown)."""


@dataclass(frozen=True)
class TextPayload:
    """Payload of headings, paragraphs, list items and quotes."""

    rich_text: list[RichText] = field(default_factory=list)


@dataclass(frozen=True)
class TodoPayload:
    """Payload of a to-do item."""

    rich_text: list[RichText] = field(default_factory=list)
    checked: bool = False


@dataclass(frozen=True)
class CalloutPayload:
    """Payload of a callout; ``icon`` holds the emoji when one is set."""

    rich_text: list[RichText] = field(default_factory=list)
    icon: Optional[str] = None


@dataclass(frozen=True)
class CodePayload:
    """Payload of a code block."""

    rich_text: list[RichText] = field(default_factory=list)
    language: str = "plain text"
    caption: list[RichText] = field(default_factory=list)


@dataclass(frozen=True)
class ImagePayload:
    """Payload of an image block.

    Parameters
    ----------
    source : str
        ``file`` for images hosted by Notion, ``external`` for images linked
        from elsewhere
    url : str
        Location of the image
    caption : list of RichText
        Caption runs

    """

    source: str
    url: str
    caption: list[RichText] = field(default_factory=list)

    @property
    def is_hosted(self) -> bool:
        """Whether the image is stored by Notion and must be downloaded."""
        return self.source == "file"


@dataclass(frozen=True)
class TablePayload:
    """Payload of a table block; its rows arrive as children."""

    table_width: int = 0
    has_column_header: bool = False
    has_row_header: bool = False


@dataclass(frozen=True)
class TableRowPayload:
    """Payload of a table row: one rich text sequence per cell."""

    cells: list[list[RichText]] = field(default_factory=list)


BlockPayload = Union[
    EmptyPayload,
    TextPayload,
    TodoPayload,
    CalloutPayload,
    CodePayload,
    ImagePayload,
    TablePayload,
    TableRowPayload,
]


def _text_payload(body: Mapping[str, Any]) -> TextPayload:
    return TextPayload(rich_text=parse_rich_text(body.get("rich_text")))


def _todo_payload(body: Mapping[str, Any]) -> TodoPayload:
    return TodoPayload(rich_text=parse_rich_text(body.get("rich_text")), checked=bool(body.get("checked", False)))


def _callout_payload(body: Mapping[str, Any]) -> CalloutPayload:
    icon = body.get("icon") or {}
    return CalloutPayload(
        rich_text=parse_rich_text(body.get("rich_text")),
        icon=icon.get("emoji") if icon.get("type") == "emoji" else None,
    )


def _code_payload(body: Mapping[str, Any]) -> CodePayload:
    return CodePayload(
        rich_text=parse_rich_text(body.get("rich_text")),
        language=body.get("language") or "plain text",
        caption=parse_rich_text(body.get("caption")),
    )


def _image_payload(body: Mapping[str, Any]) -> ImagePayload:
    source = body.get("type", "external")
    location = body.get(source) or {}
    return ImagePayload(
        source=source,
        url=location.get("url", ""),
        caption=parse_rich_text(body.get("caption")),
    )


def _table_payload(body: Mapping[str, Any]) -> TablePayload:
    return TablePayload(
        table_width=int(body.get("table_width", 0)),
        has_column_header=bool(body.get("has_column_header", False)),
        has_row_header=bool(body.get("has_row_header", False)),
    )


def _table_row_payload(body: Mapping[str, Any]) -> TableRowPayload:
    return TableRowPayload(cells=[parse_rich_text(cell) for cell in body.get("cells") or []])


_PAYLOAD_PARSERS = {
    BlockType.HEADING_1: _text_payload,
    BlockType.HEADING_2: _text_payload,
    BlockType.HEADING_3: _text_payload,
    BlockType.PARAGRAPH: _text_payload,
    BlockType.BULLETED_LIST_ITEM: _text_payload,
    BlockType.NUMBERED_LIST_ITEM: _text_payload,
    BlockType.QUOTE: _text_payload,
    BlockType.TO_DO: _todo_payload,
    BlockType.CALLOUT: _callout_payload,
    BlockType.CODE: _code_payload,
    BlockType.IMAGE: _image_payload,
    BlockType.TABLE: _table_payload,
    BlockType.TABLE_ROW: _table_row_payload,
}


@dataclass(frozen=True)
class Block:
    """Snapshot of one Notion block.

    Parameters
    ----------
    id : str
        Block id, used to fetch its children
    type : str
        Variant tag exactly as reported by the API
    has_children : bool, default False
        Whether the block has nested children
    payload : BlockPayload
        Typed content for the variant
    raw : Mapping
        The unmodified API object

    """

    id: str
    type: str
    has_children: bool = False
    payload: BlockPayload = field(default_factory=EmptyPayload)
    raw: Mapping[str, Any] = field(default_factory=dict)

    @property
    def block_type(self) -> BlockType:
        return BlockType.from_tag(self.type)

    @property
    def rich_text(self) -> list[RichText]:
        """Rich text of the block, empty for variants without text."""
        return list(getattr(self.payload, "rich_text", []))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Block:
        """Build a block from a Notion block object."""
        tag = data.get("type", "")
        parser = _PAYLOAD_PARSERS.get(BlockType.from_tag(tag))
        payload: BlockPayload = parser(data.get(tag) or {}) if parser else EmptyPayload()
        return cls(
            id=data.get("id", ""),
            type=tag,
            has_children=bool(data.get("has_children", False)),
            payload=payload,
            raw=data,
        )


@dataclass(frozen=True)
class BlockChildren:
    """One page of children returned by the block children endpoint."""

    results: list[Block] = field(default_factory=list)
    has_more: bool = False
    next_cursor: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BlockChildren:
        return cls(
            results=[Block.from_dict(item) for item in data.get("results") or []],
            has_more=bool(data.get("has_more", False)),
            next_cursor=data.get("next_cursor") or None,
        )


@dataclass(frozen=True)
class Page:
    """Snapshot of a Notion page.

    Parameters
    ----------
    id : str
        Page id
    properties : Mapping
        Raw page properties keyed by property name
    url : str, default ""
        Public URL of the page
    raw : Mapping
        The unmodified API object

    """

    id: str
    properties: Mapping[str, Any] = field(default_factory=dict)
    url: str = ""
    raw: Mapping[str, Any] = field(default_factory=dict)

    @property
    def title(self) -> str:
        return resolve_title(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Page:
        return cls(
            id=data.get("id", ""),
            properties=data.get("properties") or {},
            url=data.get("url") or "",
            raw=data,
        )


def resolve_title(page: Page) -> str:
    """Return the display title of a page.

    A page has exactly one property of type ``title``. The plain text of its
    first rich text run is the title; an empty title (or a page without a
    title property) yields an empty string.

    Parameters
    ----------
    page : Page
        The page to inspect

    Returns
    -------
    str
        The page title

    """
    for prop in page.properties.values():
        if isinstance(prop, Mapping) and prop.get("type") == "title":
            runs = prop.get("title") or []
            if not runs:
                return ""
            return RichText.from_dict(runs[0]).plain_text
    return ""
