"""Test utilities for the notion2md test suite.

This module provides builders for Notion API JSON objects and an in-memory
content source, so exporter tests run without network access.
"""

from __future__ import annotations

from typing import Any, Optional

from notion2md.models import Block, BlockChildren, Page

PAGE_ID = "de4d2477f3214ec98614fd46a4e1487f"

HOSTED_IMAGE_URL = (
    "https://s3.us-west-2.amazonaws.com/secure.notion-static.com/"
    "3b2f5a9e-5c1f-4f0e-9d1a-0a7e2c6b8f11/diagram.png?X-Amz-Signature=abc"
)


def text(content: str, href: Optional[str] = None, **annotations: bool) -> dict[str, Any]:
    """Build a rich text run."""
    return {
        "type": "text",
        "text": {"content": content, "link": {"url": href} if href else None},
        "annotations": {
            "bold": False,
            "italic": False,
            "strikethrough": False,
            "underline": False,
            "code": False,
            "color": "default",
            **annotations,
        },
        "plain_text": content,
        "href": href,
    }


def _runs(value: str | list[dict[str, Any]]) -> list[dict[str, Any]]:
    if isinstance(value, str):
        return [text(value)] if value else []
    return value


def block(block_type: str, body: Optional[dict[str, Any]] = None, block_id: str = "", has_children: bool = False):
    """Build a raw block object of any type."""
    return {
        "object": "block",
        "id": block_id or f"{block_type}-id",
        "type": block_type,
        "has_children": has_children,
        block_type: body or {},
    }


def text_block(block_type: str, content: str | list[dict[str, Any]] = "", **kwargs: Any) -> dict[str, Any]:
    return block(block_type, {"rich_text": _runs(content)}, **kwargs)


def paragraph(content: str | list[dict[str, Any]] = "", **kwargs: Any) -> dict[str, Any]:
    return text_block("paragraph", content, **kwargs)


def heading(level: int, content: str, **kwargs: Any) -> dict[str, Any]:
    return text_block(f"heading_{level}", content, **kwargs)


def bulleted(content: str, **kwargs: Any) -> dict[str, Any]:
    return text_block("bulleted_list_item", content, **kwargs)


def numbered(content: str, **kwargs: Any) -> dict[str, Any]:
    return text_block("numbered_list_item", content, **kwargs)


def todo(content: str, checked: bool = False, **kwargs: Any) -> dict[str, Any]:
    return block("to_do", {"rich_text": _runs(content), "checked": checked}, **kwargs)


def code(content: str, language: str = "plain text", **kwargs: Any) -> dict[str, Any]:
    return block("code", {"rich_text": _runs(content), "language": language, "caption": []}, **kwargs)


def divider(**kwargs: Any) -> dict[str, Any]:
    return block("divider", {}, **kwargs)


def image(url: str, hosted: bool = False, caption: str = "", **kwargs: Any) -> dict[str, Any]:
    source = "file" if hosted else "external"
    return block("image", {"type": source, source: {"url": url}, "caption": _runs(caption)}, **kwargs)


def table(width: int = 2, row_header: bool = False, column_header: bool = False, **kwargs: Any) -> dict[str, Any]:
    kwargs.setdefault("has_children", True)
    return block(
        "table",
        {"table_width": width, "has_column_header": column_header, "has_row_header": row_header},
        **kwargs,
    )


def table_row(*cells: str, **kwargs: Any) -> dict[str, Any]:
    return block("table_row", {"cells": [_runs(cell) for cell in cells]}, **kwargs)


def page(title: str = "Notes", page_id: str = PAGE_ID) -> dict[str, Any]:
    """Build a raw page object whose title property is ``title``."""
    return {
        "object": "page",
        "id": page_id,
        "url": f"https://www.notion.so/{page_id}",
        "properties": {
            "Status": {"id": "s1", "type": "select", "select": None},
            "Name": {"id": "title", "type": "title", "title": _runs(title)},
        },
    }


class FakeContentSource:
    """In-memory content source.

    Parameters
    ----------
    pages : dict
        Raw page objects keyed by page id
    children : dict
        Raw child block lists keyed by parent id
    page_size : int, default 100
        Children returned per call; smaller values exercise pagination

    """

    def __init__(
        self,
        pages: Optional[dict[str, dict[str, Any]]] = None,
        children: Optional[dict[str, list[dict[str, Any]]]] = None,
        page_size: int = 100,
    ):
        self.pages = pages or {}
        self.children = children or {}
        self.page_size = page_size
        self.page_calls: list[str] = []
        self.children_calls: list[tuple[str, Optional[str]]] = []

    def get_page(self, page_id: str) -> Page:
        self.page_calls.append(page_id)
        return Page.from_dict(self.pages[page_id])

    def get_block_children(self, block_id: str, start_cursor: Optional[str] = None) -> BlockChildren:
        self.children_calls.append((block_id, start_cursor))
        items = self.children.get(block_id, [])
        start = int(start_cursor) if start_cursor else 0
        end = start + self.page_size
        return BlockChildren(
            results=[Block.from_dict(item) for item in items[start:end]],
            has_more=end < len(items),
            next_cursor=str(end) if end < len(items) else None,
        )


def single_page_source(blocks: list[dict[str, Any]], title: str = "Notes", **kwargs: Any) -> FakeContentSource:
    """Build a source holding one page with ``blocks`` at its root."""
    return FakeContentSource(pages={PAGE_ID: page(title)}, children={PAGE_ID: blocks}, **kwargs)
