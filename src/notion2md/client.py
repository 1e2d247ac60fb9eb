#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2md/client.py
"""Access to Notion pages and blocks.

The exporter only depends on the small :class:`ContentSource` protocol:
fetch a page, fetch one page of a block's children. :class:`NotionClient`
implements it over the Notion REST API with httpx; tests and embedders can
supply any object with the same two methods.

"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional, Protocol

import httpx

from notion2md.constants import (
    DEFAULT_NETWORK_TIMEOUT,
    NOTION_API_BASE_URL,
    NOTION_API_VERSION,
    NOTION_PAGE_SIZE,
)
from notion2md.exceptions import NotionAPIError, SourceFetchError
from notion2md.models import Block, BlockChildren, Page
from notion2md.utils.network import create_http_client

logger = logging.getLogger(__name__)


class ContentSource(Protocol):
    """Where the exporter reads pages and blocks from."""

    def get_page(self, page_id: str) -> Page:
        """Return the page with the given id."""
        ...

    def get_block_children(self, block_id: str, start_cursor: Optional[str] = None) -> BlockChildren:
        """Return one page of the children of a block (or page).

        ``start_cursor`` is the ``next_cursor`` of the previous page, or
        None for the first page.
        """
        ...


def iter_block_children(source: ContentSource, block_id: str) -> Iterator[Block]:
    """Yield every child of a block, following pagination cursors.

    Parameters
    ----------
    source : ContentSource
        Where children are fetched from
    block_id : str
        Id of the parent block or page

    Yields
    ------
    Block
        Children in document order

    Raises
    ------
    SourceFetchError
        If any page of children cannot be fetched

    """
    cursor: Optional[str] = None
    while True:
        children = source.get_block_children(block_id, start_cursor=cursor)
        yield from children.results
        if not children.has_more or not children.next_cursor:
            return
        cursor = children.next_cursor


class NotionClient:
    """Minimal Notion REST API client.

    Parameters
    ----------
    token : str
        Notion integration token
    timeout : float, default 30.0
        Request timeout in seconds
    notion_version : str
        ``Notion-Version`` header value
    base_url : str
        API base URL
    client : httpx.Client, optional
        Pre-configured HTTP client. It must send the authorization headers
        itself; the NotionClient does not close it.

    Examples
    --------
        >>> with NotionClient(token) as notion:
        ...     page = notion.get_page("de4d2477f3214ec98614fd46a4e1487f")

    """

    def __init__(
        self,
        token: str,
        timeout: float = DEFAULT_NETWORK_TIMEOUT,
        notion_version: str = NOTION_API_VERSION,
        base_url: str = NOTION_API_BASE_URL,
        client: Optional[httpx.Client] = None,
    ):
        self._owns_client = client is None
        self._client = client or create_http_client(
            timeout=timeout,
            base_url=base_url,
            headers={
                "Authorization": f"Bearer {token}",
                "Notion-Version": notion_version,
                "Accept": "application/json",
            },
        )

    def __enter__(self) -> NotionClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client if this object created it."""
        if self._owns_client:
            self._client.close()

    def _get(self, path: str, resource_id: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        logger.debug("GET %s params=%s", path, params)
        try:
            response = self._client.get(path, params=params)
        except httpx.HTTPError as e:
            raise SourceFetchError(
                f"Request to Notion failed for {resource_id}: {e}", resource_id=resource_id, original_error=e
            ) from e
        return self._handle_response(response, resource_id)

    @staticmethod
    def _handle_response(response: httpx.Response, resource_id: str) -> dict[str, Any]:
        """Return the JSON body or raise NotionAPIError for error statuses."""
        if response.status_code >= 400:
            try:
                error_data = response.json()
            except ValueError:
                error_data = {}
            message = error_data.get("message") or response.text or "Unknown error"
            raise NotionAPIError(
                f"Notion API returned {response.status_code} for {resource_id}: {message}",
                status_code=response.status_code,
                code=error_data.get("code", ""),
                resource_id=resource_id,
            )
        try:
            return response.json()
        except ValueError as e:
            raise SourceFetchError(
                f"Notion returned invalid JSON for {resource_id}", resource_id=resource_id, original_error=e
            ) from e

    def get_page(self, page_id: str) -> Page:
        """Retrieve a page object.

        Raises
        ------
        SourceFetchError
            If the page cannot be retrieved

        """
        return Page.from_dict(self._get(f"/pages/{page_id}", page_id))

    def get_block_children(self, block_id: str, start_cursor: Optional[str] = None) -> BlockChildren:
        """Retrieve one page of a block's children.

        Raises
        ------
        SourceFetchError
            If the children cannot be retrieved

        """
        params: dict[str, Any] = {"page_size": NOTION_PAGE_SIZE}
        if start_cursor:
            params["start_cursor"] = start_cursor
        return BlockChildren.from_dict(self._get(f"/blocks/{block_id}/children", block_id, params=params))
