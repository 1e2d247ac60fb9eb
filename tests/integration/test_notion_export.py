#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_notion_export.py
"""Integration tests exporting a page through the HTTP client.

The Notion API and the image host are replaced with an ``httpx.MockTransport``;
everything between the HTTP layer and the written Markdown file is real.
"""

from unittest.mock import patch

import httpx
import pytest
from utils import (
    HOSTED_IMAGE_URL,
    PAGE_ID,
    bulleted,
    code,
    heading,
    image,
    page,
    paragraph,
    table,
    table_row,
    text,
    todo,
)

from notion2md.cli import main
from notion2md.client import NotionClient
from notion2md.constants import NOTION_API_BASE_URL
from notion2md.exporter import Exporter
from notion2md.options import ImageSaveOptions, RenderOptions

ASSET_ID = "3b2f5a9e-5c1f-4f0e-9d1a-0a7e2c6b8f11"

CHILDREN = {
    PAGE_ID: [
        heading(1, "Overview"),
        paragraph([text("Read the "), text("guide", href="https://example.com/guide"), text(" first.")]),
        bulleted("Install", block_id="b1", has_children=True),
        bulleted("Configure"),
        paragraph(""),
        table(row_header=True, block_id="t1"),
        image(HOSTED_IMAGE_URL, hosted=True, caption="Architecture"),
    ],
    "b1": [todo("pip install notion2md", checked=True), code("notion2md login secret", language="shell")],
    "t1": [table_row("Flag", "Meaning"), table_row("-o", "Output file")],
}

EXPECTED = (
    "# Handbook\n\n"
    "# Overview\n\n"
    "Read the [guide](https://example.com/guide) first.\n\n"
    "* Install\n\n"
    "    * [x] pip install notion2md\n\n"
    "    ```shell\n"
    "    notion2md login secret\n"
    "    ```\n"
    "* Configure\n\n"
    "| Flag | Meaning |\n"
    "| --- | --- |\n"
    "| -o | Output file |\n\n"
    f"![Architecture](IMAGE_DIR/{ASSET_ID}.png)"
)


class NotionMock:
    """Serve pages and paginated block children like the Notion API."""

    def __init__(self, page_size: int = 2):
        self.page_size = page_size
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if request.url.host != "api.notion.com":
            return httpx.Response(200, content=b"\x89PNG image bytes")
        if path == f"/v1/pages/{PAGE_ID}":
            return httpx.Response(200, json=page("Handbook"))
        if path.startswith("/v1/blocks/") and path.endswith("/children"):
            block_id = path.split("/")[3]
            items = CHILDREN.get(block_id, [])
            start = int(request.url.params.get("start_cursor", "0"))
            end = start + self.page_size
            return httpx.Response(
                200,
                json={
                    "object": "list",
                    "results": items[start:end],
                    "has_more": end < len(items),
                    "next_cursor": str(end) if end < len(items) else None,
                },
            )
        return httpx.Response(404, json={"object": "error", "code": "object_not_found", "message": path})


@pytest.fixture
def notion():
    return NotionMock()


@pytest.fixture
def mock_http(notion):
    """Route every HTTP client notion2md creates through the mock."""
    transport = httpx.MockTransport(notion)
    real_client = httpx.Client

    def client_factory(*args, **kwargs):
        kwargs["transport"] = transport
        return real_client(*args, **kwargs)

    with patch("notion2md.utils.network.httpx.Client", side_effect=client_factory):
        yield notion


@pytest.mark.integration
class TestNotionExport:
    def test_full_page(self, mock_http, tmp_path):
        image_dir = tmp_path / "img"
        options = RenderOptions(
            image_options=ImageSaveOptions(save_path=str(image_dir)),
            skip_empty_paragraphs=True,
        )
        with NotionClient("secret_test", base_url=NOTION_API_BASE_URL) as client:
            result = Exporter(client).render(PAGE_ID, options).decode("utf-8")

        assert result == EXPECTED.replace("IMAGE_DIR", str(image_dir))
        assert (image_dir / f"{ASSET_ID}.png").read_bytes() == b"\x89PNG image bytes"

    def test_children_paginated(self, mock_http, tmp_path):
        options = RenderOptions(image_options=ImageSaveOptions(ignore_images=True))
        with NotionClient("secret_test") as client:
            Exporter(client).render(PAGE_ID, options)

        cursors = [
            r.url.params.get("start_cursor") for r in mock_http.requests if r.url.path == f"/v1/blocks/{PAGE_ID}/children"
        ]
        assert cursors == [None, "2", "4", "6"]

    def test_cli_writes_file(self, mock_http, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("NOTION_TOKEN", "secret_env")
        out = tmp_path / "handbook.md"

        exit_code = main(["export", f"https://www.notion.so/Handbook-{PAGE_ID}", "-o", str(out), "--skip-empty-paragraphs"])

        assert exit_code == 0
        assert out.read_text(encoding="utf-8") == EXPECTED.replace("IMAGE_DIR", "images")
        assert (tmp_path / "images" / f"{ASSET_ID}.png").exists()
        auth_headers = {r.headers.get("Authorization") for r in mock_http.requests if r.url.host == "api.notion.com"}
        assert auth_headers == {"Bearer secret_env"}

    def test_api_error_exit_code(self, mock_http, monkeypatch, capsys):
        monkeypatch.setenv("NOTION_TOKEN", "secret_env")
        assert main(["export", "f" * 32]) == 12
        assert "404" in capsys.readouterr().err
