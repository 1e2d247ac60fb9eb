#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2md/utils/images.py
"""Persistence of Notion-hosted images.

Images uploaded to Notion are served from short-lived signed URLs, so an
exported document has to reference a local copy instead. This module
derives a stable file name from the image URL, downloads the image once and
reuses the local file on later exports.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import httpx

from notion2md.constants import IMAGE_DOWNLOAD_CHUNK_SIZE, NOTION_IMAGE_EXTENSION
from notion2md.exceptions import ImageDownloadError
from notion2md.options.render import ImageSaveOptions, resolve_image_save_options
from notion2md.utils.network import create_http_client

logger = logging.getLogger(__name__)


def image_file_name(url: str) -> str:
    """Derive the local file name of a Notion-hosted image.

    Notion image URLs look like
    ``https://<bucket>/<workspace-id>/<asset-id>/<name>.png?<signature>``.
    The asset id (third segment of the path) is stable across exports and
    becomes the file name.

    Parameters
    ----------
    url : str
        Image URL

    Returns
    -------
    str
        File name with the image extension

    Raises
    ------
    ImageDownloadError
        If the URL path has no asset id segment

    """
    segments = urlparse(url).path.split("/")
    if len(segments) < 3 or not segments[2]:
        raise ImageDownloadError(f"Path from Notion image URL was invalid: {url}", url=url)
    return segments[2] + NOTION_IMAGE_EXTENSION


def _ensure_directory(path: Path, url: str) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ImageDownloadError(
            f"Could not create image directory {path}: {e}", url=url, file_path=str(path), original_error=e
        ) from e


def _download(url: str, destination: Path, client: httpx.Client) -> None:
    try:
        with client.stream("GET", url) as response:
            if response.status_code != 200:
                raise ImageDownloadError(
                    f"Non 200 status code returned when retrieving image. Code was: {response.status_code}",
                    url=url,
                    file_path=str(destination),
                    status_code=response.status_code,
                )
            with open(destination, "wb") as f:
                for chunk in response.iter_bytes(chunk_size=IMAGE_DOWNLOAD_CHUNK_SIZE):
                    f.write(chunk)
    except httpx.HTTPError as e:
        destination.unlink(missing_ok=True)
        raise ImageDownloadError(
            f"HTTP request failed for image: {e}", url=url, file_path=str(destination), original_error=e
        ) from e
    except OSError as e:
        destination.unlink(missing_ok=True)
        raise ImageDownloadError(
            f"Could not write image to {destination}: {e}", url=url, file_path=str(destination), original_error=e
        ) from e


def save_notion_image(
    url: str,
    options: Optional[ImageSaveOptions] = None,
    client: Optional[httpx.Client] = None,
) -> str:
    """Save a Notion-hosted image to the local filesystem.

    The save directory is created when missing. If the image file already
    exists and ``overwrite_existing`` is not set, its path is returned
    without any network access.

    Parameters
    ----------
    url : str
        URL of the Notion-hosted image
    options : ImageSaveOptions, optional
        Where to save and whether to overwrite. Defaults to ``./images``.
    client : httpx.Client, optional
        HTTP client to download with. A short-lived client is created when
        not given.

    Returns
    -------
    str
        Path of the local image file

    Raises
    ------
    ImageDownloadError
        If the directory cannot be created, the URL is malformed, the server
        answers with a status other than 200, or the file cannot be written

    """
    config = resolve_image_save_options(options)
    save_dir = Path(config.save_path)
    _ensure_directory(save_dir, url)

    file_path = save_dir / image_file_name(url)
    if not config.overwrite_existing and file_path.exists():
        logger.debug("Image already saved at %s, skipping download", file_path)
        return str(file_path)

    logger.info("Downloading image to %s", file_path)
    if client is not None:
        _download(url, file_path, client)
    else:
        with create_http_client() as owned_client:
            _download(url, file_path, owned_client)

    return str(file_path)
