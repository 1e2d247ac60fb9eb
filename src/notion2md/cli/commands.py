#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/notion2md/cli/commands.py
"""CLI command handlers for notion2md.

This module implements the ``export`` and ``login`` sub-commands and the
page reference parsing they rely on.
"""

import argparse
import logging
import re
from pathlib import Path
from typing import Optional

from notion2md.cli.output import print_markdown, should_use_rich_output
from notion2md.config import Notion2MdConfig, load_config, resolve_token, save_config
from notion2md.constants import DEFAULT_IMAGE_SAVE_PATH
from notion2md.exceptions import InvalidPageReferenceError
from notion2md.exporter import create_exporter
from notion2md.options import ExporterOptions, ImageSaveOptions, RenderOptions
from notion2md.utils.io_utils import write_content

logger = logging.getLogger(__name__)

_PAGE_ID_PATTERN = re.compile(r"[a-f0-9]{32}$")


def extract_page_id(reference: str) -> str:
    """Extract a Notion page id from a page URL or id.

    Parameters
    ----------
    reference : str
        Page URL (``https://www.notion.so/Title-<id>?v=...``), dashed UUID or
        bare 32 character id

    Returns
    -------
    str
        The 32 character page id

    Raises
    ------
    InvalidPageReferenceError
        If the reference does not end in a page id

    Examples
    --------
        >>> extract_page_id("https://www.notion.so/Notes-de4d2477f3214ec98614fd46a4e1487f?pvs=4")
        'de4d2477f3214ec98614fd46a4e1487f'

    """
    cleaned = reference.strip().split("#", 1)[0].split("?", 1)[0].rstrip("/").replace("-", "")
    match = _PAGE_ID_PATTERN.search(cleaned)
    if match is None:
        raise InvalidPageReferenceError(reference)
    return match.group(0)


def _config_path(args: argparse.Namespace) -> Optional[Path]:
    return Path(args.config).expanduser() if getattr(args, "config", None) else None


def build_image_options(args: argparse.Namespace, config: Notion2MdConfig) -> ImageSaveOptions:
    """Combine image flags with the config file; flags win, then config, then defaults."""
    return ImageSaveOptions(
        save_path=args.image_directory or config.images.save_path or DEFAULT_IMAGE_SAVE_PATH,
        ignore_images=args.disable_images or config.images.ignore_images,
        overwrite_existing=args.overwrite_existing_images or config.images.overwrite_existing,
    )


def run_export(args: argparse.Namespace) -> int:
    """Export the page named on the command line.

    Returns
    -------
    int
        Exit code

    Raises
    ------
    Notion2MdError
        Any export failure; mapped to an exit code by the caller

    """
    page_id = extract_page_id(args.page)
    config_path = _config_path(args)
    config = load_config(config_path, missing_ok=True)

    render_options = RenderOptions(
        image_options=build_image_options(args, config),
        skip_empty_paragraphs=args.skip_empty_paragraphs,
    )
    exporter_options = ExporterOptions(
        notion_token=resolve_token(args.token, config_path),
        format=args.format,
    )

    logger.info("Exporting page %s", page_id)
    with create_exporter(exporter_options) as exporter:
        content = exporter.render(page_id, render_options)

    if args.out:
        output_path = Path(args.out)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        write_content(content, output_path)
        print(f"Exported {page_id} to {output_path}")
    else:
        print_markdown(content.decode("utf-8"), use_rich=should_use_rich_output(args))
    return 0


def run_login(args: argparse.Namespace) -> int:
    """Store the integration token, keeping any other settings in the config file."""
    config_path = _config_path(args)
    config = load_config(config_path, missing_ok=True)
    config.token = args.token
    written = save_config(config, config_path)
    print(f"Token saved to {written}")
    return 0
