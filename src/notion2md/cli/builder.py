#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2md/cli/builder.py
"""Argument parser and exit codes for the notion2md command line."""

import argparse

from notion2md import __version__
from notion2md.constants import DEFAULT_FORMAT
from notion2md.exceptions import (
    ConfigurationError,
    FileError,
    FormatError,
    RenderingError,
    SourceFetchError,
    ValidationError,
)
from notion2md.renderers import list_formats

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_FORMAT_ERROR = 5
EXIT_RENDERING_ERROR = 7
EXIT_CONFIG_ERROR = 11
EXIT_SOURCE_ERROR = 12


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    # Image download failures are file errors
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, FormatError):
        return EXIT_FORMAT_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    if isinstance(exception, ConfigurationError):
        return EXIT_CONFIG_ERROR

    if isinstance(exception, SourceFetchError):
        return EXIT_SOURCE_ERROR

    return EXIT_ERROR


def _add_logging_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output with detailed logging (equivalent to --log-level DEBUG)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level for debugging (default: WARNING). Overrides --verbose if both are specified.",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write log messages to specified file in addition to console output",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with very verbose logging, HTTP client logs included",
    )


def _add_export_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("page", help="Notion page URL or page id")
    parser.add_argument("--out", "-o", type=str, metavar="FILE", help="Write output to FILE instead of stdout")
    parser.add_argument(
        "--format",
        "-f",
        default=DEFAULT_FORMAT,
        metavar="FORMAT",
        help=f"Export format (default: {DEFAULT_FORMAT}; available: {', '.join(list_formats())})",
    )
    parser.add_argument(
        "--token",
        "-t",
        type=str,
        help="Notion integration token (default: $NOTION_TOKEN, then the config file)",
    )

    images = parser.add_argument_group("image options")
    images.add_argument(
        "--image-directory",
        "-d",
        type=str,
        metavar="DIR",
        help="Directory for downloaded Notion-hosted images (default: config file, then ./images)",
    )
    images.add_argument("--disable-images", action="store_true", help="Leave image blocks out of the output")
    images.add_argument(
        "--overwrite-existing-images",
        action="store_true",
        help="Download images again even when a local copy exists",
    )

    parser.add_argument(
        "--skip-empty-paragraphs", action="store_true", help="Leave paragraphs without text out of the output"
    )
    parser.add_argument(
        "--rich", action="store_true", help="Render Markdown in the terminal with rich (requires notion2md[rich])"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="notion2md",
        description="Export Notion pages to Markdown.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--config",
        type=str,
        metavar="PATH",
        help="Configuration file (default: $NOTION2MD_CONFIG or ~/.config/notion2md.yaml)",
    )
    _add_logging_arguments(parser)

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    export_parser = subparsers.add_parser("export", help="Export a Notion page")
    _add_export_arguments(export_parser)

    login_parser = subparsers.add_parser("login", help="Store a Notion integration token in the config file")
    login_parser.add_argument("token", help="Notion integration token")

    return parser
