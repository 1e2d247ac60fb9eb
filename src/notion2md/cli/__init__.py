"""Command-line interface for the notion2md exporter.

Examples
--------
Store a token once::

    $ notion2md login secret_abc123

Export a page to stdout::

    $ notion2md export https://www.notion.so/Notes-de4d2477f3214ec98614fd46a4e1487f

Export to a file, saving images in ./assets::

    $ notion2md export de4d2477f3214ec98614fd46a4e1487f --out notes.md -d ./assets

Render in the terminal::

    $ notion2md export de4d2477f3214ec98614fd46a4e1487f --rich

The token can also come from ``--token`` or the ``NOTION_TOKEN`` environment
variable, which take precedence over the config file.

"""

import argparse
import logging
import sys

from notion2md.cli.builder import EXIT_ERROR, create_parser, get_exit_code_for_exception
from notion2md.cli.commands import extract_page_id, run_export, run_login
from notion2md.exceptions import Notion2MdError
from notion2md.logging_utils import configure_logging

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser", "extract_page_id"]

_COMMANDS = {
    "export": run_export,
    "login": run_login,
}


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def main(args: list[str] | None = None) -> int:
    """Execute main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    handler = _COMMANDS[parsed_args.command]
    try:
        return handler(parsed_args)
    except Notion2MdError as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
