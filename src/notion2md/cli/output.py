#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2md/cli/output.py
"""Terminal output of exported pages.

Exports written to stdout are plain Markdown unless ``--rich`` is given and
stdout is an interactive terminal, in which case Rich renders them.
"""

import argparse
import importlib.util
import logging
import sys
from typing import IO, Optional

logger = logging.getLogger(__name__)

RICH_INSTALL_HINT = "pip install notion2md[rich]"


def check_rich_available() -> bool:
    """Return True if the optional Rich dependency is installed."""
    return importlib.util.find_spec("rich") is not None


def should_use_rich_output(args: argparse.Namespace, stream: Optional[IO[str]] = None) -> bool:
    """Decide whether an export printed to ``stream`` goes through Rich.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed ``export`` arguments (``rich`` and ``out`` are read)
    stream : IO[str], optional
        Destination of the output, ``sys.stdout`` by default

    Returns
    -------
    bool
        False when ``--rich`` is off, when writing to a file, when Rich is
        missing (a warning is printed) or when the stream is not a TTY

    """
    if not getattr(args, "rich", False) or getattr(args, "out", None):
        return False

    if not check_rich_available():
        print(f"Warning: --rich needs the Rich library. Install with: {RICH_INSTALL_HINT}", file=sys.stderr)
        return False

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    if callable(isatty) and isatty():
        return True

    logger.debug("Output is not a terminal, printing plain Markdown")
    return False


def print_markdown(content: str, use_rich: bool = False) -> None:
    """Print an exported page to stdout."""
    if not use_rich:
        print(content)
        return

    from rich.console import Console
    from rich.markdown import Markdown

    Console().print(Markdown(content, hyperlinks=True))
