#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notion2md/constants.py
"""Constants and default values for notion2md.

This module centralizes the literal markup used by the Markdown renderer,
the default values used by option dataclasses, and the names of environment
variables and service endpoints.

"""

from __future__ import annotations

from typing import Final

# =============================================================================
# Environment Variables
# =============================================================================

NOTION_TOKEN_ENV_VAR: Final = "NOTION_TOKEN"
CONFIG_PATH_ENV_VAR: Final = "NOTION2MD_CONFIG"
USER_AGENT_ENV_VAR: Final = "NOTION2MD_USER_AGENT"

# =============================================================================
# Notion API
# =============================================================================

NOTION_API_BASE_URL: Final = "https://api.notion.com/v1"
NOTION_API_VERSION: Final = "2022-06-28"
NOTION_PAGE_SIZE: Final = 100
DEFAULT_USER_AGENT: Final = "notion2md/0.1.0"
DEFAULT_NETWORK_TIMEOUT: Final = 30.0

# =============================================================================
# Configuration
# =============================================================================

DEFAULT_CONFIG_DIRNAME: Final = ".config"
DEFAULT_CONFIG_FILENAME: Final = "notion2md.yaml"

# =============================================================================
# Formats
# =============================================================================

DEFAULT_FORMAT: Final = "markdown"

# =============================================================================
# Images
# =============================================================================

DEFAULT_IMAGE_SAVE_PATH: Final = "images"
NOTION_IMAGE_EXTENSION: Final = ".png"
DEFAULT_IMAGE_ALT_TEXT: Final = "image"
IMAGE_DOWNLOAD_CHUNK_SIZE: Final = 8192

# =============================================================================
# Markdown Formatting Constants
# =============================================================================

DEFAULT_PADDING_WIDTH: Final = 4

MD_CODE_BLOCK_DELIMITER: Final = "```"
MD_HEADING_ONE_PATTERN: Final = "# {}"
MD_HEADING_TWO_PATTERN: Final = "## {}"
MD_HEADING_THREE_PATTERN: Final = "### {}"
MD_LINK_PATTERN: Final = "[{}]({})"
MD_BOLD_PATTERN: Final = "**{}**"
MD_ITALIC_PATTERN: Final = "_{}_"
MD_STRIKETHROUGH_PATTERN: Final = "~{}~"
MD_INLINE_CODE_PATTERN: Final = "`{}`"
MD_LIST_ITEM_PATTERN: Final = "* {}"
MD_NUMBERED_ITEM_PATTERN: Final = "1. {}"
MD_TODO_UNCHECKED_PATTERN: Final = "* [ ] {}"
MD_TODO_CHECKED_PATTERN: Final = "* [x] {}"
MD_IMAGE_PATTERN: Final = "![{}]({})"
MD_TABLE_CELL_PATTERN: Final = "| {} "
MD_TABLE_ROW_TERMINATOR: Final = "|"
MD_TABLE_HEADER_CELL: Final = "| --- "
MD_DIVIDER: Final = "---"
MD_QUOTE_PATTERN: Final = "> {}"

SINGLE_BREAK: Final = "\n"
DOUBLE_BREAK: Final = "\n\n"

# Notion language names that differ from the names Markdown highlighters expect.
CODE_LANGUAGE_ALIASES: Final[dict[str, str]] = {
    "c++": "cpp",
    "c#": "csharp",
    "f#": "fsharp",
    "plain text": "txt",
}
