"""Shared error responses for tmux-mcp commands.

Commands catch TmuxError themselves and hand the message to one of these
helpers, so a failed tmux call never escapes the command layer.

PUBLIC API:
  - markdown_error_response: Create error response for markdown display
  - table_error_response: Create error response for table display
  - string_error_response: Create error response for string display
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)


def markdown_error_response(message: str, **frontmatter: Any) -> dict[str, Any]:
    """Create error response for markdown display commands.

    Args:
        message: The error message to display
        **frontmatter: Extra frontmatter fields (e.g. pane)

    Returns:
        Markdown display dict with error element
    """
    return {
        "elements": [{"type": "text", "content": f"Error: {message}"}],
        "frontmatter": {**frontmatter, "error": message, "status": "error"},
    }


def table_error_response(message: str) -> list[dict[str, Any]]:
    """Create error response for table display commands.

    Args:
        message: The error message (will be logged)

    Returns:
        Empty list (tables show nothing on error)
    """
    logger.warning(f"Command failed: {message}")
    return []


def string_error_response(message: str) -> str:
    """Create error response for string display commands."""
    return f"Error: {message}"
