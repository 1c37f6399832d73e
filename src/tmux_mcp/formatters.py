"""Custom formatters for tmux-mcp displays."""

from typing import Any
from replkit2.types.core import CommandMeta
from replkit2.textkit.formatter import TextFormatter

from .app import app


@app.formatter.register("codeblock")  # pyright: ignore[reportAttributeAccessIssue]
def format_codeblock(data: Any, meta: CommandMeta, formatter: TextFormatter) -> str:
    """Format command output as markdown code block.

    Expects data dict with:
    - content: The text to display
    - language: Syntax hint (optional)

    Other fields preserved for programmatic use.
    """
    if isinstance(data, dict) and "content" in data:
        language = data.get("language") or "text"
        content = data.get("content", "")

        if not content:
            return f"```{language}\n[No output]\n```"

        content = content.rstrip() if isinstance(content, str) else str(content)
        return f"```{language}\n{content}\n```"

    return f"```\n{str(data)}\n```"
