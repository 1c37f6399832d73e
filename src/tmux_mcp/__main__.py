"""tmux session manager with MCP support.

Entry point for tmux-mcp that can run as either a REPL interface or MCP
server depending on command line arguments.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .app import app
from .config import get_config_manager

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
)
logger = logging.getLogger(__name__)


def _parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tmux-mcp", description="tmux sessions, windows and panes for agents")
    parser.add_argument("--mcp", action="store_true", help="run as MCP server instead of REPL")
    parser.add_argument("--shell-type", help="shell family in the target panes: bash, zsh or fish")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """Run tmux-mcp as REPL or MCP server based on command line arguments.

    - With --mcp: Runs as MCP server for integration
    - Without --mcp: Runs as interactive REPL
    - --shell-type overrides the configured shell family
    """
    args = _parse_args(sys.argv[1:] if argv is None else argv)

    config = get_config_manager()
    if args.shell_type:
        config.set_shell(args.shell_type)
    logger.debug(f"Shell {config.shell} (config file: {config.config_file or 'none'})")

    if args.mcp:
        app.mcp.run()
    else:
        app.run(title="tmux-mcp - tmux Session Manager")


if __name__ == "__main__":
    main()
