"""Configuration management for tmux-mcp.

The only option is the shell family, which selects the exit-status syntax
used by the completion hook. Sources, later ones win:

  1. built-in default ("bash")
  2. [default] shell = "..." in tmux-mcp.toml (current or any parent directory)
  3. TMUX_MCP_SHELL environment variable
  4. --shell-type on the command line (see __main__)

Unrecognized values fall back to bash.
"""

import logging
import os
from pathlib import Path
from typing import Optional
import tomllib

from .shell import DEFAULT_SHELL, normalize_shell
from .types import ShellType

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "tmux-mcp.toml"
SHELL_ENV_VAR = "TMUX_MCP_SHELL"


def _find_config_file() -> Optional[Path]:
    """Find tmux-mcp.toml in current or parent directories."""
    current = Path.cwd()

    for parent in [current] + list(current.parents):
        config_file = parent / CONFIG_FILENAME
        if config_file.exists():
            return config_file

    return None


def _load_config(path: Optional[Path] = None) -> dict:
    """Load raw configuration from file."""
    if path is None:
        path = _find_config_file()

    if path is None or not path.exists():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


class ConfigManager:
    """Manages configuration for tmux-mcp."""

    def __init__(self, path: Optional[Path] = None):
        self._config_file = path or _find_config_file()
        self.data = _load_config(self._config_file)
        self._default_config = self.data.get("default", {})
        self._shell: ShellType = DEFAULT_SHELL

        configured = self._default_config.get("shell")
        if configured is not None:
            self.set_shell(configured)

        env_shell = os.environ.get(SHELL_ENV_VAR)
        if env_shell:
            self.set_shell(env_shell)

    @property
    def config_file(self) -> Optional[Path]:
        return self._config_file

    @property
    def shell(self) -> ShellType:
        """Configured shell family."""
        return self._shell

    def set_shell(self, value: Optional[str]) -> ShellType:
        """Set the shell family, coercing unknown values to bash."""
        shell = normalize_shell(value)
        if value is not None and shell != str(value).strip().lower():
            logger.warning(f"Unsupported shell type {value!r}, using {shell}")
        self._shell = shell
        return shell


# Global instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def reset_config_manager() -> None:
    """Forget the global config manager (for testing)."""
    global _config_manager
    _config_manager = None


def get_shell() -> ShellType:
    """Configured shell family."""
    return get_config_manager().shell
