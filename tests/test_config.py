"""Tests for configuration loading."""

from __future__ import annotations

from tmux_mcp.config import (
    CONFIG_FILENAME,
    SHELL_ENV_VAR,
    ConfigManager,
    get_config_manager,
    get_shell,
    reset_config_manager,
)


def _write_config(directory, shell):
    path = directory / CONFIG_FILENAME
    path.write_text(f'[default]\nshell = "{shell}"\n')
    return path


class TestConfigManager:
    def test_defaults_to_bash(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        manager = ConfigManager()
        assert manager.shell == "bash"
        assert manager.config_file is None

    def test_reads_shell_from_file(self, tmp_path):
        manager = ConfigManager(_write_config(tmp_path, "fish"))
        assert manager.shell == "fish"

    def test_finds_file_in_parent_directory(self, tmp_path, monkeypatch):
        config_path = _write_config(tmp_path, "zsh")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)

        manager = ConfigManager()

        assert manager.config_file == config_path
        assert manager.shell == "zsh"

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv(SHELL_ENV_VAR, "zsh")
        manager = ConfigManager(_write_config(tmp_path, "fish"))
        assert manager.shell == "zsh"

    def test_unknown_value_falls_back_to_bash(self, tmp_path, monkeypatch, caplog):
        monkeypatch.setenv(SHELL_ENV_VAR, "tcsh")
        manager = ConfigManager(_write_config(tmp_path, "fish"))
        assert manager.shell == "bash"
        assert "Unsupported shell type" in caplog.text

    def test_set_shell_normalizes(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        manager = ConfigManager()
        assert manager.set_shell("FISH") == "fish"
        assert manager.set_shell("elvish") == "bash"
        assert manager.shell == "bash"


class TestGlobalManager:
    def test_singleton_until_reset(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        first = get_config_manager()
        assert get_config_manager() is first

        reset_config_manager()
        assert get_config_manager() is not first

    def test_get_shell_uses_environment(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv(SHELL_ENV_VAR, "fish")
        assert get_shell() == "fish"
