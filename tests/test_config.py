"""
Unit tests for configuration and the command-line entry point.
"""

import logging

import pytest

import main
from fserrors import ConfigurationError
from namespacefs import DEFAULT_NUM_NODES
from shellconfig import ShellConfig


class TestShellConfig:
    """Tests for ShellConfig."""

    def test_default_values(self):
        config = ShellConfig()
        assert config.prompt_host == "pseudo-linux"
        assert config.num_nodes == DEFAULT_NUM_NODES
        assert config.log_level == "WARNING"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("PSEUDOFS_PROMPT_HOST", "lab")
        monkeypatch.setenv("PSEUDOFS_NUM_NODES", "64")
        monkeypatch.setenv("PSEUDOFS_LOG_LEVEL", "DEBUG")

        config = ShellConfig.from_env()
        assert config.prompt_host == "lab"
        assert config.num_nodes == 64
        assert config.log_level == "DEBUG"

    def test_from_yaml_file(self, tmp_path):
        path = tmp_path / "pseudofs.yaml"
        path.write_text("prompt_host: yamlhost\nnum_nodes: 32\n")

        config = ShellConfig.from_file(str(path))
        assert config.prompt_host == "yamlhost"
        assert config.num_nodes == 32

    def test_from_json_file(self, tmp_path):
        path = tmp_path / "pseudofs.json"
        path.write_text('{"log_level": "INFO"}')

        config = ShellConfig.from_file(str(path))
        assert config.log_level == "INFO"

    def test_from_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            ShellConfig.from_file("/nonexistent/pseudofs.yaml")

    def test_unsupported_format(self, tmp_path):
        path = tmp_path / "pseudofs.toml"
        path.write_text("num_nodes = 3\n")
        with pytest.raises(ConfigurationError):
            ShellConfig.from_file(str(path))

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "pseudofs.yaml"
        path.write_text("max_entries: 99\n")
        with pytest.raises(ConfigurationError):
            ShellConfig.from_file(str(path))

    def test_load_file_overrides_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PSEUDOFS_PROMPT_HOST", "envhost")
        monkeypatch.setenv("PSEUDOFS_NUM_NODES", "10")
        path = tmp_path / "pseudofs.yaml"
        path.write_text("num_nodes: 20\n")

        config = ShellConfig.load(str(path))
        assert config.num_nodes == 20
        assert config.prompt_host == "envhost"

    def test_validate_success(self):
        ShellConfig().validate()

    def test_validate_invalid_num_nodes(self):
        with pytest.raises(ConfigurationError):
            ShellConfig(num_nodes=0).validate()

    def test_validate_invalid_log_level(self):
        with pytest.raises(ConfigurationError):
            ShellConfig(log_level="LOUD").validate()

    def test_validate_non_integer_num_nodes(self):
        for value in ("8", 2.5, True):
            with pytest.raises(ConfigurationError, match="num_nodes must be an integer"):
                ShellConfig(num_nodes=value).validate()

    def test_validate_non_string_log_level(self):
        with pytest.raises(ConfigurationError, match="log_level must be a string"):
            ShellConfig(log_level=10).validate()

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "pseudofs.yaml"
        path.write_text("num_nodes: [\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            ShellConfig.from_file(str(path))

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "pseudofs.json"
        path.write_text('{"num_nodes": ')
        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            ShellConfig.from_file(str(path))

    def test_logging_level(self):
        assert ShellConfig(log_level="debug").logging_level() == logging.DEBUG


class TestMain:
    def test_cli_overrides(self):
        config = main.load_config(["--num-nodes", "8", "--log-level", "INFO"])
        assert config.num_nodes == 8
        assert config.log_level == "INFO"

    def test_invalid_config_exits_with_error(self, capsys):
        assert main.main(["--log-level", "LOUD"]) == 2
        assert "Unknown log level" in capsys.readouterr().err

    @pytest.mark.parametrize("content", [
        'num_nodes: "8"\n',
        "log_level: 10\n",
        "num_nodes: [\n",
    ])
    def test_bad_config_file_exits_with_error(self, tmp_path, capsys, content):
        path = tmp_path / "pseudofs.yaml"
        path.write_text(content)

        assert main.main(["--config", str(path)]) == 2
        assert capsys.readouterr().err.startswith("pseudofs: ")

    def test_runs_session(self, monkeypatch, capsys):
        lines = iter(["mkdir docs", "ls", "exit"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))

        assert main.main(["--num-nodes", "4"]) == 0
        out = capsys.readouterr().out
        assert "directory 'docs' created" in out
        assert "docs/" in out
