"""
pseudofs - Shell Configuration

Handles shell configuration from environment variables and files.
"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Optional

import yaml

from fserrors import ConfigurationError
from namespacefs import DEFAULT_NUM_NODES

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _read_config_file(path: str) -> dict:
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with open(path, "r") as f:
        if path.endswith((".yaml", ".yml")):
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
        elif path.endswith(".json"):
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e
        else:
            raise ConfigurationError(f"Unsupported config file format: {path}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration in {path} must be a mapping")
    return data


@dataclass
class ShellConfig:
    """Interactive shell configuration."""

    prompt_host: str = "pseudo-linux"
    num_nodes: int = DEFAULT_NUM_NODES  # Directory slots in the node arena
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "ShellConfig":
        """
        Load configuration from environment variables.

        Environment variables:
        - PSEUDOFS_PROMPT_HOST: Name shown before the path in the prompt
        - PSEUDOFS_NUM_NODES: Number of directory slots
        - PSEUDOFS_LOG_LEVEL: Logging level name
        """
        return cls(
            prompt_host=os.environ.get("PSEUDOFS_PROMPT_HOST", cls.prompt_host),
            num_nodes=int(os.environ.get("PSEUDOFS_NUM_NODES", cls.num_nodes)),
            log_level=os.environ.get("PSEUDOFS_LOG_LEVEL", cls.log_level),
        )

    @classmethod
    def from_file(cls, path: str) -> "ShellConfig":
        """
        Load configuration from YAML or JSON file.

        Args:
            path: Path to configuration file (.yaml, .yml, or .json)

        Returns:
            ShellConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ConfigurationError: If config file format or keys are invalid
        """
        data = _read_config_file(path)
        try:
            return cls(**data)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration in {path}: {e}") from e

    @classmethod
    def load(cls, config_file: Optional[str] = None) -> "ShellConfig":
        """
        Load configuration with priority: file > env > defaults.

        Only keys present in the file override the environment.
        """
        config = cls.from_env()

        if config_file:
            file_config = cls.from_file(config_file)
            for key in _read_config_file(config_file):
                setattr(config, key, getattr(file_config, key))

        return config

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if not isinstance(self.num_nodes, int) or isinstance(self.num_nodes, bool):
            raise ConfigurationError(f"num_nodes must be an integer, got {self.num_nodes!r}")
        if self.num_nodes < 1:
            raise ConfigurationError("num_nodes must be positive")
        if not isinstance(self.log_level, str):
            raise ConfigurationError(f"log_level must be a string, got {self.log_level!r}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level}")

    def logging_level(self) -> int:
        return getattr(logging, self.log_level.upper())
