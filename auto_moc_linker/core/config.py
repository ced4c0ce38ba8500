#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
config.py - Configuration management for Auto MOC Linker

This module centralizes configuration settings loaded from multiple sources:
1. Default values
2. Configuration file (YAML, or the Obsidian plugin's data.json)
3. Environment variables (a .env file is honoured)
4. Command line arguments (overrides all others)
"""

import argparse
import logging
import os
from typing import Any, Dict, List, Optional, Sequence

import yaml
from dotenv import load_dotenv

from .mapping import TagMapping, make_mapping, parse_mapping


logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when the configuration cannot be used for a run."""


class Config:
    """
    Configuration manager for Auto MOC Linker.

    This class provides a unified interface for all application settings,
    with prioritized loading from multiple sources.
    """

    # Default configuration values
    DEFAULTS = {
        # General settings
        "vault_path": "",  # Must be provided via ENV var, config file, or CLI
        "verbose": False,

        # Linking settings
        "tag_mappings": [],
        "default_path": "/",
        "append_format": "- [[{{fileName}}]]\n",
        "section_heading": "## Links",

        # Note processing settings
        "batch_size": 50,
    }

    # Keys used by the Obsidian plugin settings (data.json)
    KEY_ALIASES = {
        "vaultPath": "vault_path",
        "tagMappings": "tag_mappings",
        "defaultPath": "default_path",
        "appendFormat": "append_format",
        "sectionHeading": "section_heading",
        "batchSize": "batch_size",
    }

    DEFAULT_LOCATIONS = [
        os.path.join(os.getcwd(), "config.yaml"),
        os.path.expanduser("~/.config/auto_moc_linker/config.yaml"),
    ]

    def __init__(self, config_file: Optional[str] = None, load_defaults: bool = True):
        """
        Initialize the configuration manager.

        Args:
            config_file: Path to a configuration file to load from
            load_defaults: Whether to look for a config file in the default
                locations and read the environment
        """
        # Start with default configuration
        self._config = {key: (list(value) if isinstance(value, list) else value)
                        for key, value in self.DEFAULTS.items()}

        # Load from configuration file if specified
        if config_file:
            self.load_from_file(config_file)
        elif load_defaults:
            # Try to load from default locations
            for path in self.DEFAULT_LOCATIONS:
                if os.path.exists(path):
                    self.load_from_file(path)
                    break

        # Environment variables sit above any config file, including --config
        self.use_env = load_defaults
        if self.use_env:
            self.load_from_env()

    def load_from_file(self, config_file: str) -> None:
        """
        Load configuration from a YAML (or JSON) file.

        Args:
            config_file: Path to the configuration file

        Raises:
            ConfigError: If the file cannot be read or parsed
        """
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Error loading configuration from {config_file}: {e}") from e

        if config_data is None:
            return
        if not isinstance(config_data, dict):
            raise ConfigError(f"Configuration file {config_file} does not contain a mapping")

        self.update(config_data)
        logger.info("Loaded configuration from %s", config_file)

    def update(self, values: Dict[str, Any]) -> None:
        """
        Update configuration values, accepting plugin-style key names.

        Unknown keys are ignored.
        """
        for key, value in values.items():
            key = self.KEY_ALIASES.get(key, key)
            if key == "tag_mappings":
                self._config[key] = self._load_mappings(value)
            elif key in self._config:
                self._config[key] = value

    @staticmethod
    def _load_mappings(value: Any) -> List[TagMapping]:
        if value is None:
            return []
        if not isinstance(value, list):
            raise ConfigError("tag_mappings must be a list of {tag, hub_path} entries")
        try:
            return [make_mapping(entry) for entry in value]
        except ValueError as e:
            raise ConfigError(str(e)) from e

    def load_from_env(self) -> None:
        """Load configuration from environment variables."""
        load_dotenv()

        # Map config keys to environment variable names
        env_mapping = {
            "vault_path": "OBSIDIAN_VAULT_PATH",
            "default_path": "AUTO_MOC_DEFAULT_PATH",
            "section_heading": "AUTO_MOC_SECTION_HEADING",
            "append_format": "AUTO_MOC_APPEND_FORMAT",
            "batch_size": "AUTO_MOC_BATCH_SIZE",
        }

        # Load values from environment
        for config_key, env_var in env_mapping.items():
            if env_var in os.environ:
                value = os.environ[env_var]

                # Convert to appropriate type
                if isinstance(self.DEFAULTS[config_key], int):
                    try:
                        value = int(value)
                    except ValueError:
                        logger.warning("Ignoring non-integer %s=%r", env_var, value)
                        continue

                self._config[config_key] = value

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        """Create the command line parser."""
        parser = argparse.ArgumentParser(
            prog="auto-moc-linker",
            description="Append links to tagged notes in their Obsidian MOC notes",
        )

        # General options
        parser.add_argument("--vault-path", type=str, help="Path to Obsidian vault")
        parser.add_argument("--config", type=str, help="Path to a YAML configuration file")
        parser.add_argument("-v", "--verbose", action="store_true", default=None,
                            help="Enable verbose output")

        # Linking options
        parser.add_argument("--default-path", type=str,
                            help="Folder to search for notes (/ for entire vault)")
        parser.add_argument("--section-heading", type=str,
                            help="Heading under which links will be added")
        parser.add_argument("--append-format", type=str,
                            help="Format of the appended line; {{fileName}} is replaced by the note name")
        parser.add_argument("--batch-size", type=int, help="Number of notes processed between progress reports")
        parser.add_argument("--map", dest="extra_mappings", action="append", default=[],
                            metavar="TAG=MOC", help="Add a tag to MOC mapping (repeatable)")

        # Maintenance options
        parser.add_argument("--save-config", type=str, metavar="FILE",
                            help="Save the effective configuration to FILE")

        return parser

    def load_from_args(self, argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
        """
        Load configuration from command line arguments.

        Args:
            argv: Argument list (defaults to sys.argv)

        Returns:
            The parsed arguments
        """
        args = self.build_parser().parse_args(argv)

        # A config file named on the command line sits below the other options
        if args.config:
            self.load_from_file(args.config)
            if self.use_env:
                self.load_from_env()

        # Update configuration with command line values (only for non-None values)
        for key, value in vars(args).items():
            if key == "extra_mappings":
                try:
                    self._config["tag_mappings"].extend(parse_mapping(text) for text in value)
                except ValueError as e:
                    raise ConfigError(str(e)) from e
            elif value is not None and key in self._config:
                self._config[key] = value

        return args

    def validate(self) -> None:
        """
        Check that the configuration can be used for a run.

        Raises:
            ConfigError: If a setting is missing or invalid
        """
        if not self._config["vault_path"]:
            raise ConfigError(
                "No vault path provided. Set OBSIDIAN_VAULT_PATH environment variable or use --vault-path"
            )
        if not os.path.isdir(os.path.expanduser(self._config["vault_path"])):
            raise ConfigError(f"Vault path {self._config['vault_path']} is not a directory")

        batch_size = self._config["batch_size"]
        if isinstance(batch_size, bool) or not isinstance(batch_size, int) or batch_size < 1:
            raise ConfigError(f"batch_size must be a positive integer, got {batch_size!r}")

        if not isinstance(self._config["append_format"], str):
            raise ConfigError("append_format must be a string")
        if not isinstance(self._config["section_heading"], str):
            raise ConfigError("section_heading must be a string")

    def __getitem__(self, key: str) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key

        Returns:
            The configured value for the key
        """
        return self._config.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key
            value: New value
        """
        self._config[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self._config

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value with a default fallback."""
        return self._config.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        """
        Get a dictionary representation of the configuration.

        Returns:
            Dictionary containing all configuration values
        """
        data = self._config.copy()
        data["tag_mappings"] = [dict(mapping) for mapping in self._config["tag_mappings"]]
        return data

    def save_to_file(self, config_file: str) -> None:
        """
        Save the current configuration to a file.

        Args:
            config_file: Path where to save the configuration

        Raises:
            ConfigError: If the file cannot be written
        """
        try:
            directory = os.path.dirname(os.path.abspath(config_file))
            os.makedirs(directory, exist_ok=True)
            with open(config_file, 'w', encoding='utf-8') as f:
                yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            raise ConfigError(f"Error saving configuration to {config_file}: {e}") from e
        logger.info("Saved configuration to %s", config_file)


# Global configuration instance; files and environment are loaded by main()
config = Config(load_defaults=False)
