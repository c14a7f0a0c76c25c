"""Configuration module for svgpathinfo.

This module handles loading and validating configuration from YAML files.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

# Set up logging
logger = logging.getLogger(__name__)


class Config:
    """Configuration handler for svgpathinfo."""

    # Default configuration values
    DEFAULT_CONFIG = {
        "parse": {
            "absolute": False,
            "no_smooth": False,  # Rewrite S/T as C/Q when making absolute
            "initial_position": None,  # [x, y] for a relative first moveto
            "verbose": False,
        },
        "output": {
            "precision": 6,  # Decimals per number
        },
        "logging": {
            "level": "WARNING",
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
    }

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """Initialize configuration.

        Args:
            config_file: Path to YAML configuration file (optional)
        """
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file:
            self.load_config(config_file)

    def load_config(self, config_file: Union[str, Path]) -> bool:
        """Load configuration from YAML file.

        Args:
            config_file: Path to YAML configuration file

        Returns:
            True if config was loaded successfully, False otherwise
        """
        config_path = Path(config_file)

        if not config_path.exists():
            logger.error(f"Configuration file not found: {config_path}")
            return False

        try:
            with open(config_path, "r") as f:
                user_config = yaml.safe_load(f)

            if not user_config:
                logger.warning(f"Empty configuration file: {config_path}")
                return False

            if not isinstance(user_config, dict):
                logger.error(f"Configuration must be a mapping: {config_path}")
                return False

            # Merge user config with default config
            self._merge_config(self.config, user_config)
            logger.info(f"Loaded configuration from {config_path}")
            return True

        except yaml.YAMLError as e:
            logger.error(f"Error parsing YAML configuration: {e}")
            return False
        except OSError as e:
            logger.error(f"Error loading configuration: {e}")
            return False

    def _merge_config(self, target: Dict, source: Dict) -> None:
        """Recursively merge source dict into target dict.

        Args:
            target: Target dictionary to merge into
            source: Source dictionary to merge from
        """
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._merge_config(target[key], value)
            else:
                target[key] = value

    def get(self, path: str, default: Any = None) -> Any:
        """Get configuration value using dot notation path.

        Args:
            path: Configuration path (e.g., "output.precision")
            default: Default value if path not found

        Returns:
            Configuration value or default
        """
        parts = path.split(".")
        value = self.config

        try:
            for part in parts:
                value = value[part]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, path: str, value: Any) -> None:
        """Set configuration value using dot notation path.

        Args:
            path: Configuration path (e.g., "parse.absolute")
            value: Value to set
        """
        parts = path.split(".")
        config = self.config

        # Navigate to the parent of the target
        for part in parts[:-1]:
            if part not in config or not isinstance(config[part], dict):
                config[part] = {}
            config = config[part]

        config[parts[-1]] = value

    def save(self, config_file: Union[str, Path]) -> bool:
        """Save configuration to YAML file.

        Args:
            config_file: Path to YAML configuration file

        Returns:
            True if config was saved successfully, False otherwise
        """
        config_path = Path(config_file)

        try:
            os.makedirs(config_path.parent, exist_ok=True)

            with open(config_path, "w") as f:
                yaml.dump(self.config, f, default_flow_style=False, sort_keys=False)

            logger.info(f"Saved configuration to {config_path}")
            return True

        except OSError as e:
            logger.error(f"Error saving configuration: {e}")
            return False

    def validate(self) -> bool:
        """Validate configuration.

        Returns:
            True if configuration is valid, False otherwise
        """
        required_sections = ["parse", "output", "logging"]
        for section in required_sections:
            if section not in self.config:
                logger.error(f"Missing required configuration section: {section}")
                return False

        precision = self.get("output.precision")
        if not isinstance(precision, int) or isinstance(precision, bool) or precision < 0:
            logger.error(f"Output precision must be a non-negative integer: {precision}")
            return False

        initial_position = self.get("parse.initial_position")
        if initial_position is not None:
            if not isinstance(initial_position, (list, tuple)) or len(initial_position) != 2:
                logger.error(f"Initial position must be a pair of numbers: {initial_position}")
                return False

        level = self.get("logging.level")
        if not isinstance(logging.getLevelName(str(level).upper()), int):
            logger.error(f"Unknown logging level: {level}")
            return False

        return True

    def parse_options(self) -> Dict[str, Any]:
        """Get the parse section as keyword options for parsing.

        Returns:
            Dictionary of parse options
        """
        return dict(self.get("parse", {}))


def load_config(config_file: Optional[Union[str, Path]] = None) -> Config:
    """Load configuration from file.

    Args:
        config_file: Path to YAML configuration file (optional)

    Returns:
        Config object
    """
    return Config(config_file)
