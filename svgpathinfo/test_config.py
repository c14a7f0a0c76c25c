#!/usr/bin/env python3
"""Test script for the configuration module.

This script tests the configuration module's functionality.
"""

import logging
import sys
import tempfile
from pathlib import Path

from svgpathinfo.config import Config, load_config

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger("test_config")


def test_default_config():
    """Test loading default configuration."""
    logger.info("Testing default configuration...")

    config = Config()

    precision = config.get("output.precision")
    logger.info(f"Precision: {precision}")
    assert precision == 6

    assert config.get("parse.absolute") is False
    assert config.get("parse.initial_position") is None
    assert config.get("logging.level") == "WARNING"

    # Check a non-existent value
    non_existent = config.get("non.existent.path", "default_value")
    logger.info(f"Non-existent value: {non_existent}")
    assert non_existent == "default_value"

    # Changing one config leaves the defaults alone
    config.set("parse.absolute", True)
    assert Config.DEFAULT_CONFIG["parse"]["absolute"] is False
    assert Config().get("parse.absolute") is False


def test_custom_config():
    """Test loading and saving custom configuration."""
    logger.info("Testing custom configuration...")

    with tempfile.NamedTemporaryFile(suffix=".yaml", delete=False) as temp_file:
        temp_path = Path(temp_file.name)

    try:
        config = Config()
        config.set("parse.absolute", True)
        config.set("parse.initial_position", [10, 20])
        config.set("output.precision", 3)

        assert config.save(temp_path)

        new_config = Config(temp_path)

        assert new_config.get("parse.absolute") is True
        assert new_config.get("parse.initial_position") == [10, 20]
        assert new_config.get("output.precision") == 3

        # Check that default values are preserved
        assert new_config.get("parse.no_smooth") is False
        assert new_config.get("logging.level") == "WARNING"

        options = new_config.parse_options()
        logger.info(f"Parse options: {options}")
        assert options == {
            "absolute": True,
            "no_smooth": False,
            "initial_position": [10, 20],
            "verbose": False,
        }

    finally:
        temp_path.unlink(missing_ok=True)


def test_partial_config():
    """Test merging a partial YAML file over the defaults."""
    logger.info("Testing partial configuration...")

    with tempfile.TemporaryDirectory() as temp_dir:
        config_path = Path(temp_dir) / "svgpathinfo.yaml"
        config_path.write_text("output:\n  precision: 2\n")

        config = load_config(config_path)
        assert config.get("output.precision") == 2
        assert config.get("parse.absolute") is False
        assert config.validate()

        empty_path = Path(temp_dir) / "empty.yaml"
        empty_path.write_text("")
        assert not Config().load_config(empty_path)

        broken_path = Path(temp_dir) / "broken.yaml"
        broken_path.write_text("output: [unclosed\n")
        assert not Config().load_config(broken_path)

        assert not Config().load_config(Path(temp_dir) / "missing.yaml")


def test_validation():
    """Test configuration validation."""
    logger.info("Testing configuration validation...")

    config = Config()
    assert config.validate()
    logger.info("Default configuration is valid")

    invalid_config = Config()
    invalid_config.config.pop("output")
    assert not invalid_config.validate()

    invalid_config = Config()
    invalid_config.set("output.precision", -1)
    assert not invalid_config.validate()

    invalid_config = Config()
    invalid_config.set("output.precision", "six")
    assert not invalid_config.validate()

    invalid_config = Config()
    invalid_config.set("parse.initial_position", [1, 2, 3])
    assert not invalid_config.validate()

    invalid_config = Config()
    invalid_config.set("logging.level", "LOUD")
    assert not invalid_config.validate()
    logger.info("Invalid configurations failed validation")


def main():
    """Main function."""
    tests = [
        test_default_config,
        test_custom_config,
        test_partial_config,
        test_validation,
    ]

    failure_count = 0
    for test in tests:
        try:
            test()
        except AssertionError as e:
            logger.error(f"{test.__name__} failed: {e}")
            failure_count += 1

    logger.info(f"Test results: {len(tests) - failure_count} succeeded, {failure_count} failed")


if __name__ == "__main__":
    main()
