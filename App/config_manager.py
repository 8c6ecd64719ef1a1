"""Configuration persistence manager for the Dots application.

This module handles loading and saving of user preferences to/from JSON files.
"""

import json
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any, Optional, Tuple

from models import CONFIG_FILE, MosaicConfig


def _accepts(default: Any, value: Any) -> bool:
    """Whether a loaded JSON value may replace a default of the same field."""
    if isinstance(default, bool) or isinstance(value, bool):
        return type(value) is type(default)
    if isinstance(default, float):
        return isinstance(value, (int, float))
    return isinstance(value, type(default))


class ConfigManager:
    """Handles loading and saving of mosaic configuration."""

    def __init__(self, config_path: Path = CONFIG_FILE):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file (defaults to ~/.dots_config.json)
        """
        self.config_path = config_path

    def load(self) -> MosaicConfig:
        """Load configuration from file, returning defaults if not found.

        Values of the wrong type are ignored and keep their defaults.

        Returns:
            MosaicConfig with loaded or default values
        """
        config = MosaicConfig()

        try:
            if self.config_path.exists():
                with open(self.config_path, "r") as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError(f"expected a JSON object, got {type(data).__name__}")

                # Update config with loaded values (fallback to defaults)
                for field in fields(config):
                    if field.name not in data:
                        continue
                    value = data[field.name]
                    default = getattr(config, field.name)
                    if _accepts(default, value):
                        setattr(config, field.name, type(default)(value))
                    else:
                        print(f"Warning: Ignoring config value {field.name}={value!r}")
                print(f"✓ Loaded configuration from {self.config_path}")
        except Exception as e:
            print(f"Warning: Could not load config file: {e}")
            config = MosaicConfig()

        return config

    def save(self, config: MosaicConfig) -> Tuple[bool, Optional[str]]:
        """Save configuration to file.

        Args:
            config: MosaicConfig to save

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        try:
            with open(self.config_path, "w") as f:
                json.dump(asdict(config), f, indent=2)
            return True, None
        except OSError as e:
            return False, str(e)
