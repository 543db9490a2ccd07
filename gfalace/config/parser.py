#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
GFALace v0.1.0

Configuration parser - YAML config loading, merging, and overrides.

Author: GFALace Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import os
import re
import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .schema import default_config


# ${VAR} or ${VAR:-default}
ENV_REFERENCE = re.compile(r'\$\{(?P<name>[^}:]+)(?::-(?P<default>[^}]*))?\}')


def _expand_env(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    return ENV_REFERENCE.sub(
        lambda m: os.environ.get(m.group('name'), m.group('default') or ''), value
    )


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


class ConfigParser:
    """
    Parse GFALace configuration files.

    Features:
    - Start from the built-in defaults
    - Merge a user YAML file over them
    - Environment variable substitution (${VAR} and ${VAR:-default})
    - CLI parameter overrides
    - Dotted notation access (e.g., config.get('output.include_sequence'))
    """

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """
        Initialize configuration parser.

        Args:
            config_file: Path to YAML configuration file (optional)
        """
        self.config_file = Path(config_file) if config_file else None
        self._config: Dict[str, Any] = default_config()

        if self.config_file:
            self._load_user_config()

    def _load_user_config(self):
        """Load and merge user configuration file."""
        if not self.config_file.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_file}"
            )

        try:
            with open(self.config_file, 'r') as f:
                user_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(
                f"Invalid YAML in config file {self.config_file}: {e}"
            ) from e

        if user_config is None:
            return
        if not isinstance(user_config, dict):
            raise ConfigValidationError(
                f"Config file {self.config_file} must contain a mapping at top level"
            )

        # Sections are merged key by key; anything else replaces the default
        for section, values in user_config.items():
            if isinstance(values, dict) and isinstance(self._config.get(section), dict):
                self._config[section].update(
                    {key: _expand_env(value) for key, value in values.items()}
                )
            else:
                self._config[section] = values

    def merge_cli_overrides(self, overrides: Dict[str, Any]):
        """
        Merge command-line overrides into configuration.

        None values are ignored so that unset CLI options keep the file value.

        Args:
            overrides: Keys in dotted notation (e.g., 'input.temp_dir')
        """
        for key, value in overrides.items():
            if value is None:
                continue

            keys = key.split('.')
            target = self._config
            for k in keys[:-1]:
                if not isinstance(target.get(k), dict):
                    target[k] = {}
                target = target[k]

            target[keys[-1]] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Supports dotted notation for nested access.

        Args:
            key: Configuration key (e.g., 'lacing.report_overlaps')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        value = self._config

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as dictionary."""
        return self._config.copy()

    def __repr__(self) -> str:
        return f"ConfigParser(config_file={self.config_file})"

# GFALace v0.1.0
# Any usage is subject to this software's license.
