"""
GFALace v0.1.0

Configuration schema for GFALace.

Defines all available configuration parameters with defaults and validation.

Author: GFALace Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from typing import Dict, Any, List
from pathlib import Path
import copy
import yaml


VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


# Default configuration values
DEFAULT_CONFIG = {
    # ========================================================================
    # Input
    # ========================================================================
    'input': {
        'temp_dir': None,  # Where gzip blocks are decompressed (system temp if None)
    },

    # ========================================================================
    # Lacing
    # ========================================================================
    'lacing': {
        'report_overlaps': True,  # Warn about overlapping ranges of one locus
    },

    # ========================================================================
    # Output
    # ========================================================================
    'output': {
        'include_sequence': True,  # False writes '*' plus an LN tag
        'stats_json': None,  # Optional lace statistics file
    },

    # ========================================================================
    # Logging
    # ========================================================================
    'logging': {
        'level': 'ERROR',  # --verbose raises to INFO, --debug to DEBUG
    },
}


def default_config() -> Dict[str, Any]:
    """Return a deep copy of the default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def save_config_template(output_path: Path):
    """
    Save a configuration template to file.

    Args:
        output_path: Output file path
    """
    with open(output_path, 'w') as f:
        yaml.dump(default_config(), f, default_flow_style=False, sort_keys=False)


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration dictionary.

    Args:
        config: Configuration to validate

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    sections = {}
    for name in DEFAULT_CONFIG:
        section = config.get(name)
        if isinstance(section, dict):
            sections[name] = section
        else:
            errors.append(f"Missing or invalid configuration section: {name}")

    temp_dir = sections.get('input', {}).get('temp_dir')
    if temp_dir is not None:
        temp_path = Path(temp_dir)
        if temp_path.exists() and not temp_path.is_dir():
            errors.append(f"input.temp_dir is not a directory: {temp_dir}")

    if not isinstance(sections.get('lacing', {}).get('report_overlaps', True), bool):
        errors.append("lacing.report_overlaps must be true or false")

    if not isinstance(sections.get('output', {}).get('include_sequence', True), bool):
        errors.append("output.include_sequence must be true or false")

    level = sections.get('logging', {}).get('level', 'ERROR')
    if str(level).upper() not in VALID_LOG_LEVELS:
        errors.append(f"Invalid logging.level: {level} (expected one of {', '.join(VALID_LOG_LEVELS)})")

    return errors
