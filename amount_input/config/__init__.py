# PATH: amount_input/config/__init__.py
"""
Configuration loading utilities for amount_input.

Presets live in presets.yaml next to this module. A preset is a partial
mapping merged over the `default` preset.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from amount_input.constants import ErrorCode
from amount_input.exceptions import ConfigurationError
from amount_input.models import FormatterConfig


CONFIG_DIR = Path(__file__).parent
PRESETS_FILE = "presets.yaml"
DEFAULT_PRESET = "default"


def load_yaml(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of file in config directory

    Returns:
        Parsed YAML as dict
    """
    filepath = CONFIG_DIR / filename
    if not filepath.exists():
        raise FileNotFoundError(f"Config file not found: {filepath}")

    with open(filepath, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_presets(config_path: Optional[Path] = None) -> Dict[str, Dict[str, Any]]:
    """
    Load all formatter presets.

    Args:
        config_path: Alternative presets file (default: bundled presets.yaml)

    Returns:
        Mapping of preset name -> partial config mapping
    """
    if config_path is None:
        return load_yaml(PRESETS_FILE)

    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigurationError(
            f"Presets file not found: {config_path}",
            ErrorCode.PRESET_FILE_MISSING,
            {"path": str(config_path)},
        )

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_preset(name: str, config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Get the merged settings for a preset.

    Args:
        name: Preset name (e.g., 'european')
        config_path: Alternative presets file

    Returns:
        `default` preset updated with the named preset
    """
    presets = load_presets(config_path)
    if name not in presets:
        raise ConfigurationError(
            f"Unknown preset: {name}",
            ErrorCode.UNKNOWN_PRESET,
            {"preset": name, "available": sorted(presets)},
        )

    merged = dict(presets.get(DEFAULT_PRESET) or {})
    merged.update(presets[name] or {})
    return merged


def load_formatter_config(
    name: str = DEFAULT_PRESET,
    config_path: Optional[Path] = None,
    **overrides: Any,
) -> FormatterConfig:
    """
    Build a FormatterConfig from a preset plus keyword overrides.

    Example:
        load_formatter_config("european", fractional_digits=2)
    """
    settings = get_preset(name, config_path)
    settings.update(overrides)
    return FormatterConfig.from_dict(settings)
