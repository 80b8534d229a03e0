"""Configuration loading and result persistence."""

import json
import yaml
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .logging import get_logger, level_value

logger = get_logger("hutupy_io")

def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load YAML configuration file.

    Args:
        config_path: Path to YAML config file

    Returns:
        Configuration dictionary (empty if the file holds no mapping)
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    logger.debug(f"Loaded config from {config_path}")
    return config

def save_results(results: Dict[str, Any], output_path: Union[str, Path]) -> None:
    """Save results to JSON file.

    Args:
        results: Results dictionary
        output_path: Output file path
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w') as f:
        json.dump(results, f, indent=2, default=str)

    logger.debug(f"Saved results to {output_path}")

@dataclass
class Settings:
    """Defaults shared by the CLI and example scripts."""

    datetime_format: str = "%F %T"
    log_level: str = "INFO"
    log_file: Optional[str] = None
    page_size: int = 10
    rainbow_display_count: int = 5

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "Settings":
        """Build settings from a config mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(config) - known
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {sorted(unknown)}")

        settings = cls(**{k: v for k, v in config.items() if k in known})

        for name in ("page_size", "rainbow_display_count"):
            value = getattr(settings, name)
            # YAML reads yes/no as bool, an int subclass
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

        if not isinstance(settings.datetime_format, str):
            raise ValueError(f"datetime_format must be a string, got {settings.datetime_format!r}")
        if settings.log_file is not None and not isinstance(settings.log_file, str):
            raise ValueError(f"log_file must be a path string, got {settings.log_file!r}")
        level_value(settings.log_level)
        return settings

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "Settings":
        return cls.from_dict(load_config(config_path))
