"""Simple YAML configuration loader for vdireport."""

import copy
import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "vdireport.yaml"

DEFAULTS: Dict[str, Any] = {
    "session": {
        "file_path": None,
        "history_key": "sessionHistory",
    },
    "vdi": {
        "mode_scheme": "positional",
        "slimcore_stack": "remote",
    },
    "report": {
        "label_width": 24,
    },
    "logging": {
        "level": "WARNING",
        "file_path": None,
        "console_output": True,
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


class ReportConfig:
    """vdireport configuration loader."""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration loader.

        Args:
            config_path: Path to YAML config file. If None, uses vdireport.yaml
                        from the current directory when present, otherwise
                        built-in defaults.
        """
        self.config = copy.deepcopy(DEFAULTS)

        if config_path:
            self.config_file: Optional[Path] = Path(config_path)
            if not self.config_file.exists():
                raise FileNotFoundError(f"Configuration file not found: {self.config_file}")
        else:
            candidate = Path.cwd() / DEFAULT_CONFIG_FILENAME
            self.config_file = candidate if candidate.exists() else None

        if self.config_file is not None:
            logger.info(f"Loading configuration from: {self.config_file}")
            _merge(self.config, self._load_config())
        else:
            logger.debug("No configuration file found, using defaults")

    def _load_config(self) -> Dict[str, Any]:
        """Load and parse YAML configuration file."""
        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file: {e}")
        except OSError as e:
            raise ValueError(f"Failed to load configuration: {e}")

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ValueError("Configuration file must contain a mapping")

        self._resolve_paths(config)
        logger.info("Configuration loaded successfully")
        return config

    def _resolve_paths(self, config: Dict[str, Any]) -> None:
        """Resolve relative paths in configuration relative to config file location."""
        config_dir = self.config_file.parent

        for section in ('session', 'logging'):
            path = (config.get(section) or {}).get('file_path')
            if path and not os.path.isabs(path):
                config[section]['file_path'] = str(config_dir / path)

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get configuration value using dot notation (e.g., 'vdi.mode_scheme').

        Args:
            key_path: Dot-separated key path
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key_path.split('.')
        value = self.config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return default if value is None else value

    def set(self, key_path: str, value: Any) -> None:
        """Set configuration value using dot notation.

        Args:
            key_path: Dot-separated path to config value (e.g., 'session.file_path')
            value: Value to set
        """
        keys = key_path.split('.')
        config_dict = self.config

        for key in keys[:-1]:
            if not isinstance(config_dict.get(key), dict):
                config_dict[key] = {}
            config_dict = config_dict[key]

        config_dict[keys[-1]] = value
        logger.debug(f"Configuration key '{key_path}' set to: {value}")
