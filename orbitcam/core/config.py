# orbitcam/core/config.py

import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional
from orbitcam.core.logging import get_logger

logger = get_logger()


class ConfigError(ValueError):
    """Raised when a configuration value cannot be turned into a setting."""


class Config:
    """
    Camera configuration management.
    Handles loading/saving settings from JSON files.
    Without a path the configuration only holds the defaults.
    """

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path) if config_path else None
        self.data: Dict[str, Any] = {}

        # Default configuration
        self.defaults = {
            'camera': {
                'orbit_button': 'left',
                'zoom_button': 'right',
                'pan_button': 'left',
                'orbit_mod': None,
                'zoom_mod': None,
                'pan_mod': 'lshift',
                'scroll_mode': ['zoom_button'],
                'orbit_speed': 0.05,
                'pitch_speed': 0.1,
                'pan_speed': 0.1,
                'zoom_speed': 0.1,
                'distance': 10.0,
                'distance_near_limit': 0.1,
                'distance_far_limit': 1000.0,
                'yaw': 0.0,
                'pitch': 0.0,
            },
            'logging': {
                'log_dir': None,
            },
        }

        self.load()

    def load(self):
        """Load configuration from file."""
        if self.config_path is None:
            self.data = copy.deepcopy(self.defaults)
            return

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    loaded_data = json.load(f)

                # Loaded values override defaults
                self.data = self._deep_merge(copy.deepcopy(self.defaults), loaded_data)
                logger.info(f"Loaded configuration from {self.config_path}")
            except (OSError, ValueError) as e:
                logger.error(f"Failed to load configuration from {self.config_path}: {e}")
                self.data = copy.deepcopy(self.defaults)
        else:
            self.data = copy.deepcopy(self.defaults)
            logger.info(f"Configuration file not found, using defaults and creating {self.config_path}")
            self.save()

    def save(self):
        """Save configuration to file."""
        if self.config_path is None:
            return

        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self.config_path, 'w') as f:
                json.dump(self.data, f, indent=2)
            logger.info(f"Saved configuration to {self.config_path}")
        except OSError as e:
            logger.error(f"Failed to save configuration to {self.config_path}: {e}")

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get configuration value by path.
        Example: config.get('camera.orbit_speed')
        """
        value = self.data

        for key in path.split('.'):
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def set(self, path: str, value: Any):
        """
        Set configuration value by path.
        Example: config.set('camera.zoom_speed', 0.2)
        """
        keys = path.split('.')
        data = self.data

        for key in keys[:-1]:
            if key not in data:
                data[key] = {}
            data = data[key]

        data[keys[-1]] = value

    def _deep_merge(self, base: dict, override: dict) -> dict:
        """Recursively merge override dict into base dict."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
