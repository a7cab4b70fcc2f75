# src/seo_shell/core/managers/config_manager.py
import json
import logging
from typing import Any, Dict, Optional

from seo_analyzer.config import AnalyzerConfig
from seo_shell.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}


def _cast_like(original: Any, value: Any) -> Any:
    """
    Casts value to the type of original. Booleans are parsed from their usual
    string spellings, since bool('false') is True.
    """
    if isinstance(original, bool):
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
            raise ValueError(f"'{value}' is not a boolean")
        return bool(value)
    return type(original)(value)


class ConfigManager:
    """
    A singleton class to manage the application's configuration.
    It loads settings.json once and allows for in-memory modifications for the session.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        """Loads the configuration from the file."""
        self._config: Dict[str, Any] = {}
        self.reset()
        logger.debug("ConfigManager initialized.")

    def get_all(self) -> Dict[str, Any]:
        """Returns the entire current configuration dictionary."""
        return self._config

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Safely retrieves a nested value from the configuration.
        e.g., 'server.port' or 'analyzer.seo.content.min_words'.
        """
        value = self._config
        for key in key_path.split('.'):
            if isinstance(value, dict):
                value = value.get(key)
            else:
                return default
        return value if value is not None else default

    def set_nested(self, key_path: str, value: Any) -> bool:
        """
        Sets a nested value in the in-memory configuration.
        An existing value keeps its type: 'config set server.port 8080' stores an int.
        """
        keys = key_path.split('.')
        d = self._config
        # Navigate to the second-to-last dictionary
        for key in keys[:-1]:
            d = d.setdefault(key, {})
            if not isinstance(d, dict):
                logger.error("Cannot set value: '%s' is not a dictionary.", key)
                return False

        original_value = d.get(keys[-1])
        if isinstance(original_value, dict):
            logger.error("Cannot overwrite section '%s' with a single value.", key_path)
            return False

        if original_value is not None:
            try:
                value = _cast_like(original_value, value)
            except (ValueError, TypeError):
                logger.warning(
                    "Could not cast new value for '%s' to type %s. Storing as string.",
                    key_path, type(original_value).__name__
                )

        d[keys[-1]] = value
        logger.info("Configuration updated: %s = %s", key_path, value)
        return True

    def reset(self):
        """Resets the in-memory configuration from the settings.json file."""
        try:
            config_path = PathUtils.get_shell_package_root() / "settings.json"
            if not config_path.exists():
                logger.warning("settings.json not found at %s. Using empty config.", config_path)
                self._config = {}
                return
            with open(config_path, "r", encoding="utf-8") as f:
                self._config = json.load(f)
            logger.info("Configuration has been (re)loaded from settings.json.")
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load settings.json: %s", e, exc_info=True)
            self._config = {}

    def get_analyzer_config(self) -> AnalyzerConfig:
        """Builds the engine configuration from the 'analyzer' section."""
        return AnalyzerConfig.from_settings(self.get_nested("analyzer", {}))


# The global singleton instance that the entire application will use.
config_manager = ConfigManager()
