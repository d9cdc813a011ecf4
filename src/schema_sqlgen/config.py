"""
Configuration loader for schema-sqlgen.

Loads settings from config.yaml with sensible defaults.
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

# Default configuration values
DEFAULTS = {
    'generation': {
        'include_schema': True,
        'manual_prefix': '',
        'cursor_parameter_name': None,  # None = dialect default
    },
    'output': {
        'encoding': 'utf-8',
    },
    'logging': {
        'level': 'INFO',
    },
}


PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_NAMES = ('config.yaml', 'config.yml')


def find_config_file() -> Optional[Path]:
    """First config file found in the working directory, project root or home."""
    candidates = [Path(name) for name in CONFIG_NAMES]
    candidates += [PROJECT_ROOT / name for name in CONFIG_NAMES]
    candidates.append(Path.home() / '.schema-sqlgen' / 'config.yaml')
    return next((path for path in candidates if path.is_file()), None)


class Config:
    """Configuration manager for script generation."""

    _instance: Optional['Config'] = None
    _config: Dict[str, Any] = {}

    def __new__(cls):
        """Singleton pattern to ensure single config instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._load_config()
        return cls._instance

    def _load_config(self):
        """Load settings from the first config file found, over DEFAULTS."""
        self._config = copy.deepcopy(DEFAULTS)

        config_file = find_config_file()
        if config_file is None:
            logger.debug("No config.yaml found, using defaults")
            return

        try:
            file_config = yaml.safe_load(config_file.read_text(encoding='utf-8')) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Failed to load config from {config_file}: {e}")
            return

        self._config = self._deep_merge(DEFAULTS, file_config)
        logger.info(f"Loaded configuration from {config_file}")

    def _deep_merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dictionaries."""
        result = copy.deepcopy(base)
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def get(self, *keys, default=None) -> Any:
        """
        Get a configuration value by key path.

        Usage:
            config.get('generation', 'include_schema')
            config.get('output', 'encoding', default='utf-8')
        """
        value = self._config
        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default
        return value

    @property
    def generation(self) -> Dict[str, Any]:
        """Get generator defaults."""
        return self._config.get('generation', DEFAULTS['generation'])

    def reload(self):
        """Reload configuration from file."""
        self._load_config()


# Global config instance
config = Config()


def get_config() -> Config:
    """Get the global configuration instance."""
    return config


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging from the 'logging.level' setting."""
    level_name = (level or config.get('logging', 'level', default='INFO')).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
