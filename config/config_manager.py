"""
Configuration management for the Euchred scoreboard.
"""

import logging
import yaml
from typing import Dict, Any

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading and provides default values."""
    
    @staticmethod
    def load_config(config_file: str) -> Dict[str, Any]:
        """Load configuration from YAML file, filling missing keys from the defaults."""
        config = ConfigManager.get_default_config()
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f)
        except FileNotFoundError:
            logger.warning(f"Configuration file '{config_file}' not found. Using default configuration.")
            return config
        except yaml.YAMLError as e:
            logger.warning(f"Error parsing configuration file: {e}. Using default configuration.")
            return config

        if not isinstance(loaded, dict):
            logger.warning(f"Configuration file '{config_file}' is empty or not a mapping. Using default configuration.")
            return config

        config.update(loaded)
        config['default_names'] = ConfigManager._clean_default_names(config.get('default_names'))
        return config
    
    @staticmethod
    def get_default_config() -> Dict[str, Any]:
        """Return default configuration if config file is not available."""
        return {
            'database_path': 'euchred.db',
            'default_names': ['Player One', 'Player Two', 'Player Three', 'Player Four'],
            'max_name_length': 20,
            'log_level': 'INFO'
        }

    @staticmethod
    def _clean_default_names(names) -> list:
        """Coerce the configured roster into a list of non-blank strings."""
        if not isinstance(names, (list, tuple)):
            logger.warning("'default_names' must be a list. Using default roster.")
            return ConfigManager.get_default_config()['default_names']

        cleaned = [str(name).strip() for name in names if name is not None and str(name).strip()]
        if len(cleaned) != len(names):
            logger.warning(f"Dropped {len(names) - len(cleaned)} blank entries from 'default_names'")
        return cleaned
