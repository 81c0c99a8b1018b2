"""
Configuration loading for the word search generator.
"""

import copy
import json
import os
from typing import Dict, Any, Optional

import yaml

from wordfind.errors import ConfigError


DEFAULT_CONFIG = {
    'words_file': None,
    'grid': {
        'size': 20,
        'max_tries': 10000,
        'hard': False
    },
    'export': {
        'output_dir': '.',
        'answer_key': 'answer_key.csv',
        'puzzle': 'puzzle.csv',
        'solution': 'solution.json',
        'formats': ['csv']
    },
    'random_seed': None,
    'logging': {
        'level': 'WARNING',
        'file': None
    }
}


def merge_config(default: Dict[str, Any], user: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge user values into default, in place."""
    for key, value in user.items():
        if key in default and isinstance(default[key], dict) and isinstance(value, dict):
            merge_config(default[key], value)
        else:
            default[key] = value
    return default


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Check the grid settings.
    
    Raises:
        ConfigError: if size is not a positive integer, max_tries is not a
            non-negative integer or hard is not a boolean
    """
    grid = config.get('grid')
    if not isinstance(grid, dict):
        raise ConfigError("grid must be a mapping")
    
    size = grid.get('size')
    if not _is_int(size) or size < 1:
        raise ConfigError(f"grid size must be a positive integer, got {size!r}")
    
    max_tries = grid.get('max_tries')
    if not _is_int(max_tries) or max_tries < 0:
        raise ConfigError(f"grid max_tries must be a non-negative integer, got {max_tries!r}")
    
    if not isinstance(grid.get('hard'), bool):
        raise ConfigError(f"grid hard must be true or false, got {grid.get('hard')!r}")
    
    return config


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from file or return defaults.
    
    Raises:
        ConfigError: if the file is missing, is not a YAML/JSON mapping or
            holds invalid grid settings
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    
    if config_path is None:
        return config
    
    if not os.path.exists(config_path):
        raise ConfigError(f"config file not found: {config_path}")
    
    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            if config_path.endswith('.yaml') or config_path.endswith('.yml'):
                user_config = yaml.safe_load(f)
            else:
                user_config = json.load(f)
        except (yaml.YAMLError, ValueError) as e:
            raise ConfigError(f"could not parse {config_path}: {e}") from e
    
    if user_config is None:
        return config
    
    if not isinstance(user_config, dict):
        raise ConfigError(f"{config_path} must contain a mapping")
    
    return validate_config(merge_config(config, user_config))


def save_config(config: Dict[str, Any], config_path: str):
    """Save configuration as YAML."""
    with open(config_path, 'w', encoding='utf-8') as f:
        yaml.dump(config, f, default_flow_style=False)
