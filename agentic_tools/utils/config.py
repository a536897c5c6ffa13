"""Configuration management."""

import json
import yaml
from pathlib import Path
from typing import Dict, Any

from .. import __version__


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from YAML or JSON file."""
    path = Path(config_path)
    
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    
    with open(path, 'r') as f:
        if path.suffix.lower() in ['.yaml', '.yml']:
            return yaml.safe_load(f) or {}
        elif path.suffix.lower() == '.json':
            return json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")


def get_default_config() -> Dict[str, Any]:
    """Get default configuration."""
    return {
        'server': {
            'name': 'agentic-tools',
            'version': __version__,
        },
        'storage': {
            'directory_name': '.agentic-tools-mcp',
            'use_global_directory': False,
        },
        'analysis': {
            'complexity_threshold': 7,
            'suggest_breakdown': True,
            'auto_create_subtasks': False,
        },
        'memories': {
            'default_limit': 50,
        },
        'logging': {
            'level': 'INFO',
        },
    }


def config_section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Return a config section, treating a missing or non-mapping section as empty."""
    section = config.get(name)
    return section if isinstance(section, dict) else {}


def resolve_config(config_path: str = None) -> Dict[str, Any]:
    """Load the config file when it exists, layered over the defaults."""
    config = get_default_config()
    if config_path and Path(config_path).exists():
        for section, values in load_config(config_path).items():
            if isinstance(config.get(section), dict):
                # An empty YAML section (`analysis:`) loads as None and keeps the defaults
                if isinstance(values, dict):
                    config[section].update(values)
            else:
                config[section] = values
    return config
