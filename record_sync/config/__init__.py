"""
Record Sync Configuration Module

Provides centralized configuration loading for both applications.
"""

from pathlib import Path
from typing import Dict, Any, Optional

import yaml


_config_cache: Optional[Dict[str, Any]] = None
CONFIG_DIR = Path(__file__).parent


def get_config() -> Dict[str, Any]:
    """
    Load record sync configuration (cached).

    Returns:
        Dict containing the "todo_sync" and "user_export" sections.
    """
    global _config_cache
    if _config_cache is not None:
        return _config_cache

    config_path = CONFIG_DIR / "record_sync_config.yaml"
    with open(config_path, 'r') as f:
        _config_cache = yaml.safe_load(f)

    return _config_cache


def clear_config_cache() -> None:
    """Clear the config cache (useful for testing)."""
    global _config_cache
    _config_cache = None
