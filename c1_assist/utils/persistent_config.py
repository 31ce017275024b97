# c1_assist/utils/persistent_config.py
"""
Persistent user configuration storage.
Stores user preferences and window state that should persist across sessions.
"""

from __future__ import annotations
import json
from pathlib import Path
from typing import Dict, Any

from .log import setup_logger

# Store config in user's home directory
USER_CONFIG_DIR = Path.home() / ".c1_assist"
USER_CONFIG_PATH = USER_CONFIG_DIR / "config.json"

log = setup_logger("utils.persistent_config")

# Keys holding a single path
PATH_FIELDS = ['PROJECTS_ROOT', 'LAST_PROJECT_LOCATION']


def _serialize_value(value: Any) -> Any:
    """Convert Python objects to JSON-serializable values."""
    if isinstance(value, Path):
        return str(value)
    elif isinstance(value, dict):
        return {k: _serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [_serialize_value(v) for v in value]
    else:
        return value


def load_persistent_config() -> Dict[str, Any]:
    """Load persistent user configuration."""
    if not USER_CONFIG_PATH.exists():
        return {}

    try:
        with USER_CONFIG_PATH.open('r', encoding='utf-8') as f:
            config = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        log.warning(f"Failed to load persistent config: {e}")
        return {}

    if not isinstance(config, dict):
        log.warning(f"Ignoring persistent config with unexpected layout: {USER_CONFIG_PATH}")
        return {}

    for key in PATH_FIELDS:
        if config.get(key):
            config[key] = Path(config[key])

    return config


def save_persistent_config(config: Dict[str, Any]) -> None:
    """Save persistent user configuration.

    Merges provided config with existing config, so different windows
    can save their own settings without overwriting each other.
    """
    USER_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)

    existing_serialized = {
        key: _serialize_value(value)
        for key, value in load_persistent_config().items()
    }
    new_serialized = {
        key: _serialize_value(value)
        for key, value in config.items()
    }

    # New values override existing
    merged_config = {**existing_serialized, **new_serialized}

    try:
        with USER_CONFIG_PATH.open('w', encoding='utf-8') as f:
            json.dump(merged_config, f, indent=2, sort_keys=True)
    except OSError as e:
        log.error(f"Failed to save persistent config: {e}")
        raise


def get_persistent_value(key: str, default: Any = None) -> Any:
    """Get a single persistent config value."""
    return load_persistent_config().get(key, default)


def clear_persistent_config() -> None:
    """Clear all persistent configuration (reset to defaults)."""
    if USER_CONFIG_PATH.exists():
        USER_CONFIG_PATH.unlink()


def reload_all_config() -> None:
    """
    Reload persistent config into the shared DEFAULT_CONFIG.

    Call this after saving settings so the next project uses the new values
    without an application restart.
    """
    from ..config import reload_config
    reload_config()
