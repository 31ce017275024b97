# c1_assist/config.py
"""
Configuration for project scaffolding and session database patching.
Defaults live here; user overrides are loaded from persistent storage.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List

from .utils.persistent_config import load_persistent_config, USER_CONFIG_DIR

_PERSISTENT_CONFIG = load_persistent_config()


def _get_config_value(key: str, default: Any) -> Any:
    """Get config value from persistent storage or use default."""
    return _PERSISTENT_CONFIG.get(key, default)


@dataclass
class Config:
    # --- Logging ---
    LOG_LEVEL: str = field(default_factory=lambda: _get_config_value('LOG_LEVEL', 'INFO'))
    LOG_DIR: Path = USER_CONFIG_DIR / "logs"

    # --- Project defaults ---
    PROJECTS_ROOT: Path = field(
        default_factory=lambda: Path(_get_config_value('PROJECTS_ROOT', Path.home() / "Pictures"))
    )
    DEFAULT_FOLDER_COUNT: int = field(
        default_factory=lambda: _get_config_value('DEFAULT_FOLDER_COUNT', 5)
    )

    # --- Project layout ---
    PROJECT_FOLDERS: List[str] = field(
        default_factory=lambda: ["Capture", "Output", "Selects", "Trash"]
    )
    CAPTURE_FOLDER: str = "Capture"
    SESSION_EXTENSION: str = field(
        default_factory=lambda: _get_config_value('SESSION_EXTENSION', 'cosessiondb')
    )

    # --- Template lookup ---
    TEMPLATE_NAME: str = field(default_factory=lambda: _get_config_value('TEMPLATE_NAME', 'main.db'))
    # Extra directories searched before the built-in locations
    TEMPLATE_SEARCH_PATHS: List[Path] = field(
        default_factory=lambda: [Path(p) for p in _get_config_value('TEMPLATE_SEARCH_PATHS', [])]
    )

    # --- Session database schema ---
    PATH_LOCATION_TABLE: str = "ZPATHLOCATION"
    PATH_LOCATION_ENTITY: int = 38
    # MAX(Z_PK) assumed for an empty table
    PATH_LOCATION_PK_FLOOR: int = 5

    # Installation-relative template location
    ASSETS_DIR: Path = Path(__file__).resolve().parent / "assets"


DEFAULT_CONFIG = Config()


def reload_config() -> Config:
    """
    Re-read persistent overrides and refresh DEFAULT_CONFIG in place.

    Modules hold a reference to DEFAULT_CONFIG, so the existing instance is
    updated rather than replaced.
    """
    global _PERSISTENT_CONFIG
    _PERSISTENT_CONFIG = load_persistent_config()

    fresh = Config()
    for name in fresh.__dataclass_fields__:
        setattr(DEFAULT_CONFIG, name, getattr(fresh, name))
    return DEFAULT_CONFIG
