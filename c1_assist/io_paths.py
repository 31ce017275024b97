# c1_assist/io_paths.py
"""
Centralized path helpers for project-scoped artifacts.
Layout:
    {Project}/
        {Project}.cosessiondb
        Capture/
            01/ 02/ ... NN/
        Output/
        Selects/
        Trash/
"""

from pathlib import Path
from typing import Optional

from .config import DEFAULT_CONFIG as CFG, Config


def capture_folder_name(index: int) -> str:
    """Two-digit zero padded name; wider indices are not re-padded (100, 101, ...)."""
    return f"{index:02d}"


def capture_relative_path(index: int, cfg: Optional[Config] = None) -> str:
    """Path of a numbered capture folder relative to the project root."""
    cfg = cfg or CFG
    return f"{cfg.CAPTURE_FOLDER}/{capture_folder_name(index)}"


def project_dir(location: Path, name: str) -> Path: return Path(location) / name
def capture_dir(project: Path, cfg: Optional[Config] = None) -> Path: return project / (cfg or CFG).CAPTURE_FOLDER


def session_db_path(project: Path, name: str, cfg: Optional[Config] = None) -> Path:
    return project / f"{name}.{(cfg or CFG).SESSION_EXTENSION}"
