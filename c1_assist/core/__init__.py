"""
Core package: project scaffolding and session database patching
"""

from .scaffold import ScaffoldBuilder, validate_project_name, validate_folder_count, default_template_search_paths
from .session_db import SessionDatabasePatcher, open_session_db

__all__ = [
    "ScaffoldBuilder",
    "SessionDatabasePatcher",
    "default_template_search_paths",
    "open_session_db",
    "validate_folder_count",
    "validate_project_name",
]
