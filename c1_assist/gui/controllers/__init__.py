"""
GUI controller modules for main window.

Separates concerns:
- project_controller: Input validation and project generation
"""

from .project_controller import ProjectController, ProjectResult, describe_error, parse_folder_count

__all__ = [
    "ProjectController",
    "ProjectResult",
    "describe_error",
    "parse_folder_count",
]
