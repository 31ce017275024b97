# c1_assist/gui/controllers/project_controller.py
"""
Project generation controller.
Validates user input, runs scaffold + database patch, and translates
failures into messages for the window. No Qt dependency.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from ...config import DEFAULT_CONFIG, Config
from ...core import ScaffoldBuilder, SessionDatabasePatcher, validate_folder_count, validate_project_name
from ...errors import (
    DatabaseError,
    FilesystemError,
    InvalidProjectError,
    LocationError,
    ProjectError,
    TemplateNotFoundError,
)
from ...utils.log import setup_logger

log = setup_logger("gui.controllers.project_controller")


@dataclass
class ProjectResult:
    name: str
    project_path: Path
    database_path: Path
    folder_count: int
    keys: List[int] = field(default_factory=list)


def parse_folder_count(text: str) -> int:
    """Folder count from a text field: digits only, at least 1."""
    text = (text or "").strip()
    if not text.isdigit():
        raise InvalidProjectError("Please enter a valid number for folder count.")
    return validate_folder_count(int(text))


def describe_error(exc: ProjectError) -> Tuple[str, str]:
    """Alert (title, message) for a generation failure."""
    if isinstance(exc, LocationError):
        return "Missing Location", exc.message
    if isinstance(exc, InvalidProjectError):
        return "Invalid Input", exc.message
    if isinstance(exc, TemplateNotFoundError):
        return "Template Not Found", exc.message
    if isinstance(exc, FilesystemError):
        return "Error", f"Failed to generate project: {exc.message}"
    if isinstance(exc, DatabaseError):
        return "Database Error", f"Failed to update the session database: {exc.message}"
    return "Error", f"Failed to generate project: {exc.message}"


class ProjectController:
    """Runs project generation for the main window."""

    def __init__(
        self,
        log_callback: Optional[Callable] = None,
        config: Optional[Config] = None,
        builder: Optional[ScaffoldBuilder] = None,
        patcher: Optional[SessionDatabasePatcher] = None,
    ):
        """
        Args:
            log_callback: Function to call for logging (message, level)
            config: Configuration (default: shared DEFAULT_CONFIG)
            builder: Scaffold builder override
            patcher: Database patcher override
        """
        self.cfg = config or DEFAULT_CONFIG
        self.builder = builder or ScaffoldBuilder(self.cfg)
        self.patcher = patcher or SessionDatabasePatcher(self.cfg)
        self.log = log_callback or (lambda msg, lvl: None)
        self.last_result: Optional[ProjectResult] = None
        self.last_error: Optional[ProjectError] = None

    def generate(self, name: str, folder_count: int, location: Optional[Path]) -> ProjectResult:
        """
        Build the project tree, copy the template and register capture folders.

        Raises:
            ProjectError: on the first failing step; nothing is rolled back
        """
        validate_project_name(name)
        validate_folder_count(folder_count)
        if location is None:
            raise LocationError("Please select a project location.")
        location = Path(location)

        database_path = self.builder.build(name, folder_count, location)
        self.log(f"Created project folders in {location / name}", "info")

        keys = self.patcher.patch(database_path, folder_count)
        self.log(f"Registered {len(keys)} capture folder(s) in {database_path.name}", "info")

        return ProjectResult(
            name=name,
            project_path=database_path.parent,
            database_path=database_path,
            folder_count=folder_count,
            keys=keys,
        )

    def create_project(self, name: str, folder_count: int, location: Optional[Path]) -> Optional[ProjectResult]:
        """
        Generate a project, logging instead of raising.

        Returns:
            ProjectResult, or None on failure (see last_error)
        """
        self.last_result = None
        self.last_error = None

        try:
            result = self.generate(name, folder_count, location)
        except ProjectError as e:
            self.last_error = e
            cause = f" (caused by {e.__cause__!r})" if e.__cause__ else ""
            log.error(f"Project generation failed: {type(e).__name__}: {e}{cause}")
            self.log(f"Error creating project: {e}", "error")
            return None

        self.last_result = result
        log.info(f"Project '{name}' generated at {result.project_path}")
        self.log(f"Project '{name}' has been generated successfully.", "success")
        return result
