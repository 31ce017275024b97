# c1_assist/errors.py
"""
Domain errors raised while generating a project.

Every failure of the scaffold/patch pipeline surfaces as one of these.
Library exceptions are chained as __cause__.
"""

from __future__ import annotations


class ProjectError(Exception):
    """Base class for all project generation failures."""

    default_message = "Failed to generate project."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class InvalidProjectError(ProjectError):
    default_message = "Project name cannot be empty or contain invalid characters."


# --- Filesystem ---

class FilesystemError(ProjectError):
    default_message = "Failed to create project directory structure."


class LocationError(FilesystemError):
    default_message = "The project location does not exist or is not a folder."


class NoWriteAccessError(FilesystemError):
    default_message = "No write access to the project location."


class DirectoryCreationError(FilesystemError):
    default_message = "Failed to create project directory structure."


class TemplateNotFoundError(FilesystemError):
    default_message = "The session database template was not found."

    def __init__(self, message: str | None = None, searched: list | None = None):
        super().__init__(message)
        self.searched = list(searched or [])


class CopyFailedError(FilesystemError):
    default_message = "Failed to copy the database file."


# --- Database ---

class DatabaseError(ProjectError):
    default_message = "Failed to update the database with folder information."


class ConnectionFailedError(DatabaseError):
    default_message = "Failed to connect to the database."


class SchemaMissingError(DatabaseError):
    default_message = "The session database does not contain the path location table."


class PrepareFailedError(DatabaseError):
    default_message = "Failed to prepare the SQL statement."


class BindFailedError(DatabaseError):
    default_message = "Failed to bind parameters to the SQL statement."


class StepFailedError(DatabaseError):
    default_message = "Failed to execute the SQL statement."
