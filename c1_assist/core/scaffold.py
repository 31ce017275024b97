# c1_assist/core/scaffold.py
"""
Project scaffolding: directory tree creation and session template copy.

Steps (each failure-terminal, nothing is cleaned up on failure):
1. Verify the target location exists and is writable (probe file)
2. Create {location}/{name}
3. Create the fixed sub-folders, plus numbered folders inside Capture
4. Copy the first template found on the search path to {name}.{ext}
"""

from __future__ import annotations
import os
import shutil
import sys
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from ..config import DEFAULT_CONFIG, Config
from ..errors import (
    CopyFailedError,
    DirectoryCreationError,
    InvalidProjectError,
    LocationError,
    NoWriteAccessError,
    TemplateNotFoundError,
)
from ..io_paths import capture_dir, capture_folder_name, project_dir, session_db_path
from ..utils.log import setup_logger

log = setup_logger("core.scaffold")


def _separators() -> List[str]:
    seps = ["/", os.sep]
    if os.altsep:
        seps.append(os.altsep)
    return seps


def validate_project_name(name: str) -> str:
    """Reject empty names and names containing a path separator."""
    if not isinstance(name, str) or not name:
        raise InvalidProjectError("Project name cannot be empty.")
    if any(sep in name for sep in _separators()):
        raise InvalidProjectError(f"Project name cannot contain a path separator: {name!r}")
    return name


def validate_folder_count(folder_count: int) -> int:
    if isinstance(folder_count, bool) or not isinstance(folder_count, int) or folder_count < 1:
        raise InvalidProjectError(f"Folder count must be a positive whole number, got {folder_count!r}.")
    return folder_count


def bundle_resources_dir() -> Optional[Path]:
    """Contents/Resources of a frozen py2app bundle, None when running from source."""
    if not getattr(sys, "frozen", False):
        return None
    # {App}.app/Contents/MacOS/{executable}
    return Path(sys.executable).resolve().parent.parent / "Resources"


def default_template_search_paths(cfg: Optional[Config] = None) -> List[Path]:
    """
    Ordered directories searched for the session template.

    1. User configured directories (TEMPLATE_SEARCH_PATHS)
    2. Installation assets directory
    3. App bundle resources (frozen builds only)
    4. Current working directory
    """
    cfg = cfg or DEFAULT_CONFIG
    candidates: List[Path] = [Path(p).expanduser() for p in cfg.TEMPLATE_SEARCH_PATHS]
    candidates.append(cfg.ASSETS_DIR)

    resources = bundle_resources_dir()
    if resources is not None:
        candidates.append(resources)

    candidates.append(Path.cwd())

    ordered: List[Path] = []
    for path in candidates:
        if path not in ordered:
            ordered.append(path)
    return ordered


@contextmanager
def write_probe(location: Path) -> Iterator[Path]:
    """Write a throwaway file into location; it is removed on every exit path."""
    probe = location / f"write_test_{uuid.uuid4().hex}.tmp"
    try:
        probe.write_text("test", encoding="utf-8")
    except OSError as e:
        raise NoWriteAccessError(f"No write access to location: {location} ({e})") from e
    try:
        yield probe
    finally:
        probe.unlink(missing_ok=True)


class ScaffoldBuilder:
    """Creates the project directory tree and its session database copy."""

    def __init__(self, config: Optional[Config] = None, search_paths: Optional[Sequence[Path]] = None):
        self.cfg = config or DEFAULT_CONFIG
        self._search_paths = [Path(p) for p in search_paths] if search_paths is not None else None

    @property
    def search_paths(self) -> List[Path]:
        if self._search_paths is not None:
            return list(self._search_paths)
        return default_template_search_paths(self.cfg)

    def build(self, name: str, folder_count: int, root_location: Path) -> Path:
        """
        Create the project skeleton and copy the session template into it.

        Args:
            name: Project name (becomes folder and database name)
            folder_count: Number of numbered folders inside Capture
            root_location: Existing, writable parent directory

        Returns:
            Path to the copied session database
        """
        validate_project_name(name)
        validate_folder_count(folder_count)
        root_location = Path(root_location)

        self.check_location(root_location)

        project = project_dir(root_location, name)
        log.info(f"Creating project directory at: {project}")
        self._mkdir(project)

        for folder_name in self.cfg.PROJECT_FOLDERS:
            folder = project / folder_name
            log.debug(f"Creating folder: {folder}")
            self._mkdir(folder)

            if folder == capture_dir(project, self.cfg):
                for i in range(1, folder_count + 1):
                    numbered = folder / capture_folder_name(i)
                    log.debug(f"Creating capture folder: {numbered}")
                    self._mkdir(numbered)

        log.info(f"Created {len(self.cfg.PROJECT_FOLDERS)} folders and {folder_count} capture folder(s)")

        return self.copy_template(project, name)

    def check_location(self, root_location: Path) -> None:
        """Fail before any work if the location is missing, not a folder, or read-only."""
        if not root_location.exists() or not root_location.is_dir():
            raise LocationError(f"Project location is not an existing folder: {root_location}")

        with write_probe(root_location):
            pass
        log.info(f"Write access confirmed for location: {root_location}")

    def locate_template(self) -> Path:
        """Return the first existing template on the search path."""
        checked: List[Path] = []
        for directory in self.search_paths:
            candidate = directory / self.cfg.TEMPLATE_NAME
            log.debug(f"Checking: {candidate}")
            checked.append(candidate)
            if candidate.is_file():
                log.info(f"Found database template at: {candidate}")
                return candidate

        log.error(f"Could not find {self.cfg.TEMPLATE_NAME} in any expected location")
        raise TemplateNotFoundError(
            f"The {self.cfg.TEMPLATE_NAME} template was not found. Searched: "
            + ", ".join(str(p) for p in checked),
            searched=checked,
        )

    def copy_template(self, project: Path, name: str) -> Path:
        template = self.locate_template()
        destination = session_db_path(project, name, self.cfg)

        if destination.exists():
            raise CopyFailedError(f"Session database already exists: {destination}")

        try:
            shutil.copy2(template, destination)
        except (OSError, ValueError) as e:
            raise CopyFailedError(f"Failed to copy {template} to {destination}: {e}") from e

        log.info(f"Copied session database to: {destination}")
        return destination

    @staticmethod
    def _mkdir(path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except (OSError, ValueError) as e:
            # ValueError: names the OS cannot represent (embedded NUL)
            raise DirectoryCreationError(f"Failed to create directory {path}: {e}") from e
