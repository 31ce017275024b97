from __future__ import annotations

import sys
from pathlib import Path

import pytest

from c1_assist.core.scaffold import (
    ScaffoldBuilder,
    default_template_search_paths,
    validate_folder_count,
    validate_project_name,
)
from c1_assist.errors import (
    CopyFailedError,
    DirectoryCreationError,
    FilesystemError,
    InvalidProjectError,
    LocationError,
    NoWriteAccessError,
    TemplateNotFoundError,
)

from conftest import make_template


def _children(path: Path) -> list[str]:
    return sorted(p.name for p in path.iterdir())


@pytest.mark.parametrize("name", ["", "a/b", "/Wedding", "Wedding/"])
def test_validate_project_name_rejects_empty_and_separators(name) -> None:
    with pytest.raises(InvalidProjectError):
        validate_project_name(name)


@pytest.mark.parametrize("name", ["Wedding01", "Smith & Jones 2025", "a:b", "Été", ".hidden"])
def test_validate_project_name_accepts_other_names(name) -> None:
    assert validate_project_name(name) == name


@pytest.mark.parametrize("count", [0, -1, True, 1.5, "3", None])
def test_validate_folder_count_rejects_non_positive_ints(count) -> None:
    with pytest.raises(InvalidProjectError):
        validate_folder_count(count)


def test_build_creates_fixed_tree(cfg, template_db, location) -> None:
    db_path = ScaffoldBuilder(cfg).build("Wedding01", 3, location)

    project = location / "Wedding01"
    assert _children(location) == ["Wedding01"]
    assert _children(project) == ["Capture", "Output", "Selects", "Trash", "Wedding01.cosessiondb"]
    assert _children(project / "Capture") == ["01", "02", "03"]
    for folder in ("Output", "Selects", "Trash"):
        assert _children(project / folder) == []

    assert db_path == project / "Wedding01.cosessiondb"
    assert db_path.read_bytes() == template_db.read_bytes()


def test_build_pads_to_two_digits_only(cfg, template_db, location) -> None:
    ScaffoldBuilder(cfg).build("Big", 101, location)

    names = _children(location / "Big" / "Capture")
    assert len(names) == 101
    assert {"01", "09", "10", "99", "100", "101"} <= set(names)
    assert "001" not in names


def test_build_missing_location_fails_before_creating_anything(cfg, template_db, tmp_path) -> None:
    missing = tmp_path / "nope"
    with pytest.raises(LocationError):
        ScaffoldBuilder(cfg).build("Wedding01", 3, missing)
    assert not missing.exists()


def test_build_location_must_be_a_directory(cfg, template_db, tmp_path) -> None:
    a_file = tmp_path / "file.txt"
    a_file.write_text("x")
    with pytest.raises(LocationError):
        ScaffoldBuilder(cfg).build("Wedding01", 3, a_file)


def test_build_unwritable_location_fails_before_creating_directories(cfg, template_db, location, monkeypatch) -> None:
    def refuse(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "write_text", refuse)

    with pytest.raises(NoWriteAccessError) as excinfo:
        ScaffoldBuilder(cfg).build("Wedding01", 3, location)

    assert isinstance(excinfo.value, FilesystemError)
    assert isinstance(excinfo.value.__cause__, PermissionError)
    assert _children(location) == []


def test_write_probe_is_removed(cfg, template_db, location) -> None:
    ScaffoldBuilder(cfg).build("Wedding01", 1, location)
    assert not list(location.glob("write_test_*.tmp"))


def test_missing_template_keeps_created_directories(cfg, location, tmp_path) -> None:
    empty = tmp_path / "empty"
    empty.mkdir()
    builder = ScaffoldBuilder(cfg, search_paths=[empty])

    with pytest.raises(TemplateNotFoundError) as excinfo:
        builder.build("Wedding01", 2, location)

    assert excinfo.value.searched == [empty / "main.db"]
    project = location / "Wedding01"
    # Directories from the first two steps are not rolled back
    assert _children(project) == ["Capture", "Output", "Selects", "Trash"]
    assert _children(project / "Capture") == ["01", "02"]


def test_first_template_on_search_path_wins(cfg, location, tmp_path) -> None:
    first = make_template(tmp_path / "first" / "main.db", rows=[(40, "Capture/first")])
    make_template(tmp_path / "second" / "main.db", rows=[(50, "Capture/second")])
    builder = ScaffoldBuilder(cfg, search_paths=[tmp_path / "missing", first.parent, tmp_path / "second"])

    assert builder.locate_template() == first
    db_path = builder.build("Wedding01", 1, location)
    assert db_path.read_bytes() == first.read_bytes()


def test_existing_session_database_is_not_overwritten(cfg, template_db, location) -> None:
    builder = ScaffoldBuilder(cfg)
    db_path = builder.build("Wedding01", 2, location)
    db_path.write_bytes(b"patched")

    with pytest.raises(CopyFailedError):
        builder.build("Wedding01", 2, location)
    assert db_path.read_bytes() == b"patched"


def test_directory_creation_failure_is_wrapped(cfg, template_db, location) -> None:
    project = location / "Wedding01"
    project.mkdir()
    (project / "Output").write_text("in the way")

    with pytest.raises(DirectoryCreationError) as excinfo:
        ScaffoldBuilder(cfg).build("Wedding01", 2, location)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_name_the_filesystem_cannot_represent_is_wrapped(cfg, template_db, location) -> None:
    with pytest.raises(DirectoryCreationError) as excinfo:
        ScaffoldBuilder(cfg).build("Wed\x00ding", 2, location)

    assert isinstance(excinfo.value.__cause__, ValueError)
    assert _children(location) == []


def test_session_extension_is_configurable(cfg, template_db, location) -> None:
    cfg.SESSION_EXTENSION = "testdb"
    db_path = ScaffoldBuilder(cfg).build("Shoot", 1, location)
    assert db_path.name == "Shoot.testdb"


def test_default_search_paths_order(cfg, tmp_path, monkeypatch) -> None:
    extra = tmp_path / "extra"
    monkeypatch.chdir(tmp_path)
    cfg.TEMPLATE_SEARCH_PATHS = [extra, cfg.ASSETS_DIR]

    assert default_template_search_paths(cfg) == [extra, cfg.ASSETS_DIR, Path.cwd()]


def test_default_search_paths_include_bundle_resources(cfg, tmp_path, monkeypatch) -> None:
    executable = tmp_path / "C1 Assist.app" / "Contents" / "MacOS" / "C1 Assist"
    executable.parent.mkdir(parents=True)
    executable.write_text("")
    monkeypatch.setattr(sys, "frozen", True, raising=False)
    monkeypatch.setattr(sys, "executable", str(executable))
    monkeypatch.chdir(tmp_path)

    paths = default_template_search_paths(cfg)

    resources = executable.resolve().parent.parent / "Resources"
    assert paths == [cfg.ASSETS_DIR, resources, Path.cwd()]
