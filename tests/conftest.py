from __future__ import annotations

import os
import sqlite3
from pathlib import Path

import pytest

# Qt widgets in tests never need a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from c1_assist.config import Config
from c1_assist.utils import persistent_config

PATH_LOCATION_SCHEMA = """
CREATE TABLE ZPATHLOCATION (
    Z_PK INTEGER PRIMARY KEY,
    Z_ENT INTEGER,
    Z_OPT INTEGER,
    ZISRELATIVE INTEGER,
    ZRELATIVEPATH VARCHAR,
    ZVOLUME VARCHAR,
    ZWINROOT VARCHAR,
    ZWINATTRIBUTE BLOB
)
"""


def make_template(path: Path, rows=(), schema: str | None = PATH_LOCATION_SCHEMA, extra_sql=()) -> Path:
    """Create a session template; rows are (Z_PK, ZRELATIVEPATH) pairs."""
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(path)
    try:
        conn.execute("CREATE TABLE Z_METADATA (Z_VERSION INTEGER PRIMARY KEY, Z_UUID VARCHAR(255))")
        if schema:
            conn.execute(schema)
        for sql in extra_sql:
            conn.execute(sql)
        for pk, relative_path in rows:
            conn.execute(
                "INSERT INTO ZPATHLOCATION (Z_PK, Z_ENT, ZISRELATIVE, ZRELATIVEPATH, ZVOLUME) "
                "VALUES (?, 38, 1, ?, '')",
                (pk, relative_path),
            )
        conn.commit()
    finally:
        conn.close()
    return path


def read_rows(path: Path):
    conn = sqlite3.connect(path)
    try:
        return conn.execute(
            "SELECT Z_ENT, Z_PK, ZRELATIVEPATH, ZISRELATIVE, ZVOLUME, ZWINROOT, ZWINATTRIBUTE "
            "FROM ZPATHLOCATION ORDER BY Z_PK"
        ).fetchall()
    finally:
        conn.close()


@pytest.fixture(autouse=True)
def isolated_user_config(tmp_path, monkeypatch):
    config_path = tmp_path / "user_config" / "config.json"
    monkeypatch.setattr(persistent_config, "USER_CONFIG_PATH", config_path)
    return config_path


@pytest.fixture
def assets_dir(tmp_path) -> Path:
    path = tmp_path / "assets"
    path.mkdir()
    return path


@pytest.fixture
def template_db(assets_dir) -> Path:
    return make_template(assets_dir / "main.db")


@pytest.fixture
def cfg(assets_dir, tmp_path) -> Config:
    config = Config()
    config.ASSETS_DIR = assets_dir
    config.TEMPLATE_SEARCH_PATHS = []
    config.LOG_DIR = tmp_path / "logs"
    return config


@pytest.fixture
def location(tmp_path) -> Path:
    path = tmp_path / "projects"
    path.mkdir()
    return path
