# c1_assist/core/session_db.py
"""
Session database patching.

Registers each numbered capture folder as a row of the path location table
of a copied session database, so the capture application offers it as a
destination. The table must already exist; it is never created here.
"""

from __future__ import annotations
import sqlite3
from contextlib import closing, contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from ..config import DEFAULT_CONFIG, Config
from ..errors import (
    BindFailedError,
    ConnectionFailedError,
    PrepareFailedError,
    SchemaMissingError,
    StepFailedError,
)
from ..io_paths import capture_relative_path
from ..utils.log import setup_logger

log = setup_logger("core.session_db")

PATH_LOCATION_COLUMNS = (
    "Z_ENT", "Z_PK", "ZRELATIVEPATH", "ZISRELATIVE", "ZVOLUME", "ZWINROOT", "ZWINATTRIBUTE",
)


@contextmanager
def open_session_db(database_path: Path) -> Iterator[sqlite3.Connection]:
    """
    Open an existing database read/write; the connection is always closed.

    Autocommit mode: every INSERT is committed on its own.
    """
    database_path = Path(database_path)
    uri = f"{database_path.resolve().as_uri()}?mode=rw"
    try:
        conn = sqlite3.connect(uri, uri=True, isolation_level=None)
    except sqlite3.Error as e:
        raise ConnectionFailedError(f"Failed to connect to the database {database_path}: {e}") from e

    with closing(conn):
        yield conn


class SessionDatabasePatcher:
    """Appends capture folder rows to the path location table."""

    def __init__(self, config: Optional[Config] = None):
        self.cfg = config or DEFAULT_CONFIG

    @property
    def table(self) -> str:
        return self.cfg.PATH_LOCATION_TABLE

    @property
    def insert_sql(self) -> str:
        return (
            f"INSERT INTO {self.table} "
            "(Z_ENT, Z_PK, ZRELATIVEPATH, ZISRELATIVE, ZVOLUME, ZWINROOT, ZWINATTRIBUTE) "
            "VALUES (?, ?, ?, ?, ?, NULL, NULL)"
        )

    def patch(self, database_path: Path, folder_count: int) -> List[int]:
        """
        Insert one row per capture folder 1..folder_count.

        Rows inserted before a failing row stay in the database.

        Returns:
            Primary keys assigned, in insertion order
        """
        with open_session_db(database_path) as conn:
            self.ensure_schema(conn)

            starting_pk = self.highest_pk(conn) + 1
            log.info(f"Starting PK for new folder entries: {starting_pk}")

            keys = self.add_folder_paths(conn, folder_count, starting_pk)

        log.info(f"Successfully updated database with {folder_count} folder paths")
        return keys

    def ensure_schema(self, conn: sqlite3.Connection) -> None:
        if not self.table_exists(conn):
            log.error(f"{self.table} table does not exist")
            raise SchemaMissingError(f"The session database has no {self.table} table.")

        missing = self.missing_columns(conn)
        if missing:
            raise PrepareFailedError(
                f"Cannot prepare insert into {self.table}, missing column(s): {', '.join(missing)}"
            )

    def table_exists(self, conn: sqlite3.Connection) -> bool:
        try:
            row = conn.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name=? COLLATE NOCASE",
                (self.table,),
            ).fetchone()
        except sqlite3.DatabaseError as e:
            # Not a database at all (e.g. a corrupt or foreign file)
            raise ConnectionFailedError(f"Failed to read the database schema: {e}") from e
        return row is not None

    def missing_columns(self, conn: sqlite3.Connection) -> List[str]:
        present = {row[1].upper() for row in conn.execute(f"PRAGMA table_info({self.table})")}
        return [col for col in PATH_LOCATION_COLUMNS if col not in present]

    def highest_pk(self, conn: sqlite3.Connection) -> int:
        """MAX(Z_PK), or the configured floor when the table is empty."""
        try:
            row = conn.execute(f"SELECT MAX(Z_PK) FROM {self.table}").fetchone()
        except sqlite3.Error as e:
            raise StepFailedError(f"Failed to query the highest primary key: {e}") from e

        if row is None or row[0] is None:
            return self.cfg.PATH_LOCATION_PK_FLOOR
        return int(row[0])

    def add_folder_paths(self, conn: sqlite3.Connection, folder_count: int, starting_pk: int) -> List[int]:
        """Same statement text for every row; only the bound values differ."""
        sql = self.insert_sql
        keys: List[int] = []

        for i in range(1, folder_count + 1):
            pk = starting_pk + (i - 1)
            relative_path = capture_relative_path(i, self.cfg)
            params = (self.cfg.PATH_LOCATION_ENTITY, pk, relative_path, 1, "")

            try:
                conn.execute(sql, params)
            except (sqlite3.InterfaceError, sqlite3.ProgrammingError) as e:
                raise BindFailedError(f"Failed to bind row {relative_path} (Z_PK={pk}): {e}") from e
            except sqlite3.Error as e:
                log.error(f"Error inserting data: {e}")
                raise StepFailedError(f"Failed to insert {relative_path} (Z_PK={pk}): {e}") from e

            log.debug(f"Inserted {relative_path} with Z_PK={pk}")
            keys.append(pk)

        return keys

    def path_locations(self, database_path: Path) -> List[Tuple[int, str]]:
        """(Z_PK, ZRELATIVEPATH) pairs currently registered, ordered by key."""
        with open_session_db(database_path) as conn:
            self.ensure_schema(conn)
            rows = conn.execute(
                f"SELECT Z_PK, ZRELATIVEPATH FROM {self.table} ORDER BY Z_PK"
            ).fetchall()
        return [(int(pk), path) for pk, path in rows]
