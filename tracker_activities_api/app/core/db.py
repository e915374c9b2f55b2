"""
SQLite database integration.

This module provides the ``Database`` handle used by the application:
it knows where the database file lives, opens connections configured
for the services (rows keyed by column name, foreign keys enforced)
and creates the schema on startup.  One ``Database`` is built by
``create_app`` and stored on ``app.state``; request handlers receive a
connection through the ``get_db`` dependency, which makes it easy to
substitute a test double with ``app.dependency_overrides``.
"""

import logging
import os
import sqlite3
import uuid
from pathlib import Path
from typing import Iterable, Iterator, Tuple

from fastapi import Request

logger = logging.getLogger(__name__)


SCHEMA = """
CREATE TABLE IF NOT EXISTS subjects (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    subject TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS students (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    num_list INTEGER NOT NULL UNIQUE,
    name TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS activities (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    date TEXT NOT NULL,
    id_subject INTEGER NOT NULL,
    description TEXT,
    FOREIGN KEY(id_subject) REFERENCES subjects(id)
);

CREATE TABLE IF NOT EXISTS qualifications (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    qualification INTEGER NOT NULL CHECK (qualification BETWEEN 0 AND 100),
    num_list_student INTEGER NOT NULL,
    id_activity INTEGER NOT NULL,
    FOREIGN KEY(num_list_student) REFERENCES students(num_list),
    FOREIGN KEY(id_activity) REFERENCES activities(id),
    UNIQUE(num_list_student, id_activity)
);

CREATE INDEX IF NOT EXISTS idx_activities_subject ON activities(id_subject);
CREATE INDEX IF NOT EXISTS idx_qualifications_activity ON qualifications(id_activity);
"""


def resolve_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    A ``sqlite:///`` prefix is stripped.  Absolute paths and
    ``:memory:`` are returned as is; relative paths are resolved
    against the project root.
    """
    db_url = database_url
    if db_url.startswith("sqlite:///"):
        db_url = db_url[len("sqlite:///"):]
    if db_url == ":memory:" or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # tracker_activities_api/
    return str((base_dir / db_url).resolve())


class Database:
    """Connection factory bound to one SQLite database.

    A plain ``:memory:`` database would be private to each connection,
    so it is replaced by a named shared-cache memory database that lives
    as long as the handle keeps one connection open to it.
    """

    def __init__(self, database_url: str):
        self.path = resolve_database_path(database_url)
        self._uri = False
        self._keepalive = None
        if self.path == ":memory:":
            self.path = f"file:tracker_{uuid.uuid4().hex}?mode=memory&cache=shared"
            self._uri = True
            self._keepalive = self.connect()

    def connect(self) -> sqlite3.Connection:
        """Create and return a new SQLite connection.

        ``check_same_thread`` is disabled because FastAPI may open the
        connection in a worker thread and use it from the event loop.
        Each connection is still used by a single request only.
        """
        conn = sqlite3.connect(self.path, uri=self._uri, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        # SQLite ignores REFERENCES clauses unless this is set per connection.
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    def init_schema(self) -> None:
        """Create the tables if they do not exist yet."""
        conn = self.connect()
        try:
            conn.executescript(SCHEMA)
            conn.commit()
        finally:
            conn.close()
        logger.info("Database ready at %s", self.path)

    def seed(
        self,
        subjects: Iterable[str] = (),
        students: Iterable[Tuple[int, str]] = (),
    ) -> None:
        """Insert subjects and students, which the API itself never creates.

        Subjects already present by name and students whose list number
        is taken are left untouched, so seeding twice is harmless.
        """
        conn = self.connect()
        try:
            cursor = conn.cursor()
            for name in subjects:
                cursor.execute(
                    "INSERT INTO subjects (subject) "
                    "SELECT ? WHERE NOT EXISTS (SELECT 1 FROM subjects WHERE subject = ?)",
                    (name, name),
                )
            for num_list, name in students:
                cursor.execute(
                    "INSERT OR IGNORE INTO students (num_list, name) VALUES (?, ?)",
                    (num_list, name),
                )
            conn.commit()
        finally:
            conn.close()


def get_db(request: Request) -> Iterator[sqlite3.Connection]:
    """FastAPI dependency yielding a connection for the current request."""
    conn = request.app.state.database.connect()
    try:
        yield conn
    finally:
        conn.close()
