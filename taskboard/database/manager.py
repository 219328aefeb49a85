"""
Database manager for Taskboard.

This module owns the process-wide DuckDB connection: it is opened and closed
explicitly, creates the schema, and hands out per-unit-of-work sessions.
"""

import duckdb
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from ..config import config
from ..errors import StoreConnectionError
from .gateway import StoreGateway


class DatabaseManager:
    """
    Manages the DuckDB database holding the boards, lists and cards collections.
    """

    def __init__(self, db_path: Optional[str] = None, read_only: Optional[bool] = None):
        """
        Initialize the database manager.

        Args:
            db_path: Path to the DuckDB database file, or ":memory:" (defaults to config value)
            read_only: Open the database read-only (defaults to config value)
        """
        self.db_path = db_path or config.database_filename
        self.read_only = config.database_read_only if read_only is None else read_only
        self.connection = None

    def connect(self):
        """Establish connection to the database."""
        try:
            self.connection = duckdb.connect(self.db_path, read_only=self.read_only)
        except duckdb.Error as e:
            logging.error(f"Failed to open database {self.db_path}: {e}")
            raise StoreConnectionError(f"Cannot open database {self.db_path}: {e}", e) from e
        logging.info(f"Connected to database {self.db_path}")

    def disconnect(self):
        """Close the database connection."""
        if self.connection:
            self.connection.close()
            self.connection = None
            logging.info(f"Disconnected from database {self.db_path}")

    def __enter__(self):
        """Context manager entry."""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.disconnect()

    @property
    def is_connected(self) -> bool:
        return self.connection is not None

    def _require_connection(self):
        if not self.connection:
            logging.error("Database connection not established")
            raise StoreConnectionError("Database connection not established")
        return self.connection

    def initialize_database(self):
        """
        Create the three collections if they don't exist.

        Parent references are plain columns: the store does not enforce them,
        the cascade orchestrator does.
        """
        connection = self._require_connection()

        # Shared sequence gives every record a creation rank for ordering
        connection.execute("CREATE SEQUENCE IF NOT EXISTS record_seq;")

        connection.execute("""
            CREATE TABLE IF NOT EXISTS boards (
                id UUID PRIMARY KEY,
                name VARCHAR NOT NULL,
                seq BIGINT DEFAULT nextval('record_seq')
            )
        """)

        connection.execute("""
            CREATE TABLE IF NOT EXISTS lists (
                id UUID PRIMARY KEY,
                board_id UUID NOT NULL,
                name VARCHAR NOT NULL,
                seq BIGINT DEFAULT nextval('record_seq')
            )
        """)

        connection.execute("""
            CREATE TABLE IF NOT EXISTS cards (
                id UUID PRIMARY KEY,
                list_id UUID NOT NULL,
                name VARCHAR NOT NULL,
                description VARCHAR NOT NULL,
                seq BIGINT DEFAULT nextval('record_seq')
            )
        """)

    @contextmanager
    def session(self) -> Iterator[StoreGateway]:
        """
        Open a gateway on its own cursor of the shared connection.

        A DuckDB connection must not be driven from several threads at once,
        so every unit of work gets a cursor. Closing the session never closes
        the shared connection.
        """
        connection = self._require_connection()
        try:
            cursor = connection.cursor()
        except (duckdb.ConnectionException, duckdb.IOException) as e:
            logging.error(f"Cannot open a cursor on {self.db_path}: {e}")
            raise StoreConnectionError(f"Store unavailable: {e}", e) from e
        try:
            yield StoreGateway(cursor)
        finally:
            cursor.close()
