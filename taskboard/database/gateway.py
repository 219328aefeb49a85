"""
Persistence gateway for Taskboard.

Every query against the boards, lists and cards collections lives here.
Identifiers are bound and compared in their native UUID form and rendered
as strings only when a row becomes a public projection.
"""

import duckdb
import uuid
from contextlib import contextmanager
from typing import List, Optional, Sequence

from ..errors import StoreConflictError, StoreConnectionError, ValidationError
from ..models import Board, BoardList, Card
from ..models.identifiers import parse_id, to_str


class StoreGateway:
    """
    CRUD and bulk-by-parent operations over one store cursor.
    """

    def __init__(self, cursor):
        self.cursor = cursor

    @contextmanager
    def _translated(self):
        """Map store failures onto the Taskboard error taxonomy."""
        try:
            yield
        except (duckdb.ConnectionException, duckdb.IOException) as e:
            raise StoreConnectionError(f"Store unavailable: {e}", e) from e
        except duckdb.TransactionException as e:
            raise StoreConflictError(f"Write conflict: {e}", e) from e

    def _execute(self, sql: str, params: Optional[list] = None):
        with self._translated():
            return self.cursor.execute(sql, params or [])

    @contextmanager
    def transaction(self):
        """Run the enclosed statements as one store transaction."""
        with self._translated():
            self.cursor.begin()
        try:
            yield self
        except BaseException:
            with self._translated():
                self.cursor.rollback()
            raise
        with self._translated():
            self.cursor.commit()

    def _write(self, entity: str, sql: str, params: list):
        try:
            return self._execute(sql, params).fetchone()
        except duckdb.ConstraintException as e:
            raise ValidationError(entity, str(e)) from e

    def _exists(self, table: str, record_id: uuid.UUID) -> bool:
        row = self._execute(
            f"SELECT 1 FROM {table} WHERE id = CAST(? AS UUID) LIMIT 1",
            [str(record_id)]
        ).fetchone()
        return row is not None

    # Boards

    def list_boards(self) -> List[Board]:
        rows = self._execute(
            "SELECT id, name FROM boards ORDER BY seq"
        ).fetchall()
        return [Board(id=to_str(row[0]), name=row[1]) for row in rows]

    def board_exists(self, board_id: uuid.UUID) -> bool:
        return self._exists("boards", board_id)

    def insert_board(self, board_id: uuid.UUID, name: str) -> Board:
        row = self._write("board", """
            INSERT INTO boards (id, name)
            VALUES (CAST(? AS UUID), ?)
            RETURNING id, name
        """, [str(board_id), name])
        return Board(id=to_str(row[0]), name=row[1])

    def update_board(self, board_id: uuid.UUID, name: str) -> Optional[Board]:
        row = self._write("board", """
            UPDATE boards SET name = ?
            WHERE id = CAST(? AS UUID)
            RETURNING id, name
        """, [name, str(board_id)])
        if row is None:
            return None
        return Board(id=to_str(row[0]), name=row[1])

    def delete_board(self, board_id: uuid.UUID) -> bool:
        rows = self._execute(
            "DELETE FROM boards WHERE id = CAST(? AS UUID) RETURNING id",
            [str(board_id)]
        ).fetchall()
        return len(rows) > 0

    # Lists

    def find_lists(self, board_id: uuid.UUID) -> List[BoardList]:
        rows = self._execute("""
            SELECT id, board_id, name FROM lists
            WHERE board_id = CAST(? AS UUID)
            ORDER BY seq
        """, [str(board_id)]).fetchall()
        return [
            BoardList(id=to_str(row[0]), board_id=to_str(row[1]), name=row[2])
            for row in rows
        ]

    def find_list_ids(self, board_id: uuid.UUID) -> List[uuid.UUID]:
        rows = self._execute(
            "SELECT id FROM lists WHERE board_id = CAST(? AS UUID)",
            [str(board_id)]
        ).fetchall()
        return [parse_id(row[0]) for row in rows]

    def list_exists(self, list_id: uuid.UUID) -> bool:
        return self._exists("lists", list_id)

    def insert_list(self, list_id: uuid.UUID, board_id: uuid.UUID, name: str) -> BoardList:
        row = self._write("list", """
            INSERT INTO lists (id, board_id, name)
            VALUES (CAST(? AS UUID), CAST(? AS UUID), ?)
            RETURNING id, board_id, name
        """, [str(list_id), str(board_id), name])
        return BoardList(id=to_str(row[0]), board_id=to_str(row[1]), name=row[2])

    def update_list(self, list_id: uuid.UUID, name: str) -> Optional[BoardList]:
        row = self._write("list", """
            UPDATE lists SET name = ?
            WHERE id = CAST(? AS UUID)
            RETURNING id, board_id, name
        """, [name, str(list_id)])
        if row is None:
            return None
        return BoardList(id=to_str(row[0]), board_id=to_str(row[1]), name=row[2])

    def delete_list(self, list_id: uuid.UUID) -> bool:
        rows = self._execute(
            "DELETE FROM lists WHERE id = CAST(? AS UUID) RETURNING id",
            [str(list_id)]
        ).fetchall()
        return len(rows) > 0

    def delete_lists_by_board(self, board_id: uuid.UUID) -> int:
        """Delete every list of a board. Returns the number removed."""
        rows = self._execute(
            "DELETE FROM lists WHERE board_id = CAST(? AS UUID) RETURNING id",
            [str(board_id)]
        ).fetchall()
        return len(rows)

    # Cards

    def find_cards(self, list_id: uuid.UUID) -> List[Card]:
        rows = self._execute("""
            SELECT id, list_id, name, description FROM cards
            WHERE list_id = CAST(? AS UUID)
            ORDER BY seq
        """, [str(list_id)]).fetchall()
        return [
            Card(id=to_str(row[0]), list_id=to_str(row[1]), name=row[2], description=row[3])
            for row in rows
        ]

    def insert_card(self, card_id: uuid.UUID, list_id: uuid.UUID, name: str, description: str) -> Card:
        row = self._write("card", """
            INSERT INTO cards (id, list_id, name, description)
            VALUES (CAST(? AS UUID), CAST(? AS UUID), ?, ?)
            RETURNING id, list_id, name, description
        """, [str(card_id), str(list_id), name, description])
        return Card(id=to_str(row[0]), list_id=to_str(row[1]), name=row[2], description=row[3])

    def update_card(self, card_id: uuid.UUID, name: str, description: str) -> Optional[Card]:
        row = self._write("card", """
            UPDATE cards SET name = ?, description = ?
            WHERE id = CAST(? AS UUID)
            RETURNING id, list_id, name, description
        """, [name, description, str(card_id)])
        if row is None:
            return None
        return Card(id=to_str(row[0]), list_id=to_str(row[1]), name=row[2], description=row[3])

    def delete_card(self, card_id: uuid.UUID) -> bool:
        rows = self._execute(
            "DELETE FROM cards WHERE id = CAST(? AS UUID) RETURNING id",
            [str(card_id)]
        ).fetchall()
        return len(rows) > 0

    def delete_cards_by_list(self, list_id: uuid.UUID) -> int:
        """Delete every card of a list. Returns the number removed."""
        rows = self._execute(
            "DELETE FROM cards WHERE list_id = CAST(? AS UUID) RETURNING id",
            [str(list_id)]
        ).fetchall()
        return len(rows)

    def delete_cards_by_lists(self, list_ids: Sequence[uuid.UUID]) -> int:
        """Delete every card whose list is in ``list_ids``. Returns the number removed."""
        if not list_ids:
            return 0
        placeholders = ", ".join("CAST(? AS UUID)" for _ in list_ids)
        rows = self._execute(
            f"DELETE FROM cards WHERE list_id IN ({placeholders}) RETURNING id",
            [str(list_id) for list_id in list_ids]
        ).fetchall()
        return len(rows)
