"""
Taskboard: a kanban-style project board data layer.

Boards contain lists, lists contain cards. All three are stored in
independent collections and linked by parent references, so deletes of a
board or list cascade to their descendants procedurally.
"""

__version__ = "0.1.0"
__author__ = "Taskboard Project"

# Import main components
from .errors import TaskboardError, ValidationError, NotFoundError, StoreConnectionError, StoreConflictError
from .models import Board, BoardList, Card, CascadeResult, BoardView
from .database import DatabaseManager, StoreGateway
from .cascade import CascadeDeleter
from .api import BoardService

__all__ = [
    "TaskboardError",
    "ValidationError",
    "NotFoundError",
    "StoreConnectionError",
    "StoreConflictError",
    "Board",
    "BoardList",
    "Card",
    "CascadeResult",
    "BoardView",
    "DatabaseManager",
    "StoreGateway",
    "CascadeDeleter",
    "BoardService",
]
