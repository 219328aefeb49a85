"""Data models for Taskboard."""

from .identifiers import new_id, parse_id
from .entities import Board, BoardList, Card, BoardInput, ListInput, CardInput
from .results import CascadeResult, ListWithCards, BoardView

__all__ = [
    "new_id",
    "parse_id",
    "Board",
    "BoardList",
    "Card",
    "BoardInput",
    "ListInput",
    "CardInput",
    "CascadeResult",
    "ListWithCards",
    "BoardView",
]
