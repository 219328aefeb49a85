"""
Result models for Taskboard operations that return more than one entity.
"""

from typing import List
from pydantic import BaseModel, Field

from .entities import BoardList, Card


class CascadeResult(BaseModel):
    """
    Outcome of a cascading delete.
    """

    entity: str = Field(
        ...,
        description="Kind of the root entity that was deleted ('board' or 'list')"
    )

    entity_id: str = Field(
        ...,
        description="Identifier of the deleted root entity"
    )

    lists_deleted: int = Field(
        0,
        description="Number of lists removed as descendants"
    )

    cards_deleted: int = Field(
        0,
        description="Number of cards removed as descendants"
    )


class ListWithCards(BaseModel):
    """A list together with the cards it owns."""

    board_list: BoardList
    cards: List[Card] = Field(default_factory=list)


class BoardView(BaseModel):
    """
    Snapshot of a whole board as rendered by a front end.
    """

    board_id: str = Field(
        ...,
        description="Identifier of the board"
    )

    lists: List[ListWithCards] = Field(
        default_factory=list,
        description="Lists of the board in creation order, each with its cards"
    )
