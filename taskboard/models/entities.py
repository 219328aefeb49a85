"""
Entity models for Taskboard.

This module defines the public projections returned to callers and the
payloads accepted for create and update operations. Identifiers and parent
references are always strings in projections.
"""

from pydantic import BaseModel, ConfigDict, Field


class Board(BaseModel):
    """
    Root entity representing one project or workspace.
    """

    id: str = Field(
        ...,
        description="Canonical string form of the board identifier"
    )

    name: str = Field(
        ...,
        description="Display name of the board"
    )


class BoardList(BaseModel):
    """
    A named column owned by exactly one board.
    """

    id: str = Field(
        ...,
        description="Canonical string form of the list identifier"
    )

    board_id: str = Field(
        ...,
        description="Identifier of the owning board"
    )

    name: str = Field(
        ...,
        description="Display name of the list"
    )


class Card(BaseModel):
    """
    A named, described task item owned by exactly one list.
    """

    id: str = Field(
        ...,
        description="Canonical string form of the card identifier"
    )

    list_id: str = Field(
        ...,
        description="Identifier of the owning list"
    )

    name: str = Field(
        ...,
        description="Title of the card"
    )

    description: str = Field(
        ...,
        description="Free-text body of the card"
    )


class BoardInput(BaseModel):
    """Fields accepted when creating or renaming a board."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)


class ListInput(BaseModel):
    """Fields accepted when creating or renaming a list."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)


class CardInput(BaseModel):
    """Fields accepted when creating or editing a card."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
