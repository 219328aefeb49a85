"""
Error taxonomy for Taskboard.

Every failure surfaced by the data layer is one of these. None of them is
retried by the library; callers decide what to show.
"""

from typing import Optional


class TaskboardError(Exception):
    """Base class for all Taskboard errors."""


class ValidationError(TaskboardError):
    """
    A required field was missing or malformed.

    Raised both for payloads rejected at the model boundary and for rows
    rejected by the store schema.
    """

    def __init__(self, entity: str, message: str):
        self.entity = entity
        self.message = message
        super().__init__(f"Invalid {entity}: {message}")


class NotFoundError(TaskboardError):
    """An update or delete targeted an identifier with no live record."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity.capitalize()} not found: {entity_id}")


class StoreConnectionError(TaskboardError, ConnectionError):
    """The store could not be reached, or no connection is open."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)


class StoreConflictError(TaskboardError):
    """A concurrent write touched the same records and the store aborted this one."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)
