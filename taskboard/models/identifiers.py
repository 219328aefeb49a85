"""
Identifier handling for Taskboard.

Identifiers are UUIDs generated at creation time. The store keeps them in
their native UUID form; callers only ever see the canonical string form.
"""

import uuid
from typing import Union

from ..errors import ValidationError


def new_id() -> uuid.UUID:
    """Generate a fresh identifier for a new record."""
    return uuid.uuid4()


def parse_id(value: Union[str, uuid.UUID], entity: str = "identifier") -> uuid.UUID:
    """
    Convert a caller-supplied identifier into its native form.

    Args:
        value: Identifier in string or native form
        entity: Entity kind used in the error message

    Returns:
        The native UUID

    Raises:
        ValidationError: If the value is not a well-formed identifier
    """
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError, AttributeError):
        raise ValidationError(entity, f"malformed identifier {value!r}")


def to_str(value) -> str:
    """Render a native identifier in canonical string form."""
    return str(value)
