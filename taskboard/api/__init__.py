"""Access API for boards, lists and cards."""

from .service import BoardService

__all__ = ["BoardService"]
