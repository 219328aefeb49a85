"""Cascading deletes across the board, list and card hierarchy."""

from .orchestrator import CascadeDeleter

__all__ = ["CascadeDeleter"]
