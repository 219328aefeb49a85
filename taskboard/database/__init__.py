"""Database management for Taskboard."""

from .gateway import StoreGateway
from .manager import DatabaseManager

__all__ = ["DatabaseManager", "StoreGateway"]
