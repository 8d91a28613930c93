"""Database module."""

from .connection import DatabaseManager
from .utils import build_update_query

__all__ = ["DatabaseManager", "build_update_query"]
