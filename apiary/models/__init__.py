"""
Models package for Apiary.

Exports all SQLAlchemy models for database operations.
"""

from .request import Request
from .history import History

__all__ = [
    "Request",
    "History",
]
