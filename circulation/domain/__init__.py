"""Circulation domain layer - pure business objects with no infrastructure dependencies."""

from . import entities, repositories
from .entities import Book, BorrowRecord, CirculationRules, Member, MemberStatus
from .exceptions import (
    ArgumentError,
    CirculationError,
    InvalidOperationError,
    NotFoundError,
)

__all__ = [
    # Modules
    "entities",
    "repositories",
    # Key domain types
    "Book",
    "BorrowRecord",
    "CirculationRules",
    "Member",
    "MemberStatus",
    # Errors
    "ArgumentError",
    "CirculationError",
    "InvalidOperationError",
    "NotFoundError",
]
