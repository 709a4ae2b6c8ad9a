"""In-memory persistence for the catalog and borrow records."""

from .in_memory import InMemoryBookRepository, InMemoryBorrowRepository

__all__ = ["InMemoryBookRepository", "InMemoryBorrowRepository"]
