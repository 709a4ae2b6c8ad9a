"""Core domain entities representing circulation concepts."""

from .book import Book, total_copies
from .borrow import BorrowRecord
from .member import Member, MemberStatus
from .rules import CirculationRules
from .shared import ensure_utc, utc_now

__all__ = [
    # Catalog
    "Book",
    "total_copies",
    # Members
    "Member",
    "MemberStatus",
    # Loans
    "BorrowRecord",
    # Rules
    "CirculationRules",
    # Shared utilities
    "ensure_utc",
    "utc_now",
]
