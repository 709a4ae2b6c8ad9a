"""Domain repository interfaces following Clean Architecture principles.

These interfaces define the contracts for data access and collaborating
services without depending on infrastructure implementations.
"""

from .interfaces import (
    AuditServiceProtocol,
    BookRepositoryProtocol,
    BorrowRepositoryProtocol,
    FineServiceProtocol,
    MemberServiceProtocol,
    NotificationServiceProtocol,
)

__all__ = [
    "AuditServiceProtocol",
    "BookRepositoryProtocol",
    "BorrowRepositoryProtocol",
    "FineServiceProtocol",
    "MemberServiceProtocol",
    "NotificationServiceProtocol",
]
