"""In-memory member, audit, fine and notification services."""

from .members import InMemoryMemberService
from .recorders import (
    AuditEntry,
    FineEntry,
    InMemoryAuditService,
    InMemoryFineService,
    LoggingNotificationService,
)

__all__ = [
    "AuditEntry",
    "FineEntry",
    "InMemoryAuditService",
    "InMemoryFineService",
    "InMemoryMemberService",
    "LoggingNotificationService",
]
