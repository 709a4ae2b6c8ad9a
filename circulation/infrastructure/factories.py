"""Factory functions wiring the library service to in-memory collaborators.

The application layer depends only on domain protocols; these factories are
the one place that picks concrete implementations.
"""

from collections.abc import Callable
from datetime import datetime

from attrs import define

from circulation.application.services import LibraryService
from circulation.domain.entities import Book, CirculationRules, utc_now
from circulation.infrastructure.persistence.in_memory import (
    InMemoryBookRepository,
    InMemoryBorrowRepository,
)
from circulation.infrastructure.services.members import InMemoryMemberService
from circulation.infrastructure.services.recorders import (
    InMemoryAuditService,
    InMemoryFineService,
    LoggingNotificationService,
)


@define(slots=True)
class InMemoryLibrary:
    """A wired library service together with the adapters behind it."""

    service: LibraryService
    books: InMemoryBookRepository
    borrows: InMemoryBorrowRepository
    members: InMemoryMemberService
    audit: InMemoryAuditService
    fines: InMemoryFineService
    notifications: LoggingNotificationService


def create_in_memory_library(
    books: list[Book] | None = None,
    rules: CirculationRules | None = None,
    clock: Callable[[], datetime] = utc_now,
) -> InMemoryLibrary:
    """Build a library service backed entirely by in-memory adapters.

    Args:
        books: Initial catalog contents
        rules: Circulation limits; configured settings are used when omitted
        clock: Shared time source for the service and every adapter
    """
    book_repo = InMemoryBookRepository(books)
    borrow_repo = InMemoryBorrowRepository()
    members = InMemoryMemberService(borrow_repo, clock=clock)
    audit = InMemoryAuditService(clock=clock)
    fines = InMemoryFineService(clock=clock)
    notifications = LoggingNotificationService()

    service = LibraryService(
        book_repo,
        members,
        notifications,
        audit,
        borrow_repo,
        fines,
        rules=rules,
        clock=clock,
    )
    return InMemoryLibrary(
        service=service,
        books=book_repo,
        borrows=borrow_repo,
        members=members,
        audit=audit,
        fines=fines,
        notifications=notifications,
    )
