"""Shared test fixtures - pure domain objects and a fixed clock.

Function-scoped for isolation, no external dependencies.
"""

from datetime import UTC, datetime, timedelta

import pytest

from circulation.domain.entities import (
    Book,
    BorrowRecord,
    CirculationRules,
    Member,
    MemberStatus,
)


@pytest.fixture
def now():
    """Fixed point in time used as 'now' by service and adapters."""
    return datetime(2024, 3, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def clock(now):
    """Zero-argument time source returning the fixed 'now'."""
    return lambda: now


@pytest.fixture
def rules():
    """Default circulation limits, independent of environment settings."""
    return CirculationRules()


@pytest.fixture
def book():
    """Borrowable book with several copies."""
    return Book(title="Novel", copies=5)


@pytest.fixture
def reference_book():
    """Reference-only book that can never leave the library."""
    return Book(title="Dictionary", copies=1, is_reference_only=True)


@pytest.fixture
def active_member():
    """Member in good standing."""
    return Member(id=1, status=MemberStatus.ACTIVE)


@pytest.fixture
def active_borrows(now):
    """Factory for a list of active borrow records with distinct titles."""

    def _make(count: int, member_id: int = 1) -> list[BorrowRecord]:
        return [
            BorrowRecord(
                member_id=member_id,
                title=f"Borrowed Book {i}",
                borrow_date=now - timedelta(days=1),
                due_date=now + timedelta(days=13),
            )
            for i in range(count)
        ]

    return _make
