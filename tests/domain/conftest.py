"""Domain layer test fixtures - Pure business objects with no dependencies."""

from datetime import timedelta

import pytest

from circulation.domain.entities import BorrowRecord


@pytest.fixture
def open_record(now, rules):
    """Active loan that started at 'now'."""
    return BorrowRecord.open(
        member_id=1,
        title="Novel",
        borrowed_at=now,
        loan_period=rules.loan_period,
    )


@pytest.fixture
def overdue_record(now):
    """Active loan whose due date passed a day ago."""
    return BorrowRecord(
        member_id=1,
        title="Overdue",
        borrow_date=now - timedelta(days=15),
        due_date=now - timedelta(days=1),
    )
