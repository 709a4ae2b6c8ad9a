"""Tests for the in-memory repositories and services."""

from datetime import timedelta

import pytest

from circulation.domain.entities import Book, BorrowRecord, MemberStatus
from circulation.domain.exceptions import InvalidOperationError, NotFoundError
from circulation.infrastructure.persistence import (
    InMemoryBookRepository,
    InMemoryBorrowRepository,
)
from circulation.infrastructure.services import (
    InMemoryAuditService,
    InMemoryFineService,
    InMemoryMemberService,
    LoggingNotificationService,
)


@pytest.fixture
def borrow_repo():
    return InMemoryBorrowRepository()


@pytest.fixture
def make_record(now, rules):
    def _make(title: str, member_id: int = 1, borrowed_days_ago: int = 0) -> BorrowRecord:
        return BorrowRecord.open(
            member_id=member_id,
            title=title,
            borrowed_at=now - timedelta(days=borrowed_days_ago),
            loan_period=rules.loan_period,
        )

    return _make


class TestInMemoryBookRepository:
    def test_seeded_books_are_found(self, book):
        repo = InMemoryBookRepository([book])
        assert repo.find_book("Novel") == book
        assert repo.find_book("Missing") is None

    def test_save_duplicate_title_raises(self, book):
        repo = InMemoryBookRepository([book])
        with pytest.raises(InvalidOperationError):
            repo.save_book(Book(title="Novel", copies=1))


class TestInMemoryBorrowRepository:
    def test_active_borrows_are_per_member(self, borrow_repo, make_record):
        borrow_repo.save_borrow(make_record("Novel", member_id=1))
        borrow_repo.save_borrow(make_record("Poetry", member_id=2))

        assert [r.title for r in borrow_repo.get_active_borrows(1)] == ["Novel"]

    def test_returned_records_are_not_active(self, borrow_repo, make_record, now):
        record = make_record("Novel")
        borrow_repo.save_borrow(record)

        record.mark_returned(now)
        borrow_repo.update_borrow(record)

        assert borrow_repo.get_active_borrows(1) == []
        assert borrow_repo.get_borrow_record(1, "Novel") is None
        assert borrow_repo.get_history(1) == [record]

    def test_update_unknown_record_raises(self, borrow_repo, make_record):
        with pytest.raises(NotFoundError):
            borrow_repo.update_borrow(make_record("Novel"))

    def test_overdue_borrows(self, borrow_repo, make_record, now):
        borrow_repo.save_borrow(make_record("Old", borrowed_days_ago=20))
        borrow_repo.save_borrow(make_record("Fresh"))

        overdue = borrow_repo.get_overdue_borrows(1, now)

        assert [r.title for r in overdue] == ["Old"]


class TestInMemoryMemberService:
    def test_unknown_member_is_none(self, borrow_repo, clock):
        assert InMemoryMemberService(borrow_repo, clock=clock).get_member(1) is None

    def test_overdue_flag_derived_from_loans(self, borrow_repo, make_record, clock):
        members = InMemoryMemberService(borrow_repo, clock=clock)
        members.register(1)
        assert members.get_member(1).has_overdue_books is False

        borrow_repo.save_borrow(make_record("Old", borrowed_days_ago=20))

        assert members.get_member(1).has_overdue_books is True

    def test_set_status(self, borrow_repo, clock):
        members = InMemoryMemberService(borrow_repo, clock=clock)
        members.register(1, name="Ada")

        members.set_status(1, "Suspended")

        member = members.get_member(1)
        assert member.status is MemberStatus.SUSPENDED
        assert member.name == "Ada"

    def test_set_status_unknown_member_raises(self, borrow_repo):
        with pytest.raises(NotFoundError):
            InMemoryMemberService(borrow_repo).set_status(7, MemberStatus.ACTIVE)


class TestRecorders:
    def test_audit_records_borrow(self, clock, now):
        audit = InMemoryAuditService(clock=clock)
        audit.log_borrow(1, "Novel")

        entry = audit.entries[0]
        assert (entry.member_id, entry.title, entry.action, entry.timestamp) == (
            1,
            "Novel",
            "borrow",
            now,
        )

    def test_entries_are_returned_as_copies(self, clock):
        audit = InMemoryAuditService(clock=clock)
        audit.log_borrow(1, "Novel")

        audit.entries.clear()

        assert len(audit.entries) == 1

    def test_fines_are_filtered_by_member(self, clock):
        fines = InMemoryFineService(clock=clock)
        fines.apply_fine(1, "Novel")
        fines.apply_fine(2, "Poetry")

        assert [f.title for f in fines.fines_for(2)] == ["Poetry"]

    def test_notifications_are_recorded(self):
        notifications = LoggingNotificationService()
        notifications.notify_all_returned(3)
        assert notifications.notified == [3]
