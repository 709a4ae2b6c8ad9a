"""Borrow-related domain entities.

A borrow record moves through exactly two states: active (created when a
member borrows a title) and returned (terminal, lateness decided at return).
"""

from datetime import datetime, timedelta

from attrs import define, field

from .shared import ensure_utc, utc_now


@define(slots=True)
class BorrowRecord:
    """Loan of one title to one member.

    Mutable on purpose: the return flow marks the same record late and
    returned before handing it back to the repository for update.
    """

    member_id: int | None = None
    title: str | None = None
    borrow_date: datetime = field(factory=utc_now, converter=ensure_utc)
    due_date: datetime | None = field(default=None, converter=ensure_utc)
    is_late: bool = False
    returned_at: datetime | None = field(default=None, converter=ensure_utc)

    @classmethod
    def open(
        cls,
        member_id: int,
        title: str,
        borrowed_at: datetime,
        loan_period: timedelta,
    ) -> "BorrowRecord":
        """Start a new active loan due ``loan_period`` after ``borrowed_at``."""
        return cls(
            member_id=member_id,
            title=title,
            borrow_date=borrowed_at,
            due_date=borrowed_at + loan_period,
        )

    @property
    def is_active(self) -> bool:
        return self.returned_at is None

    def is_overdue(self, now: datetime) -> bool:
        """Active loan whose due date has already passed."""
        return self.is_active and self.is_past_due(now)

    def is_past_due(self, now: datetime) -> bool:
        if self.due_date is None:
            return False
        return ensure_utc(now) > self.due_date

    def mark_returned(self, returned_at: datetime) -> None:
        """Close the loan, recording whether it came back after the due date."""
        self.is_late = self.is_past_due(returned_at)
        self.returned_at = ensure_utc(returned_at)
