"""Domain repository and collaborator interfaces following Clean Architecture principles.

These interfaces define the contracts the library service consumes without
depending on infrastructure implementations, following the dependency
inversion principle. Storage, membership, fines, notifications and auditing
all live behind them.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from circulation.domain.entities import Book, BorrowRecord, Member


class BookRepositoryProtocol(Protocol):
    """Repository interface for catalog persistence operations."""

    def get_all_books(self) -> list["Book"]:
        """Return every book in the catalog."""
        ...

    def find_book(self, title: str) -> "Book | None":
        """Find a book by its title, or None when it is not catalogued."""
        ...

    def save_book(self, book: "Book") -> None:
        """Add a new book to the catalog."""
        ...


class MemberServiceProtocol(Protocol):
    """Service interface owning membership status and overdue computation."""

    def get_member(self, member_id: int) -> "Member | None":
        """Get member by ID."""
        ...


class BorrowRepositoryProtocol(Protocol):
    """Repository interface for borrow record persistence operations."""

    def get_active_borrows(self, member_id: int) -> list["BorrowRecord"]:
        """Get the member's borrow records that have not been returned."""
        ...

    def save_borrow(self, record: "BorrowRecord") -> None:
        """Persist a new borrow record."""
        ...

    def get_borrow_record(self, member_id: int, title: str) -> "BorrowRecord | None":
        """Get the member's outstanding borrow record for a title.

        Returns:
            The matching record, or None when the member never borrowed it
        """
        ...

    def update_borrow(self, record: "BorrowRecord") -> None:
        """Persist changes to an existing borrow record."""
        ...


class NotificationServiceProtocol(Protocol):
    """Service interface for member notifications."""

    def notify_all_returned(self, member_id: int) -> None:
        """Tell the member every borrowed book has been returned."""
        ...


class AuditServiceProtocol(Protocol):
    """Service interface for the circulation audit trail."""

    def log_borrow(self, member_id: int, title: str) -> None:
        """Record that the member borrowed the title."""
        ...


class FineServiceProtocol(Protocol):
    """Service interface for late-return fines."""

    def apply_fine(self, member_id: int, title: str) -> None:
        """Charge the member for returning the title late."""
        ...
