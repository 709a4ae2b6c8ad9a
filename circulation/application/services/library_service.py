"""Library service orchestrating catalog additions, borrows and returns.

Each operation runs an ordered chain of guard checks against facts supplied by
the injected collaborators, and only mutates state once every guard has
passed. The order of the guards decides which error a caller sees when several
rules are broken at once, so it must not be rearranged.

The service keeps no state between calls. Consistency under concurrent use is
the responsibility of the repositories behind the protocols.
"""

from collections.abc import Callable
from datetime import datetime
from typing import NoReturn

from circulation.config import get_logger
from circulation.domain.entities import (
    Book,
    BorrowRecord,
    CirculationRules,
    total_copies,
    utc_now,
)
from circulation.domain.exceptions import (
    ArgumentError,
    InvalidOperationError,
    NotFoundError,
)
from circulation.domain.repositories import (
    AuditServiceProtocol,
    BookRepositoryProtocol,
    BorrowRepositoryProtocol,
    FineServiceProtocol,
    MemberServiceProtocol,
    NotificationServiceProtocol,
)

logger = get_logger(__name__)

CAPACITY_EXCEEDED = "Library capacity exceeded."
MEMBER_CANNOT_BORROW = "Member cannot borrow."
MEMBER_HAS_OVERDUE_BOOKS = "Member has overdue books."
REFERENCE_BOOK = "Reference books cannot be borrowed."
BORROW_LIMIT_EXCEEDED = "Borrow limit exceeded."
DUPLICATE_BORROW = "Cannot borrow the same book twice."
SIGNATURE_REQUIRED = "Return must be confirmed with signature."


class LibraryService:
    """Applies the circulation rules on top of the injected collaborators.

    Collaborators are passed in the order book repository, member service,
    notification service, audit service, borrow repository, fine service.
    ``rules`` defaults to the configured circulation limits and ``clock`` to
    the current UTC time.
    """

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        member_service: MemberServiceProtocol,
        notification_service: NotificationServiceProtocol,
        audit_service: AuditServiceProtocol,
        borrow_repository: BorrowRepositoryProtocol,
        fine_service: FineServiceProtocol,
        *,
        rules: CirculationRules | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.book_repository = book_repository
        self.member_service = member_service
        self.notification_service = notification_service
        self.audit_service = audit_service
        self.borrow_repository = borrow_repository
        self.fine_service = fine_service
        self.rules = rules or CirculationRules.from_settings()
        self.clock = clock

    # -------------------------------------------------------------------------
    # Catalog
    # -------------------------------------------------------------------------

    def add_book(self, title: str, copies: int) -> None:
        """Add a new title to the catalog.

        Args:
            title: Unique title, at least ``min_title_length`` characters
            copies: Number of copies being added

        Raises:
            ArgumentError: Title too short or copy count out of range
            InvalidOperationError: The addition would exceed library capacity
        """
        rules = self.rules

        if not isinstance(title, str) or len(title.strip()) < rules.min_title_length:
            raise ArgumentError(
                f"Title must be at least {rules.min_title_length} characters long.",
                argument="title",
                value=title,
            )

        # bool is an int subclass but never a copy count
        if (
            not isinstance(copies, int)
            or isinstance(copies, bool)
            or not rules.accepts_copy_count(copies)
        ):
            raise ArgumentError(
                f"Copies must be between {rules.min_copies_per_addition} "
                f"and {rules.max_copies_per_addition}.",
                argument="copies",
                value=copies,
            )

        current_total = total_copies(self.book_repository.get_all_books())
        if current_total + copies > rules.max_total_copies:
            self._reject(
                CAPACITY_EXCEEDED,
                title=title,
                copies=copies,
                current_total=current_total,
            )

        self.book_repository.save_book(Book(title=title, copies=copies))
        logger.info(
            "Added {copies} copies of '{title}' to the catalog",
            title=title,
            copies=copies,
        )

    # -------------------------------------------------------------------------
    # Borrowing
    # -------------------------------------------------------------------------

    def borrow_book(self, member_id: int, title: str) -> BorrowRecord:
        """Lend a title to a member.

        Guards run in this order: member status, overdue books, reference-only
        book, borrow limit, duplicate borrow.

        Returns:
            The saved borrow record

        Raises:
            NotFoundError: Unknown member or title
            InvalidOperationError: A circulation rule forbids the borrow
        """
        member = self.member_service.get_member(member_id)
        if member is None:
            raise NotFoundError("Member", member_id)
        if not member.can_borrow:
            self._reject(MEMBER_CANNOT_BORROW, member_id=member_id, title=title)
        if member.has_overdue_books:
            self._reject(MEMBER_HAS_OVERDUE_BOOKS, member_id=member_id, title=title)

        book = self.book_repository.find_book(title)
        if book is None:
            raise NotFoundError("Book", title)
        if book.is_reference_only:
            self._reject(REFERENCE_BOOK, member_id=member_id, title=title)

        active_borrows = self.borrow_repository.get_active_borrows(member_id)
        if len(active_borrows) >= self.rules.max_active_borrows:
            self._reject(
                BORROW_LIMIT_EXCEEDED,
                member_id=member_id,
                title=title,
                active_borrows=len(active_borrows),
            )
        if any(record.title == title for record in active_borrows):
            self._reject(DUPLICATE_BORROW, member_id=member_id, title=title)

        record = BorrowRecord.open(
            member_id=member_id,
            title=title,
            borrowed_at=self.clock(),
            loan_period=self.rules.loan_period,
        )
        self.borrow_repository.save_borrow(record)
        self.audit_service.log_borrow(member_id, title)

        logger.info(
            "Member {member_id} borrowed '{title}', due {due_date}",
            member_id=member_id,
            title=title,
            due_date=record.due_date,
        )
        return record

    # -------------------------------------------------------------------------
    # Returning
    # -------------------------------------------------------------------------

    def return_book(
        self, member_id: int, title: str, signature_confirmed: bool
    ) -> BorrowRecord:
        """Take a borrowed title back from a member.

        Late returns are fined. Once the member holds no more active borrows
        they are notified that everything has been returned.

        Returns:
            The updated borrow record

        Raises:
            InvalidOperationError: The return was not confirmed with a signature
            NotFoundError: No borrow record for the member and title, or the
                title is no longer catalogued
        """
        if not signature_confirmed:
            self._reject(SIGNATURE_REQUIRED, member_id=member_id, title=title)

        record = self.borrow_repository.get_borrow_record(member_id, title)
        if record is None:
            raise NotFoundError("Borrow record", (member_id, title))
        if self.book_repository.find_book(title) is None:
            raise NotFoundError("Book", title)

        record.mark_returned(self.clock())
        self.borrow_repository.update_borrow(record)

        if record.is_late:
            self.fine_service.apply_fine(member_id, title)
            logger.info(
                "Late return of '{title}' by member {member_id}, fine applied",
                member_id=member_id,
                title=title,
            )

        # Re-read after the update so the record just returned is excluded
        if not self.borrow_repository.get_active_borrows(member_id):
            self.notification_service.notify_all_returned(member_id)
            logger.debug("Member {member_id} has returned all books", member_id=member_id)

        logger.info(
            "Member {member_id} returned '{title}'",
            member_id=member_id,
            title=title,
        )
        return record

    def _reject(self, message: str, **context: object) -> NoReturn:
        logger.bind(**context).warning("Circulation rule violated: {}", message)
        raise InvalidOperationError(message, dict(context))
