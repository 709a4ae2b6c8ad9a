"""In-memory repository implementations.

These repositories keep catalog and loan data in process memory. Each call
holds the repository lock, so a single call is atomic, but sequences of calls
made by the library service are not serialized.
"""

from datetime import datetime
from threading import Lock

from circulation.config import get_logger
from circulation.domain.entities import Book, BorrowRecord
from circulation.domain.exceptions import InvalidOperationError, NotFoundError

logger = get_logger(__name__)


class InMemoryBookRepository:
    """Catalog keyed by title."""

    def __init__(self, books: list[Book] | None = None):
        self._lock = Lock()
        self._books: dict[str, Book] = {book.title: book for book in books or []}

    def get_all_books(self) -> list[Book]:
        with self._lock:
            return list(self._books.values())

    def find_book(self, title: str) -> Book | None:
        with self._lock:
            return self._books.get(title)

    def save_book(self, book: Book) -> None:
        """Add a book, refusing a title that is already catalogued."""
        with self._lock:
            if book.title in self._books:
                raise InvalidOperationError(
                    "Book already exists.", {"title": book.title}
                )
            self._books[book.title] = book
        logger.debug("Saved book '{title}'", title=book.title)


class InMemoryBorrowRepository:
    """Borrow records in insertion order, returned ones included."""

    def __init__(self):
        self._lock = Lock()
        self._records: list[BorrowRecord] = []

    def get_active_borrows(self, member_id: int) -> list[BorrowRecord]:
        with self._lock:
            return [
                record
                for record in self._records
                if record.member_id == member_id and record.is_active
            ]

    def save_borrow(self, record: BorrowRecord) -> None:
        with self._lock:
            self._records.append(record)
        logger.debug(
            "Saved borrow of '{title}' by member {member_id}",
            title=record.title,
            member_id=record.member_id,
        )

    def get_borrow_record(self, member_id: int, title: str) -> BorrowRecord | None:
        """Outstanding record for the member and title, if any."""
        with self._lock:
            for record in self._records:
                if (
                    record.member_id == member_id
                    and record.title == title
                    and record.is_active
                ):
                    return record
        return None

    def update_borrow(self, record: BorrowRecord) -> None:
        with self._lock:
            for index, stored in enumerate(self._records):
                # A loan is identified by member, title and borrow date
                if (
                    stored.member_id == record.member_id
                    and stored.title == record.title
                    and stored.borrow_date == record.borrow_date
                ):
                    self._records[index] = record
                    return
        raise NotFoundError("Borrow record", (record.member_id, record.title))

    def get_history(self, member_id: int) -> list[BorrowRecord]:
        """Every record for the member, returned or not."""
        with self._lock:
            return [r for r in self._records if r.member_id == member_id]

    def get_overdue_borrows(self, member_id: int, now: datetime) -> list[BorrowRecord]:
        return [r for r in self.get_active_borrows(member_id) if r.is_overdue(now)]
