"""In-memory audit, fine and notification services.

They record what the library service asked of them so embedding applications
and tests can inspect it. Fine amounts, delivery channels and durable audit
storage are left to real implementations.
"""

from collections.abc import Callable
from datetime import datetime
from threading import Lock

from attrs import define

from circulation.config import get_logger
from circulation.domain.entities import utc_now

logger = get_logger(__name__)


@define(frozen=True, slots=True)
class AuditEntry:
    """One line of the circulation audit trail."""

    member_id: int
    title: str
    action: str
    timestamp: datetime


@define(frozen=True, slots=True)
class FineEntry:
    """A late-return fine issued to a member."""

    member_id: int
    title: str
    issued_at: datetime


class InMemoryAuditService:
    """Audit trail kept as an append-only list of entries."""

    def __init__(self, clock: Callable[[], datetime] = utc_now):
        self._lock = Lock()
        self._entries: list[AuditEntry] = []
        self.clock = clock

    @property
    def entries(self) -> list[AuditEntry]:
        with self._lock:
            return list(self._entries)

    def log_borrow(self, member_id: int, title: str) -> None:
        entry = AuditEntry(
            member_id=member_id, title=title, action="borrow", timestamp=self.clock()
        )
        with self._lock:
            self._entries.append(entry)


class InMemoryFineService:
    """Fine ledger recording which member returned which title late."""

    def __init__(self, clock: Callable[[], datetime] = utc_now):
        self._lock = Lock()
        self._fines: list[FineEntry] = []
        self.clock = clock

    @property
    def fines(self) -> list[FineEntry]:
        with self._lock:
            return list(self._fines)

    def apply_fine(self, member_id: int, title: str) -> None:
        fine = FineEntry(member_id=member_id, title=title, issued_at=self.clock())
        with self._lock:
            self._fines.append(fine)
        logger.info(
            "Fine issued to member {member_id} for '{title}'",
            member_id=member_id,
            title=title,
        )

    def fines_for(self, member_id: int) -> list[FineEntry]:
        return [fine for fine in self.fines if fine.member_id == member_id]


class LoggingNotificationService:
    """Writes notifications to the log instead of delivering them."""

    def __init__(self):
        self._lock = Lock()
        self._notified: list[int] = []

    @property
    def notified(self) -> list[int]:
        with self._lock:
            return list(self._notified)

    def notify_all_returned(self, member_id: int) -> None:
        with self._lock:
            self._notified.append(member_id)
        logger.info(
            "Notification: member {member_id} has returned all borrowed books",
            member_id=member_id,
        )
