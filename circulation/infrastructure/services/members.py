"""In-memory member service.

Membership status is stored as registered; the overdue flag is derived on
every lookup from the borrow repository so it always reflects current loans.
"""

from collections.abc import Callable
from datetime import datetime
from threading import Lock

import attrs

from circulation.config import get_logger
from circulation.domain.entities import Member, MemberStatus, utc_now
from circulation.domain.exceptions import NotFoundError
from circulation.infrastructure.persistence.in_memory import InMemoryBorrowRepository

logger = get_logger(__name__)


class InMemoryMemberService:
    """Member directory backed by a dictionary."""

    def __init__(
        self,
        borrow_repository: InMemoryBorrowRepository,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._lock = Lock()
        self._members: dict[int, Member] = {}
        self.borrow_repository = borrow_repository
        self.clock = clock

    def register(
        self,
        member_id: int,
        name: str | None = None,
        status: MemberStatus | str = MemberStatus.ACTIVE,
    ) -> Member:
        member = Member(id=member_id, status=status, name=name)
        with self._lock:
            self._members[member_id] = member
        logger.debug("Registered member {member_id}", member_id=member_id)
        return member

    def set_status(self, member_id: int, status: MemberStatus | str) -> Member:
        with self._lock:
            member = self._members.get(member_id)
            if member is None:
                raise NotFoundError("Member", member_id)
            member = attrs.evolve(member, status=status)
            self._members[member_id] = member
        logger.info(
            "Member {member_id} is now {status}",
            member_id=member_id,
            status=member.status,
        )
        return member

    def get_member(self, member_id: int) -> Member | None:
        with self._lock:
            member = self._members.get(member_id)
        if member is None:
            return None
        overdue = bool(
            self.borrow_repository.get_overdue_borrows(member_id, self.clock())
        )
        return attrs.evolve(member, has_overdue_books=overdue)
