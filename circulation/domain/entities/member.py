"""Member-related domain entities."""

from enum import StrEnum

from attrs import define, field


class MemberStatus(StrEnum):
    """Membership states. Only active members may borrow."""

    ACTIVE = "Active"
    SUSPENDED = "Suspended"
    EXPIRED = "Expired"

    @classmethod
    def _missing_(cls, value: object) -> "MemberStatus | None":
        # Accept "active", "SUSPENDED", etc.
        if isinstance(value, str):
            for status in cls:
                if status.value.lower() == value.lower():
                    return status
        return None


@define(frozen=True, slots=True)
class Member:
    """Library member as reported by the member service.

    Read-only from the circulation point of view: status and the overdue flag
    are computed by whoever owns the membership records.
    """

    id: int | None = field(default=None)
    status: MemberStatus = field(default=MemberStatus.ACTIVE, converter=MemberStatus)
    has_overdue_books: bool = field(default=False)
    name: str | None = field(default=None)

    @property
    def can_borrow(self) -> bool:
        return self.status is MemberStatus.ACTIVE
