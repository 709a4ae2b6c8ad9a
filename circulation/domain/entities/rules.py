"""Circulation rule limits as a domain value object.

The limits are plain values so the library service stays independent of the
configuration system; ``from_settings`` bridges the two.
"""

from datetime import timedelta
from typing import TYPE_CHECKING

from attrs import define, field, validators

if TYPE_CHECKING:
    from circulation.config.settings import CirculationConfig


@define(frozen=True, slots=True)
class CirculationRules:
    """Limits enforced when adding, borrowing and returning books."""

    min_title_length: int = field(default=3, validator=validators.ge(1))
    min_copies_per_addition: int = field(default=1, validator=validators.ge(1))
    max_copies_per_addition: int = field(default=100, validator=validators.ge(1))
    max_total_copies: int = field(default=500, validator=validators.ge(1))
    max_active_borrows: int = field(default=5, validator=validators.ge(1))
    loan_period_days: int = field(default=14, validator=validators.ge(1))

    @property
    def loan_period(self) -> timedelta:
        return timedelta(days=self.loan_period_days)

    def accepts_copy_count(self, copies: int) -> bool:
        return self.min_copies_per_addition <= copies <= self.max_copies_per_addition

    @classmethod
    def from_settings(cls, config: "CirculationConfig | None" = None) -> "CirculationRules":
        """Build rules from the circulation settings group.

        Args:
            config: Explicit settings group; the application settings are used
                when omitted
        """
        if config is None:
            from circulation.config import settings

            config = settings.circulation
        return cls(**config.model_dump())
