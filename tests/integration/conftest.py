"""Integration test fixtures - library service wired to in-memory adapters.

The clock is mutable so tests can move time forward between a borrow and a
return.
"""

import pytest

from circulation.infrastructure import create_in_memory_library


class MovableClock:
    """Time source whose current value tests can advance."""

    def __init__(self, start):
        self.current = start

    def __call__(self):
        return self.current

    def advance(self, delta):
        self.current += delta


@pytest.fixture
def movable_clock(now):
    return MovableClock(now)


@pytest.fixture
def library(movable_clock, rules):
    """Library with one registered member and a small catalog."""
    library = create_in_memory_library(rules=rules, clock=movable_clock)
    library.members.register(1, name="Ada")
    library.service.add_book("Novel", 3)
    library.service.add_book("Poetry", 2)
    return library
