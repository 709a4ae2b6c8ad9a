"""Catalog domain entities.

Pure book representations with zero external dependencies.
"""

from attrs import define, field, validators


@define(frozen=True, slots=True)
class Book:
    """Catalog entry identified by its unique title.

    ``copies`` is the number of copies the catalog holds. Loans are tracked as
    borrow records and never change it, so catalog capacity only moves when
    books are added. Reference-only books can never be borrowed.
    """

    title: str = field(validator=validators.instance_of(str))
    copies: int = field(default=0, validator=validators.instance_of(int))
    is_reference_only: bool = field(default=False)


def total_copies(books: list[Book]) -> int:
    """Sum catalog copies across a collection of books."""
    return sum(book.copies for book in books)
