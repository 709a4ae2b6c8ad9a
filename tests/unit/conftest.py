"""Unit test fixtures - collaborator mocks for library service orchestration tests.

Every collaborator is a ``Mock`` specced on its domain protocol, so calling a
method the protocol does not declare fails the test.
"""

from unittest.mock import Mock

import pytest

from circulation.application.services import LibraryService
from circulation.domain.repositories import (
    AuditServiceProtocol,
    BookRepositoryProtocol,
    BorrowRepositoryProtocol,
    FineServiceProtocol,
    MemberServiceProtocol,
    NotificationServiceProtocol,
)


@pytest.fixture
def book_repo():
    repo = Mock(spec=BookRepositoryProtocol)
    repo.get_all_books.return_value = []
    repo.find_book.return_value = None
    return repo


@pytest.fixture
def member_service():
    service = Mock(spec=MemberServiceProtocol)
    service.get_member.return_value = None
    return service


@pytest.fixture
def notification_service():
    return Mock(spec=NotificationServiceProtocol)


@pytest.fixture
def audit_service():
    return Mock(spec=AuditServiceProtocol)


@pytest.fixture
def borrow_repo():
    repo = Mock(spec=BorrowRepositoryProtocol)
    repo.get_active_borrows.return_value = []
    repo.get_borrow_record.return_value = None
    return repo


@pytest.fixture
def fine_service():
    return Mock(spec=FineServiceProtocol)


@pytest.fixture
def service(
    book_repo,
    member_service,
    notification_service,
    audit_service,
    borrow_repo,
    fine_service,
    rules,
    clock,
):
    """Library service wired to mocked collaborators and a fixed clock."""
    return LibraryService(
        book_repo,
        member_service,
        notification_service,
        audit_service,
        borrow_repo,
        fine_service,
        rules=rules,
        clock=clock,
    )
