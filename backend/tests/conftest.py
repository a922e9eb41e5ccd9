"""
Fixtures compartilhadas para testes.

O "agora" é sempre injetado via parâmetro `now` para manter os testes
determinísticos.
"""

from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import AsyncGenerator

import pytest
from httpx import AsyncClient, ASGITransport

from library_policy.main import app
from library_policy.models.enums import LoanStatus, UserRole
from library_policy.schemas.book import BookRecord
from library_policy.schemas.loan import LoanRecord
from library_policy.schemas.member import MemberProfile
from library_policy.services.circulation import CirculationService
from library_policy.services.policy import RolePolicyStore, get_policy_store

NOW = datetime(2024, 6, 15, 12, 0, 0)
TODAY = date(2024, 6, 15)


# ==========================================
# Event loop configuration
# ==========================================

@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


# ==========================================
# Policy fixtures
# ==========================================

@pytest.fixture
def policy_store() -> RolePolicyStore:
    """Tabela de políticas nova, com os valores padrão."""
    return RolePolicyStore()


@pytest.fixture
def circulation(policy_store: RolePolicyStore) -> CirculationService:
    return CirculationService(policy_store)


# ==========================================
# Domain fixtures
# ==========================================

@pytest.fixture
def patron() -> MemberProfile:
    """Membro patron sem pendências."""
    return MemberProfile(
        id="member-1",
        name="Ayesha Khan",
        email="ayesha@example.com",
        role=UserRole.PATRON,
        current_borrows=1,
        fines_owed=Decimal("0.00"),
        membership_expiry=NOW + timedelta(days=180),
    )


@pytest.fixture
def book() -> BookRecord:
    return BookRecord(
        id="book-1",
        title="The Pragmatic Programmer",
        author="Andrew Hunt",
        isbn="9780201616224",
        category="Technology",
        publish_year=1999,
        total_copies=2,
        available_copies=2,
        location="A-12",
        added_date=TODAY,
        keywords=["programming", "craft"],
    )


@pytest.fixture
def active_loan(patron: MemberProfile, book: BookRecord) -> LoanRecord:
    """Empréstimo ativo que vence em 5 dias."""
    return LoanRecord(
        id="loan-1",
        user_id=patron.id,
        book_id=book.id,
        user_name=patron.name,
        book_title=book.title,
        issue_date=NOW - timedelta(days=9),
        due_date=NOW + timedelta(days=5),
        renew_count=0,
        status=LoanStatus.ACTIVE,
    )


# ==========================================
# HTTP Client fixtures
# ==========================================

@pytest.fixture
async def client(policy_store: RolePolicyStore) -> AsyncGenerator[AsyncClient, None]:
    """
    Cliente HTTP assíncrono para testes.

    Substitui a dependency get_policy_store por uma tabela isolada.
    """
    app.dependency_overrides[get_policy_store] = lambda: policy_store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
