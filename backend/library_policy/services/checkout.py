"""
Elegibilidade para novos empréstimos.

Regras de negócio (na ordem em que são verificadas):
    1. Multas acima de MAX_FINE_THRESHOLD bloqueiam
    2. Limite de livros da role atingido bloqueia
    3. Empréstimo atrasado em aberto bloqueia
    4. Associação vencida bloqueia
A primeira regra que falhar define o motivo devolvido.
"""

from collections.abc import Iterable
from datetime import datetime
from decimal import Decimal

from library_policy.core.config import get_settings
from library_policy.models.enums import LoanStatus
from library_policy.schemas.base import Decision
from library_policy.schemas.loan import LoanRecord
from library_policy.schemas.member import MemberProfile
from library_policy.services.fines import is_overdue
from library_policy.services.membership import is_membership_expired
from library_policy.services.policy import RolePolicyStore
from library_policy.utils.formatters import format_amount


def can_checkout(
    member: MemberProfile,
    store: RolePolicyStore,
    *,
    max_fine_threshold: Decimal | None = None,
) -> Decision:
    """
    Verifica multas e limite de livros do membro.

    Multas são verificadas antes do limite: se as duas condições
    valem, o motivo reportado é o das multas.

    Args:
        member: Perfil do membro
        store: Tabela de políticas vigente
        max_fine_threshold: Saldo máximo permitido (padrão MAX_FINE_THRESHOLD)

    Returns:
        Decision com allowed e motivo da negativa
    """
    if max_fine_threshold is None:
        max_fine_threshold = get_settings().MAX_FINE_THRESHOLD

    if member.fines_owed > max_fine_threshold:
        return Decision.deny(
            f"Excessive fines ({format_amount(member.fines_owed)} owed, "
            f"limit {format_amount(max_fine_threshold)}). Please pay before checking out."
        )

    max_books = store.get_max_books(member.role)
    if member.current_borrows >= max_books:
        return Decision.deny(
            f"Borrowing limit reached ({member.current_borrows}/{max_books} books)."
        )

    return Decision.allow()


def has_overdue_loan(
    member_id: str,
    loans: Iterable[LoanRecord],
    *,
    now: datetime | None = None,
) -> bool:
    """
    Retorna True se o membro tem empréstimo atrasado em aberto.

    Considera tanto loans já marcados OVERDUE quanto ACTIVE com
    vencimento passado.
    """
    for loan in loans:
        if loan.user_id != member_id:
            continue
        if loan.status == LoanStatus.OVERDUE:
            return True
        if loan.status == LoanStatus.ACTIVE and is_overdue(loan.due_date, now=now):
            return True
    return False


def check_checkout(
    member: MemberProfile,
    loans: Iterable[LoanRecord],
    store: RolePolicyStore,
    *,
    now: datetime | None = None,
    max_fine_threshold: Decimal | None = None,
) -> Decision:
    """
    Cadeia completa de pré-condições para um novo empréstimo.

    Args:
        member: Perfil do membro
        loans: Empréstimos conhecidos (de qualquer membro)
        store: Tabela de políticas vigente
        now: Referência de "agora"
        max_fine_threshold: Saldo máximo permitido (padrão MAX_FINE_THRESHOLD)

    Returns:
        Primeira negativa encontrada, ou Decision permitida
    """
    decision = can_checkout(member, store, max_fine_threshold=max_fine_threshold)
    if not decision.allowed:
        return decision

    if has_overdue_loan(member.id, loans, now=now):
        return Decision.deny(
            f"{member.display_name} has overdue books. "
            "Please return them before issuing new books."
        )

    if is_membership_expired(member.membership_expiry, now=now):
        return Decision.deny(
            f"{member.display_name}'s membership has expired. "
            "Please renew membership before issuing books."
        )

    return Decision.allow()
