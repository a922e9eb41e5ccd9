"""
Elegibilidade para renovação de empréstimos.

Regras de negócio:
    - renew_count < MAX_RENEWALS
    - Nenhuma reserva PENDING para o livro (reservas sempre prevalecem,
      mesmo com renovações sobrando)
    - Empréstimo devolvido ou perdido não pode ser renovado
"""

from collections.abc import Iterable

from library_policy.core.config import get_settings
from library_policy.models.enums import ReservationStatus
from library_policy.schemas.base import Decision
from library_policy.schemas.loan import LoanRecord
from library_policy.schemas.reservation import Reservation


def can_renew(renew_count: int, has_holds: bool = False, *, max_renewals: int | None = None) -> bool:
    """
    Retorna True se o empréstimo pode ser renovado.

    Args:
        renew_count: Renovações já realizadas
        has_holds: Existe reserva pendente para o livro
        max_renewals: Limite de renovações (padrão MAX_RENEWALS)
    """
    if max_renewals is None:
        max_renewals = get_settings().MAX_RENEWALS
    return renew_count < max_renewals and not has_holds


def has_pending_holds(book_id: str, reservations: Iterable[Reservation]) -> bool:
    """Retorna True se há reserva PENDING na fila do livro."""
    return any(
        r.book_id == book_id and r.status == ReservationStatus.PENDING
        for r in reservations
    )


def renewal_decision(
    renew_count: int,
    has_holds: bool = False,
    *,
    max_renewals: int | None = None,
) -> Decision:
    """
    Mesma regra de can_renew, com motivo para exibição.

    Reservas pendentes são reportadas antes do limite de renovações.
    """
    if max_renewals is None:
        max_renewals = get_settings().MAX_RENEWALS

    if has_holds:
        return Decision.deny("Cannot renew: there are pending holds for this book.")

    if not can_renew(renew_count, has_holds, max_renewals=max_renewals):
        return Decision.deny(f"Maximum renewals reached ({renew_count}/{max_renewals}).")

    return Decision.allow()


def check_renewal(
    loan: LoanRecord,
    has_holds: bool = False,
    *,
    max_renewals: int | None = None,
) -> Decision:
    """
    Verifica a renovação de um empréstimo com motivo para exibição.

    Args:
        loan: Empréstimo a renovar
        has_holds: Existe reserva pendente para o livro
        max_renewals: Limite de renovações (padrão MAX_RENEWALS)
    """
    if not loan.is_open:
        return Decision.deny(f"Cannot renew a loan with status '{loan.status.value}'.")

    return renewal_decision(loan.renew_count, has_holds, max_renewals=max_renewals)
