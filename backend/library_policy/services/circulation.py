"""
Service para o ciclo de vida de empréstimos.

Opera sobre registros imutáveis: cada ação devolve novas instâncias e
quem chama é responsável por persisti-las. Toda ação refaz a verificação
de elegibilidade imediatamente antes de montar o novo registro.

Regras de negócio:
    - Prazo do empréstimo vem da política da role do membro
    - Renovação soma RENEWAL_PERIOD_DAYS ao vencimento atual
    - Devolução calcula multa por dia de atraso
    - Perda fixa a multa no custo de reposição (LOST_BOOK_FEE)
"""

import uuid
from collections.abc import Iterable
from datetime import datetime, timedelta
from decimal import Decimal

from library_policy.core.config import Settings, get_settings
from library_policy.core.logging import get_logger
from library_policy.models.enums import BookStatus, LoanStatus
from library_policy.schemas.base import Decision
from library_policy.schemas.book import BookRecord
from library_policy.schemas.loan import (
    CheckoutOutcome,
    LoanRecord,
    LostOutcome,
    RenewalOutcome,
    ReturnOutcome,
)
from library_policy.schemas.member import MemberProfile
from library_policy.services.checkout import check_checkout
from library_policy.services.fines import calculate_fine, get_days_late, get_due_date, is_overdue
from library_policy.services.policy import RolePolicyStore
from library_policy.services.renewal import check_renewal
from library_policy.utils.dates import resolve_now
from library_policy.utils.formatters import format_currency, format_date

logger = get_logger(__name__)


class CirculationService:
    """Service para emissão, renovação, devolução e perda de empréstimos."""

    def __init__(self, store: RolePolicyStore, settings: Settings | None = None):
        self.store = store
        self.settings = settings or get_settings()

    # ==========================================
    # Issue
    # ==========================================

    def issue(
        self,
        member: MemberProfile,
        book: BookRecord,
        loans: Iterable[LoanRecord] = (),
        *,
        now: datetime | None = None,
    ) -> CheckoutOutcome:
        """
        Emite um novo empréstimo.

        Fluxo:
            1. Verifica se há exemplar disponível
            2. Verifica multas, limite da role, atrasos e associação
            3. Cria LoanRecord com due_date = agora + prazo da role
            4. Devolve membro e livro atualizados

        Args:
            member: Membro que está pegando o livro
            book: Livro desejado
            loans: Empréstimos conhecidos, para checar atrasos
            now: Referência de "agora"

        Returns:
            CheckoutOutcome; em caso de negativa só decision é preenchido
        """
        if book.available_copies <= 0:
            return CheckoutOutcome(
                decision=Decision.deny(f'No copies of "{book.title}" are available.')
            )

        decision = check_checkout(
            member,
            loans,
            self.store,
            now=now,
            max_fine_threshold=self.settings.MAX_FINE_THRESHOLD,
        )
        if not decision.allowed:
            logger.info(f"Empréstimo negado para {member.id}: {decision.reason}")
            return CheckoutOutcome(decision=decision)

        issued_at = resolve_now(now)
        loan_period = self.store.get_loan_period(member.role)
        max_books = self.store.get_max_books(member.role)

        loan = LoanRecord(
            id=str(uuid.uuid4()),
            user_id=member.id,
            book_id=book.id or book.isbn,
            user_name=member.name,
            book_title=book.title,
            issue_date=issued_at,
            due_date=get_due_date(issued_at, loan_period),
            renew_count=0,
            fine=Decimal("0.00"),
            status=LoanStatus.ACTIVE,
        )

        available = book.available_copies - 1
        updated_book = book.model_copy(
            update={
                "available_copies": available,
                "status": BookStatus.AVAILABLE if available > 0 else BookStatus.BORROWED,
            }
        )
        updated_member = member.model_copy(
            update={
                "current_borrows": member.current_borrows + 1,
                "borrowing_limit": max_books,
            }
        )

        logger.info(
            f"Empréstimo {loan.id}: livro {loan.book_id} para {member.id}, "
            f"vence em {format_date(loan.due_date)}"
        )
        return CheckoutOutcome(
            decision=decision,
            loan=loan,
            member=updated_member,
            book=updated_book,
        )

    # ==========================================
    # Renew
    # ==========================================

    def renew(
        self,
        loan: LoanRecord,
        has_holds: bool = False,
        *,
        now: datetime | None = None,
    ) -> RenewalOutcome:
        """
        Renova um empréstimo.

        Ação:
            - due_date += RENEWAL_PERIOD_DAYS
            - renew_count += 1

        Args:
            loan: Empréstimo a renovar (estado mais recente)
            has_holds: Existe reserva pendente para o livro
            now: Referência de "agora" para recalcular o status

        Returns:
            RenewalOutcome; em caso de negativa o loan volta inalterado
        """
        decision = check_renewal(loan, has_holds, max_renewals=self.settings.MAX_RENEWALS)
        if not decision.allowed:
            return RenewalOutcome(decision=decision, loan=loan, message=decision.reason)

        previous_due_date = loan.due_date
        new_due_date = previous_due_date + timedelta(days=self.settings.RENEWAL_PERIOD_DAYS)
        status = LoanStatus.OVERDUE if is_overdue(new_due_date, now=now) else LoanStatus.ACTIVE

        renewed = loan.model_copy(
            update={
                "due_date": new_due_date,
                "renew_count": loan.renew_count + 1,
                "status": status,
            }
        )

        return RenewalOutcome(
            decision=decision,
            loan=renewed,
            previous_due_date=previous_due_date,
            new_due_date=new_due_date,
            message=f"Renewed until {format_date(new_due_date)}",
        )

    # ==========================================
    # Return
    # ==========================================

    def return_loan(
        self,
        loan: LoanRecord,
        *,
        return_date: datetime | None = None,
    ) -> ReturnOutcome:
        """
        Processa a devolução.

        Fluxo:
            1. Verifica se o empréstimo está em aberto
            2. Calcula multa (dias_atraso * FINE_RATE_PER_DAY)
            3. Marca status RETURNED, return_date e fine

        Args:
            loan: Empréstimo a devolver
            return_date: Momento da devolução (None = agora)
        """
        if not loan.is_open:
            return ReturnOutcome(
                decision=Decision.deny(f"Cannot return a loan with status '{loan.status.value}'."),
                loan=loan,
                days_late=0,
                fine_applied=Decimal("0.00"),
                message="Loan is not open.",
            )

        returned_at = resolve_now(return_date)
        days_late = get_days_late(loan.due_date, returned_at)
        fine = calculate_fine(
            loan.due_date,
            returned_at,
            rate_per_day=self.settings.FINE_RATE_PER_DAY,
            max_amount=self.settings.MAX_FINE_AMOUNT,
        )

        returned = loan.model_copy(
            update={
                "status": LoanStatus.RETURNED,
                "return_date": returned_at,
                "fine": fine,
            }
        )

        if fine > 0:
            message = f"Returned {days_late} day(s) late. Fine: {format_currency(fine)}"
        else:
            message = "Returned on time. No fine."

        return ReturnOutcome(
            decision=Decision.allow(),
            loan=returned,
            days_late=days_late,
            fine_applied=fine,
            message=message,
        )

    # ==========================================
    # Lost / status
    # ==========================================

    def mark_lost(self, loan: LoanRecord, *, replacement_cost: Decimal | None = None) -> LostOutcome:
        """
        Dá baixa no empréstimo como perdido.

        A multa passa a ser o custo de reposição, substituindo qualquer
        multa de atraso acumulada.
        """
        if not loan.is_open:
            return LostOutcome(
                decision=Decision.deny(f"Cannot mark a loan with status '{loan.status.value}' as lost."),
                loan=loan,
                message="Loan is not open.",
            )

        fine = replacement_cost if replacement_cost is not None else self.settings.LOST_BOOK_FEE
        lost = loan.model_copy(update={"status": LoanStatus.LOST, "fine": Decimal(fine)})

        logger.info(f"Empréstimo {loan.id} marcado como perdido, multa {fine}")
        return LostOutcome(
            decision=Decision.allow(),
            loan=lost,
            message=f"Marked as lost. Fine of {format_currency(fine)} applied.",
        )

    @staticmethod
    def refresh_status(loan: LoanRecord, *, now: datetime | None = None) -> LoanRecord:
        """Empréstimo ativo com vencimento passado vira OVERDUE."""
        if loan.status == LoanStatus.ACTIVE and is_overdue(loan.due_date, now=now):
            return loan.model_copy(update={"status": LoanStatus.OVERDUE})
        return loan
