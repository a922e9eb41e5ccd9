"""
Endpoints de Circulação.

Contratos:
    - POST /circulation/checkout/eligibility: Verifica se o membro pode pegar livro
    - POST /circulation/renewal/eligibility: Verifica se o empréstimo pode ser renovado
    - POST /circulation/fines/calculate: Calcula multa por atraso
    - POST /circulation/loans/issue: Emite empréstimo
    - POST /circulation/loans/renew: Renova empréstimo
    - POST /circulation/loans/return: Devolve livro
    - POST /circulation/loans/lost: Dá baixa por perda

Os endpoints de elegibilidade sempre respondem 200 com {allowed, reason}.
As ações respondem 400 com o motivo da negativa em `detail`.

Status codes:
    - 200: Sucesso
    - 201: Empréstimo criado
    - 400: Regra de negócio impediu a ação
    - 422: Dados inválidos
"""

from fastapi import APIRouter, HTTPException, status

from library_policy.core.deps import AppSettings, Circulation, PolicyStore
from library_policy.core.logging import get_logger
from library_policy.schemas.base import Decision
from library_policy.schemas.loan import (
    CheckoutEligibilityRequest,
    CheckoutOutcome,
    FineCalculationRequest,
    FineCalculationResponse,
    LoanIssueRequest,
    LoanLostRequest,
    LoanRenewRequest,
    LoanReturnRequest,
    LostOutcome,
    RenewalEligibilityRequest,
    RenewalOutcome,
    ReturnOutcome,
)
from library_policy.services.checkout import check_checkout
from library_policy.services.fines import calculate_fine, get_days_late
from library_policy.services.renewal import renewal_decision
from library_policy.utils.formatters import format_currency

router = APIRouter(prefix="/circulation", tags=["Circulation"])
logger = get_logger(__name__)


def _raise_denied(decision: Decision) -> None:
    if not decision.allowed:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=decision.reason,
        )


# ==========================================
# Elegibilidade
# ==========================================

@router.post(
    "/checkout/eligibility",
    response_model=Decision,
    summary="Verificar elegibilidade para empréstimo",
)
async def checkout_eligibility(
    data: CheckoutEligibilityRequest,
    store: PolicyStore,
    settings: AppSettings,
) -> Decision:
    """
    Aplica, em ordem: multas, limite da role, atrasos e associação vencida.

    A primeira regra que falhar define o motivo.
    """
    return check_checkout(
        data.member,
        data.loans,
        store,
        max_fine_threshold=settings.MAX_FINE_THRESHOLD,
    )


@router.post(
    "/renewal/eligibility",
    response_model=Decision,
    summary="Verificar elegibilidade para renovação",
)
async def renewal_eligibility(data: RenewalEligibilityRequest, settings: AppSettings) -> Decision:
    """Renovação exige renovações sobrando e nenhuma reserva pendente."""
    return renewal_decision(data.renew_count, data.has_holds, max_renewals=settings.MAX_RENEWALS)


@router.post(
    "/fines/calculate",
    response_model=FineCalculationResponse,
    summary="Calcular multa por atraso",
)
async def fines_calculate(data: FineCalculationRequest) -> FineCalculationResponse:
    """Multa na unidade base e formatada na moeda de exibição."""
    amount = calculate_fine(data.due_date, data.return_date)
    return FineCalculationResponse(
        days_late=get_days_late(data.due_date, data.return_date),
        amount=amount,
        formatted=format_currency(amount),
    )


# ==========================================
# Ações
# ==========================================

@router.post(
    "/loans/issue",
    response_model=CheckoutOutcome,
    status_code=status.HTTP_201_CREATED,
    summary="Emitir empréstimo",
)
async def issue_loan(data: LoanIssueRequest, service: Circulation) -> CheckoutOutcome:
    """
    Emite empréstimo e devolve membro e livro atualizados.

    Raises:
        400: Sem exemplar disponível, multas, limite, atraso ou associação vencida
    """
    outcome = service.issue(data.member, data.book, data.loans)
    _raise_denied(outcome.decision)
    return outcome


@router.post(
    "/loans/renew",
    response_model=RenewalOutcome,
    summary="Renovar empréstimo",
)
async def renew_loan(data: LoanRenewRequest, service: Circulation) -> RenewalOutcome:
    """
    Renova o empréstimo somando o período de renovação ao vencimento.

    Raises:
        400: Limite de renovações, reserva pendente ou empréstimo encerrado
    """
    outcome = service.renew(data.loan, data.has_holds)
    _raise_denied(outcome.decision)
    return outcome


@router.post(
    "/loans/return",
    response_model=ReturnOutcome,
    summary="Devolver livro",
)
async def return_loan(data: LoanReturnRequest, service: Circulation) -> ReturnOutcome:
    """
    Registra a devolução e calcula a multa.

    Raises:
        400: Empréstimo já encerrado
    """
    outcome = service.return_loan(data.loan, return_date=data.return_date)
    _raise_denied(outcome.decision)
    if outcome.fine_applied > 0:
        logger.info(f"Devolução com multa: loan {data.loan.id}, {outcome.fine_applied}")
    return outcome


@router.post(
    "/loans/lost",
    response_model=LostOutcome,
    summary="Marcar livro como perdido",
)
async def mark_lost(data: LoanLostRequest, service: Circulation) -> LostOutcome:
    """
    Fixa a multa no custo de reposição.

    Raises:
        400: Empréstimo já encerrado
    """
    outcome = service.mark_lost(data.loan, replacement_cost=data.replacement_cost)
    _raise_denied(outcome.decision)
    return outcome
