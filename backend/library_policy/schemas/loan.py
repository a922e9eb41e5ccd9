"""
Schemas Pydantic para Loan (empréstimo).
"""

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from library_policy.models.enums import LoanStatus
from library_policy.schemas.base import BaseSchema, Decision, ValueRecord
from library_policy.schemas.book import BookRecord
from library_policy.schemas.member import MemberProfile


class LoanRecord(ValueRecord):
    """
    Empréstimo de um livro para um membro.

    Regras:
        - renew_count nunca passa de MAX_RENEWALS
        - status LOST implica multa fixa no custo de reposição
        - fine está sempre na unidade base
    """
    id: str
    user_id: str
    book_id: str
    user_name: str | None = None
    book_title: str | None = None
    issue_date: datetime
    due_date: datetime
    return_date: datetime | None = None
    renew_count: int = Field(0, ge=0)
    fine: Decimal = Field(Decimal("0.00"), ge=0)
    fine_paid: bool = False
    status: LoanStatus = LoanStatus.ACTIVE

    @property
    def is_open(self) -> bool:
        """True enquanto o livro está com o membro (ativo ou atrasado)."""
        return self.status in (LoanStatus.ACTIVE, LoanStatus.OVERDUE)


# ==========================================
# Resultados das ações de circulação
# ==========================================

class CheckoutOutcome(BaseSchema):
    """Resultado da emissão de um empréstimo."""
    decision: Decision
    loan: LoanRecord | None = None
    member: MemberProfile | None = None
    book: BookRecord | None = None


class RenewalOutcome(BaseSchema):
    """Resultado de uma renovação."""
    decision: Decision
    loan: LoanRecord
    previous_due_date: datetime | None = None
    new_due_date: datetime | None = None
    message: str


class ReturnOutcome(BaseSchema):
    """Resultado de uma devolução."""
    decision: Decision
    loan: LoanRecord
    days_late: int
    fine_applied: Decimal = Field(..., description="Multa aplicada (pode ser 0)")
    message: str


class LostOutcome(BaseSchema):
    """Resultado da baixa por perda."""
    decision: Decision
    loan: LoanRecord
    message: str


# ==========================================
# Requests da API
# ==========================================

class CheckoutEligibilityRequest(BaseSchema):
    """Membro e seus empréstimos para verificação de elegibilidade."""
    member: MemberProfile
    loans: list[LoanRecord] = Field(default_factory=list)


class RenewalEligibilityRequest(BaseSchema):
    renew_count: int = Field(..., ge=0)
    has_holds: bool = False


class FineCalculationRequest(BaseSchema):
    due_date: datetime
    return_date: datetime | None = None


class FineCalculationResponse(BaseSchema):
    """Multa calculada, na unidade base e formatada para exibição."""
    days_late: int
    amount: Decimal
    formatted: str


class LoanIssueRequest(BaseSchema):
    member: MemberProfile
    book: BookRecord
    loans: list[LoanRecord] = Field(default_factory=list)


class LoanRenewRequest(BaseSchema):
    loan: LoanRecord
    has_holds: bool = False


class LoanReturnRequest(BaseSchema):
    loan: LoanRecord
    return_date: datetime | None = None


class LoanLostRequest(BaseSchema):
    loan: LoanRecord
    replacement_cost: Decimal | None = Field(None, ge=0)
