"""
Schemas Pydantic para membros e status de associação.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from library_policy.models.enums import ExpiryWarningLevel, UserRole
from library_policy.schemas.base import BaseSchema, ValueRecord


class MemberProfile(ValueRecord):
    """
    Perfil de circulação de um membro.

    borrowing_limit é derivado da política da role; quando presente é
    apenas informativo, as verificações sempre consultam a tabela de
    políticas vigente.
    """
    id: str
    name: str | None = None
    email: str | None = None
    role: UserRole = UserRole.PATRON
    current_borrows: int = Field(0, ge=0)
    borrowing_limit: int | None = Field(None, ge=0)
    fines_owed: Decimal = Field(Decimal("0.00"), ge=0)
    membership_expiry: datetime | None = None

    @property
    def display_name(self) -> str:
        return self.name or "Member"


class MembershipStatusRequest(BaseSchema):
    """Entrada para avaliação de validade da associação."""
    membership_expiry: datetime | None = None


class MembershipStatus(BaseSchema):
    """Situação da associação em relação à data de vencimento."""
    expired: bool
    days_until_expiry: int | None = None
    warning_level: ExpiryWarningLevel
    expiry_display: str
