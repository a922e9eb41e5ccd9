"""
Schemas Pydantic para estrutura de taxas.
"""

from decimal import Decimal

from pydantic import Field

from library_policy.models.enums import FeeType, RateType
from library_policy.schemas.base import ValueRecord


class FeeStructure(ValueRecord):
    """
    Regra de cobrança configurável.

    Attributes:
        type: Tipo da taxa (atraso, perda, dano, processamento)
        name: Nome exibido
        rate: Valor por dia, valor fixo ou percentual conforme rate_type
        rate_type: per_day, fixed ou percentage
        max_amount: Teto opcional do valor cobrado
        is_active: Taxas inativas nunca cobram
    """
    id: str | None = None
    type: FeeType = FeeType.OVERDUE
    name: str = Field(..., min_length=1, max_length=100)
    rate: Decimal = Field(..., ge=0)
    rate_type: RateType = RateType.PER_DAY
    max_amount: Decimal | None = Field(None, ge=0)
    is_active: bool = True
