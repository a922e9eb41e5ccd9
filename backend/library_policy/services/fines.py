"""
Cálculo de multas e prazos de devolução.

Regras de negócio:
    - Devolução no dia do vencimento (ou antes) não gera multa
    - Cada fração de dia de atraso conta como um dia inteiro
    - Multa = dias_atraso * FINE_RATE_PER_DAY, com teto opcional
    - Valores sempre na unidade base, arredondados em 2 casas
"""

from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal

from library_policy.core.config import get_settings
from library_policy.models.enums import RateType
from library_policy.schemas.fee import FeeStructure
from library_policy.utils.dates import DateLike, ceil_days_between, resolve_now, to_utc_naive

CENTS = Decimal("0.01")


def _round(amount: Decimal) -> Decimal:
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def get_days_late(due_date: DateLike, return_date: DateLike | None = None, *, now: datetime | None = None) -> int:
    """
    Dias de atraso de uma devolução (0 se não atrasada).

    Args:
        due_date: Data de vencimento
        return_date: Data de devolução (None = agora)
        now: Referência de "agora" (injeção para testes)
    """
    returned = return_date if return_date is not None else resolve_now(now)
    return max(0, ceil_days_between(due_date, returned))


def calculate_fine(
    due_date: DateLike,
    return_date: DateLike | None = None,
    *,
    now: datetime | None = None,
    rate_per_day: Decimal | None = None,
    max_amount: Decimal | None = None,
) -> Decimal:
    """
    Calcula multa por atraso.

    Args:
        due_date: Data de vencimento
        return_date: Data de devolução (None = agora)
        now: Referência de "agora" quando return_date é None
        rate_per_day: Valor por dia (padrão FINE_RATE_PER_DAY)
        max_amount: Teto da multa (padrão MAX_FINE_AMOUNT)

    Returns:
        Valor da multa com 2 casas decimais (0 se não atrasado)
    """
    settings = get_settings()
    if rate_per_day is None:
        rate_per_day = settings.FINE_RATE_PER_DAY
    if max_amount is None:
        max_amount = settings.MAX_FINE_AMOUNT

    days_late = get_days_late(due_date, return_date, now=now)
    if days_late <= 0:
        return _round(Decimal("0"))

    amount = Decimal(days_late) * Decimal(rate_per_day)
    if max_amount is not None:
        amount = min(amount, Decimal(max_amount))
    return _round(amount)


def calculate_fee(
    structure: FeeStructure,
    *,
    days_late: int = 0,
    item_cost: Decimal | None = None,
) -> Decimal:
    """
    Aplica uma estrutura de taxa configurada.

    Args:
        structure: Regra de cobrança
        days_late: Dias de atraso (usado em PER_DAY)
        item_cost: Valor do item (usado em PERCENTAGE)

    Returns:
        Valor cobrado, limitado por max_amount; 0 se a regra estiver inativa
    """
    if not structure.is_active:
        return _round(Decimal("0"))

    if structure.rate_type == RateType.PER_DAY:
        amount = structure.rate * max(0, days_late)
    elif structure.rate_type == RateType.FIXED:
        amount = structure.rate
    else:
        amount = (item_cost or Decimal("0")) * structure.rate / Decimal("100")

    if structure.max_amount is not None:
        amount = min(amount, structure.max_amount)
    return _round(amount)


def get_due_date(issue_date: DateLike | None = None, loan_period_days: int | None = None) -> datetime:
    """
    Data de vencimento a partir da data de emissão.

    Args:
        issue_date: Data de emissão (None = agora)
        loan_period_days: Prazo em dias (padrão LOAN_PERIOD_DAYS)
    """
    if loan_period_days is None:
        loan_period_days = get_settings().LOAN_PERIOD_DAYS
    issued = resolve_now(issue_date)
    return issued + timedelta(days=loan_period_days)


def is_overdue(due_date: DateLike, *, now: datetime | None = None) -> bool:
    """Retorna True se o vencimento já passou."""
    return to_utc_naive(due_date) < resolve_now(now)


def get_days_until_due(due_date: DateLike, *, now: datetime | None = None) -> int:
    """
    Dias até o vencimento, com sinal (negativo = atrasado).

    Arredonda para cima: faltando 2 horas retorna 1.
    """
    return ceil_days_between(resolve_now(now), due_date)
