"""
Avaliação da validade da associação de um membro.

Faixas de alerta (dias até o vencimento):
    - < 0: expired
    - 0 a 7: critical
    - 8 a 30: warning
    - > 30: none
Associação sem data de vencimento nunca expira.
"""

from datetime import datetime

from library_policy.core.config import get_settings
from library_policy.models.enums import ExpiryWarningLevel
from library_policy.schemas.member import MembershipStatus
from library_policy.utils.dates import DateLike, ceil_days_between, resolve_now, to_utc_naive
from library_policy.utils.formatters import format_date


def is_membership_expired(expiry: DateLike | None = None, *, now: datetime | None = None) -> bool:
    """Retorna True se a associação já venceu (False se não há vencimento)."""
    if not expiry:
        return False
    return to_utc_naive(expiry) < resolve_now(now)


def get_days_until_expiry(expiry: DateLike | None = None, *, now: datetime | None = None) -> int | None:
    """Dias até o vencimento, com sinal; None se não há vencimento."""
    if not expiry:
        return None
    return ceil_days_between(resolve_now(now), expiry)


def get_expiry_warning_level(
    expiry: DateLike | None = None,
    *,
    now: datetime | None = None,
) -> ExpiryWarningLevel:
    """
    Classifica o vencimento em um nível de alerta.

    Os limites 7 e 30 são inclusivos (EXPIRY_CRITICAL_DAYS e
    EXPIRY_WARNING_DAYS).
    """
    days = get_days_until_expiry(expiry, now=now)
    if days is None:
        return ExpiryWarningLevel.NONE

    settings = get_settings()
    if days < 0:
        return ExpiryWarningLevel.EXPIRED
    if days <= settings.EXPIRY_CRITICAL_DAYS:
        return ExpiryWarningLevel.CRITICAL
    if days <= settings.EXPIRY_WARNING_DAYS:
        return ExpiryWarningLevel.WARNING
    return ExpiryWarningLevel.NONE


def format_expiry_date(expiry: DateLike | None = None) -> str:
    """Data de vencimento para exibição, ou "No expiry"."""
    if not expiry:
        return "No expiry"
    return format_date(to_utc_naive(expiry))


def get_membership_status(expiry: DateLike | None = None, *, now: datetime | None = None) -> MembershipStatus:
    """Agrupa expiração, dias restantes e nível de alerta."""
    return MembershipStatus(
        expired=is_membership_expired(expiry, now=now),
        days_until_expiry=get_days_until_expiry(expiry, now=now),
        warning_level=get_expiry_warning_level(expiry, now=now),
        expiry_display=format_expiry_date(expiry),
    )
