"""
Normalização de datas.

Todas as comparações são feitas em datetime naive em UTC. Datas sem hora
("2024-01-01") representam meia-noite UTC.
"""

import math
from datetime import date, datetime, timezone

SECONDS_PER_DAY = 86400

DateLike = date | datetime | str


def utcnow() -> datetime:
    """Data/hora atual em UTC, sem tzinfo."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_utc_naive(value: DateLike) -> datetime:
    """
    Converte date, datetime ou string ISO para datetime naive em UTC.

    Args:
        value: Data a normalizar

    Returns:
        datetime sem tzinfo, em UTC

    Raises:
        ValueError: String em formato não reconhecido
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    return datetime(value.year, value.month, value.day)


def ceil_days_between(start: DateLike, end: DateLike) -> int:
    """
    Diferença com sinal em dias entre duas datas, arredondada para cima.

    Qualquer fração de dia conta como um dia inteiro: um segundo após
    a meia-noite já é 1 dia.
    """
    delta = to_utc_naive(end) - to_utc_naive(start)
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


def resolve_now(now: DateLike | None = None) -> datetime:
    """Retorna `now` normalizado, ou o instante atual se ausente."""
    return to_utc_naive(now) if now is not None else utcnow()
