"""
Enums utilizados nos models da aplicação.
"""

import enum


class UserRole(str, enum.Enum):
    """Roles de usuário no sistema."""
    ADMIN = "admin"
    LIBRARIAN = "librarian"
    PATRON = "patron"


class LoanStatus(str, enum.Enum):
    """
    Status de um empréstimo.

    Fluxo típico:
        ACTIVE -> RETURNED (devolvido)
        ACTIVE -> OVERDUE -> RETURNED (devolvido com atraso)
        ACTIVE/OVERDUE -> LOST (multa fixa = custo de reposição)
    """
    ACTIVE = "active"
    RETURNED = "returned"
    OVERDUE = "overdue"
    LOST = "lost"


class BookStatus(str, enum.Enum):
    """Status de um título no acervo."""
    AVAILABLE = "available"
    BORROWED = "borrowed"
    RESERVED = "reserved"
    LOST = "lost"
    DAMAGED = "damaged"


class ReservationStatus(str, enum.Enum):
    """
    Status de uma reserva.

    Somente reservas PENDING bloqueiam a renovação do empréstimo atual.
    """
    PENDING = "pending"      # Na fila
    READY = "ready"          # Exemplar separado para retirada
    CANCELLED = "cancelled"
    FULFILLED = "fulfilled"


class ExpiryWarningLevel(str, enum.Enum):
    """Nível de alerta de vencimento da associação."""
    NONE = "none"
    WARNING = "warning"
    CRITICAL = "critical"
    EXPIRED = "expired"


class FeeType(str, enum.Enum):
    """Tipos de taxa cobrados pela biblioteca."""
    OVERDUE = "overdue"
    LOST = "lost"
    DAMAGED = "damaged"
    PROCESSING = "processing"


class RateType(str, enum.Enum):
    """Forma de cálculo de uma taxa."""
    PER_DAY = "per_day"
    FIXED = "fixed"
    PERCENTAGE = "percentage"
