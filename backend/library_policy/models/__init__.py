"""
Enums de domínio compartilhados por schemas e services.
"""

from library_policy.models.enums import (
    BookStatus,
    ExpiryWarningLevel,
    FeeType,
    LoanStatus,
    RateType,
    ReservationStatus,
    UserRole,
)

__all__ = [
    "BookStatus",
    "ExpiryWarningLevel",
    "FeeType",
    "LoanStatus",
    "RateType",
    "ReservationStatus",
    "UserRole",
]
