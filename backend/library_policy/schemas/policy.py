"""
Schemas Pydantic para política por role.
"""

from pydantic import Field

from library_policy.models.enums import UserRole
from library_policy.schemas.base import ValueRecord


class RolePolicy(ValueRecord):
    """Prazo de empréstimo e limite de livros simultâneos de uma role."""
    loan_period_days: int = Field(..., ge=1, le=365, examples=[14])
    max_books: int = Field(..., ge=1, le=1000, examples=[5])


# Tabela completa role -> política, usada na substituição integral
RolePolicies = dict[UserRole, RolePolicy]
