"""
Tabela de políticas por role (prazo de empréstimo e limite de livros).

A tabela é um objeto explícito, injetado nos services. Só é substituída
por inteiro via replace(); não existe atualização parcial de campos.
"""

import threading
from collections.abc import Mapping
from functools import lru_cache

from library_policy.core.logging import get_logger
from library_policy.models.enums import UserRole
from library_policy.schemas.policy import RolePolicies, RolePolicy

logger = get_logger(__name__)

DEFAULT_ROLE_POLICIES: RolePolicies = {
    UserRole.PATRON: RolePolicy(loan_period_days=14, max_books=5),
    UserRole.LIBRARIAN: RolePolicy(loan_period_days=21, max_books=15),
    UserRole.ADMIN: RolePolicy(loan_period_days=30, max_books=20),
}


class RolePolicyStore:
    """
    Tabela mutável role -> RolePolicy.

    Leitores sempre veem uma tabela completa: replace() monta um dict novo
    e troca a referência sob um lock de escrita único.
    """

    def __init__(self, policies: Mapping[UserRole | str, RolePolicy | Mapping] | None = None):
        self._write_lock = threading.Lock()
        self._policies: RolePolicies = dict(DEFAULT_ROLE_POLICIES)
        if policies is not None:
            self.replace(policies)

    def replace(self, policies: Mapping[UserRole | str, RolePolicy | Mapping]) -> RolePolicies:
        """
        Substitui a tabela inteira.

        Args:
            policies: Mapeamento role -> política (RolePolicy ou dict)

        Returns:
            A nova tabela vigente

        Raises:
            ValueError: Role desconhecida
            pydantic.ValidationError: Política com valores inválidos
        """
        table: RolePolicies = {
            UserRole(role): policy if isinstance(policy, RolePolicy) else RolePolicy.model_validate(policy)
            for role, policy in policies.items()
        }
        with self._write_lock:
            self._policies = table

        logger.info(
            "Políticas por role atualizadas: "
            + ", ".join(f"{r.value}={p.loan_period_days}d/{p.max_books}" for r, p in table.items())
        )
        return dict(table)

    def reset(self) -> None:
        """Restaura as políticas padrão."""
        self.replace(DEFAULT_ROLE_POLICIES)

    def snapshot(self) -> RolePolicies:
        """Cópia da tabela vigente."""
        return dict(self._policies)

    def get_policy(self, role: UserRole | str) -> RolePolicy:
        """
        Política de uma role, com fallback para o padrão.

        Nunca falha para roles conhecidas: se a tabela vigente não tiver
        entrada, usa DEFAULT_ROLE_POLICIES.
        """
        role = UserRole(role)
        policy = self._policies.get(role)
        if policy is None:
            return DEFAULT_ROLE_POLICIES[role]
        return policy

    def get_loan_period(self, role: UserRole | str) -> int:
        """Prazo de empréstimo em dias para a role."""
        return self.get_policy(role).loan_period_days

    def get_max_books(self, role: UserRole | str) -> int:
        """Máximo de livros emprestados simultaneamente para a role."""
        return self.get_policy(role).max_books


@lru_cache
def get_policy_store() -> RolePolicyStore:
    """
    Retorna a tabela de políticas do processo.

    Usada como dependency na API; testes substituem via
    app.dependency_overrides.
    """
    return RolePolicyStore()
