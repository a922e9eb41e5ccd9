"""
Endpoints de configuração das políticas por role.

Contratos:
    - GET /settings/role-policies: Tabela vigente
    - PUT /settings/role-policies: Substitui a tabela inteira

Não existe atualização parcial: o corpo do PUT é sempre o mapeamento
completo role -> {loan_period_days, max_books}.

Status codes:
    - 200: Sucesso
    - 422: Role ou valores inválidos
"""

from fastapi import APIRouter

from library_policy.core.deps import PolicyStore
from library_policy.schemas.policy import RolePolicies

router = APIRouter(prefix="/settings", tags=["Settings"])


@router.get(
    "/role-policies",
    response_model=RolePolicies,
    summary="Consultar políticas por role",
)
async def get_role_policies(store: PolicyStore) -> RolePolicies:
    """Retorna prazo e limite de livros de cada role."""
    return store.snapshot()


@router.put(
    "/role-policies",
    response_model=RolePolicies,
    summary="Substituir políticas por role",
    description="Substitui a tabela inteira. Roles ausentes passam a usar o padrão.",
)
async def replace_role_policies(data: RolePolicies, store: PolicyStore) -> RolePolicies:
    """Substitui a tabela de políticas."""
    return store.replace(data)
