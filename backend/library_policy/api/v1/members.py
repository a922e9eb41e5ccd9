"""
Endpoints de Membros.

Contratos:
    - POST /members/membership-status: Situação de vencimento da associação

Status codes:
    - 200: Sucesso
    - 422: Data inválida
"""

from fastapi import APIRouter

from library_policy.schemas.member import MembershipStatus, MembershipStatusRequest
from library_policy.services.membership import get_membership_status

router = APIRouter(prefix="/members", tags=["Members"])


@router.post(
    "/membership-status",
    response_model=MembershipStatus,
    summary="Avaliar vencimento da associação",
)
async def membership_status(data: MembershipStatusRequest) -> MembershipStatus:
    """
    Classifica o vencimento em none, warning, critical ou expired.

    Associação sem data de vencimento nunca expira.
    """
    return get_membership_status(data.membership_expiry)
