"""
Dependencies FastAPI para injeção da tabela de políticas e services.
"""

from typing import Annotated

from fastapi import Depends

from library_policy.core.config import Settings, get_settings
from library_policy.services.circulation import CirculationService
from library_policy.services.policy import RolePolicyStore, get_policy_store


def get_circulation_service(
    store: Annotated[RolePolicyStore, Depends(get_policy_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> CirculationService:
    """Service de circulação ligado à tabela de políticas vigente."""
    return CirculationService(store, settings)


# Type aliases para uso nos endpoints
PolicyStore = Annotated[RolePolicyStore, Depends(get_policy_store)]
AppSettings = Annotated[Settings, Depends(get_settings)]
Circulation = Annotated[CirculationService, Depends(get_circulation_service)]
