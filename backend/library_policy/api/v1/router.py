"""
Router principal da API v1.

Inclui todos os routers de endpoints.
"""

from fastapi import APIRouter

from library_policy.api.v1.circulation import router as circulation_router
from library_policy.api.v1.imports import router as imports_router
from library_policy.api.v1.members import router as members_router
from library_policy.api.v1.settings import router as settings_router

api_router = APIRouter(prefix="/api/v1")

api_router.include_router(circulation_router)
api_router.include_router(members_router)
api_router.include_router(imports_router)
api_router.include_router(settings_router)
