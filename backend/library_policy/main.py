"""
Ponto de entrada da aplicação FastAPI.

Este módulo configura a aplicação FastAPI, inclui rotas e define
handlers de ciclo de vida (startup/shutdown).
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from library_policy import __version__
from library_policy.api.v1.router import api_router
from library_policy.core.config import get_settings
from library_policy.core.logging import get_logger, setup_logging
from library_policy.schemas.health import HealthResponse
from library_policy.services.policy import get_policy_store

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Gerencia o ciclo de vida da aplicação.

    Startup:
        - Configura logging
        - Carrega a tabela de políticas com os valores padrão
    """
    setup_logging()
    logger.info(f"Iniciando {settings.APP_NAME} em ambiente {settings.ENVIRONMENT}")

    store = get_policy_store()
    logger.info(f"Políticas por role carregadas: {sorted(r.value for r in store.snapshot())}")

    yield

    logger.info(f"Encerrando {settings.APP_NAME}")


app = FastAPI(
    title=settings.APP_NAME,
    description="API de políticas de circulação: empréstimos, renovações, multas e importação de acervo",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.include_router(api_router)


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Verifica status da aplicação",
)
async def health_check() -> HealthResponse:
    """
    Endpoint de healthcheck para monitoramento.

    Retorna status da aplicação, nome e ambiente.
    """
    return HealthResponse(
        status="healthy",
        app_name=settings.APP_NAME,
        environment=settings.ENVIRONMENT,
    )
