"""
Configuração de logging da aplicação.

Nível do pacote library_policy vem de LOG_LEVEL. Loggers ruidosos
(acesso HTTP e resumo de cada importação CSV) ficam em WARNING fora
do modo debug.
"""

import logging
import sys
from collections.abc import Iterable
from typing import Optional

from library_policy.core.config import get_settings

APP_LOGGER = "library_policy"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

NOISY_LOGGERS: tuple[str, ...] = (
    "uvicorn.access",
    "httpx",
    "library_policy.services.importer",
)


def setup_logging(level: Optional[str] = None, quiet: Optional[Iterable[str]] = None) -> None:
    """
    Configura o logging da aplicação.

    Args:
        level: Nível do pacote library_policy. Se não fornecido, usa LOG_LEVEL
        quiet: Loggers rebaixados para WARNING (padrão NOISY_LOGGERS).
            Ignorado com DEBUG=True.
    """
    settings = get_settings()
    log_level = (level or settings.LOG_LEVEL).upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.WARNING)

    # Remove handlers existentes para evitar duplicação
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    logging.getLogger(APP_LOGGER).setLevel(log_level)

    if not settings.DEBUG:
        for name in NOISY_LOGGERS if quiet is None else quiet:
            logging.getLogger(name).setLevel(logging.WARNING)

    get_logger(__name__).info(f"Logging de {settings.APP_NAME} configurado com nível {log_level}")


def get_logger(name: str) -> logging.Logger:
    """
    Retorna o logger do módulo.

    Args:
        name: Nome do módulo (geralmente __name__)
    """
    return logging.getLogger(name)
