"""
Configuração centralizada da aplicação via Pydantic Settings.

Carrega variáveis de ambiente do arquivo .env e valida tipos automaticamente.
Todos os valores monetários estão na unidade base; a conversão para a moeda
de exibição acontece apenas na formatação (ver utils.formatters).
"""

from decimal import Decimal
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configurações da aplicação carregadas de variáveis de ambiente.

    Attributes:
        APP_NAME: Nome da aplicação exibido na documentação
        DEBUG: Habilita modo debug (não usar em produção)
        ENVIRONMENT: Ambiente atual (development, staging, production)
        LOG_LEVEL: Nível de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        FINE_RATE_PER_DAY: Multa por dia de atraso
        MAX_FINE_AMOUNT: Teto opcional da multa por empréstimo
        MAX_FINE_THRESHOLD: Saldo de multas acima do qual o empréstimo é bloqueado
        MAX_RENEWALS: Número máximo de renovações por empréstimo
        LOAN_PERIOD_DAYS: Prazo padrão de empréstimo
        RENEWAL_PERIOD_DAYS: Dias adicionados ao vencimento em cada renovação
        LOST_BOOK_FEE: Custo de reposição aplicado a livro perdido
        CURRENCY_SYMBOL: Símbolo da moeda de exibição
        CURRENCY_RATE: Taxa fixa unidade base -> moeda de exibição
        EXPIRY_CRITICAL_DAYS: Dias restantes de associação para alerta crítico
        EXPIRY_WARNING_DAYS: Dias restantes de associação para aviso
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "Library Circulation API"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Fines
    FINE_RATE_PER_DAY: Decimal = Decimal("50.00")
    MAX_FINE_AMOUNT: Decimal | None = None
    MAX_FINE_THRESHOLD: Decimal = Decimal("2500.00")
    LOST_BOOK_FEE: Decimal = Decimal("25.00")

    # Circulation
    MAX_RENEWALS: int = 2
    LOAN_PERIOD_DAYS: int = 14
    RENEWAL_PERIOD_DAYS: int = 14

    # Currency
    CURRENCY_SYMBOL: str = "Rs."
    CURRENCY_RATE: Decimal = Decimal("280")

    # Membership
    EXPIRY_CRITICAL_DAYS: int = 7
    EXPIRY_WARNING_DAYS: int = 30

    @property
    def is_production(self) -> bool:
        """Verifica se está em ambiente de produção."""
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Retorna instância cacheada das configurações.

    Usa lru_cache para evitar recarregar .env em cada chamada.
    """
    return Settings()
