"""
Schemas base reutilizáveis em toda a aplicação.
"""

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Schema base com configurações padrão."""
    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
    )


class ValueRecord(BaseSchema):
    """
    Registro de valor imutável.

    Alterações geram uma nova instância via model_copy(update=...).
    """
    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        frozen=True,
    )


class Decision(BaseModel):
    """
    Resultado de uma verificação de elegibilidade.

    Verificações nunca levantam exceção: a negativa vem com um motivo
    pronto para ser exibido ao usuário final.
    """
    allowed: bool
    reason: str | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def allow(cls) -> "Decision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> "Decision":
        return cls(allowed=False, reason=reason)
