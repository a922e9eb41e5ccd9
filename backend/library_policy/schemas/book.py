"""
Schemas Pydantic para livros e importação em lote.
"""

from datetime import date

from pydantic import Field, model_validator

from library_policy.models.enums import BookStatus
from library_policy.schemas.base import BaseSchema, ValueRecord


class BookRecord(ValueRecord):
    """
    Livro normalizado do acervo.

    Invariante: available_copies <= total_copies. Na importação os dois
    valores são sempre iguais.
    """
    id: str | None = None
    title: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)
    isbn: str = Field(..., min_length=1)
    category: str = "Uncategorized"
    genre: str = ""
    publisher: str = ""
    publish_year: int
    description: str = ""
    total_copies: int = Field(1, ge=1)
    available_copies: int = Field(1, ge=0)
    status: BookStatus = BookStatus.AVAILABLE
    location: str = "TBD"
    added_date: date
    dewey_classification: str = ""
    keywords: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_copies(self) -> "BookRecord":
        if self.available_copies > self.total_copies:
            raise ValueError("available_copies não pode exceder total_copies")
        return self


class BookImportRow(BaseSchema):
    """
    Linha crua extraída do CSV.

    Todos os campos são texto sem conversão; a validação acontece em
    validate_import_row.
    """
    title: str | None = None
    author: str | None = None
    isbn: str | None = None
    category: str | None = None
    genre: str | None = None
    publisher: str | None = None
    publish_year: str | None = None
    description: str | None = None
    total_copies: str | None = None
    location: str | None = None
    dewey_classification: str | None = None
    keywords: str | None = None


class ImportResult(BaseSchema):
    """
    Resultado agregado da importação.

    success é False se qualquer linha teve erro; books ainda contém as
    linhas aceitas e cabe ao chamador decidir se importa o subconjunto.
    """
    success: bool
    books: list[BookRecord] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class ImportRequest(BaseSchema):
    """Conteúdo CSV bruto enviado para importação."""
    content: str
