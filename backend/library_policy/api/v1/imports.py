"""
Endpoints de Importação em lote.

Contratos:
    - POST /imports/books: Valida e converte CSV de livros

A resposta é sempre 200 com ImportResult: erros por linha vêm em
`errors` e não interrompem o processamento das demais linhas.
"""

from fastapi import APIRouter

from library_policy.schemas.book import ImportRequest, ImportResult
from library_policy.services.importer import import_books_csv

router = APIRouter(prefix="/imports", tags=["Imports"])


@router.post(
    "/books",
    response_model=ImportResult,
    summary="Importar livros via CSV",
)
async def import_books(data: ImportRequest) -> ImportResult:
    """Processa o conteúdo CSV e devolve livros aceitos, erros e avisos."""
    return import_books_csv(data.content)
