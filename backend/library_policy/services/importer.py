"""
Importação de livros em lote a partir de CSV.

Fluxo por linha:
    1. Parse: cabeçalho com sinônimos, campos entre aspas; linhas sem
       title, author ou isbn são descartadas em silêncio
    2. Validação: ISBN, ano de publicação e número de cópias
    3. Conversão: BookRecord normalizado com valores padrão
    4. Agregação: erros e avisos de todas as linhas, sem interromper
       no primeiro erro

Nada aqui levanta exceção por causa do conteúdo do arquivo: toda falha
vira mensagem em ImportResult.
"""

import csv
import re
from datetime import date

from library_policy.core.logging import get_logger
from library_policy.models.enums import BookStatus
from library_policy.schemas.book import BookImportRow, BookRecord, ImportResult

logger = get_logger(__name__)

DEFAULT_CATEGORY = "Uncategorized"
DEFAULT_LOCATION = "TBD"
MIN_PUBLISH_YEAR = 1000

# Nome da coluna (minúsculo) -> campo de BookImportRow
HEADER_SYNONYMS: dict[str, str] = {
    "title": "title",
    "author": "author",
    "isbn": "isbn",
    "category": "category",
    "genre": "genre",
    "publisher": "publisher",
    "publishyear": "publish_year",
    "publish_year": "publish_year",
    "year": "publish_year",
    "description": "description",
    "totalcopies": "total_copies",
    "total_copies": "total_copies",
    "copies": "total_copies",
    "location": "location",
    "dewey": "dewey_classification",
    "deweyclassification": "dewey_classification",
    "dewey_classification": "dewey_classification",
    "keywords": "keywords",
    "tags": "keywords",
}

_ISBN_SEPARATORS = re.compile(r"[-\s]")


# ==========================================
# Parse
# ==========================================

def parse_csv_line(line: str) -> list[str]:
    """
    Divide uma linha em campos.

    Campos entre aspas aceitam vírgulas e aspas escapadas ("").
    Aspas desbalanceadas são toleradas: o campo vai até o fim da linha.
    """
    try:
        return next(csv.reader([line], skipinitialspace=True), [])
    except csv.Error as e:
        logger.warning(f"Linha CSV malformada, usando divisão simples: {e}")
        return line.split(",")


def _normalize_header(header: str) -> str:
    return header.strip().lstrip("\ufeff").lower().replace('"', "")


def parse_csv(csv_text: str) -> list[BookImportRow]:
    """
    Converte o texto CSV em linhas cruas.

    A primeira linha não vazia é o cabeçalho. A ordem das colunas é livre
    e colunas desconhecidas são ignoradas.

    Args:
        csv_text: Conteúdo do arquivo

    Returns:
        Linhas com title, author e isbn preenchidos
    """
    lines = [line.rstrip("\r") for line in csv_text.split("\n") if line.strip()]
    if not lines:
        return []

    headers = [_normalize_header(h) for h in parse_csv_line(lines[0])]
    rows: list[BookImportRow] = []

    for line in lines[1:]:
        values = parse_csv_line(line)
        if not values:
            continue

        fields: dict[str, str] = {}
        for header, raw in zip(headers, values):
            field = HEADER_SYNONYMS.get(header)
            if field is None or not raw:
                continue
            fields[field] = raw.strip()

        row = BookImportRow(**fields)
        if row.title and row.author and row.isbn:
            rows.append(row)

    return rows


# ==========================================
# Validate
# ==========================================

def _parse_int(value: str) -> int | None:
    try:
        return int(value.strip())
    except ValueError:
        return None


def normalize_isbn(isbn: str) -> str:
    """Remove hífens e espaços do ISBN."""
    return _ISBN_SEPARATORS.sub("", isbn)


def validate_import_row(
    row: BookImportRow,
    index: int,
    *,
    today: date | None = None,
) -> tuple[bool, list[str]]:
    """
    Valida uma linha crua.

    Args:
        row: Linha extraída do CSV
        index: Posição 0-based da linha entre as linhas de dados
        today: Data de referência para o limite do ano de publicação

    Returns:
        Tupla (válida, lista de erros "Row N: ...")
    """
    today = today or date.today()
    label = f"Row {index + 1}"
    errors: list[str] = []

    if not row.title or not row.title.strip():
        errors.append(f"{label}: Title is required")
    if not row.author or not row.author.strip():
        errors.append(f"{label}: Author is required")
    if not row.isbn or not row.isbn.strip():
        errors.append(f"{label}: ISBN is required")
    elif len(normalize_isbn(row.isbn)) not in (10, 13):
        errors.append(f"{label}: ISBN must be 10 or 13 digits")

    if row.publish_year:
        year = _parse_int(row.publish_year)
        if year is None or year < MIN_PUBLISH_YEAR or year > today.year + 1:
            errors.append(f"{label}: Invalid publish year")

    if row.total_copies:
        copies = _parse_int(row.total_copies)
        if copies is None or copies < 1:
            errors.append(f"{label}: Total copies must be a positive number")

    return len(errors) == 0, errors


# ==========================================
# Convert
# ==========================================

def split_keywords(raw: str | None) -> list[str]:
    """
    Separa palavras-chave por vírgula.

    Remove espaços, converte para minúsculas, descarta vazias e
    duplicadas (mantém a primeira ocorrência).
    """
    if not raw:
        return []
    keywords = (k.strip().lower() for k in raw.split(","))
    return list(dict.fromkeys(k for k in keywords if k))


def convert_row_to_book(
    row: BookImportRow,
    index: int,
    *,
    today: date | None = None,
) -> tuple[BookRecord, list[str]]:
    """
    Converte uma linha válida em BookRecord.

    Valores padrão:
        - category ausente: "Uncategorized" (gera aviso)
        - location ausente: "TBD" (gera aviso)
        - genre, publisher, description, dewey: ""
        - publish_year ausente: ano corrente
        - total_copies ausente: 1

    Args:
        row: Linha que passou em validate_import_row
        index: Posição 0-based da linha
        today: Data de cadastro (padrão hoje)

    Returns:
        Tupla (livro, avisos)
    """
    today = today or date.today()
    label = f"Row {index + 1}"
    warnings: list[str] = []

    total_copies = int(row.total_copies) if row.total_copies else 1

    book = BookRecord(
        title=row.title.strip(),
        author=row.author.strip(),
        isbn=normalize_isbn(row.isbn),
        category=row.category or DEFAULT_CATEGORY,
        genre=row.genre or "",
        publisher=row.publisher or "",
        publish_year=int(row.publish_year) if row.publish_year else today.year,
        description=row.description or "",
        total_copies=total_copies,
        available_copies=total_copies,
        location=row.location or DEFAULT_LOCATION,
        dewey_classification=row.dewey_classification or "",
        keywords=split_keywords(row.keywords),
        status=BookStatus.AVAILABLE,
        added_date=today,
    )

    if not row.category:
        warnings.append(f'{label}: No category specified, using "{DEFAULT_CATEGORY}"')
    if not row.location:
        warnings.append(f'{label}: No location specified, using "{DEFAULT_LOCATION}"')

    return book, warnings


# ==========================================
# Aggregate
# ==========================================

def process_import_data(rows: list[BookImportRow], *, today: date | None = None) -> ImportResult:
    """
    Valida e converte todas as linhas.

    Linhas com erro ficam fora de books; as demais continuam sendo
    processadas.
    """
    books: list[BookRecord] = []
    errors: list[str] = []
    warnings: list[str] = []

    for index, row in enumerate(rows):
        valid, row_errors = validate_import_row(row, index, today=today)
        if not valid:
            errors.extend(row_errors)
            continue

        book, row_warnings = convert_row_to_book(row, index, today=today)
        books.append(book)
        warnings.extend(row_warnings)

    return ImportResult(
        success=len(errors) == 0,
        books=books,
        errors=errors,
        warnings=warnings,
    )


def import_books_csv(csv_text: str, *, today: date | None = None) -> ImportResult:
    """Executa parse + validação + conversão sobre o texto CSV."""
    rows = parse_csv(csv_text)
    result = process_import_data(rows, today=today)

    logger.info(
        f"Importação CSV: {len(rows)} linha(s) lidas, {len(result.books)} aceita(s), "
        f"{len(result.errors)} erro(s), {len(result.warnings)} aviso(s)"
    )
    return result
