"""
Busca global sobre o acervo, membros e empréstimos em memória.
"""

from collections.abc import Iterable

from library_policy.schemas.book import BookRecord
from library_policy.schemas.loan import LoanRecord
from library_policy.schemas.member import MemberProfile
from library_policy.schemas.search import SearchResults


def _contains(value: str | None, term: str) -> bool:
    return bool(value) and term in value.lower()


def perform_search(
    query: str,
    books: Iterable[BookRecord] = (),
    members: Iterable[MemberProfile] = (),
    loans: Iterable[LoanRecord] = (),
) -> SearchResults:
    """
    Busca por substring, sem diferenciar maiúsculas.

    Campos considerados:
        - livros: título, autor, palavras-chave
        - membros: nome, email
        - empréstimos: título do livro, nome do membro, status

    Consulta vazia retorna resultado vazio.
    """
    term = query.strip().lower()
    if not term:
        return SearchResults()

    return SearchResults(
        books=[
            b for b in books
            if _contains(b.title, term)
            or _contains(b.author, term)
            or any(_contains(k, term) for k in b.keywords)
        ],
        members=[
            m for m in members
            if _contains(m.name, term) or _contains(m.email, term)
        ],
        loans=[
            loan for loan in loans
            if _contains(loan.book_title, term)
            or _contains(loan.user_name, term)
            or _contains(loan.status.value, term)
        ],
    )
