"""
Testes para a busca global.
"""

from library_policy.models.enums import LoanStatus
from library_policy.services.search import perform_search


class TestPerformSearch:
    """Busca por substring em livros, membros e empréstimos."""

    def test_matches_book_title_case_insensitive(self, book):
        results = perform_search("PRAGMATIC", books=[book])

        assert results.books == [book]

    def test_matches_book_keyword(self, book):
        assert perform_search("craft", books=[book]).books == [book]

    def test_matches_member_email(self, patron):
        assert perform_search("ayesha@", members=[patron]).members == [patron]

    def test_matches_loan_status(self, active_loan):
        overdue = active_loan.model_copy(update={"status": LoanStatus.OVERDUE})

        results = perform_search("overdue", loans=[active_loan, overdue])

        assert results.loans == [overdue]

    def test_matches_across_collections(self, book, patron, active_loan):
        results = perform_search("khan", books=[book], members=[patron], loans=[active_loan])

        assert results.books == []
        assert results.members == [patron]
        assert results.loans == [active_loan]

    def test_empty_query_returns_nothing(self, book, patron):
        results = perform_search("   ", books=[book], members=[patron])

        assert results.books == []
        assert results.members == []
        assert results.loans == []

    def test_no_match(self, book):
        assert perform_search("zzz", books=[book]).books == []
