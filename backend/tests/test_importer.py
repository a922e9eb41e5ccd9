"""
Testes unitários para a importação de livros via CSV.
"""

from datetime import date

import pytest

from library_policy.models.enums import BookStatus
from library_policy.schemas.book import BookImportRow
from library_policy.services.importer import (
    convert_row_to_book,
    import_books_csv,
    parse_csv,
    parse_csv_line,
    process_import_data,
    split_keywords,
    validate_import_row,
)

TODAY = date(2024, 6, 15)

THREE_ROWS = """title,author,isbn,category,location,copies
Clean Code,Robert Martin,978-0-13-235088-4,Technology,A-1,3
Broken Isbn,Some Author,123456789,Fiction,B-2,1
Dune,Frank Herbert,0441013597,Fiction,C-3,2
"""


# ==========================================
# Parse
# ==========================================

class TestParseCsv:
    """Testes para parse_csv e parse_csv_line."""

    def test_quoted_field_with_comma_and_escaped_quotes(self):
        values = parse_csv_line('"The ""Best"" Book, Vol 1",Author,0306406152')

        assert values == ['The "Best" Book, Vol 1', "Author", "0306406152"]

    def test_space_before_quoted_field(self):
        assert parse_csv_line('a, "b,c"') == ["a", "b,c"]

    def test_header_is_case_insensitive_and_order_independent(self):
        text = "ISBN,Total_Copies,Author,Title,Year\n0306406152,4,Jane Doe,Some Title,2001\n"

        rows = parse_csv(text)

        assert len(rows) == 1
        assert rows[0].title == "Some Title"
        assert rows[0].author == "Jane Doe"
        assert rows[0].total_copies == "4"
        assert rows[0].publish_year == "2001"

    @pytest.mark.parametrize("header", ["copies", "totalcopies", "total_copies", "TotalCopies"])
    def test_copies_synonyms(self, header):
        rows = parse_csv(f"title,author,isbn,{header}\nT,A,0306406152,7\n")

        assert rows[0].total_copies == "7"

    @pytest.mark.parametrize("header", ["dewey", "deweyclassification", "dewey_classification"])
    def test_dewey_synonyms(self, header):
        rows = parse_csv(f"title,author,isbn,{header}\nT,A,0306406152,005.1\n")

        assert rows[0].dewey_classification == "005.1"

    def test_tags_map_to_keywords(self):
        rows = parse_csv('title,author,isbn,tags\nT,A,0306406152,"x, y"\n')

        assert rows[0].keywords == "x, y"

    def test_rows_missing_required_fields_are_dropped(self):
        text = "title,author,isbn\nNo Isbn,Someone,\n,Nobody,0306406152\nOk,Author,0306406152\n"

        rows = parse_csv(text)

        assert [r.title for r in rows] == ["Ok"]

    def test_blank_lines_and_crlf(self):
        text = "title,author,isbn\r\n\r\nT1,A1,0306406152\r\n   \r\nT2,A2,0306406152\r\n"

        assert [r.title for r in parse_csv(text)] == ["T1", "T2"]

    def test_unknown_columns_are_ignored(self):
        rows = parse_csv("title,author,isbn,shelf_color\nT,A,0306406152,red\n")

        assert rows[0].title == "T"

    def test_empty_text(self):
        assert parse_csv("") == []
        assert parse_csv("title,author,isbn\n") == []

    def test_escaped_quotes_at_field_edges_are_kept(self):
        text = "title,author,isbn,category,location\n\"\"\"Hamlet\"\" annotated\",A,0306406152,C,L\n"

        rows = parse_csv(text)

        assert rows[0].title == '"Hamlet" annotated'

    def test_only_newline_separates_rows(self):
        text = "title,author,isbn\nPage\x0cBreak,A,0306406152\nLine\u2028Sep,B,0306406152\n"

        rows = parse_csv(text)

        assert [r.title for r in rows] == ["Page\x0cBreak", "Line\u2028Sep"]

    def test_unbalanced_quotes_do_not_raise(self):
        text = 'title,author,isbn\n"Unclosed title,Author,0306406152\nOk,Author,0306406152\n'

        rows = parse_csv(text)

        assert "Ok" in [r.title for r in rows]


# ==========================================
# Validate
# ==========================================

class TestValidateRow:
    """Testes para validate_import_row."""

    def make_row(self, **overrides) -> BookImportRow:
        data = {"title": "T", "author": "A", "isbn": "0306406152"}
        data.update(overrides)
        return BookImportRow(**data)

    def test_valid_row(self):
        valid, errors = validate_import_row(self.make_row(), 0, today=TODAY)

        assert valid is True
        assert errors == []

    def test_missing_required_fields(self):
        valid, errors = validate_import_row(BookImportRow(), 4, today=TODAY)

        assert valid is False
        assert errors == [
            "Row 5: Title is required",
            "Row 5: Author is required",
            "Row 5: ISBN is required",
        ]

    @pytest.mark.parametrize("isbn", ["030640615", "03064061521", "978030640615"])
    def test_invalid_isbn_length(self, isbn):
        valid, errors = validate_import_row(self.make_row(isbn=isbn), 0, today=TODAY)

        assert valid is False
        assert errors == ["Row 1: ISBN must be 10 or 13 digits"]

    def test_isbn_hyphens_and_spaces_are_ignored(self):
        valid, _ = validate_import_row(self.make_row(isbn="978 0-306-40615 7"), 0, today=TODAY)

        assert valid is True

    @pytest.mark.parametrize("year", ["999", "2026", "abc", "19.5"])
    def test_invalid_publish_year(self, year):
        valid, errors = validate_import_row(self.make_row(publish_year=year), 1, today=TODAY)

        assert valid is False
        assert errors == ["Row 2: Invalid publish year"]

    @pytest.mark.parametrize("year", ["1000", "2024", "2025"])
    def test_publish_year_bounds(self, year):
        valid, _ = validate_import_row(self.make_row(publish_year=year), 0, today=TODAY)

        assert valid is True

    @pytest.mark.parametrize("year", ["2001.0", "1999.5"])
    def test_decimal_publish_year_is_rejected(self, year):
        valid, errors = validate_import_row(self.make_row(publish_year=year), 0, today=TODAY)

        assert valid is False
        assert errors == ["Row 1: Invalid publish year"]

    @pytest.mark.parametrize("copies", ["3.5", "2.0"])
    def test_decimal_total_copies_is_rejected(self, copies):
        valid, errors = validate_import_row(self.make_row(total_copies=copies), 0, today=TODAY)

        assert valid is False
        assert errors == ["Row 1: Total copies must be a positive number"]

    @pytest.mark.parametrize("copies", ["0", "-1", "many"])
    def test_invalid_total_copies(self, copies):
        valid, errors = validate_import_row(self.make_row(total_copies=copies), 0, today=TODAY)

        assert valid is False
        assert errors == ["Row 1: Total copies must be a positive number"]

    def test_errors_accumulate(self):
        row = self.make_row(isbn="123", publish_year="3000", total_copies="0")

        valid, errors = validate_import_row(row, 2, today=TODAY)

        assert valid is False
        assert len(errors) == 3
        assert all(e.startswith("Row 3:") for e in errors)


# ==========================================
# Convert
# ==========================================

class TestConvertRow:
    """Testes para convert_row_to_book."""

    def test_defaults(self):
        row = BookImportRow(title="T", author="A", isbn="0-306-40615-2")

        book, warnings = convert_row_to_book(row, 0, today=TODAY)

        assert book.isbn == "0306406152"
        assert book.category == "Uncategorized"
        assert book.location == "TBD"
        assert book.genre == ""
        assert book.publisher == ""
        assert book.description == ""
        assert book.dewey_classification == ""
        assert book.publish_year == 2024
        assert book.total_copies == 1
        assert book.available_copies == 1
        assert book.keywords == []
        assert book.status == BookStatus.AVAILABLE
        assert book.added_date == TODAY
        assert warnings == [
            'Row 1: No category specified, using "Uncategorized"',
            'Row 1: No location specified, using "TBD"',
        ]

    def test_available_copies_match_total(self):
        row = BookImportRow(title="T", author="A", isbn="0306406152", total_copies="6")

        book, _ = convert_row_to_book(row, 0, today=TODAY)

        assert book.total_copies == 6
        assert book.available_copies == 6

    def test_keywords_are_normalized(self):
        assert split_keywords("Fiction, Classic , fiction") == ["fiction", "classic"]
        assert split_keywords(" , ,") == []
        assert split_keywords(None) == []


# ==========================================
# Pipeline
# ==========================================

class TestImportPipeline:
    """Fluxo completo parse -> validação -> conversão -> agregação."""

    def test_invalid_row_does_not_stop_processing(self):
        result = import_books_csv(THREE_ROWS, today=TODAY)

        assert result.success is False
        assert len(result.books) == 2
        assert len(result.errors) == 1
        assert result.errors[0].startswith("Row 2:")
        assert [b.title for b in result.books] == ["Clean Code", "Dune"]
        assert all(b.available_copies == b.total_copies for b in result.books)
        assert result.warnings == []

    def test_missing_category_produces_one_warning(self):
        text = "title,author,isbn,location\nDune,Frank Herbert,0441013597,C-3\n"

        result = import_books_csv(text, today=TODAY)

        assert result.success is True
        assert result.books[0].category == "Uncategorized"
        assert len(result.warnings) == 1
        assert "category" in result.warnings[0]

    def test_keywords_round_trip(self):
        text = 'title,author,isbn,category,location,keywords\nT,A,0306406152,C,L,"Fiction, Classic , fiction"\n'

        result = import_books_csv(text, today=TODAY)

        assert result.books[0].keywords == ["fiction", "classic"]

    def test_no_valid_rows_still_returns_result(self):
        text = "title,author,isbn\nT,A,1\nU,B,2\n"

        result = import_books_csv(text, today=TODAY)

        assert result.success is False
        assert result.books == []
        assert len(result.errors) == 2

    def test_empty_input_is_success(self):
        result = import_books_csv("", today=TODAY)

        assert result.success is True
        assert result.books == []
        assert result.errors == []

    def test_process_import_data_directly(self):
        rows = [
            BookImportRow(title="T", author="A", isbn="0306406152", category="C", location="L"),
            BookImportRow(title="", author="A", isbn="0306406152"),
        ]

        result = process_import_data(rows, today=TODAY)

        assert len(result.books) == 1
        assert result.errors == ["Row 2: Title is required"]
