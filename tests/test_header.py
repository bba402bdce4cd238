"""Test header row detection scoring."""
from sqlpaste.parser.header import header_score, looks_like_header_row


class TestLooksLikeHeaderRow:

    def test_information_schema_header(self):
        assert looks_like_header_row(["COLUMN_NAME", "DATA_TYPE", "IS_NULLABLE"]) is True

    def test_data_row_with_numbers(self):
        assert looks_like_header_row(["202110", "CC", "1046908774"]) is False

    def test_snake_case_headers(self):
        assert looks_like_header_row(["COD_PERIODO_ACADEMICO", "NUM_DOC_PERSONA"]) is True

    def test_dates_and_emails_are_data(self):
        assert looks_like_header_row(["2024-01-31", "ana@example.com", "15/02/2024"]) is False

    def test_empty_row_is_not_header(self):
        assert looks_like_header_row([]) is False

    def test_null_and_empty_tokens_ignored(self):
        assert header_score(["NULL", "", "PROGRAMA_ID"]) == header_score(["PROGRAMA_ID"])


class TestHeaderScore:
    """Point values per token pattern."""

    def test_underscore_uppercase_keyword(self):
        # underscore +2, keyword ID +1, UPPER_CASE +1
        assert header_score(["PROGRAMA_ID"]) == 4

    def test_all_digits(self):
        assert header_score(["12345"]) == -2

    def test_iso_date(self):
        # date prefix -2, keyword DATE/ID absent
        assert header_score(["2024-01-31"]) == -2

    def test_email(self):
        assert header_score(["ana@correo.co"]) == -2

    def test_long_free_text(self):
        text = "x" * 51
        assert header_score([text]) == -1

    def test_short_uppercase_gets_no_bonus(self):
        assert header_score(["CC"]) == 0

    def test_keyword_is_case_insensitive(self):
        assert header_score(["Fecha"]) == 1

    def test_keyword_counted_once_per_token(self):
        # CODIGO, COD and ID all present, still +1
        assert header_score(["Codigoid"]) == 1
