"""Test column type inference from sample values."""
from sqlpaste.parser.inference import classify_value, infer_type
from sqlpaste.parser.models import SqlType


class TestInferType:

    def test_integers(self):
        assert infer_type(["1", "2", "3", "4"]) == SqlType.INT

    def test_decimals(self):
        assert infer_type(["1.5", "2.75", "3.0"]) == SqlType.DECIMAL

    def test_comma_decimals(self):
        assert infer_type(["1,5", "2,75"]) == SqlType.DECIMAL

    def test_dates(self):
        assert infer_type(["2024-01-01", "2024-02-15"]) == SqlType.DATE

    def test_datetimes_count_as_dates(self):
        assert infer_type(["2024-01-01 10:15:00.000", "15/02/2024"]) == SqlType.DATE

    def test_booleans(self):
        assert infer_type(["true", "false", "true"]) == SqlType.BIT

    def test_spanish_booleans(self):
        assert infer_type(["SI", "NO", "si", "No"]) == SqlType.BIT

    def test_bigint_beyond_int32(self):
        assert infer_type(["3000000000", "1", "2"]) == SqlType.BIGINT

    def test_bigint_negative(self):
        assert infer_type(["-2147483649", "1"]) == SqlType.BIGINT

    def test_nine_digits_stay_int(self):
        assert infer_type(["-214748364", "999999999"]) == SqlType.INT

    def test_ten_digit_identifiers(self):
        assert infer_type(["1046908774", "1234567890"]) == SqlType.BIGINT

    def test_ten_digit_int32_max_is_bigint(self):
        assert infer_type(["2147483647", "1"]) == SqlType.BIGINT

    def test_leading_zeros_not_significant(self):
        assert infer_type(["0000000042", "7"]) == SqlType.INT

    def test_empty(self):
        assert infer_type([]) == SqlType.VARCHAR

    def test_only_nulls(self):
        assert infer_type(["NULL", "NULL"]) == SqlType.VARCHAR
        assert infer_type(["", "  ", None]) == SqlType.VARCHAR

    def test_nulls_ignored_in_majority(self):
        assert infer_type(["1", "NULL", "2", ""]) == SqlType.INT

    def test_text(self):
        assert infer_type(["Derecho", "Medicina"]) == SqlType.VARCHAR

    def test_below_majority(self):
        # 3 of 5 integers is 60%
        assert infer_type(["1", "2", "3", "abc", "def"]) == SqlType.VARCHAR

    def test_exactly_eighty_percent(self):
        assert infer_type(["1", "2", "3", "4", "abc"]) == SqlType.INT

    def test_zero_one_flags_are_integers(self):
        # 0/1 match the integer pattern first
        assert infer_type(["0", "1", "1", "0"]) == SqlType.INT


class TestClassifyValue:

    def test_priority(self):
        assert classify_value("20240131") == "integer"
        assert classify_value("-12") == "integer"
        assert classify_value("-1.25") == "decimal"
        assert classify_value("2024/01/31") == "date"
        assert classify_value("yes") == "boolean"
        assert classify_value("N") == "boolean"
        assert classify_value("1.2.3") == "unclassified"
        assert classify_value("CC") == "unclassified"
