"""
Tests for the per-field transforms.

Validates:
- House number keeps only the leading digit run
- Phone priority order (+32, 0, 4, pass-through)
- Address composition without dangling space
"""
import pytest

from services.field_service import compose_address, extract_house_number, normalize_be_phone


class TestExtractHouseNumber:

    @pytest.mark.parametrize("raw, expected", [
        ("11A", "11"),
        ("12 Bus 3", "12"),
        ("A12", ""),
        ("  7", "7"),
        ("7  ", "7"),
        ("", ""),
        ("Onbekend", ""),
        ("104/2", "104"),
    ])
    def test_leading_digits(self, raw, expected):
        assert extract_house_number(raw) == expected

    def test_idempotent(self):
        for raw in ["11A", "12 Bus 3", "A1", "42"]:
            once = extract_house_number(raw)
            assert extract_house_number(once) == once

    def test_non_ascii_digits_stop_the_scan(self):
        """Arabic-Indic digits are not ASCII digits."""
        assert extract_house_number("1٢") == "1"


class TestNormalizeBePhone:

    def test_plus_32(self):
        assert normalize_be_phone("+32470123456") == "0032470123456"

    def test_leading_zero(self):
        assert normalize_be_phone("0470123456") == "0032470123456"

    def test_leading_four(self):
        assert normalize_be_phone("470123456") == "0032470123456"

    def test_32_without_plus_passes_through(self):
        assert normalize_be_phone("32470123456") == "32470123456"

    def test_punctuation_stripped(self):
        assert normalize_be_phone("+32 470-12.34.56") == "0032470123456"
        assert normalize_be_phone("(0470) 12 34 56") == "0032470123456"
        assert normalize_be_phone("0470 12 34 56") == "0032470123456"

    def test_empty(self):
        assert normalize_be_phone("") == ""
        assert normalize_be_phone("   ") == ""
        assert normalize_be_phone("geen gsm") == ""

    def test_only_first_zero_dropped(self):
        assert normalize_be_phone("0032470123456") == "0032032470123456"

    def test_other_country_code_unchanged(self):
        assert normalize_be_phone("+31612345678") == "+31612345678"

    def test_no_length_validation(self):
        assert normalize_be_phone("4") == "00324"


class TestComposeAddress:

    def test_street_and_number(self):
        assert compose_address("Dorpsstraat", "12") == "Dorpsstraat 12"

    def test_empty_number_no_trailing_space(self):
        assert compose_address("Dorpsstraat", extract_house_number("Onbekend")) == "Dorpsstraat"

    def test_empty_street(self):
        assert compose_address("", "12") == "12"
