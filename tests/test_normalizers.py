import math

from exc_utils.normalizers import coerce_amount, parse_amount, to_text


def test_numbers_pass_through():
    assert parse_amount(12.5) == 12.5
    assert parse_amount(-7) == -7.0
    assert parse_amount(0) == 0.0


def test_strings_use_leading_number():
    assert parse_amount("12.50") == 12.5
    assert parse_amount("  -3.25") == -3.25
    assert parse_amount("12.50 CAD") == 12.5
    assert parse_amount(".5") == 0.5
    assert parse_amount("1e3") == 1000.0
    # Thousands separators are not understood; only the leading "1" is read.
    assert parse_amount("1,234.50") == 1.0


def test_unparsable_amounts():
    assert parse_amount("abc") is None
    assert parse_amount("$12.50") is None
    assert parse_amount("") is None
    assert parse_amount(None) is None
    assert parse_amount(True) is None
    assert parse_amount(float("nan")) is None
    assert parse_amount(math.inf) is None


def test_coerce_amount_is_absolute_with_zero_fallback():
    assert coerce_amount("-7") == 7.0
    assert coerce_amount(-12.5) == 12.5
    assert coerce_amount("abc") == 0.0
    assert coerce_amount(None) == 0.0


def test_to_text():
    assert to_text("Starbucks") == "Starbucks"
    assert to_text(None) == ""
    assert to_text("") == ""
    assert to_text(0) == ""
    assert to_text(float("nan")) == ""
    assert to_text(20240102.0) == "20240102"
    assert to_text(12.5) == "12.5"
    assert to_text(7) == "7"
