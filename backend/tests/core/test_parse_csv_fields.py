"""CSV field parsers: pure coercion of seed file values."""

import uuid
from datetime import date

from app.core.parse_csv_fields import (
    parse_bool, parse_date, parse_int_value, parse_optional_int,
    parse_string, parse_uuid,
)

VALID = "3f2b8c1e-9d4a-4b6e-8f1a-2c3d4e5f6a7b"


def test_parse_uuid_trims_and_converts():
    assert parse_uuid(f"  {VALID} ") == uuid.UUID(VALID)


def test_parse_uuid_rejects_wrong_length():
    assert parse_uuid(VALID[:-1]) is None
    assert parse_uuid("") is None
    assert parse_uuid(None) is None


def test_parse_uuid_rejects_36_chars_that_are_not_hex():
    assert parse_uuid("z" * 36) is None


def test_parse_string():
    assert parse_string("  hello ") == "hello"
    assert parse_string(None) == ""


def test_parse_int_value_defaults_to_zero():
    assert parse_int_value(" 42 ") == 42
    assert parse_int_value("forty") == 0
    assert parse_int_value(None) == 0


def test_parse_optional_int_keeps_failures_visible():
    assert parse_optional_int("7") == 7
    assert parse_optional_int("") is None
    assert parse_optional_int("7.5") is None


def test_parse_date_day_month_year():
    assert parse_date("05/03/2024") == date(2024, 3, 5)


def test_parse_date_invalid_values():
    assert parse_date("2024-03-05") is None
    assert parse_date("31/02/2024") is None
    assert parse_date("aa/bb/cccc") is None
    assert parse_date(None) is None


def test_parse_bool_only_true_is_true():
    assert parse_bool("true") is True
    assert parse_bool(" TRUE ") is True
    assert parse_bool("false") is False
    assert parse_bool("1") is False
    assert parse_bool(None) is False
