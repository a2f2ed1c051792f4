from datetime import date

import pytest

from homevalue.services.validation import (
    is_property_data_valid,
    validate_land_value,
    validate_lot_size,
    validate_municipal_value,
    validate_property_data,
    validate_year_built,
    visible_errors,
)


@pytest.mark.parametrize("value", [100000, 450000, 10000000, "100000", "$2,500,000"])
def test_municipal_value_in_range(value):
    assert validate_municipal_value(value) is None


@pytest.mark.parametrize("value,message", [
    ("", "Property value is required"),
    (None, "Property value is required"),
    ("abc", "Property value must be a number"),
    (99999, "Property value must be at least $100,000"),
    (10000001, "Property value cannot exceed $10,000,000"),
])
def test_municipal_value_errors(value, message):
    assert validate_municipal_value(value) == message


def test_lot_size_is_optional():
    assert validate_lot_size("") is None
    assert validate_lot_size(None) is None
    assert validate_lot_size("100") is None
    assert validate_lot_size("50000") is None
    assert validate_lot_size("99") == "Lot size must be at least 100 sq ft"
    assert validate_lot_size("50001") == "Lot size cannot exceed 50,000 sq ft"
    assert validate_lot_size("big") == "Lot size must be a number"


def test_year_built_uses_current_year():
    today = date(2026, 10, 19)
    assert validate_year_built("", today=today) is None
    assert validate_year_built("1800", today=today) is None
    assert validate_year_built("2026", today=today) is None
    assert validate_year_built("1799", today=today) == "Year built cannot be before 1800"
    assert validate_year_built("2027", today=today) == "Year built cannot be after 2026"
    assert validate_year_built("19xx", today=today) == "Year must be a number"


def test_year_built_defaults_to_today():
    assert validate_year_built(str(date.today().year)) is None
    assert validate_year_built(str(date.today().year + 1)) is not None


def test_land_value_is_never_validated():
    assert validate_land_value("not a number") is None


def test_record_validation_collects_field_messages():
    result = validate_property_data({"municipal_value": "50000", "lot_size": "20", "land_value": "x"})
    assert result.errors() == {
        "municipal_value": "Property value must be at least $100,000",
        "lot_size": "Lot size must be at least 100 sq ft",
    }
    assert result.has_errors


def test_empty_municipal_value_is_invalid_but_not_shown():
    form = {"municipal_value": "", "lot_size": "5000"}
    assert is_property_data_valid(form) is False
    assert visible_errors(form) == {}


def test_valid_record():
    form = {"municipal_value": "450000", "lot_size": "5000", "year_built": "1965"}
    assert is_property_data_valid(form) is True


def test_bad_optional_field_blocks_record():
    form = {"municipal_value": "450000", "year_built": "1700"}
    assert is_property_data_valid(form) is False
    assert visible_errors(form) == {"year_built": "Year built cannot be before 1800"}
