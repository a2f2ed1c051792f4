from dataclasses import dataclass, asdict
from datetime import date
from typing import Any, Mapping, Optional

from ..core.utils import is_blank, parse_int

MIN_MUNICIPAL_VALUE = 100_000
MAX_MUNICIPAL_VALUE = 10_000_000
MIN_LOT_SIZE = 100
MAX_LOT_SIZE = 50_000
MIN_YEAR_BUILT = 1800

@dataclass(frozen=True)
class PropertyValidation:
    municipal_value: Optional[str] = None
    land_value: Optional[str] = None
    lot_size: Optional[str] = None
    year_built: Optional[str] = None

    @property
    def has_errors(self) -> bool:
        return any(v is not None for v in asdict(self).values())

    def errors(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

def validate_municipal_value(value: Any) -> Optional[str]:
    if is_blank(value):
        return "Property value is required"
    num = parse_int(value)
    if num is None:
        return "Property value must be a number"
    if num < MIN_MUNICIPAL_VALUE:
        return "Property value must be at least $100,000"
    if num > MAX_MUNICIPAL_VALUE:
        return "Property value cannot exceed $10,000,000"
    return None

def validate_lot_size(value: Any) -> Optional[str]:
    if is_blank(value):
        return None  # optional
    num = parse_int(value)
    if num is None:
        return "Lot size must be a number"
    if num < MIN_LOT_SIZE:
        return "Lot size must be at least 100 sq ft"
    if num > MAX_LOT_SIZE:
        return "Lot size cannot exceed 50,000 sq ft"
    return None

def validate_year_built(value: Any, today: Optional[date] = None) -> Optional[str]:
    if is_blank(value):
        return None  # optional
    num = parse_int(value)
    if num is None:
        return "Year must be a number"
    current_year = (today or date.today()).year
    if num < MIN_YEAR_BUILT:
        return "Year built cannot be before 1800"
    if num > current_year:
        return f"Year built cannot be after {current_year}"
    return None

def validate_land_value(value: Any) -> Optional[str]:
    # Informational only
    return None

def validate_property_data(form: Mapping[str, Any], today: Optional[date] = None) -> PropertyValidation:
    return PropertyValidation(
        municipal_value=validate_municipal_value(form.get("municipal_value")),
        land_value=validate_land_value(form.get("land_value")),
        lot_size=validate_lot_size(form.get("lot_size")),
        year_built=validate_year_built(form.get("year_built"), today=today),
    )

def visible_errors(form: Mapping[str, Any], today: Optional[date] = None) -> dict:
    """
    Messages to show next to the fields. An untouched municipal value is
    not flagged yet even though it still blocks progress.
    """
    errors = validate_property_data(form, today=today).errors()
    if is_blank(form.get("municipal_value")):
        errors.pop("municipal_value", None)
    return errors

def is_property_data_valid(form: Mapping[str, Any], today: Optional[date] = None) -> bool:
    if is_blank(form.get("municipal_value")):
        return False
    return not validate_property_data(form, today=today).has_errors
