from typing import Protocol, List, Optional
from dataclasses import dataclass, field, asdict

# ----- Condition answers -----

LESS_THAN_20 = "lessThan20"
MORE_THAN_20 = "moreThan20"
HARDWOOD = "hardwood"
YES = "yes"

# Older form builds posted the short tokens
AGE_ALIASES = {"less20": LESS_THAN_20, "more20": MORE_THAN_20}

EXTRACTION_SUCCESS = "success"
EXTRACTION_PARTIAL = "partial"
EXTRACTION_ERROR = "error"

LISTED = "Listed"
SOLD = "Sold"

# ----- Data shapes (thin & explicit) -----

@dataclass(frozen=True)
class GeoPoint:
    lat: float
    lon: float

@dataclass(frozen=True)
class GeocodeResult:
    point: GeoPoint
    formatted_address: str
    city: Optional[str] = None
    province: Optional[str] = None
    country: str = "Canada"

@dataclass(frozen=True)
class PropertyRecord:
    """
    Everything known about the subject property for one evaluation.
    Only municipal_value feeds the formula; the rest refines comparables
    or is informational.
    """
    address: str = ""
    coordinates: Optional[GeoPoint] = None
    municipal_value: Optional[int] = None
    land_value: Optional[int] = None
    lot_size: Optional[int] = None        # square feet
    year_built: Optional[int] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[float] = None
    roof_age: Optional[str] = None
    windows_age: Optional[str] = None
    flooring_type: Optional[str] = None
    bathroom_renovated: Optional[str] = None
    kitchen_renovated: Optional[str] = None

@dataclass(frozen=True)
class ExtractionResult:
    municipal_value: Optional[int] = None
    land_value: Optional[int] = None
    year_built: Optional[int] = None
    lot_size: Optional[int] = None

    @property
    def status(self) -> str:
        if self.municipal_value is not None:
            return EXTRACTION_SUCCESS
        if self.fields():
            return EXTRACTION_PARTIAL
        return EXTRACTION_ERROR

    def fields(self) -> dict:
        """Only the fields that were found, ready to merge into form state."""
        return {k: v for k, v in asdict(self).items() if v is not None}

@dataclass(frozen=True)
class ComparableProperty:
    address: str
    price: int
    status: str                           # Listed | Sold
    bedrooms: int
    bathrooms: float
    square_feet: int
    days_on_market: Optional[int] = None  # Listed only
    sold_date: Optional[str] = None       # Sold only, e.g. "Aug 2026"

@dataclass(frozen=True)
class MarketMetrics:
    avg_price: Optional[int] = None
    avg_price_per_sqft: Optional[int] = None
    market_trend: Optional[str] = None    # Hot | Stable | Cool
    confidence: Optional[str] = None      # High | Medium | Low
    comparables_count: int = 0

    @property
    def has_data(self) -> bool:
        return self.comparables_count > 0

@dataclass(frozen=True)
class Valuation:
    base: int
    value: int
    low: int
    high: int
    adjustments: dict = field(default_factory=dict)

    @property
    def after_fixed(self) -> int:
        return self.base + sum(self.adjustments.get(k, 0) for k in ("roof", "windows", "flooring"))

# ----- Protocols (interfaces) -----

class RandomSource(Protocol):
    def random(self) -> float: ...

class GeocodeClient(Protocol):
    async def resolve(self, address: str) -> GeocodeResult: ...

class TextDecoder(Protocol):
    def decode(self, data: bytes) -> str: ...

class CompsClient(Protocol):
    def comparables(
        self, address: str, calculated_value: int, bedrooms: int = 3, bathrooms: float = 2
    ) -> List[ComparableProperty]: ...
