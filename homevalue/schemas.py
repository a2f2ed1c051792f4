from typing import Literal
from pydantic import BaseModel, Field, field_validator

AgeAnswer = Literal["lessThan20", "moreThan20", "less20", "more20"]
YesNo = Literal["yes", "no"]

class ExtractTextRequest(BaseModel):
    text: str = Field(max_length=200_000)

class ExtractedFields(BaseModel):
    municipal_value: int | None = None
    land_value: int | None = None
    year_built: int | None = None
    lot_size: int | None = None

class ExtractionResponse(BaseModel):
    status: Literal["success", "partial", "error"]
    data: ExtractedFields

class PropertyForm(BaseModel):
    """
    Raw wizard state. Numeric fields arrive as typed text ("$450,000")
    or numbers; empty strings mean "not answered".
    """
    address: str = ""
    municipal_value: str | int | None = None
    land_value: str | int | None = None
    lot_size: str | int | None = None
    year_built: str | int | None = None
    bedrooms: str | int | None = None
    bathrooms: str | float | None = None
    roof_age: AgeAnswer | None = None
    windows_age: AgeAnswer | None = None
    flooring_type: Literal["hardwood", "other"] | None = None
    bathroom_renovated: YesNo | None = None
    kitchen_renovated: YesNo | None = None

    @field_validator(
        "roof_age", "windows_age", "flooring_type", "bathroom_renovated", "kitchen_renovated",
        mode="before",
    )
    @classmethod
    def _blank_is_unset(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

class ValidationResponse(BaseModel):
    valid: bool
    errors: dict[str, str]

class Range(BaseModel):
    low: int
    high: int

class Adjustments(BaseModel):
    roof: int = 0
    windows: int = 0
    flooring: int = 0
    bathroom: int = 0
    kitchen: int = 0

class Coordinates(BaseModel):
    lat: float
    lon: float

class Comparable(BaseModel):
    address: str
    price: int = Field(ge=0)
    status: Literal["Listed", "Sold"]
    bedrooms: int = Field(ge=0)
    bathrooms: float = Field(ge=0)
    square_feet: int = Field(gt=0)
    days_on_market: int | None = None
    sold_date: str | None = None

class MarketMetricsOut(BaseModel):
    avg_price: int | None = None
    avg_price_per_sqft: int | None = None
    market_trend: Literal["Hot", "Stable", "Cool"] | None = None
    confidence: Literal["High", "Medium", "Low"] | None = None
    comparables_count: int = 0
    has_data: bool = False

class ValuationResponse(BaseModel):
    address: str
    currency: str = "CAD"
    ready: bool
    base_value: int
    valuation: int
    range: Range
    adjustments: Adjustments
    coordinates: Coordinates | None = None
    comparables: list[Comparable]
    market: MarketMetricsOut
    errors: dict[str, str]
    disclaimer: str
    cached: bool = False
    etag: str | None = None

class ComparablesRequest(BaseModel):
    address: str = Field(min_length=1)
    estimate: int = Field(ge=0)
    bedrooms: int = Field(default=3, ge=0)
    bathrooms: float = Field(default=2, ge=0)

class MarketMetricsRequest(BaseModel):
    comparables: list[Comparable]
    estimate: int = Field(ge=0)

class WizardRequest(BaseModel):
    step: int = Field(ge=1, le=5)
    form: PropertyForm = Field(default_factory=PropertyForm)

class WizardResponse(BaseModel):
    step: int
    name: str
    can_advance: bool
