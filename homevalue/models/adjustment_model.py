from .base import ValuationModel
from ..core.utils import round_half_up
from ..data.base import (
    AGE_ALIASES, HARDWOOD, LESS_THAN_20, MORE_THAN_20, YES, PropertyRecord, Valuation,
)

AGE_ADJUSTMENT = 15_000          # roof, windows
HARDWOOD_ADJUSTMENT = 20_000
BATHROOM_RENOVATION_PCT = 0.03
KITCHEN_RENOVATION_PCT = 0.05
BAND = 0.08                      # +/- around the final value

def age_adjustment(answer: str | None) -> int:
    answer = AGE_ALIASES.get(answer, answer)
    if answer == LESS_THAN_20:
        return AGE_ADJUSTMENT
    if answer == MORE_THAN_20:
        return -AGE_ADJUSTMENT
    return 0

def value_band(value: int) -> tuple[int, int]:
    """Fixed +/-8% display range, not a statistical interval."""
    return round_half_up(value * (1 - BAND)), round_half_up(value * (1 + BAND))

class AdjustmentModel(ValuationModel):
    """
    Condition questionnaire -> dollar estimate.

    Fixed adjustments (roof, windows, flooring) are added to the municipal
    value; renovation percentages are taken from the municipal value itself,
    not from the fixed-adjusted subtotal.
    """
    def predict(self, record: PropertyRecord) -> Valuation:
        base = record.municipal_value or 0

        roof = age_adjustment(record.roof_age)
        windows = age_adjustment(record.windows_age)
        flooring = HARDWOOD_ADJUSTMENT if record.flooring_type == HARDWOOD else 0
        after_fixed = base + roof + windows + flooring

        bathroom = round_half_up(base * BATHROOM_RENOVATION_PCT) if record.bathroom_renovated == YES else 0
        kitchen = round_half_up(base * KITCHEN_RENOVATION_PCT) if record.kitchen_renovated == YES else 0

        value = after_fixed + bathroom + kitchen
        low, high = value_band(value)
        return Valuation(
            base=base,
            value=value,
            low=low,
            high=high,
            adjustments={
                "roof": roof,
                "windows": windows,
                "flooring": flooring,
                "bathroom": bathroom,
                "kitchen": kitchen,
            },
        )
