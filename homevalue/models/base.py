from typing import Protocol
from ..data.base import PropertyRecord, Valuation

class ValuationModel(Protocol):
    def predict(self, record: PropertyRecord) -> Valuation:
        """
        Returns the adjusted value for the record together with its
        display band (low, high) and the individual adjustments applied.
        """
        ...
