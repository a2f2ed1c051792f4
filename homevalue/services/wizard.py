from enum import IntEnum
from typing import Any, Mapping

from ..core.utils import is_blank
from .validation import is_property_data_valid

class Step(IntEnum):
    ADDRESS = 1
    ASSESSMENT = 2
    CONDITION = 3
    MARKET = 4
    RESULTS = 5

class StepTransitionError(Exception):
    def __init__(self, step: Step, reason: str):
        super().__init__(reason)
        self.step = step
        self.reason = reason

def blocking_reason(step: Step, form: Mapping[str, Any]) -> str | None:
    """Why the user cannot move forward from ``step``, or None."""
    if step == Step.RESULTS:
        return "Already at the last step"
    if step == Step.ADDRESS and is_blank(form.get("address")):
        return "An address is required"
    if step == Step.ASSESSMENT and not is_property_data_valid(form):
        return "A valid property value is required"
    return None

def can_advance(step: Step, form: Mapping[str, Any]) -> bool:
    return blocking_reason(step, form) is None

def next_step(step: Step, form: Mapping[str, Any]) -> Step:
    reason = blocking_reason(step, form)
    if reason:
        raise StepTransitionError(step, reason)
    return Step(step + 1)

def previous_step(step: Step) -> Step:
    return Step(max(step - 1, Step.ADDRESS))
