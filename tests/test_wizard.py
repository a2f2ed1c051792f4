import pytest

from homevalue.services.wizard import Step, StepTransitionError, can_advance, next_step, previous_step

READY = {"address": "500 Rue Test, Montreal", "municipal_value": "450000"}


def test_walk_forward_to_results():
    step = Step.ADDRESS
    for expected in (Step.ASSESSMENT, Step.CONDITION, Step.MARKET, Step.RESULTS):
        step = next_step(step, READY)
        assert step == expected


def test_address_required():
    with pytest.raises(StepTransitionError) as excinfo:
        next_step(Step.ADDRESS, {"address": "  "})
    assert excinfo.value.step == Step.ADDRESS


def test_assessment_requires_valid_value():
    assert not can_advance(Step.ASSESSMENT, {"address": "x", "municipal_value": ""})
    assert not can_advance(Step.ASSESSMENT, {"address": "x", "municipal_value": "5000"})
    assert can_advance(Step.ASSESSMENT, READY)


def test_results_is_last():
    assert not can_advance(Step.RESULTS, READY)
    with pytest.raises(StepTransitionError):
        next_step(Step.RESULTS, READY)


def test_back_stops_at_address():
    assert previous_step(Step.CONDITION) == Step.ASSESSMENT
    assert previous_step(Step.ADDRESS) == Step.ADDRESS
