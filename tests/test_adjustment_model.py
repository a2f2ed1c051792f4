from homevalue.data.base import PropertyRecord
from homevalue.models.adjustment_model import AdjustmentModel, age_adjustment, value_band


def predict(**fields):
    return AdjustmentModel().predict(PropertyRecord(**fields))


def test_mixed_condition_answers():
    v = predict(
        municipal_value=450000,
        roof_age="lessThan20",
        windows_age="moreThan20",
        flooring_type="hardwood",
        bathroom_renovated="yes",
        kitchen_renovated="no",
    )
    assert v.after_fixed == 470000
    assert v.adjustments["bathroom"] == 13500
    assert v.adjustments["kitchen"] == 0
    assert v.value == 483500
    assert (v.low, v.high) == (444820, 522180)


def test_no_answers_keeps_municipal_value():
    v = predict(municipal_value=500000)
    assert v.value == 500000
    assert (v.low, v.high) == (460000, 540000)


def test_percentages_use_unadjusted_municipal_value():
    v = predict(
        municipal_value=400000,
        roof_age="lessThan20",
        flooring_type="hardwood",
        kitchen_renovated="yes",
        bathroom_renovated="yes",
    )
    # 5% / 3% of 400000, not of the 435000 subtotal
    assert v.adjustments["kitchen"] == 20000
    assert v.adjustments["bathroom"] == 12000
    assert v.value == 400000 + 15000 + 20000 + 20000 + 12000


def test_other_flooring_adds_nothing():
    assert predict(municipal_value=300000, flooring_type="other").value == 300000


def test_short_age_tokens_are_accepted():
    assert age_adjustment("less20") == 15000
    assert age_adjustment("more20") == -15000
    assert age_adjustment(None) == 0


def test_missing_municipal_value_propagates_zero():
    v = predict(roof_age="moreThan20", kitchen_renovated="yes")
    assert v.base == 0
    assert v.value == -15000 + 0
    assert predict().value == 0
    assert value_band(0) == (0, 0)


def test_same_record_same_result():
    record = PropertyRecord(municipal_value=612000, windows_age="lessThan20", bathroom_renovated="yes")
    model = AdjustmentModel()
    assert model.predict(record) == model.predict(record)
