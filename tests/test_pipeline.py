import asyncio

from homevalue.models.adjustment_model import AdjustmentModel
from homevalue.services.extraction import extract_fields
from homevalue.services.validation import is_property_data_valid
from homevalue.services.valuation_service import ValuationService, is_ready, to_record

ROLE = """
4. Valeurs au rôle d'évaluation
Valeur du terrain : 210 500 $
Valeur du bâtiment : 511 900 $
Valeur de l'immeuble : 722 400 $
Superficie du terrain : 250.8 m²
Année de construction : 1948
"""


def run_once():
    extracted = extract_fields(ROLE)
    form = {**extracted.fields(), "address": "4521 Rue Fabre, Montréal", "kitchen_renovated": "yes"}
    assert is_property_data_valid(form)
    record = to_record(form)
    return AdjustmentModel().predict(record), record


def test_extraction_validation_valuation_is_repeatable():
    first, record = run_once()
    second, _ = run_once()
    assert (first.value, first.low, first.high) == (second.value, second.low, second.high)
    assert record.lot_size == 2700   # 250.8 m² * 10.764
    assert record.year_built == 1948
    assert first.value == 722400 + 36120
    assert is_ready(record)


def test_short_form_tokens_map_to_condition_answers():
    record = to_record({"municipal_value": "300 000", "roof_age": "less20", "bathrooms": "1,5"})
    assert record.municipal_value == 300000
    assert record.roof_age == "lessThan20"
    assert record.bathrooms == 1.5


def test_zero_value_is_not_ready():
    assert not is_ready(to_record({"municipal_value": "0"}))
    assert not is_ready(to_record({}))


def test_out_of_range_value_is_not_ready():
    assert not is_ready(to_record({"municipal_value": "5"}))
    assert not is_ready(to_record({"municipal_value": "50000"}))
    assert not is_ready(to_record({"municipal_value": "10000001"}))
    assert is_ready(to_record({"municipal_value": "100000"}))


class RecordingComps:
    def __init__(self):
        self.calls = []

    def comparables(self, address, calculated_value, bedrooms=3, bathrooms=2):
        self.calls.append((address, calculated_value, bedrooms, bathrooms))
        return []


def test_explicit_zero_rooms_reach_the_generator():
    comps = RecordingComps()
    svc = ValuationService(comps=comps)
    form = {"address": "500 Rue Test", "municipal_value": "450000", "bedrooms": "0", "bathrooms": "0"}
    asyncio.run(svc.estimate(form))
    assert comps.calls == [("500 Rue Test", 450000, 0, 0.0)]


def test_missing_rooms_use_defaults():
    comps = RecordingComps()
    svc = ValuationService(comps=comps)
    asyncio.run(svc.estimate({"address": "501 Rue Test", "municipal_value": "450000"}))
    assert comps.calls == [("501 Rue Test", 450000, 3, 2)]
