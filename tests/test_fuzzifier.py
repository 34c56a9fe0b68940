# tests/test_fuzzifier.py

import pytest
from fuzzytip.fuzzy.core.mfs import MFType
from fuzzytip.fuzzy.model.fuzzifier import CrispRouter, build_degree_map, fuzzify_into, unrouted
from fuzzytip.fuzzy.model.fuzzyset import input_set, output_set


@pytest.fixture
def sets():
    return [
        input_set("Service_Poor", MFType.SAT, 0, 50),
        input_set("Food_Good", MFType.SAT, 50, 100),
        input_set("waiting_time_Long", MFType.TRIANG, 0, 50, 100),
        input_set("price_High", MFType.TRAP, 0, 25, 75, 100),
        input_set("Weather_Bad", MFType.SAT, 0, 50),
        output_set("Tip_Low"),
    ]

def test_fuzzify_into_records_under_set_name():
    degrees = {}
    fs = input_set("Service_Poor", MFType.SAT, 0, 50)
    assert fuzzify_into(degrees, fs, 25) == pytest.approx(0.5)
    assert degrees == {"Service_Poor": pytest.approx(0.5)}
    assert fs.degree == pytest.approx(0.5)

def test_first_degree_for_duplicate_name_is_kept():
    degrees = {}
    fuzzify_into(degrees, input_set("Service_Poor", MFType.SAT, 0, 50), 0)
    fuzzify_into(degrees, input_set("Service_Poor", MFType.SAT, 0, 50), 50)
    assert degrees["Service_Poor"] == 1.0

def test_router_default_policy():
    r = CrispRouter()
    assert r.route("Service_Poor") == "service"
    assert r.route("waiting_time_Short") == "service"
    assert r.route("Food_Good") == "food"
    assert r.route("price_Low") == "food"
    assert r.route("Weather_Bad") is None

def test_build_degree_map_routes_crisp_values(sets):
    degrees = build_degree_map(sets, {"service": 25, "food": 75})
    assert degrees["Service_Poor"] == pytest.approx(0.5)
    assert degrees["Food_Good"] == pytest.approx(0.5)
    assert degrees["waiting_time_Long"] == pytest.approx(0.5)
    assert degrees["price_High"] == 1.0
    assert "Weather_Bad" not in degrees   # brak trasy
    assert "Tip_Low" not in degrees       # zbiór wyjściowy

def test_missing_crisp_value_skips_sets(sets):
    degrees = build_degree_map(sets, {"service": 0})
    assert set(degrees) == {"Service_Poor", "waiting_time_Long"}

def test_custom_routes(sets):
    router = CrispRouter.from_mapping({"weather": ["Weather"]})
    degrees = build_degree_map(sets, {"weather": 0}, router)
    assert degrees == {"Weather_Bad": 1.0}
    assert "Service_Poor" in unrouted(sets, router)

def test_refuzzification_is_idempotent(sets):
    a = build_degree_map(sets, {"service": 40, "food": 60})
    b = build_degree_map(sets, {"service": 40, "food": 60})
    assert a == b
