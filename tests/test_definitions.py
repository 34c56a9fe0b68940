# tests/test_definitions.py

import logging
import pytest
from fuzzytip.fuzzy.core.mfs import MFType
from fuzzytip.fuzzy.io.definitions import (
    load_kb, parse_rules_string, parse_set_line, parse_sets_string, read_rules, read_sets,
)

SETS = """\
# komentarz
Service_Poor SAT 0 50
Service_Good SAT 50 100
Food_Average TRAP 20 40 60 80   # trapez
Food_Good GAUSS 100 200

Tip_Low
Tip_High TRIANG 50 75 100
"""


def test_parse_sets_classifies_by_tip():
    inputs, outputs = parse_sets_string(SETS)
    assert [fs.name for fs in inputs] == ["Service_Poor", "Service_Good", "Food_Average", "Food_Good"]
    assert [fs.name for fs in outputs] == ["Tip_Low", "Tip_High"]
    assert inputs[2].shape.type is MFType.TRAP
    assert inputs[2].shape.params == (20.0, 40.0, 60.0, 80.0)
    assert outputs[0].shape is None
    assert outputs[1].shape.type is MFType.TRIANG

def test_extra_params_are_truncated_to_arity():
    fs = parse_set_line("Food_Poor TRIANG 0 25 50 99")
    assert fs.shape.params == (0.0, 25.0, 50.0)
    assert fs.evaluate(25) == 1.0

def test_too_few_params_evaluate_to_zero(caplog):
    with caplog.at_level(logging.WARNING):
        fs = parse_set_line("Food_Poor TRAP 0 25 50", 4)
    assert fs.evaluate(30) == 0.0
    assert "[sets:4]" in caplog.text

def test_unknown_shape_keeps_set_without_shape(caplog):
    with caplog.at_level(logging.WARNING):
        fs = parse_set_line("Food_Poor BELL 0 25", 2)
    assert fs is not None and fs.shape is None
    assert "Unknown MF shape" in caplog.text

def test_non_numeric_parameter_skips_line(caplog):
    with caplog.at_level(logging.WARNING):
        assert parse_set_line("Food_Poor TRIANG a b c") is None
    assert "niepoprawny parametr" in caplog.text

def test_bare_name_without_tip_is_input():
    fs = parse_set_line("Mystery")
    assert fs.is_input and fs.shape is None

def test_custom_output_marker():
    inputs, outputs = parse_sets_string("Cost_Low\nTip_Low SAT 0 50\n", marker="Cost")
    assert [fs.name for fs in outputs] == ["Cost_Low"]
    assert [fs.name for fs in inputs] == ["Tip_Low"]

def test_parse_rules_skips_blank_and_comment_lines():
    rules = parse_rules_string("IF A THEN Tip_Low\n\n# x\n  IF B AND C THEN Tip_High  \n")
    assert [r.text for r in rules] == ["IF A THEN Tip_Low", "IF B AND C THEN Tip_High"]
    assert [r.line for r in rules] == [1, 4]

def test_missing_files_are_reported_not_raised(tmp_path, caplog):
    missing = str(tmp_path / "nope.txt")
    with caplog.at_level(logging.ERROR):
        assert read_sets(missing) == ([], [])
        assert read_rules(missing) == []
    assert "Unable to open file" in caplog.text
    kb = load_kb(missing, missing)
    assert kb.infer({"service": 40, "food": 60}) == {}

def test_read_files_from_disk(tmp_path):
    sets = tmp_path / "variables.txt"
    sets.write_text(SETS, encoding="utf-8")
    rules = tmp_path / "rules.txt"
    rules.write_text("IF Service_Poor OR Food_Average THEN Tip_Low\n", encoding="utf-8")
    kb = load_kb(str(sets), str(rules))
    assert len(kb.inputs) == 4 and len(kb.outputs) == 2 and len(kb.rules) == 1
    assert kb.infer({"service": 25, "food": 30}) == {"Tip_Low": pytest.approx(0.5)}

def test_shipped_definitions(data_dir):
    kb = load_kb(str(data_dir / "variables.txt"), str(data_dir / "rules.txt"))
    out = kb.infer({"service": 40, "food": 60})
    assert out == {
        "Tip_Low": pytest.approx(1 / 3),
        "Tip_Medium": pytest.approx(2 / 3),
        "Tip_High": pytest.approx(0.01831563888873418),
    }
    assert kb.unknown_references() == []
