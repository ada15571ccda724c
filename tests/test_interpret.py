import pytest

from landmark_graph.analysis import AnalysisComponent
from landmark_graph.catalog.constructions import angle_between_points, point
from landmark_graph.config import EngineConfig, set_engine_config
from landmark_graph.interpret import (
    CategorizedAnalysisResult,
    RangeRule,
    combine_interpreters,
    interpret_with,
    severity_for_deviation,
)

RULE = RangeRule("maxilla", "SNA", 82.0, 3.5, "retrognathic", "normal", "prognathic")


@pytest.mark.parametrize(
    "value, indication",
    [(70.0, "retrognathic"), (78.5, "normal"), (82.0, "normal"), (85.5, "normal"), (86.0, "prognathic")],
)
def test_range_rule_indications(value, indication):
    result = RULE.evaluate({"SNA": value})

    assert result.indication == indication
    assert result.category == "maxilla"
    assert result.relevant_components == ("SNA",)
    assert result.value == value


def test_range_rule_skips_missing_values():
    assert RULE.evaluate({}) is None
    assert RULE.evaluate({"SNA": None}) is None


@pytest.mark.parametrize(
    "value, severity",
    [(82.0, "none"), (85.0, "none"), (86.0, "low"), (90.0, "medium"), (93.0, "high"), (71.0, "high")],
)
def test_severity_grows_with_deviation(value, severity):
    assert severity_for_deviation(value, 82.0, 3.5) == severity


def test_severity_thresholds_come_from_config():
    assert severity_for_deviation(86.0, 82.0, 3.5) == "low"

    set_engine_config(EngineConfig(severity_thresholds=(2.0, 3.0, 4.0)))

    assert severity_for_deviation(86.0, 82.0, 3.5) == "none"
    assert severity_for_deviation(90.0, 82.0, 3.5, thresholds=(1.0, 2.0, 3.0)) == "medium"


def test_severity_without_std_dev():
    assert severity_for_deviation(100.0, 82.0, None) == "none"
    assert severity_for_deviation(100.0, 82.0, 0.0) == "none"


def test_interpreters_combine_in_order():
    mandible = RangeRule("mandible", "SNB", 80.0, 3.0, "retrognathic", "normal", "prognathic")
    interpret = combine_interpreters(interpret_with([RULE]), interpret_with([mandible]))

    results = interpret({"SNA": 90.0, "SNB": 80.0}, {})

    assert results == [
        CategorizedAnalysisResult("maxilla", "prognathic", "medium", ("SNA",), 90.0),
        CategorizedAnalysisResult("mandible", "normal", "none", ("SNB",), 80.0),
    ]
    assert interpret({"SNB": 70.0}, {})[0].indication == "retrognathic"


def test_rule_for_component_uses_declared_norm():
    component = AnalysisComponent(angle_between_points(point("S"), point("N"), point("A"), "SNA"), norm=82.0, std_dev=3.5)

    rule = RangeRule.for_component("maxilla", component, "retrognathic", "normal", "prognathic")

    assert rule == RULE
    with pytest.raises(ValueError):
        RangeRule.for_component("maxilla", AnalysisComponent(component.landmark, norm=82.0), "a", "b", "c")
