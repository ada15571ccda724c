import math

import pytest

from landmark_graph.analysis import Analysis, AnalysisComponent
from landmark_graph.catalog.constructions import angle_between_points, difference, line, point
from landmark_graph.steps import (
    ComputableStep,
    ManualStep,
    MappableStep,
    are_equal_steps,
    are_equal_symbols,
    get_steps_for_analysis,
    is_step_computable,
    is_step_manual,
    is_step_mappable,
    try_calculate,
    try_map,
)


def _analysis(*steps):
    return Analysis("test", [AnalysisComponent(step, norm=0.0) for step in steps], lambda v, o: [])


def test_classifiers_are_mutually_exclusive():
    p, q = point("P"), point("Q")
    steps = [p, line(p, q), angle_between_points(p, q, point("R"))]
    flags = [(is_step_manual(s), is_step_mappable(s), is_step_computable(s)) for s in steps]
    assert flags == [(True, False, False), (False, True, False), (False, False, True)]


def test_computable_step_requires_components():
    with pytest.raises(ValueError) as exc:
        ComputableStep("X", "angle", (), lambda values, objects: 1.0)
    assert "needs at least one component" in str(exc.value)


def test_equal_steps_ignore_symbol_but_not_structure():
    p, q, r = point("P"), point("Q"), point("R")
    general = line(p, q, "L")
    left = line(p, q, "L_left")
    other = line(p, r, "L_other")

    assert are_equal_steps(general, left)
    assert not are_equal_symbols(general, left)
    assert not are_equal_steps(general, other)
    # order-sensitive component comparison
    assert not are_equal_steps(general, line(q, p, "L_reversed"))


def test_distinct_manual_points_are_never_equal():
    assert not are_equal_steps(point("P"), point("Q"))
    assert are_equal_steps(point("P"), ManualStep("P"))


def test_equal_steps_is_symmetric():
    p, q, r = point("P"), point("Q"), point("R")
    steps = [
        p,
        q,
        line(p, q, "PQ"),
        line(p, q, "PQ2"),
        line(q, p, "QP"),
        angle_between_points(p, q, r, "a1"),
        angle_between_points(p, q, r, "a2"),
        MappableStep("M", "point", lambda lm: lm["P"], components=(p, q)),
    ]
    for a in steps:
        for b in steps:
            assert are_equal_steps(a, b) == are_equal_steps(b, a)


def test_nested_computables_compare_recursively():
    p, q, r, s = (point(name) for name in "PQRS")
    first = difference(angle_between_points(p, q, r, "x"), angle_between_points(p, q, s, "y"), "d1")
    second = difference(angle_between_points(p, q, r, "x2"), angle_between_points(p, q, s, "y2"), "d2")
    swapped = difference(angle_between_points(p, q, s, "y3"), angle_between_points(p, q, r, "x3"), "d3")

    assert are_equal_steps(first, second)
    assert not are_equal_steps(first, swapped)


def test_get_steps_for_analysis_preorder_and_deduplication():
    p, q, r = point("P"), point("Q"), point("R")
    first = angle_between_points(p, q, r, "PQR")
    second = angle_between_points(r, q, p, "RQP")
    analysis = _analysis(first, second)

    with_duplicates = [s.symbol for s in get_steps_for_analysis(analysis)]
    unique = [s.symbol for s in get_steps_for_analysis(analysis, include_duplicates=False)]

    assert with_duplicates == ["PQR", "P", "Q", "R", "RQP", "R", "Q", "P"]
    assert unique == ["PQR", "P", "Q", "R", "RQP"]
    assert len(unique) == len(set(unique))


def test_try_map_turns_failures_into_none():
    p, q = point("P"), point("Q")
    ln = line(p, q)

    assert try_map(ln, {"P": (0.0, 0.0)}) is None
    assert try_map(ln, {"P": (1.0, 1.0), "Q": (1.0, 1.0)}) is None
    assert try_map(ln, {"P": (0.0, 0.0), "Q": (1.0, 0.0)}) is not None
    assert try_map(p, {"P": (0.0, 0.0)}) is None


@pytest.mark.parametrize(
    "calculate, expected",
    [
        (lambda values, objects: 1 / 0, None),
        (lambda values, objects: None, None),
        (lambda values, objects: math.nan, None),
        (lambda values, objects: "not a number", None),
        (lambda values, objects: 3, 3.0),
    ],
)
def test_try_calculate_is_soft(calculate, expected):
    step = ComputableStep("X", "distance", (point("P"),), calculate)
    assert try_calculate(step, {}, {}) == expected
