import pytest

from landmark_graph.analysis import Analysis, AnalysisComponent
from landmark_graph.catalog.constructions import angle_between_points, difference, line, point
from landmark_graph.registry import AnalysisRegistry
from landmark_graph.resolver import (
    get_calculated_value,
    get_mapped_value,
    is_step_eligible_for_computation,
    is_step_eligible_for_mapping,
)
from landmark_graph.state import WorkspaceState
from landmark_graph.steps import ComputableStep, MappableStep


def _state(analysis, landmarks=None):
    registry = AnalysisRegistry([analysis])
    return WorkspaceState.create(registry, analysis.id, landmarks or {})


def _single(step, analysis_id="test"):
    return Analysis(analysis_id, [AnalysisComponent(step, norm=0.0)], lambda v, o: [])


def test_angle_becomes_eligible_once_all_points_are_placed():
    p1, p2, p3 = point("P1"), point("P2"), point("P3")
    angle = angle_between_points(p1, p2, p3, "A")
    state = _state(_single(angle), {"P1": (1.0, 0.0), "P2": (0.0, 0.0)})

    assert not is_step_eligible_for_computation(state)(angle)
    assert get_calculated_value(state)(angle) is None

    state = state.with_landmark("P3", (0.0, 1.0))

    assert is_step_eligible_for_computation(state)(angle)
    assert get_calculated_value(state)(angle) == pytest.approx(90.0)


def test_equivalent_step_satisfies_computation():
    p, q = point("P"), point("Q")
    general = line(p, q, "B_general")

    def unmapped(landmarks):
        return None

    left = MappableStep("B_left", "line", unmapped, components=(p, q))

    def length(values, objects):
        ln = objects.get("B_left")
        return None if ln is None else ln.length

    dependent = ComputableStep("D", "distance", (left,), length)
    analysis = Analysis(
        "test",
        [AnalysisComponent(general, norm=0.0), AnalysisComponent(dependent, norm=0.0)],
        lambda v, o: [],
    )
    state = _state(analysis, {"P": (0.0, 0.0), "Q": (3.0, 4.0)})

    assert get_mapped_value(state)(general) is not None
    assert get_mapped_value(state)(left) is None
    assert is_step_eligible_for_computation(state)(dependent)
    assert get_calculated_value(state)(dependent) == pytest.approx(5.0)


def test_mapping_eligibility_by_kind():
    p, q, r = point("P"), point("Q"), point("R")
    pq = line(p, q, "PQ")
    angle = angle_between_points(p, q, r, "PQR")
    uses_line = ComputableStep("len", "distance", (pq,), lambda values, objects: objects["PQ"].length)
    state = _state(_single(angle), {"P": (0.0, 0.0), "Q": (1.0, 0.0)})
    eligible = is_step_eligible_for_mapping(state)

    assert eligible(p)
    assert eligible(r)
    assert eligible(pq)
    assert not eligible(angle)
    assert eligible(uses_line)

    state = state.with_landmark("R", (1.0, 1.0))
    assert is_step_eligible_for_mapping(state)(angle)


def test_mapping_eligibility_requires_mapped_line_components():
    p, q = point("P"), point("Q")
    pq = line(p, q, "PQ")
    uses_line = ComputableStep("len", "distance", (pq,), lambda values, objects: objects["PQ"].length)
    # coincident points: the line cannot be constructed
    state = _state(_single(uses_line), {"P": (1.0, 1.0), "Q": (1.0, 1.0)})

    assert not is_step_eligible_for_mapping(state)(uses_line)
    assert not is_step_eligible_for_computation(state)(uses_line)
    assert get_calculated_value(state)(uses_line) is None


def test_computation_eligibility_only_for_computable_steps():
    p, q = point("P"), point("Q")
    pq = line(p, q, "PQ")
    state = _state(_single(pq), {"P": (0.0, 0.0), "Q": (1.0, 0.0)})
    eligible = is_step_eligible_for_computation(state)

    assert not eligible(p)
    assert not eligible(pq)


def test_nested_computable_waits_for_inner_values():
    s, n, a, b = point("S"), point("N"), point("A"), point("B")
    sna = angle_between_points(s, n, a, "SNA")
    snb = angle_between_points(s, n, b, "SNB")
    anb = difference(sna, snb, "ANB")
    state = _state(_single(anb), {"S": (0.0, 0.0), "N": (10.0, 0.0), "A": (10.0, 5.0)})

    # computable components are vacuously mapped, so ANB may be attempted
    assert is_step_eligible_for_computation(state)(anb)
    assert get_calculated_value(state)(sna) is not None
    assert get_calculated_value(state)(anb) is None

    state = state.with_landmark("B", (10.0, 8.0))
    value = get_calculated_value(state)
    assert value(anb) == pytest.approx(value(sna) - value(snb))


def test_values_are_none_whenever_ineligible():
    p1, p2, p3 = point("P1"), point("P2"), point("P3")
    angle = angle_between_points(p1, p2, p3, "A")
    pq = line(p1, p2, "L")
    analysis = Analysis(
        "test",
        [AnalysisComponent(angle, norm=0.0), AnalysisComponent(pq, norm=0.0)],
        lambda v, o: [],
    )
    snapshots = [{}, {"P1": (0.0, 0.0)}, {"P1": (0.0, 0.0), "P2": (1.0, 0.0)}]
    for landmarks in snapshots:
        state = _state(analysis, landmarks)
        for step in (p1, p2, p3, angle, pq):
            if not is_step_eligible_for_mapping(state)(step):
                assert get_mapped_value(state)(step) is None
            if not is_step_eligible_for_computation(state)(step):
                assert get_calculated_value(state)(step) is None
