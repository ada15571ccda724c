import logging

from landmark_graph.config import EngineConfig, set_engine_config
from landmark_graph.memo import DependencyCache, RecordingMapping, _same, memoize_by_step, selector
from landmark_graph.steps import ManualStep


def test_selector_recomputes_only_on_new_inputs():
    calls = []

    def first(state):
        return state["a"]

    @selector(first)
    def doubled(a):
        calls.append(a)
        return [a, a]

    state = {"a": "x"}
    result = doubled(state)
    assert doubled(state) is result
    assert doubled({"a": "x"}) is result
    assert doubled({"a": "y"}) == ["y", "y"]
    assert calls == ["x", "y"]
    assert doubled.recomputations == 2

    doubled.reset()
    doubled(state)
    assert doubled.recomputations == 1


def test_same_compares_scalars_by_value_and_objects_by_identity():
    assert _same("a", "a")
    assert _same(None, None)
    assert not _same(1, 1.0)
    assert not _same(True, 1)
    assert not _same([1], [1])
    assert not _same({"a": 1}, {"a": 1})


def test_memoize_by_step_keys_on_identity():
    calls = []

    @memoize_by_step
    def describe(step):
        calls.append(step.symbol)
        return step.symbol.lower()

    p = ManualStep("P")
    other_p = ManualStep("P")

    assert describe(p) == "p"
    assert describe(p) == "p"
    assert describe(other_p) == "p"
    assert calls == ["P", "P"]
    assert set(describe.cache) == {p, other_p}


def test_recording_mapping_tracks_reads():
    view = RecordingMapping({"P": (0.0, 0.0)})

    assert view["P"] == (0.0, 0.0)
    assert view.get("Q") is None
    assert set(view.reads) == {"P", "Q"}
    assert not view.read_all

    list(view)
    assert view.read_all


def test_dependency_cache_reuses_results_while_reads_are_unchanged():
    cache = DependencyCache("test")
    step = ManualStep("X")
    calls = []

    def compute(landmarks):
        calls.append(1)
        return landmarks.get("P")

    assert cache.get(step, ({"P": 1.0},), compute) == 1.0
    assert cache.get(step, ({"P": 1.0, "Q": 5.0},), compute) == 1.0
    assert len(calls) == 1

    assert cache.get(step, ({"P": 2.0},), compute) == 2.0
    assert len(calls) == 2
    assert cache.misses == 2


def test_dependency_cache_notices_keys_that_appear():
    cache = DependencyCache("test")
    step = ManualStep("X")

    def compute(landmarks):
        return landmarks["P"] if "P" in landmarks else None

    assert cache.get(step, ({},), compute) is None
    assert cache.get(step, ({"P": 3.0},), compute) == 3.0


def test_dependency_cache_after_full_iteration_needs_same_source():
    cache = DependencyCache("test")
    step = ManualStep("X")
    source = {"P": 1.0}

    assert cache.get(step, (source,), lambda landmarks: len(landmarks)) == 1
    assert cache.get(step, (source,), lambda landmarks: -1) == 1
    assert cache.get(step, ({"P": 1.0},), lambda landmarks: -1) == -1


def test_tracing_logs_selector_calls(caplog):
    set_engine_config(EngineConfig(trace_selectors=True))

    @selector(lambda state: state)
    def identity(value):
        return value

    with caplog.at_level(logging.DEBUG, logger="landmark_graph.memo"):
        identity(3)

    messages = [record.getMessage() for record in caplog.records]
    assert "Recomputing identity (#1)" in messages
    assert any(message.startswith("Entering identity") for message in messages)
    assert any(message.startswith("Exiting identity") for message in messages)
