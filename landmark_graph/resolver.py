"""Memoized value resolution for the active analysis.

Every public name here is a selector: call it with a
:class:`~landmark_graph.state.WorkspaceState` to obtain either a mapping or a
per-step function bound to that snapshot, e.g.::

    value = get_calculated_value(state)(step)

Per-step functions cache by step within a snapshot.  Across snapshots the
results of ``map`` and ``calculate`` are kept in :class:`DependencyCache`
instances together with the landmarks, objects and values they read, so
placing a landmark only re-runs the steps that actually looked at it.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Sequence, Set

from .analysis import Analysis
from .eligibility import StepPredicate, computation_eligibility, mapping_eligibility
from .equivalence import find_equal_components
from .geometry import Point
from .memo import DependencyCache, memoize_by_step, selector
from .selection import get_active_analysis, get_active_analysis_steps, get_manual_landmarks
from .steps import (
    Step,
    is_step_computable,
    is_step_manual,
    is_step_mappable,
    iter_component_steps,
    try_calculate,
    try_map,
)

logger = logging.getLogger(__name__)

map_results = DependencyCache("Mapping")
calculation_results = DependencyCache("Calculating")


class CalculatedValueTable(Mapping[str, Optional[float]]):
    """Calculated values of a step set, evaluated on first access."""

    def __init__(self, steps: Mapping[str, Step], value_of: Callable[[Step], Optional[float]]) -> None:
        self._steps = steps
        self._value_of = value_of

    def __getitem__(self, symbol: str) -> Optional[float]:
        return self._value_of(self._steps[symbol])

    def __iter__(self) -> Iterator[str]:
        return iter(self._steps)

    def __len__(self) -> int:
        return len(self._steps)


@selector(get_manual_landmarks)
def is_manual_step_complete(landmarks: Mapping[str, Point]) -> StepPredicate:
    """Manual steps are complete once placed; other kinds trivially so."""

    def is_complete(step: Step) -> bool:
        if is_step_manual(step):
            return landmarks.get(step.symbol) is not None
        return True

    return is_complete


@selector(get_manual_landmarks)
def get_map_attempts(landmarks: Mapping[str, Point]) -> Callable[[Step], Any]:
    @memoize_by_step
    def attempt(step: Step) -> Any:
        if not is_step_mappable(step):
            return None
        return map_results.get(step, (landmarks,), lambda view: try_map(step, view))

    return attempt


@selector(is_manual_step_complete, get_map_attempts)
def is_step_eligible_for_mapping(is_placed: StepPredicate, attempt: Callable[[Step], Any]) -> StepPredicate:
    return mapping_eligibility(is_placed, attempt)


@selector(get_manual_landmarks, is_step_eligible_for_mapping, get_map_attempts)
def get_mapped_value(
    landmarks: Mapping[str, Point],
    is_eligible: StepPredicate,
    attempt: Callable[[Step], Any],
) -> Callable[[Step], Any]:
    """Geometric object of a step, or ``None`` while it cannot be produced.

    Manual steps pass their placed point through; computable steps have no
    geometric object of their own.
    """

    def mapped_value(step: Step) -> Any:
        if is_step_manual(step):
            return landmarks.get(step.symbol)
        if not is_step_mappable(step) or not is_eligible(step):
            return None
        return attempt(step)

    return mapped_value


@selector(get_active_analysis_steps, get_mapped_value)
def get_all_geo_objects(steps: Sequence[Step], mapped_value: Callable[[Step], Any]) -> Dict[str, Any]:
    return {step.symbol: mapped_value(step) for step in steps}


@selector(get_mapped_value)
def is_step_mapping_complete(mapped_value: Callable[[Step], Any]) -> StepPredicate:
    def is_complete(step: Step) -> bool:
        if is_step_computable(step):
            return True
        return mapped_value(step) is not None

    return is_complete


@selector(is_step_mapping_complete, find_equal_components)
def is_step_eligible_for_computation(
    is_mapped: StepPredicate,
    find_equal: Callable[[Step], List[Step]],
) -> StepPredicate:
    return computation_eligibility(is_mapped, find_equal)


@selector(get_active_analysis_steps, get_all_geo_objects, find_equal_components)
def get_resolved_geo_objects(
    steps: Sequence[Step],
    objects: Mapping[str, Any],
    find_equal: Callable[[Step], List[Step]],
) -> Dict[str, Any]:
    """Geo objects with gaps filled from equivalent steps."""

    resolved = dict(objects)
    for step in steps:
        if resolved.get(step.symbol) is not None:
            continue
        for equal in find_equal(step):
            value = objects.get(equal.symbol)
            if value is not None:
                logger.debug("Resolving %s through equivalent %s", step.symbol, equal.symbol)
                resolved[step.symbol] = value
                break
    return resolved


@selector(
    get_active_analysis_steps,
    is_step_eligible_for_computation,
    get_resolved_geo_objects,
    find_equal_components,
)
def get_calculated_value(
    steps: Sequence[Step],
    is_eligible: StepPredicate,
    objects: Mapping[str, Any],
    find_equal: Callable[[Step], List[Step]],
) -> Callable[[Step], Optional[float]]:
    """Calculated value of a step, or ``None`` while it is not available.

    ``calculate`` receives the values of every computable step of the
    active analysis, evaluated lazily and filled from equivalent steps, and
    the resolved geo objects.  A step reading its own value, directly or
    through a sibling, sees ``None``.
    """

    computables: Dict[str, Step] = {step.symbol: step for step in steps if is_step_computable(step)}
    running: Set[Step] = set()

    def resolved_value(step: Step) -> Optional[float]:
        if step in running:
            return None
        value = calculated_value(step)
        if value is not None:
            return value
        for equal in find_equal(step):
            if is_step_computable(equal) and equal not in running:
                value = calculated_value(equal)
                if value is not None:
                    return value
        return None

    table = CalculatedValueTable(computables, resolved_value)

    def values_for(step: Step) -> Mapping[str, Optional[float]]:
        # steps outside the active analysis still see their own components
        extra = {
            component.symbol: component
            for component in iter_component_steps(step)
            if is_step_computable(component) and component.symbol not in computables
        }
        if not extra:
            return table
        return CalculatedValueTable({**computables, **extra}, resolved_value)

    @memoize_by_step
    def calculated_value(step: Step) -> Optional[float]:
        if not is_eligible(step):
            return None
        running.add(step)
        try:
            return calculation_results.get(
                step,
                (values_for(step), objects),
                lambda values, objs: try_calculate(step, values, objs),
            )
        finally:
            running.discard(step)

    return calculated_value


@selector(get_calculated_value)
def is_step_calculation_complete(calculated_value: Callable[[Step], Optional[float]]) -> StepPredicate:
    def is_complete(step: Step) -> bool:
        if is_step_computable(step):
            return calculated_value(step) is not None
        return True

    return is_complete


@selector(is_step_mapping_complete, is_step_calculation_complete)
def is_step_complete(is_mapped: StepPredicate, is_calculated: StepPredicate) -> StepPredicate:
    def is_complete(step: Step) -> bool:
        return is_mapped(step) and is_calculated(step)

    return is_complete


@selector(get_active_analysis, get_calculated_value)
def get_all_calculated_values(
    analysis: Optional[Analysis],
    calculated_value: Callable[[Step], Optional[float]],
) -> Dict[str, Optional[float]]:
    if analysis is None:
        return {}
    return {component.landmark.symbol: calculated_value(component.landmark) for component in analysis.components}
