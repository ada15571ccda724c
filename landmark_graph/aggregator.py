"""Analysis-level selectors: completeness, results and guided placement."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Literal, Mapping, Optional, Sequence, Tuple

from .analysis import Analysis
from .geometry import Point
from .interpret import CategorizedAnalysisResult
from .memo import selector
from .resolver import (
    get_all_calculated_values,
    get_all_geo_objects,
    is_step_complete,
)
from .selection import (
    get_active_analysis,
    get_active_analysis_steps,
    get_all_active_analysis_steps,
    get_manual_landmarks,
    get_manual_steps,
)
from .state import WorkspaceState
from .steps import Step

StepState = Literal["done", "current", "pending"]


@selector(get_active_analysis, is_step_complete)
def is_analysis_complete(analysis: Optional[Analysis], is_complete: Callable[[Step], bool]) -> bool:
    if analysis is None:
        return False
    return all(is_complete(component.landmark) for component in analysis.components)


@selector(get_active_analysis, get_all_calculated_values, get_all_geo_objects)
def get_categorized_analysis_results(
    analysis: Optional[Analysis],
    values: Mapping[str, Optional[float]],
    objects: Mapping[str, Any],
) -> List[CategorizedAnalysisResult]:
    if analysis is None:
        return []
    return list(analysis.interpret(values, objects))


@selector(get_categorized_analysis_results)
def can_show_results(results: Sequence[CategorizedAnalysisResult]) -> bool:
    return len(results) > 0


@selector(get_manual_steps, get_manual_landmarks)
def get_expected_next_manual_landmark(
    manual_steps: Sequence[Step], landmarks: Mapping[str, Point]
) -> Optional[Step]:
    """First manual step, in traversal order, that has not been placed."""

    for step in manual_steps:
        if landmarks.get(step.symbol) is None:
            return step
    return None


@selector(get_manual_landmarks, get_expected_next_manual_landmark)
def get_manual_step_state(
    landmarks: Mapping[str, Point], next_step: Optional[Step]
) -> Callable[[str], StepState]:
    def step_state(symbol: str) -> StepState:
        if landmarks.get(symbol) is not None:
            return "done"
        if next_step is not None and next_step.symbol == symbol:
            return "current"
        return "pending"

    return step_state


@selector(get_manual_steps, get_manual_step_state)
def get_pending_steps(manual_steps: Sequence[Step], step_state: Callable[[str], StepState]) -> List[Step]:
    return [step for step in manual_steps if step_state(step.symbol) == "pending"]


@selector(get_all_active_analysis_steps, get_active_analysis_steps)
def find_step_by_symbol(
    steps: Sequence[Step], unique_steps: Sequence[Step]
) -> Callable[..., Optional[Step]]:
    def find(symbol: str, include_duplicates: bool = True) -> Optional[Step]:
        for step in steps if include_duplicates else unique_steps:
            if step.symbol == symbol:
                return step
        return None

    return find


@dataclass
class AnalysisSummary:
    """Snapshot report of the active analysis."""

    analysis_id: Optional[str]
    placed: int
    total_manual: int
    next_landmark: Optional[str]
    manual_states: Dict[str, StepState] = field(default_factory=dict)
    values: Dict[str, Optional[float]] = field(default_factory=dict)
    results: List[CategorizedAnalysisResult] = field(default_factory=list)
    complete: bool = False

    @property
    def progress(self) -> Tuple[int, int]:
        return self.placed, self.total_manual


def summarize(state: WorkspaceState) -> AnalysisSummary:
    manual_steps = get_manual_steps(state)
    step_state = get_manual_step_state(state)
    states = {step.symbol: step_state(step.symbol) for step in manual_steps}
    next_step = get_expected_next_manual_landmark(state)
    return AnalysisSummary(
        analysis_id=state.analysis_id,
        placed=sum(1 for value in states.values() if value == "done"),
        total_manual=len(manual_steps),
        next_landmark=next_step.symbol if next_step is not None else None,
        manual_states=states,
        values=dict(get_all_calculated_values(state)),
        results=list(get_categorized_analysis_results(state)),
        complete=is_analysis_complete(state),
    )
