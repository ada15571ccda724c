"""Root selectors: the active analysis and its flattened step set."""

from __future__ import annotations

from typing import List, Mapping, Optional

from .analysis import Analysis
from .geometry import Point
from .memo import selector
from .registry import AnalysisRegistry
from .state import WorkspaceState
from .steps import Step, get_steps_for_analysis, is_step_manual


def get_manual_landmarks(state: WorkspaceState) -> Mapping[str, Point]:
    return state.manual_landmarks


def get_active_analysis_id(state: WorkspaceState) -> Optional[str]:
    return state.analysis_id


def get_registry(state: WorkspaceState) -> AnalysisRegistry:
    return state.registry


@selector(get_active_analysis_id)
def is_analysis_set(analysis_id: Optional[str]) -> bool:
    return analysis_id is not None


@selector(get_registry, get_active_analysis_id)
def get_active_analysis(registry: AnalysisRegistry, analysis_id: Optional[str]) -> Optional[Analysis]:
    if analysis_id is None:
        return None
    return registry[analysis_id]


@selector(get_active_analysis)
def get_active_analysis_steps(analysis: Optional[Analysis]) -> List[Step]:
    """Every step reachable from the active analysis, one entry per symbol."""

    if analysis is None:
        return []
    return get_steps_for_analysis(analysis, include_duplicates=False)


@selector(get_active_analysis)
def get_all_active_analysis_steps(analysis: Optional[Analysis]) -> List[Step]:
    """Pre-order traversal including repeated visits of shared steps."""

    if analysis is None:
        return []
    return get_steps_for_analysis(analysis)


@selector(get_active_analysis_steps)
def get_manual_steps(steps: List[Step]) -> List[Step]:
    return [step for step in steps if is_step_manual(step)]
