"""Eligibility predicates gating evaluation of a step.

Both builders take the per-snapshot lookups they depend on and return a
memoized predicate over steps.  The predicates are total: anything that is
not satisfiable yet is ``False``, nothing raises.  The wiring into the
selector graph lives in :mod:`landmark_graph.resolver`.
"""

from __future__ import annotations

from typing import Any, Callable, List

from .memo import memoize_by_step
from .steps import Step, is_step_computable, is_step_manual, is_step_mappable

StepPredicate = Callable[[Step], bool]


def mapping_eligibility(
    is_placed: StepPredicate,
    attempt_map: Callable[[Step], Any],
) -> StepPredicate:
    """Can a value be attempted for a step right now?

    Manual and mappable steps always qualify: the former are read straight
    from the store, the latter carry their ``map``.  A computable step
    qualifies once each component does, where a manual component must be
    placed and a mappable one must have actually produced an object.
    """

    @memoize_by_step
    def is_eligible(step: Step) -> bool:
        if not is_step_computable(step):
            return True
        for component in step.components:
            if is_step_manual(component):
                if not is_placed(component):
                    return False
            elif not is_eligible(component):
                return False
            elif is_step_mappable(component) and attempt_map(component) is None:
                return False
        return True

    return is_eligible


def computation_eligibility(
    is_mapped: StepPredicate,
    find_equal: Callable[[Step], List[Step]],
) -> StepPredicate:
    """Can ``calculate`` be run for a step right now?

    Every component needs at least one mapping-complete member among itself
    and its equivalents, so a landmark placed under one symbol satisfies
    steps that reference an equivalent symbol.
    """

    def satisfied(component: Step) -> bool:
        if is_mapped(component):
            return True
        return any(is_mapped(equal) for equal in find_equal(component))

    @memoize_by_step
    def is_eligible(step: Step) -> bool:
        return is_step_computable(step) and all(satisfied(c) for c in step.components)

    return is_eligible
