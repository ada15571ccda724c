from typing import Dict, Iterable, List, Mapping, Set, Tuple

from .analysis import Analysis
from .steps import Step, are_equal_steps, is_step_computable


class ValidationError(Exception):
    pass


def _check_acyclic(step: Step, path: List[Step], done: Set[int], analysis_id: str) -> None:
    if id(step) in done:
        return
    if any(step is seen for seen in path):
        cycle = " -> ".join(s.symbol for s in path + [step])
        raise ValidationError(f'[analysis {analysis_id}] dependency cycle: {cycle}')
    path.append(step)
    for component in step.components:
        _check_acyclic(component, path, done, analysis_id)
    path.pop()
    done.add(id(step))


def _iter_reachable(analysis: Analysis) -> Iterable[Step]:
    stack = [component.landmark for component in reversed(analysis.components)]
    visited: Set[int] = set()
    while stack:
        step = stack.pop()
        if id(step) in visited:
            continue
        visited.add(id(step))
        yield step
        stack.extend(reversed(step.components))


def validate_analysis(analysis: Analysis) -> None:
    """Reject analyses whose step graph the engine cannot evaluate."""

    if not analysis.components:
        raise ValidationError(f'[analysis {analysis.id}] has no components')

    done: Set[int] = set()
    for component in analysis.components:
        _check_acyclic(component.landmark, [], done, analysis.id)

    by_symbol: Dict[str, Step] = {}
    for step in _iter_reachable(analysis):
        if is_step_computable(step) and not step.components:
            raise ValidationError(f'[analysis {analysis.id}] computable step {step.symbol} has no components')
        known = by_symbol.get(step.symbol)
        if known is None:
            by_symbol[step.symbol] = step
        elif known is not step and not are_equal_steps(known, step):
            raise ValidationError(
                f'[analysis {analysis.id}] symbol {step.symbol} is used by two different steps'
            )


def validate_registry(analyses: Mapping[str, Analysis]) -> None:
    """Validate every analysis and keep symbols consistent across them.

    Analyses of one registry share landmarks and selectors, so a symbol must
    name the same construction wherever it appears.
    """

    owners: Dict[str, Tuple[str, Step]] = {}
    for analysis_id, analysis in analyses.items():
        if analysis.id != analysis_id:
            raise ValidationError(f'[analysis {analysis.id}] registered under id {analysis_id}')
        validate_analysis(analysis)
        for step in _iter_reachable(analysis):
            owner = owners.get(step.symbol)
            if owner is None:
                owners[step.symbol] = (analysis_id, step)
                continue
            owner_id, known = owner
            if known is not step and not are_equal_steps(known, step):
                raise ValidationError(
                    f'[analysis {analysis_id}] symbol {step.symbol} differs from the step in analysis {owner_id}'
                )
