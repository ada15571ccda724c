"""Equivalence classes of structurally identical steps.

Analyses frequently define the same construction under different symbols,
e.g. the mandibular plane as ``MP`` in one analysis and ``Go-Me`` in another.
Members of one class satisfy each other's prerequisites.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from .memo import selector
from .selection import get_active_analysis_steps
from .steps import Step, are_equal_steps, are_equal_symbols

logger = logging.getLogger(__name__)


class EquivalenceIndex:
    def __init__(self, steps: Sequence[Step]) -> None:
        self._steps = tuple(steps)
        self._known = {id(step) for step in self._steps}
        self._classes: Dict[str, List[Step]] = {}
        for idx, step in enumerate(self._steps):
            for other in self._steps[idx + 1:]:
                if are_equal_symbols(step, other) or not are_equal_steps(step, other):
                    continue
                self._classes.setdefault(step.symbol, []).append(other)
                self._classes.setdefault(other.symbol, []).append(step)
        if self._classes:
            logger.debug(
                "Equivalence index over %d step(s): %s",
                len(self._steps),
                [[s.symbol for s in members] for members in self.classes()],
            )

    def find_equal_components(self, step: Step) -> List[Step]:
        """Steps equal to ``step`` under another symbol, never ``step`` itself."""

        members = self._classes.get(step.symbol)
        if members is not None:
            return list(members)
        if id(step) in self._known:
            return []
        # step from outside the indexed set
        return [
            other
            for other in self._steps
            if not are_equal_symbols(step, other) and are_equal_steps(step, other)
        ]

    def classes(self) -> List[List[Step]]:
        """Each equivalence class once, members in traversal order."""

        order = {step.symbol: idx for idx, step in enumerate(self._steps)}
        seen = set()
        result = []
        for step in self._steps:
            if step.symbol in seen or step.symbol not in self._classes:
                continue
            members = sorted([step, *self._classes[step.symbol]], key=lambda s: order[s.symbol])
            seen.update(member.symbol for member in members)
            result.append(members)
        return result


@selector(get_active_analysis_steps)
def get_equivalence_index(steps: Sequence[Step]) -> EquivalenceIndex:
    return EquivalenceIndex(steps)


@selector(get_equivalence_index)
def find_equal_components(index: EquivalenceIndex):
    return index.find_equal_components
