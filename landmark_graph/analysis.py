from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .interpret import Interpreter
from .steps import Step


@dataclass(frozen=True, eq=False)
class AnalysisComponent:
    """Top-level entry of an analysis: a step and its clinical norm."""

    landmark: Step
    norm: float
    std_dev: Optional[float] = None


@dataclass(frozen=True, eq=False)
class Analysis:
    id: str
    components: Tuple[AnalysisComponent, ...]
    interpret: Interpreter
    name: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "components", tuple(self.components))

    @property
    def symbols(self) -> Tuple[str, ...]:
        return tuple(component.landmark.symbol for component in self.components)


def merge_components(*groups: Sequence[AnalysisComponent]) -> Tuple[AnalysisComponent, ...]:
    """Concatenate component groups, keeping the first entry per symbol."""

    merged = []
    seen = set()
    for group in groups:
        for component in group:
            symbol = component.landmark.symbol
            if symbol in seen:
                continue
            seen.add(symbol)
            merged.append(component)
    return tuple(merged)
