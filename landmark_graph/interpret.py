"""Interpretation tables turning calculated values into clinical findings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, List, Literal, Optional, Sequence, Tuple

from .config import get_engine_config
from .steps import CalculatedValues, GeoObjects

if TYPE_CHECKING:
    from .analysis import AnalysisComponent

Severity = Literal["none", "low", "medium", "high"]


@dataclass(frozen=True)
class CategorizedAnalysisResult:
    category: str
    indication: str
    severity: Severity = "none"
    relevant_components: Tuple[str, ...] = ()
    value: Optional[float] = None


Interpreter = Callable[[CalculatedValues, GeoObjects], List[CategorizedAnalysisResult]]


def severity_for_deviation(
    value: float,
    norm: float,
    std_dev: Optional[float],
    thresholds: Optional[Tuple[float, float, float]] = None,
) -> Severity:
    """Grade how far ``value`` lies from ``norm`` in units of ``std_dev``."""

    if not std_dev:
        return "none"
    low, medium, high = thresholds or get_engine_config().severity_thresholds
    score = abs(value - norm) / std_dev
    if score >= high:
        return "high"
    if score >= medium:
        return "medium"
    if score >= low:
        return "low"
    return "none"


@dataclass(frozen=True)
class RangeRule:
    """Map a single value onto ``below`` / ``within`` / ``above`` indications.

    The value is *within* the norm when it lies in ``norm ± std_dev``.
    """

    category: str
    symbol: str
    norm: float
    std_dev: float
    below: str
    within: str
    above: str
    relevant_components: Tuple[str, ...] = field(default=())

    @classmethod
    def for_component(
        cls,
        category: str,
        component: "AnalysisComponent",
        below: str,
        within: str,
        above: str,
        relevant_components: Tuple[str, ...] = (),
    ) -> "RangeRule":
        """Build a rule from the norm and std-dev declared on ``component``."""

        if component.std_dev is None:
            raise ValueError(f"component {component.landmark.symbol!r} has no std_dev")
        return cls(
            category,
            component.landmark.symbol,
            component.norm,
            component.std_dev,
            below,
            within,
            above,
            relevant_components,
        )

    def evaluate(self, values: CalculatedValues) -> Optional[CategorizedAnalysisResult]:
        value = values.get(self.symbol)
        if value is None:
            return None
        if value < self.norm - self.std_dev:
            indication = self.below
        elif value > self.norm + self.std_dev:
            indication = self.above
        else:
            indication = self.within
        return CategorizedAnalysisResult(
            category=self.category,
            indication=indication,
            severity=severity_for_deviation(value, self.norm, self.std_dev),
            relevant_components=self.relevant_components or (self.symbol,),
            value=value,
        )


def interpret_with(rules: Sequence[RangeRule]) -> Interpreter:
    """Build an ``interpret`` function that applies ``rules`` in order.

    Rules whose value is not available yet are skipped.
    """

    def interpret(values: CalculatedValues, objects: GeoObjects) -> List[CategorizedAnalysisResult]:
        results: List[CategorizedAnalysisResult] = []
        for rule in rules:
            result = rule.evaluate(values)
            if result is not None:
                results.append(result)
        return results

    return interpret


def combine_interpreters(*interpreters: Interpreter) -> Interpreter:
    def interpret(values: CalculatedValues, objects: GeoObjects) -> List[CategorizedAnalysisResult]:
        results: List[CategorizedAnalysisResult] = []
        for fn in interpreters:
            results.extend(fn(values, objects))
        return results

    return interpret
