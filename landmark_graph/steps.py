"""Analysis steps: the nodes of the landmark dependency graph.

A step is one of three variants:

* :class:`ManualStep` - a point placed by the user; graph leaf.
* :class:`MappableStep` - a geometric object constructed directly from the
  manual landmark store through its ``map`` callable.
* :class:`ComputableStep` - a measurement calculated from the values and
  geometric objects of its ``components``.

Steps are immutable and compared by identity; structural comparison goes
through :func:`are_equal_steps`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    ClassVar,
    Iterator,
    List,
    Literal,
    Mapping,
    Optional,
    Set,
    Tuple,
    Union,
)

from .geometry import Point

logger = logging.getLogger(__name__)

StepKind = Literal["manual", "mappable", "computable"]
StepType = Literal["point", "line", "angle", "distance", "ratio", "sum"]

Landmarks = Mapping[str, Point]
GeoObjects = Mapping[str, Any]
CalculatedValues = Mapping[str, Optional[float]]

MapFunc = Callable[[Landmarks], Any]
CalculateFunc = Callable[[CalculatedValues, GeoObjects], Optional[float]]


@dataclass(frozen=True, eq=False)
class ManualStep:
    symbol: str
    type: StepType = "point"
    description: Optional[str] = None

    kind: ClassVar[StepKind] = "manual"
    components: ClassVar[Tuple["Step", ...]] = ()


@dataclass(frozen=True, eq=False)
class MappableStep:
    symbol: str
    type: StepType
    map: MapFunc
    components: Tuple["Step", ...] = ()
    description: Optional[str] = None

    kind: ClassVar[StepKind] = "mappable"


@dataclass(frozen=True, eq=False)
class ComputableStep:
    symbol: str
    type: StepType
    components: Tuple["Step", ...]
    calculate: CalculateFunc
    unit: Optional[str] = None
    description: Optional[str] = None

    kind: ClassVar[StepKind] = "computable"

    def __post_init__(self) -> None:
        object.__setattr__(self, "components", tuple(self.components))
        if not self.components:
            raise ValueError(f"computable step {self.symbol!r} needs at least one component")


Step = Union[ManualStep, MappableStep, ComputableStep]


def is_step_manual(step: Step) -> bool:
    return isinstance(step, ManualStep)


def is_step_mappable(step: Step) -> bool:
    return isinstance(step, MappableStep)


def is_step_computable(step: Step) -> bool:
    return isinstance(step, ComputableStep)


def are_equal_symbols(a: Step, b: Step) -> bool:
    return a.symbol == b.symbol


def are_equal_steps(a: Step, b: Step) -> bool:
    """Structural equality that ignores the symbols of ``a`` and ``b``.

    Kinds and types must match and component lists must be pairwise equal,
    in order.  Steps without components carry no structure beyond their
    symbol, so two leaves are only equal when they share it.
    """

    if a is b:
        return True
    if a.kind != b.kind or a.type != b.type:
        return False
    if not a.components or not b.components:
        return not a.components and not b.components and are_equal_symbols(a, b)
    if len(a.components) != len(b.components):
        return False
    return all(are_equal_steps(ca, cb) for ca, cb in zip(a.components, b.components))


def iter_component_steps(step: Step) -> Iterator[Step]:
    """Yield the transitive components of ``step`` in pre-order."""

    for component in step.components:
        yield component
        yield from iter_component_steps(component)


def get_steps_for_analysis(analysis: Any, include_duplicates: bool = True) -> List[Step]:
    """Flatten an analysis into its reachable steps, in pre-order.

    With ``include_duplicates=False`` a symbol reached more than once is only
    kept at its first position.
    """

    steps: List[Step] = []
    seen: Set[str] = set()
    for component in analysis.components:
        landmark = component.landmark
        for step in (landmark, *iter_component_steps(landmark)):
            if not include_duplicates:
                if step.symbol in seen:
                    continue
                seen.add(step.symbol)
            steps.append(step)
    return steps


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and not math.isfinite(value):
        return True
    return False


def try_map(step: Step, landmarks: Landmarks) -> Any:
    """Run ``step.map`` and downgrade any failure to ``None``."""

    if not isinstance(step, MappableStep):
        return None
    try:
        value = step.map(landmarks)
    except Exception as exc:
        logger.debug("Mapping %s failed: %r", step.symbol, exc)
        return None
    return None if _is_missing(value) else value


def try_calculate(step: Step, values: CalculatedValues, objects: GeoObjects) -> Optional[float]:
    """Run ``step.calculate`` and downgrade any failure to ``None``."""

    if not isinstance(step, ComputableStep):
        return None
    try:
        value = step.calculate(values, objects)
        if value is not None:
            value = float(value)
    except Exception as exc:
        logger.debug("Calculation of %s failed: %r", step.symbol, exc)
        return None
    return None if _is_missing(value) else value

