"""Step constructors used to declare analyses.

Each ``calculate`` checks its inputs explicitly and returns ``None`` when any
is missing, so a computable step can always be evaluated on partial data.
"""

from __future__ import annotations

from typing import Optional

from .. import geometry
from ..steps import ComputableStep, ManualStep, MappableStep, Step


def point(symbol: str, description: Optional[str] = None) -> ManualStep:
    return ManualStep(symbol, "point", description)


def line(a: Step, b: Step, symbol: Optional[str] = None, description: Optional[str] = None) -> MappableStep:
    """Line through two manual points, read straight from the store."""

    def map_line(landmarks):
        return geometry.line_through(landmarks[a.symbol], landmarks[b.symbol])

    return MappableStep(
        symbol or f"{a.symbol}-{b.symbol}",
        "line",
        map_line,
        components=(a, b),
        description=description,
    )


def angle_between_points(
    a: Step,
    vertex: Step,
    b: Step,
    symbol: Optional[str] = None,
    description: Optional[str] = None,
) -> ComputableStep:
    def calculate(values, objects):
        pts = [objects.get(s.symbol) for s in (a, vertex, b)]
        if any(pt is None for pt in pts):
            return None
        return geometry.angle_at(*pts)

    return ComputableStep(
        symbol or f"{a.symbol}-{vertex.symbol}-{b.symbol}",
        "angle",
        (a, vertex, b),
        calculate,
        unit="degree",
        description=description,
    )


def angle_between_lines(
    l1: Step,
    l2: Step,
    symbol: Optional[str] = None,
    description: Optional[str] = None,
    *,
    acute: bool = True,
    supplement: bool = False,
) -> ComputableStep:
    """Angle between two line steps.

    ``supplement`` reports ``180 - angle``, used for angles measured on the
    obtuse side such as the interincisal angle.
    """

    def calculate(values, objects):
        first = objects.get(l1.symbol)
        second = objects.get(l2.symbol)
        if first is None or second is None:
            return None
        angle = geometry.angle_between_lines(first, second, acute=acute)
        if angle is None:
            return None
        return 180.0 - angle if supplement else angle

    return ComputableStep(
        symbol or f"{l1.symbol}^{l2.symbol}",
        "angle",
        (l1, l2),
        calculate,
        unit="degree",
        description=description,
    )


def distance_between_points(
    a: Step, b: Step, symbol: Optional[str] = None, description: Optional[str] = None
) -> ComputableStep:
    def calculate(values, objects):
        first = objects.get(a.symbol)
        second = objects.get(b.symbol)
        if first is None or second is None:
            return None
        return geometry.distance(first, second)

    return ComputableStep(
        symbol or f"{a.symbol}{b.symbol}",
        "distance",
        (a, b),
        calculate,
        unit="mm",
        description=description,
    )


def distance_to_line(
    pt: Step, ln: Step, symbol: Optional[str] = None, description: Optional[str] = None
) -> ComputableStep:
    """Signed distance from a point to a line, positive on its left side."""

    def calculate(values, objects):
        target = objects.get(pt.symbol)
        reference = objects.get(ln.symbol)
        if target is None or reference is None:
            return None
        return geometry.signed_distance_to_line(target, reference)

    return ComputableStep(
        symbol or f"{pt.symbol}-{ln.symbol}",
        "distance",
        (pt, ln),
        calculate,
        unit="mm",
        description=description,
    )


def difference(a: ComputableStep, b: ComputableStep, symbol: str, description: Optional[str] = None) -> ComputableStep:
    def calculate(values, objects):
        first = values.get(a.symbol)
        second = values.get(b.symbol)
        if first is None or second is None:
            return None
        return first - second

    return ComputableStep(symbol, a.type, (a, b), calculate, unit=a.unit, description=description)


def ratio(a: ComputableStep, b: ComputableStep, symbol: str, description: Optional[str] = None) -> ComputableStep:
    def calculate(values, objects):
        first = values.get(a.symbol)
        second = values.get(b.symbol)
        if first is None or not second:
            return None
        return first / second * 100.0

    return ComputableStep(symbol, "ratio", (a, b), calculate, unit="percent", description=description)


def sum_of(*steps: ComputableStep, symbol: str, description: Optional[str] = None) -> ComputableStep:
    def calculate(values, objects):
        parts = [values.get(step.symbol) for step in steps]
        if any(part is None for part in parts):
            return None
        return sum(parts)

    unit = steps[0].unit if steps else None
    return ComputableStep(symbol, "sum", steps, calculate, unit=unit, description=description)
