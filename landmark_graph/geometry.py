"""Planar geometry primitives used by mappable and computable steps.

Every helper accepts plain ``(x, y)`` pairs (or numpy arrays) and returns
``None`` when the requested construction is degenerate, for example a line
through two coincident points or the intersection of parallel lines.  The
engine treats ``None`` as "not computable yet", so these helpers never raise
for bad geometry.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

Point = Tuple[float, float]

_EPS = 1e-12


def as_point(pt: Sequence[float]) -> Point:
    return (float(pt[0]), float(pt[1]))


def _vec(a: Sequence[float], b: Sequence[float]) -> np.ndarray:
    return np.asarray(b, dtype=float) - np.asarray(a, dtype=float)


def _cross(u: np.ndarray, v: np.ndarray) -> float:
    return float(u[0] * v[1] - u[1] * v[0])


@dataclass(frozen=True)
class LineValue:
    """Line through two placed points; direction runs ``start -> end``."""

    start: Point
    end: Point

    @property
    def direction(self) -> np.ndarray:
        return _vec(self.start, self.end)

    @property
    def length(self) -> float:
        return float(np.linalg.norm(self.direction))


def line_through(A: Sequence[float], B: Sequence[float]) -> Optional[LineValue]:
    """Return the line ``AB`` or ``None`` when the points coincide."""

    if float(np.dot(_vec(A, B), _vec(A, B))) <= _EPS:
        return None
    return LineValue(as_point(A), as_point(B))


def distance(A: Sequence[float], B: Sequence[float]) -> float:
    return float(np.linalg.norm(_vec(A, B)))


def midpoint(A: Sequence[float], B: Sequence[float]) -> Point:
    mid = (np.asarray(A, dtype=float) + np.asarray(B, dtype=float)) * 0.5
    return as_point(mid)


def angle_between_vectors(u: Sequence[float], v: Sequence[float]) -> Optional[float]:
    """Unsigned angle between ``u`` and ``v`` in degrees, within ``[0, 180]``."""

    u_arr = np.asarray(u, dtype=float)
    v_arr = np.asarray(v, dtype=float)
    if float(np.dot(u_arr, u_arr)) <= _EPS or float(np.dot(v_arr, v_arr)) <= _EPS:
        return None
    return math.degrees(math.atan2(abs(_cross(u_arr, v_arr)), float(np.dot(u_arr, v_arr))))


def angle_at(A: Sequence[float], vertex: Sequence[float], B: Sequence[float]) -> Optional[float]:
    """Return the angle ``A-vertex-B`` in degrees."""

    return angle_between_vectors(_vec(vertex, A), _vec(vertex, B))


def angle_between_lines(
    l1: LineValue, l2: LineValue, *, acute: bool = True
) -> Optional[float]:
    """Angle between two lines.

    With ``acute`` the result is folded into ``[0, 90]`` so that the
    orientation in which a line was placed does not matter.  Without it the
    directed angle between ``start -> end`` vectors is returned.
    """

    angle = angle_between_vectors(l1.direction, l2.direction)
    if angle is None:
        return None
    if acute and angle > 90.0:
        return 180.0 - angle
    return angle


def line_intersection(l1: LineValue, l2: LineValue) -> Optional[Point]:
    d1 = l1.direction
    d2 = l2.direction
    denom = _cross(d1, d2)
    if abs(denom) <= _EPS:
        return None
    diff = _vec(l1.start, l2.start)
    t = _cross(diff, d2) / denom
    return as_point(np.asarray(l1.start, dtype=float) + d1 * t)


def foot(V: Sequence[float], line: LineValue) -> Optional[Point]:
    """Orthogonal projection of ``V`` onto ``line``."""

    d = line.direction
    denom = float(np.dot(d, d))
    if denom <= _EPS:
        return None
    t = float(np.dot(_vec(line.start, V), d)) / denom
    return as_point(np.asarray(line.start, dtype=float) + d * t)


def signed_distance_to_line(V: Sequence[float], line: LineValue) -> Optional[float]:
    """Distance from ``V`` to ``line``; positive on the left of ``start -> end``."""

    d = line.direction
    norm = float(np.linalg.norm(d))
    if norm <= _EPS:
        return None
    return _cross(d, _vec(line.start, V)) / norm
