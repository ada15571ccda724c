"""Workspace snapshots and the in-memory landmark store.

:class:`WorkspaceState` is the immutable snapshot every selector reads.  Any
change produces a new snapshot, so selectors keyed on object identity see a
change exactly when one happened.  :class:`Workspace` is a tiny reactive
store holding the current snapshot and notifying subscribers after each
transition.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Union

from .config import get_engine_config
from .geometry import Point, as_point
from .registry import AnalysisRegistry

logger = logging.getLogger(__name__)

Listener = Callable[["WorkspaceState"], None]


class LandmarkFileError(ValueError):
    pass


def _freeze(landmarks: Mapping[str, Sequence[float]]) -> Mapping[str, Point]:
    return MappingProxyType({symbol: as_point(pt) for symbol, pt in landmarks.items()})


@dataclass(frozen=True, eq=False)
class WorkspaceState:
    registry: AnalysisRegistry
    analysis_id: Optional[str] = None
    manual_landmarks: Mapping[str, Point] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def create(
        cls,
        registry: Optional[AnalysisRegistry] = None,
        analysis_id: Optional[str] = None,
        landmarks: Optional[Mapping[str, Sequence[float]]] = None,
    ) -> "WorkspaceState":
        """Build a snapshot, validating ``analysis_id`` against ``registry``.

        Without a registry the bundled catalog is used; without an id the
        configured default analysis is selected.
        """

        if registry is None:
            from .catalog import DEFAULT_REGISTRY

            registry = DEFAULT_REGISTRY
        if analysis_id is None:
            default_id = get_engine_config().default_analysis_id
            analysis_id = default_id if default_id in registry else None
        else:
            registry.require(analysis_id)
        return cls(registry, analysis_id, _freeze(landmarks or {}))

    def with_landmark(self, symbol: str, point: Sequence[float]) -> "WorkspaceState":
        landmarks = dict(self.manual_landmarks)
        landmarks[symbol] = as_point(point)
        return replace(self, manual_landmarks=MappingProxyType(landmarks))

    def without_landmark(self, symbol: str) -> "WorkspaceState":
        if symbol not in self.manual_landmarks:
            return self
        landmarks = dict(self.manual_landmarks)
        del landmarks[symbol]
        return replace(self, manual_landmarks=MappingProxyType(landmarks))

    def with_analysis(self, analysis_id: str) -> "WorkspaceState":
        """Select ``analysis_id``; unknown ids raise ``UnknownAnalysisError``."""

        self.registry.require(analysis_id)
        if analysis_id == self.analysis_id:
            return self
        return replace(self, analysis_id=analysis_id)


class Workspace:
    """Mutable holder of the current :class:`WorkspaceState`."""

    def __init__(self, state: Optional[WorkspaceState] = None) -> None:
        self._state = state or WorkspaceState.create()
        self._initial = self._state
        self._listeners: List[Listener] = []

    @property
    def state(self) -> WorkspaceState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; the returned callable unsubscribes it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _transition(self, state: WorkspaceState) -> WorkspaceState:
        if state is self._state:
            return state
        self._state = state
        for listener in list(self._listeners):
            listener(state)
        return state

    def add_manual_landmark(self, symbol: str, point: Sequence[float]) -> WorkspaceState:
        logger.info("Placing %s at (%.3f, %.3f)", symbol, float(point[0]), float(point[1]))
        return self._transition(self._state.with_landmark(symbol, point))

    def remove_manual_landmark(self, symbol: str) -> WorkspaceState:
        logger.info("Removing %s", symbol)
        return self._transition(self._state.without_landmark(symbol))

    def set_active_analysis(self, analysis_id: str) -> WorkspaceState:
        logger.info("Selecting analysis %s", analysis_id)
        return self._transition(self._state.with_analysis(analysis_id))

    def reset(self) -> WorkspaceState:
        return self._transition(self._initial)


def load_landmarks(path: Union[str, Path]) -> Dict[str, Point]:
    """Read a ``{symbol: [x, y]}`` JSON file."""

    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise LandmarkFileError(f"{path}: invalid JSON ({exc})") from exc
    if not isinstance(raw, dict):
        raise LandmarkFileError(f"{path}: expected an object of symbol -> [x, y]")
    landmarks: Dict[str, Point] = {}
    for symbol, value in raw.items():
        if not (isinstance(value, (list, tuple)) and len(value) == 2):
            raise LandmarkFileError(f"{path}: landmark {symbol!r} must be a pair [x, y]")
        try:
            landmarks[symbol] = as_point(value)
        except (TypeError, ValueError) as exc:
            raise LandmarkFileError(f"{path}: landmark {symbol!r} has non-numeric coordinates") from exc
    return landmarks


def dump_landmarks(landmarks: Mapping[str, Point], path: Union[str, Path]) -> None:
    payload = {symbol: [x, y] for symbol, (x, y) in landmarks.items()}
    Path(path).write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
