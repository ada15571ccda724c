"""Memoized derivations over immutable workspace snapshots.

A *selector* is any callable taking a :class:`~landmark_graph.state.WorkspaceState`.
:func:`selector` composes input selectors with a combiner and remembers the
last ``(inputs, result)`` pair.  The combiner only runs again when one of
the inputs changed, which for snapshots, mappings and closures means "is a
different object".  Chaining selectors this way forms a directed graph of
derivations in which an upstream change only invalidates what depends on it.
"""

from __future__ import annotations

import logging
import weakref
from typing import Any, Callable, Dict, Generic, Iterator, Mapping, Optional, Sequence, Tuple, TypeVar

from .config import tracing_enabled
from .logging_utils import debug_log_call

logger = logging.getLogger(__name__)

T = TypeVar("T")

_VALUE_TYPES = (str, int, float, bool, type(None))

_MISSING = object()


def _same(a: Any, b: Any) -> bool:
    if a is b:
        return True
    return isinstance(a, _VALUE_TYPES) and type(a) is type(b) and a == b


class Selector(Generic[T]):
    def __init__(
        self,
        combiner: Callable[..., T],
        inputs: Sequence[Callable[[Any], Any]],
        name: Optional[str] = None,
    ) -> None:
        self.combiner = combiner
        self.inputs = tuple(inputs)
        self.name = name or getattr(combiner, "__name__", "selector")
        self.recomputations = 0
        self._last_args: Optional[Tuple[Any, ...]] = None
        self._last_result: Any = _MISSING

    def __call__(self, state: Any) -> T:
        args = tuple(select(state) for select in self.inputs)
        last = self._last_args
        if last is not None and len(last) == len(args) and all(map(_same, args, last)):
            return self._last_result
        self.recomputations += 1
        logger.debug("Recomputing %s (#%d)", self.name, self.recomputations)
        combiner = self.combiner
        if tracing_enabled():
            combiner = debug_log_call(logger, name=self.name)(combiner)
        result = combiner(*args)
        self._last_args = args
        self._last_result = result
        return result

    def reset(self) -> None:
        """Drop the cached result; the next call recomputes."""

        self._last_args = None
        self._last_result = _MISSING
        self.recomputations = 0

    def __repr__(self) -> str:
        return f"Selector({self.name}, inputs={len(self.inputs)})"


def selector(*inputs: Callable[[Any], Any], name: Optional[str] = None) -> Callable[[Callable[..., T]], Selector[T]]:
    """Decorate a combiner so it is evaluated from ``inputs`` and memoized."""

    def decorator(combiner: Callable[..., T]) -> Selector[T]:
        return Selector(combiner, inputs, name=name)

    return decorator


def memoize_by_step(func: Callable[[Any], T]) -> Callable[[Any], T]:
    """Cache a per-step function by step identity for one snapshot.

    Two analyses may bind the same symbol to different steps, so the step
    object itself is the key.
    """

    cache: Dict[Any, T] = {}

    def wrapper(step: Any) -> T:
        if step in cache:
            return cache[step]
        result = func(step)
        cache[step] = result
        return result

    wrapper.__name__ = getattr(func, "__name__", "memoized")
    wrapper.cache = cache  # type: ignore[attr-defined]
    return wrapper


def _same_input(a: Any, b: Any) -> bool:
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    try:
        return bool(a == b)
    except (TypeError, ValueError):
        # array-like values without a single truth value
        return False


class RecordingMapping(Mapping[str, Any]):
    """Read-through view of ``source`` that remembers every key looked up.

    Missing keys are recorded too, so a later snapshot that gains the key
    counts as a change.  Iterating the view marks the whole source as read.
    """

    def __init__(self, source: Mapping[str, Any]) -> None:
        self._source = source
        self.reads: Dict[str, Any] = {}
        self.read_all = False

    def __getitem__(self, key: str) -> Any:
        try:
            value = self._source[key]
        except KeyError:
            self.reads[key] = _MISSING
            raise
        self.reads[key] = value
        return value

    def __iter__(self) -> Iterator[str]:
        self.read_all = True
        return iter(self._source)

    def __len__(self) -> int:
        self.read_all = True
        return len(self._source)


class _Entry:
    __slots__ = ("sources", "reads", "result")

    def __init__(self, sources: Tuple[Any, ...], reads: Tuple[Optional[Dict[str, Any]], ...], result: Any) -> None:
        self.sources = sources
        self.reads = reads
        self.result = result


class DependencyCache:
    """Per-step results kept across snapshots, keyed on what they read.

    :meth:`get` runs ``compute`` with recording views of ``sources``.  On
    the next call for the same step the recorded keys are looked up again
    in the new sources; the cached result is returned when every one of them
    still holds an equal value.  A step that iterated a source stays valid
    only while that exact source object is passed.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.misses = 0
        self._entries: "weakref.WeakKeyDictionary[Any, _Entry]" = weakref.WeakKeyDictionary()

    def _is_current(self, entry: _Entry, sources: Sequence[Mapping[str, Any]]) -> bool:
        for old_source, reads, source in zip(entry.sources, entry.reads, sources):
            if reads is None:
                if source is not old_source:
                    return False
                continue
            for key, value in reads.items():
                if not _same_input(source.get(key, _MISSING), value):
                    return False
        return True

    def get(self, step: Any, sources: Sequence[Mapping[str, Any]], compute: Callable[..., T]) -> T:
        entry = self._entries.get(step)
        if entry is not None and len(entry.sources) == len(sources) and self._is_current(entry, sources):
            return entry.result
        views = [RecordingMapping(source) for source in sources]
        result = compute(*views)
        self.misses += 1
        logger.debug("%s %s (#%d)", self.name, getattr(step, "symbol", step), self.misses)
        self._entries[step] = _Entry(
            tuple(source if view.read_all else None for source, view in zip(sources, views)),
            tuple(None if view.read_all else view.reads for view in views),
            result,
        )
        return result

    def clear(self) -> None:
        self._entries.clear()
        self.misses = 0
