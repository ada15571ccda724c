from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Tuple

from .analysis import Analysis
from .validate import validate_registry


class UnknownAnalysisError(KeyError):
    """Raised when an analysis id is not part of the catalog."""

    def __init__(self, analysis_id: str, known: Iterable[str] = ()) -> None:
        self.analysis_id = analysis_id
        self.known = tuple(known)
        super().__init__(analysis_id)

    def __str__(self) -> str:
        known = ", ".join(self.known) or "<none>"
        return f"unknown analysis {self.analysis_id!r} (known: {known})"


class AnalysisRegistry(Mapping[str, Analysis]):
    """Immutable id -> :class:`Analysis` mapping, validated on construction."""

    def __init__(self, analyses: Iterable[Analysis]) -> None:
        table = {}
        for analysis in analyses:
            if analysis.id in table:
                raise ValueError(f"analysis {analysis.id!r} registered twice")
            table[analysis.id] = analysis
        validate_registry(table)
        self._analyses: Mapping[str, Analysis] = MappingProxyType(table)

    def __getitem__(self, analysis_id: str) -> Analysis:
        try:
            return self._analyses[analysis_id]
        except KeyError:
            raise UnknownAnalysisError(analysis_id, self._analyses) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._analyses)

    def __len__(self) -> int:
        return len(self._analyses)

    def ids(self) -> Tuple[str, ...]:
        return tuple(self._analyses)

    def require(self, analysis_id: str) -> str:
        """Return ``analysis_id`` if it is registered, raise otherwise."""

        self[analysis_id]
        return analysis_id
