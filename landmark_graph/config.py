"""Configuration helpers for the evaluation engine."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Tuple


@dataclass
class EngineConfig:
    """Knobs shared by the selectors, the catalog and the CLI."""

    default_analysis_id: str = "common"
    # std-dev multiples at which a deviation becomes low / medium / high
    severity_thresholds: Tuple[float, float, float] = (1.0, 2.0, 3.0)
    trace_selectors: bool = False


_ENGINE_CONFIG = EngineConfig()


def get_engine_config() -> EngineConfig:
    return copy.deepcopy(_ENGINE_CONFIG)


def set_engine_config(config: EngineConfig) -> None:
    global _ENGINE_CONFIG
    _ENGINE_CONFIG = copy.deepcopy(config)


def tracing_enabled() -> bool:
    return _ENGINE_CONFIG.trace_selectors
