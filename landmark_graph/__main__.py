import argparse
import logging
import sys
from typing import Optional, Sequence

from landmark_graph import (
    LandmarkFileError,
    UnknownAnalysisError,
    WorkspaceState,
    find_step_by_symbol,
    get_engine_config,
    load_landmarks,
    summarize,
)
from landmark_graph.catalog import DEFAULT_REGISTRY
from landmark_graph.logging_utils import configure_logging

logger = logging.getLogger(__name__)


def _format_value(value: Optional[float], unit: Optional[str]) -> str:
    if value is None:
        return "-"
    suffix = {"degree": "°", "mm": " mm", "percent": " %"}.get(unit or "", "")
    return f"{value:.2f}{suffix}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Evaluate cephalometric analyses from placed landmarks")
    parser.add_argument("path", nargs="?", help="JSON file mapping landmark symbols to [x, y]")
    parser.add_argument(
        "--analysis",
        default=get_engine_config().default_analysis_id,
        help="Analysis id (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--list-analyses",
        action="store_true",
        help="List the available analyses and exit",
    )
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    if args.list_analyses:
        for analysis_id in DEFAULT_REGISTRY.ids():
            analysis = DEFAULT_REGISTRY[analysis_id]
            print(f"{analysis_id}: {analysis.name or analysis_id} ({len(analysis.components)} measurement(s))")
        return 0

    if not args.path:
        parser.error("a landmark file is required unless --list-analyses is given")

    try:
        landmarks = load_landmarks(args.path)
    except (OSError, LandmarkFileError) as exc:
        logger.error("Could not read landmarks: %s", exc)
        return 1
    logger.info("Loaded %d landmark(s) from %s", len(landmarks), args.path)

    try:
        state = WorkspaceState.create(DEFAULT_REGISTRY, args.analysis, landmarks)
    except UnknownAnalysisError as exc:
        logger.error("%s", exc)
        return 2

    summary = summarize(state)
    find_step = find_step_by_symbol(state)

    print(f"Analysis: {summary.analysis_id}")
    placed, total = summary.progress
    print(f"Placed: {placed}/{total}")
    for symbol, step_state in summary.manual_states.items():
        print(f"  [{step_state}] {symbol}")
    print(f"Next landmark: {summary.next_landmark or '(none)'}")

    print("Values:")
    for symbol, value in summary.values.items():
        step = find_step(symbol)
        unit = getattr(step, "unit", None)
        print(f"  {symbol}: {_format_value(value, unit)}")

    print("Results:")
    if summary.results:
        for result in summary.results:
            print(f"  - {result.category}: {result.indication} (severity: {result.severity})")
    else:
        print("  (none)")
    print(f"Complete: {summary.complete}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
