"""Example session: place landmarks one by one and watch the analysis fill in.

Pass a path to save the placed landmarks as JSON for `python -m landmark_graph`.
"""

import sys

from landmark_graph import (
    Workspace,
    WorkspaceState,
    dump_landmarks,
    get_all_calculated_values,
    get_categorized_analysis_results,
    get_expected_next_manual_landmark,
    is_analysis_complete,
)

TRACING = {
    "S": (60.0, 80.0),
    "N": (130.0, 70.0),
    "A": (132.0, 130.0),
    "B": (126.0, 175.0),
    "Po": (40.0, 100.0),
    "Or": (115.0, 100.0),
    "Go": (60.0, 170.0),
    "Me": (120.0, 200.0),
}


def report(state: WorkspaceState) -> None:
    values = get_all_calculated_values(state)
    ready = ", ".join(f"{symbol}={value:.1f}" for symbol, value in values.items() if value is not None)
    print(f"  placed {len(state.manual_landmarks)}: {ready or '(nothing computable yet)'}")


def main() -> None:
    workspace = Workspace(WorkspaceState.create(analysis_id="basic"))
    unsubscribe = workspace.subscribe(report)

    while True:
        step = get_expected_next_manual_landmark(workspace.state)
        if step is None:
            break
        print(f"Place {step.symbol}")
        workspace.add_manual_landmark(step.symbol, TRACING[step.symbol])
    unsubscribe()

    print("\nComplete:", is_analysis_complete(workspace.state))
    for result in get_categorized_analysis_results(workspace.state):
        print(f"{result.category}: {result.indication} ({result.severity})")

    if len(sys.argv) > 1:
        dump_landmarks(workspace.state.manual_landmarks, sys.argv[1])
        print(f"Saved landmarks to {sys.argv[1]}")


if __name__ == "__main__":
    main()
