from collections import defaultdict

import pytest
from rich.console import Console
from rich.table import Table

KNOWN_MARKERS = {"unit_common", "unit_core", "unit_ui"}


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    """
    Custom hook to print statistics by marker at the end of the test session.
    """
    _ = (exitstatus, config)
    marker_stats = defaultdict(
        lambda: {"passed": 0, "failed": 0, "skipped": 0, "total": 0, "duration": 0.0}
    )

    for outcome in ["passed", "failed", "skipped"]:
        reports = terminalreporter.stats.get(outcome, [])
        for report in reports:
            # Only count the actual test call, or setup skips
            if report.when == "call" or (report.when == "setup" and report.outcome == "skipped"):
                duration = getattr(report, "duration", 0.0)
                for marker in KNOWN_MARKERS:
                    if marker in report.keywords:
                        stats = marker_stats[marker]
                        stats[outcome] += 1
                        stats["total"] += 1
                        stats["duration"] += duration

    if not marker_stats:
        return

    table = Table(title="Test Statistics by Marker", show_header=True, header_style="bold magenta")
    table.add_column("Marker", style="cyan")
    table.add_column("Total", justify="right")
    table.add_column("Passed", justify="right", style="green")
    table.add_column("Failed", justify="right", style="red")
    table.add_column("Skipped", justify="right", style="yellow")
    table.add_column("Duration (s)", justify="right", style="blue")

    for marker in sorted(marker_stats):
        stats = marker_stats[marker]
        if stats["total"] > 0:
            table.add_row(
                marker,
                str(stats["total"]),
                str(stats["passed"]),
                str(stats["failed"]),
                str(stats["skipped"]),
                f"{stats['duration']:.2f}",
            )

    console = Console()
    console.print("\n")
    console.print(table)


@pytest.fixture
def hours_rows():
    return [
        {"id": 1, "name": "B", "hours": 2},
        {"id": 2, "name": "A", "hours": 2},
        {"id": 3, "name": "C", "hours": 1},
    ]


@pytest.fixture
def dated_rows():
    return [
        {"id": 1, "day": "2024-01-01", "hours": 1.0},
        {"id": 2, "day": "2024-01-02", "hours": 4.0},
        {"id": 3, "day": "2024-01-01", "hours": 0.5},
        {"id": 4, "day": "2024-01-02", "hours": 3.0},
        {"id": 5, "day": "2024-01-01", "hours": 1.0},
    ]
