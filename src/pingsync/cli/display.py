"""pingsync CLI Display Components.

Rich-based rendering of reconciliation results:
- report_rows: flatten results into (type, status, name) rows
- render_report: build the results table (pure)
- ReportRenderer: print renderables to a console
"""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Console, Group, RenderableType
from rich.table import Table
from rich.text import Text

from pingsync.sync.models import ReconciliationResult

RESULTS_TITLE = "--- Results ---"
DRY_RUN_BANNER = "--------- DRY-RUN MODE ---------"

STATUS_STYLES = {
    "ADDED": "green",
    "UPDATED": "cyan",
    "PAUSED": "yellow",
    "DELETED": "red",
}


def report_rows(results: Iterable[ReconciliationResult], *, soft: bool) -> list[tuple[str, str, str]]:
    """One row per added, updated and deleted check, in that order per result."""
    removed_status = "PAUSED" if soft else "DELETED"
    rows = []
    for result in results:
        kind = result.type.value
        rows.extend((kind, "ADDED", check.name) for check in result.added)
        rows.extend((kind, "UPDATED", check.name) for check in result.updated)
        rows.extend((kind, removed_status, check.name) for check in result.deleted)
    return rows


def render_report(
    results: Iterable[ReconciliationResult],
    *,
    soft: bool,
    dry_run: bool,
) -> RenderableType:
    """Build the results display.

    Args:
        results: One ReconciliationResult per reconciled kind
        soft: Removed checks were paused rather than deleted
        dry_run: Prefix the table with the dry-run banner

    Returns:
        A renderable; nothing is printed
    """
    table = Table(show_header=True)
    table.add_column("Type", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Name")

    for kind, status, name in report_rows(results, soft=soft):
        table.add_row(kind, Text(status, style=STATUS_STYLES[status]), Text(name))

    parts: list[RenderableType] = [Text(RESULTS_TITLE, style="bold")]
    if dry_run:
        parts.append(Text(DRY_RUN_BANNER, style="bold yellow"))
    parts.append(table)
    return Group(*parts)


class ReportRenderer:
    """Print reports and messages to a console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def display(self, results: Iterable[ReconciliationResult], *, soft: bool, dry_run: bool) -> None:
        self.console.print(render_report(results, soft=soft, dry_run=dry_run))
