"""pingsync CLI Module.

- commands.py: Typer command (--config, --dry-run, --soft)
- display.py: Rich results table
"""

from .commands import app as cli_app
from .display import ReportRenderer, render_report, report_rows

__all__ = [
    "ReportRenderer",
    "cli_app",
    "render_report",
    "report_rows",
]
