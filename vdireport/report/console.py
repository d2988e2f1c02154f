"""Console output for the session report."""

import json
import logging
from typing import Optional

from rich.console import Console

from .assembler import DEFAULT_LABEL_WIDTH, Report

logger = logging.getLogger(__name__)


class ReportPrinter:
    """Writes reports to stdout and diagnostics to stderr."""

    def __init__(self, console: Optional[Console] = None, error_console: Optional[Console] = None,
                 label_width: int = DEFAULT_LABEL_WIDTH):
        self.console = console or Console(highlight=False)
        self.error_console = error_console or Console(stderr=True, highlight=False)
        self.label_width = label_width

    def print_report(self, report: Report) -> None:
        """Print the report as plain labeled lines."""
        for row, line in zip(report.rows, report.lines(self.label_width)):
            style = "yellow" if row.warning else None
            self.console.print(line, style=style, markup=False, highlight=False, soft_wrap=True)

    def print_json(self, report: Report) -> None:
        self.console.print(json.dumps(report.to_dict(), indent=2), markup=False,
                           highlight=False, soft_wrap=True)

    def print_error(self, message: str) -> None:
        self.error_console.print(f"Error: {message}", style="bold red", markup=False,
                                 highlight=False, soft_wrap=True)
