# src/indentdetect/cli/formatter.py
from typing import Any, Dict

from rich.console import Console
from rich.markup import escape
from rich.table import Table

# stdout carries only the result line; everything else goes to stderr.
# Paths and OS messages are printed verbatim, so no :emoji: codes either.
console = Console(highlight=False, emoji=False)
err_console = Console(stderr=True, highlight=False, emoji=False)


class CliFormatter:
    """
    CliFormatter: terminal rendering for the indentdetect command.
    """

    def print_result(self, report: Dict[str, Any]):
        """Writes the single result line, untouched by markup or wrapping."""
        console.print(report["output"], markup=False, soft_wrap=True)

    def print_error(self, message: str):
        err_console.print(f"[bold red]error:[/bold red] {escape(message)}", soft_wrap=True)

    def print_explain(self, report: Dict[str, Any]):
        """
        Summarises what was sampled and how the result was derived.
        """
        table = Table(title=f"Indentation sample: {escape(report['file_path'])}", show_header=True, header_style="bold magenta")
        table.add_column("Measure", style="cyan")
        table.add_column("Value", justify="right")

        runs = sorted(set(report["space_runs"]))
        table.add_row("Sampled lines", str(report["sampled_lines"]))
        table.add_row("Tabs observed", "yes" if report["tabs_observed"] else "no")
        table.add_row("Distinct space runs", ", ".join(map(str, runs)) or "-")
        table.add_row("Space unit", str(report["space_unit"] or "-"))
        table.add_row("Tab width", str(report["tab_width"] or "-"))
        if report["stray_tab_lines"]:
            table.add_row("[yellow]Tabs after spaces (ignored)[/yellow]", str(report["stray_tab_lines"]))

        err_console.print(table)
