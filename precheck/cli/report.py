"""
precheck CLI - Report rendering

Renders findings as a terminal table or as a JSON document.
"""
import json
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from precheck.core.models import Finding, ScanReport


def format_finding_table(findings: List[Finding], console: Optional[Console] = None) -> None:
    """Display findings in a table. Values are already masked."""
    console = console or Console()

    if not findings:
        console.print("\n✅ No secrets found!")
        return

    table = Table(title="FINDINGS", show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("FILE:LINE", overflow="fold")
    table.add_column("PATTERN")
    table.add_column("MATCHED")

    for i, finding in enumerate(findings, 1):
        table.add_row(
            str(i),
            escape(f"{finding.file}:{finding.line}"),
            finding.pattern,
            escape(finding.matched),
        )

    console.print(table)


def format_summary(report: ScanReport, console: Optional[Console] = None) -> None:
    """Print per-signature counts and file counters."""
    console = console or Console()

    console.print("\n" + "=" * 60)
    console.print("📊 SCAN SUMMARY")
    console.print("=" * 60)
    console.print(f"Files scanned:  {report.files_scanned}")
    console.print(f"Files skipped:  {report.files_skipped}")
    console.print(f"Unreadable:     {report.read_errors}")
    console.print(f"Total findings: {report.total_findings}")

    for pattern, count in report.findings_by_pattern.items():
        console.print(f"  • {pattern}: {count}")


def report_to_json(report: ScanReport) -> str:
    """Serialize a scan report."""
    return json.dumps(report.to_dict(), indent=2)


def export_report_json(report: ScanReport, output_path: str) -> None:
    """Export a scan report to a JSON file."""
    with open(output_path, "w", encoding="utf-8") as fp:
        fp.write(report_to_json(report))
        fp.write("\n")
