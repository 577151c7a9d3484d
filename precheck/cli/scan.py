"""
precheck CLI - Scan commands

Provides commands for scanning a directory tree or a single file's text,
and for listing the built-in signatures.
"""
import os
from pathlib import Path
from typing import Optional

import click

from precheck.cli.report import (
    export_report_json,
    format_finding_table,
    format_summary,
    report_to_json,
)
from precheck.core.exceptions import PrecheckError, TraversalError
from precheck.core.models import ScanReport
from precheck.core.patterns import pattern_names
from precheck.core.scanner import SecretScanner, decode_content, read_file_bytes
from precheck.utils.config import load_config

EXIT_FINDINGS = 1
EXIT_TRAVERSAL_ERROR = 2


@click.command("scan")
@click.argument("path", type=click.Path(), default=".")
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format for findings"
)
@click.option(
    "--output", "-o",
    type=click.Path(),
    help="Also write the JSON report to this file"
)
@click.option(
    "--config", "-c", "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file overriding the skip lists and size limit"
)
@click.option(
    "--fail-on-findings/--no-fail-on-findings",
    default=False,
    help="Exit with status 1 when any secret is found"
)
@click.pass_context
def scan(ctx, path: str, output_format: str, output: Optional[str],
         config_path: Optional[str], fail_on_findings: bool):
    """
    🔍 Scan a directory tree for exposed secrets.

    Test and fixture directories, VCS and build output, oversized files and
    binaries are skipped. Matched values are always masked.

    Examples:
        precheck scan .
        precheck scan ./myproject --format json
        precheck scan . -o findings.json --fail-on-findings
    """
    try:
        config = load_config(Path(config_path) if config_path else None)
    except PrecheckError as e:
        raise click.UsageError(e.message)

    scanner = SecretScanner(config)

    if output_format == "table":
        click.echo(f"\n🔍 Scanning: {os.path.abspath(path)}")
        click.echo("=" * 60)

    try:
        report = scanner.scan(path)
    except TraversalError as e:
        click.echo(f"❌ {e.message}", err=True)
        ctx.exit(EXIT_TRAVERSAL_ERROR)

    _emit_report(report, output_format)

    if output:
        export_report_json(report, output)
        if output_format == "table":
            click.echo(f"\n💾 Report written to {output}")

    if fail_on_findings and report.findings:
        ctx.exit(EXIT_FINDINGS)


def _emit_report(report: ScanReport, output_format: str) -> None:
    if output_format == "json":
        click.echo(report_to_json(report))
        return
    format_finding_table(report.findings)
    format_summary(report)


@click.command("check-content")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--name",
    help="Filename to report in findings (defaults to FILE)"
)
def check_content(file: str, name: Optional[str]):
    """
    Scan one file's text, ignoring the path and binary filters.
    """
    try:
        data = read_file_bytes(file)
    except PrecheckError as e:
        raise click.ClickException(e.message)

    scanner = SecretScanner()
    findings = scanner.scan_content(decode_content(data), name or file)
    report = ScanReport(root=file, findings=findings, files_scanned=1)
    click.echo(report_to_json(report))


@click.command("patterns")
def patterns():
    """📋 List the built-in secret signatures."""
    for signature in pattern_names():
        click.echo(signature)
