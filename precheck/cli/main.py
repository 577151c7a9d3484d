"""
precheck CLI - Main entry point
"""
import click

from precheck import __version__
from precheck.cli import scan
from precheck.utils.logger import get_logger, set_level


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (defaults to PRECHECK_LOG_LEVEL or INFO)"
)
@click.pass_context
def cli(ctx, log_level):
    """
    🛡️  precheck - Filesystem Secret Scanner

    Finds hardcoded credentials (cloud keys, private keys, API tokens,
    passwords) in a directory tree and reports them masked.

    WORKFLOW:

    1. List what is detected:
       precheck patterns

    2. Scan a project:
       precheck scan /path/to/project

    3. Gate a CI job:
       precheck scan . --format json --fail-on-findings
    """
    ctx.ensure_object(dict)
    if log_level:
        set_level(get_logger("precheck.core.scanner"), log_level)


# Register subcommands
cli.add_command(scan.scan)
cli.add_command(scan.check_content)
cli.add_command(scan.patterns)


if __name__ == '__main__':
    cli()
