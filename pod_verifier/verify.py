#!/usr/bin/env python3
# Path: pod_verifier/verify.py
"""
POD Verifier CLI
================

Command-line interface for repairing, verifying and sharing POD records.
"""

import sys
import json
import asyncio
import argparse
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.logging import RichHandler

from pod_verifier import __version__
from pod_verifier.constants import STATUS_VALID, STATUS_INVALID
from pod_verifier.core.config_loader import ConfigLoader
from pod_verifier.core.logger import setup_ipo_logging
from pod_verifier.engine.boundary import EngineLoadError, load_engine
from pod_verifier.engine.processors import VerificationOrchestrator, VerificationResult
from pod_verifier.engine.tools.formatting import (
    FormattedEntry,
    category_info,
    format_resolved_entries,
)
from pod_verifier.engine.tools.repair import Repairer, detect_malformations
from pod_verifier.engine.tools.sharing import get_shareable_url, is_valid_record_json
from pod_verifier.loaders import InputReader
from pod_verifier.output import (
    ReportGenerator,
    get_verification_summary,
    get_helpful_error_message,
)


console = Console()
err_console = Console(stderr=True)

STATUS_COLORS = {
    STATUS_VALID: 'green',
    STATUS_INVALID: 'red',
}


def setup_logging(config: ConfigLoader, verbose: bool = False) -> None:
    """Setup IPO logging with a rich console handler on stderr."""
    level = 'DEBUG' if verbose else config.get('log_level', 'INFO')

    setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level=level,
        console_output=True,
        console_handler=RichHandler(rich_tracebacks=True, console=err_console, show_path=False),
    )


def display_result(result: VerificationResult, formatted: list[FormattedEntry]) -> None:
    """Display verification result with rich formatting."""
    summary = get_verification_summary(result)
    color = STATUS_COLORS.get(summary.status, 'yellow')

    body = [f"[{color} bold]{escape(summary.message)}[/{color} bold]"]
    body.extend(escape(detail) for detail in summary.details)

    if result.error:
        help_text = get_helpful_error_message(result.error, result.error_category)
        if help_text != result.error:
            body.append(f"\n[dim]Hint:[/dim] {escape(help_text)}")

    console.print(Panel('\n'.join(body), title="Verification Result", border_style=color))

    if result.was_repaired:
        console.print("[yellow]Input was repaired before verification:[/yellow]")
        for change in result.repair_changes:
            console.print(f"  - {escape(change)}")

    for warning in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {escape(warning)}")

    if formatted:
        display_entries(formatted)


def display_entries(formatted: list[FormattedEntry]) -> None:
    """Display entries table, important fields first."""
    table = Table(title="Entries", show_header=True, header_style="bold cyan")
    table.add_column("", width=2)
    table.add_column("Category", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Type", style="cyan")
    table.add_column("Value", style="white")

    for entry in formatted:
        info = category_info(entry.category)
        table.add_row(
            "★" if entry.is_important else "",
            f"{info['icon']} {info['label']}",
            escape(entry.name),
            escape(entry.type),
            escape(entry.formatted_value),
        )

    console.print(table)


def verify_source(
    source: str,
    engine_target: Optional[str],
    json_output: bool,
    config: ConfigLoader,
) -> int:
    """Verify one record from a file or stdin."""
    engine_target = engine_target or config.get('engine')
    if not engine_target:
        console.print(
            "[red]Error:[/red] No verification engine configured. "
            "Pass --engine module:factory or set POD_VERIFIER_ENGINE."
        )
        return 1

    engine = load_engine(engine_target)
    text = InputReader().read(source)
    orchestrator = VerificationOrchestrator(engine, config=config)

    if json_output:
        result = asyncio.run(orchestrator.verify(text))
    else:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            task = progress.add_task("Verifying...", total=None)
            result = asyncio.run(orchestrator.verify(text))
            progress.update(task, completed=True)

    formatted = format_resolved_entries(result.resolved_entries)

    if json_output:
        report = ReportGenerator().build_report(result, formatted)
        console.print(json.dumps(report, indent=2, ensure_ascii=False), markup=False, highlight=False, soft_wrap=True)
    else:
        display_result(result, formatted)

    return 0 if result.is_verified else 1


def repair_source(source: str) -> int:
    """Show detected malformations and the repaired text."""
    text = InputReader().read(source)
    report = detect_malformations(text)
    result = Repairer().repair(text)

    if report.is_malformed:
        table = Table(title="Detected Issues", show_header=True, header_style="bold yellow")
        table.add_column("Issue", style="yellow")
        table.add_column("Description", style="white")
        for issue, description in zip(report.issues, report.descriptions):
            table.add_row(issue.value, escape(description))
        console.print(table)

    if not result.succeeded:
        console.print(f"[red]Repair failed:[/red] {escape(result.error)}")
        return 1

    if result.was_repaired:
        console.print("[green]Repaired:[/green]")
        for change in result.changes:
            console.print(f"  - {escape(change)}")
    else:
        console.print("[green]Input is already valid JSON[/green]")

    console.print(result.canonical_text, markup=False, highlight=False, soft_wrap=True)
    return 0


def share_source(source: str, base_url: Optional[str], config: ConfigLoader) -> int:
    """Print a share link for a record."""
    text = InputReader().read(source)

    if not is_valid_record_json(text):
        err_console.print(
            "[yellow]Warning:[/yellow] input is not a complete POD record; "
            "the link will carry it as-is"
        )

    url = get_shareable_url(
        text,
        base_url or config.get('share_base_url'),
        config.get('share_param'),
    )
    console.print(url, markup=False, highlight=False, soft_wrap=True)
    return 0


def open_link(url: str, config: ConfigLoader) -> int:
    """Print the record carried by a share link."""
    text = InputReader().read_share_link(url, config.get('share_param'))

    if text is None:
        console.print("[red]Error:[/red] Link does not carry a valid POD token")
        return 1

    console.print(text, markup=False, highlight=False, soft_wrap=True)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""

    parser = argparse.ArgumentParser(
        description="POD Verifier - repair, verify and share signed POD records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Verify a record file
  pod-verifier verify record.json --engine my_engine:create_engine

  # Verify from stdin with the engine from .env
  cat record.json | pod-verifier verify -

  # Show what auto-repair would change
  pod-verifier repair broken.json

  # Create and open share links
  pod-verifier share record.json
  pod-verifier open "http://localhost:5173/?pod=eyJlbnRyaWVzIjp7fX0"
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'POD Verifier {__version__}'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging'
    )

    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    # Verify command
    verify_parser = subparsers.add_parser(
        'verify',
        help='Repair, validate and verify a record'
    )
    verify_parser.add_argument(
        'source',
        help="Path to record file, or '-' for stdin"
    )
    verify_parser.add_argument(
        '-e', '--engine',
        help='Verification engine as module:factory (default: POD_VERIFIER_ENGINE)'
    )
    verify_parser.add_argument(
        '--json',
        action='store_true',
        help='Print the report as JSON'
    )

    # Repair command
    repair_parser = subparsers.add_parser(
        'repair',
        help='Show malformations and the repaired record text'
    )
    repair_parser.add_argument(
        'source',
        help="Path to record file, or '-' for stdin"
    )

    # Share command
    share_parser = subparsers.add_parser(
        'share',
        help='Create a share link for a record'
    )
    share_parser.add_argument(
        'source',
        help="Path to record file, or '-' for stdin"
    )
    share_parser.add_argument(
        '-b', '--base-url',
        help='Page URL to attach the token to (default: POD_VERIFIER_SHARE_BASE_URL)'
    )

    # Open command
    open_parser = subparsers.add_parser(
        'open',
        help='Decode the record carried by a share link'
    )
    open_parser.add_argument(
        'url',
        help='Share link'
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    config = ConfigLoader()
    setup_logging(config, args.verbose or config.get('debug', False))

    try:
        if args.command == 'verify':
            return verify_source(
                source=args.source,
                engine_target=args.engine,
                json_output=args.json,
                config=config,
            )

        elif args.command == 'repair':
            return repair_source(args.source)

        elif args.command == 'share':
            return share_source(args.source, args.base_url, config)

        elif args.command == 'open':
            return open_link(args.url, config)

    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        return 130

    except EngineLoadError as e:
        console.print(f"[red bold]Engine error:[/red bold] {escape(str(e))}")
        return 1

    except Exception as e:
        console.print(f"\n[red bold]Error:[/red bold] {escape(str(e))}")
        if args.verbose:
            console.print_exception()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
