"""Summary: Command-line interface for TicketIntake.

Importance: Provides a local entry point for importing and analyzing exports.
Alternatives: Build a web UI or desktop client first.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from ticketintake.app import build_services
from ticketintake.config import AppConfig
from ticketintake.filters import ALL, TicketFilter
from ticketintake.models import PRIORITIES, SENTIMENTS, STATUSES
from ticketintake.parser import ImportFailedError
from ticketintake.serializers import report_payload, summary_payload, ticket_payload


def _positive_int(value: str) -> int:
    """Summary: Parse a listing limit of at least one."""

    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Summary: Build the CLI argument parser.

    Importance: Defines supported commands for local operation.
    Alternatives: Use a CLI framework like Typer or Click.
    """

    parser = argparse.ArgumentParser(description="TicketIntake CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    import_cmd = subparsers.add_parser("import", help="Import a CSV export")
    import_cmd.add_argument("path", type=str)
    import_cmd.add_argument("--json", action="store_true", help="Print the full report as JSON")

    analyze = subparsers.add_parser("analyze", help="Import a CSV export and summarize it")
    analyze.add_argument("path", type=str)
    analyze.add_argument("--json", action="store_true", help="Print the summary as JSON")

    tickets = subparsers.add_parser("tickets", help="List imported tickets")
    tickets.add_argument("path", type=str)
    tickets.add_argument("--priority", choices=(ALL, *PRIORITIES), default=ALL)
    tickets.add_argument("--sentiment", choices=(ALL, *SENTIMENTS), default=ALL)
    tickets.add_argument("--status", choices=(ALL, *STATUSES), default=ALL)
    tickets.add_argument("--limit", type=_positive_int, default=20)
    tickets.add_argument("--json", action="store_true", help="Print tickets as JSON")

    return parser


def run_cli(argv: list[str] | None = None) -> None:
    """Summary: Execute CLI commands based on arguments.

    Importance: Drives the import workflow without a UI.
    Alternatives: Invoke services via the HTTP API.
    """

    parser = build_parser()
    args = parser.parse_args(argv)
    config = AppConfig.from_env()
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    services = build_services(config)

    try:
        report = services.ingestion.ingest_file(Path(args.path))
    except (ImportFailedError, FileNotFoundError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.command == "import":
        if args.json:
            print(json.dumps(report_payload(report), indent=2))
            return
        print(
            f"Imported {report.succeeded} of {report.total_rows} rows "
            f"({report.failed} failed)."
        )
        for error in report.errors:
            print(error)
        return

    if args.command == "analyze":
        summary = services.analysis.summarize(report.tickets)
        if args.json:
            print(json.dumps(summary_payload(summary), indent=2))
            return
        print(f"total: {summary.total_processed}")
        for key, value in summary.priority_breakdown.items():
            print(f"{key}: {value}")
        for key, value in summary.sentiment_breakdown.items():
            print(f"{key}: {value}")
        print(f"avg response time needed: {summary.avg_response_time_needed:.2f}h")
        for item in summary.common_keywords:
            print(f"keyword {item.word}: {item.count}")
        return

    if args.command == "tickets":
        criteria = TicketFilter(
            priority=args.priority, sentiment=args.sentiment, status=args.status
        )
        listed = services.triage.list_tickets(report.tickets, criteria, limit=args.limit)
        if args.json:
            print(json.dumps([ticket_payload(ticket) for ticket in listed], indent=2))
            return
        for ticket in listed:
            print(
                f"{ticket.priority}/{ticket.sentiment}: {ticket.id} "
                f"{ticket.subject} ({ticket.sender.email})"
            )
        return


if __name__ == "__main__":
    run_cli()
