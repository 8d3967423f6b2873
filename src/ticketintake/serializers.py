"""Summary: JSON-ready payloads for tickets, reports, and summaries.

Importance: Keeps CLI and API output identical for presentation clients.
Alternatives: Use Pydantic response models for every entity.
"""

from __future__ import annotations

import math
from dataclasses import asdict
from typing import Any

from ticketintake.models import AnalysisSummary, ImportReport, Ticket


def ticket_payload(ticket: Ticket) -> dict[str, Any]:
    """Summary: Convert a ticket into a JSON-ready dictionary.

    Importance: Renders timestamps as ISO-8601 strings.
    Alternatives: Register a custom JSON encoder.
    """

    return {
        "id": ticket.id,
        "sender": asdict(ticket.sender),
        "subject": ticket.subject,
        "body": ticket.body,
        "received_at": ticket.received_at.isoformat(),
        "priority": ticket.priority,
        "sentiment": ticket.sentiment,
        "status": ticket.status,
        "extracted_info": asdict(ticket.extracted_info),
        "ai_response": ticket.ai_response,
    }


def report_payload(report: ImportReport) -> dict[str, Any]:
    return {
        "total_rows": report.total_rows,
        "succeeded": report.succeeded,
        "failed": report.failed,
        "errors": list(report.errors),
        "tickets": [ticket_payload(ticket) for ticket in report.tickets],
    }


def summary_payload(summary: AnalysisSummary) -> dict[str, Any]:
    """Summary: Convert an analysis summary into a JSON-ready dictionary.

    Importance: JSON has no NaN, so an empty set reports a null average.
    Alternatives: Report zero hours for an empty set.
    """

    average = summary.avg_response_time_needed
    return {
        "total_processed": summary.total_processed,
        "sentiment_breakdown": dict(summary.sentiment_breakdown),
        "priority_breakdown": dict(summary.priority_breakdown),
        "common_keywords": [asdict(item) for item in summary.common_keywords],
        "time_distribution": list(summary.time_distribution),
        "avg_response_time_needed": None if math.isnan(average) else average,
    }
