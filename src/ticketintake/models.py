"""Summary: Domain model dataclasses for TicketIntake.

Importance: Defines the records shared by parsing, classification, import, and analysis.
Alternatives: Use Pydantic models or plain dictionaries throughout.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

PRIORITIES = ("urgent", "normal")
SENTIMENTS = ("positive", "negative", "neutral")
STATUSES = ("pending", "responded", "resolved")

REQUIRED_FIELDS = ("sender", "subject", "body", "sent_date")


@dataclass(frozen=True)
class RawRecord:
    """Summary: Represents one parsed input row with trimmed values.

    Importance: Decouples the delimited text format from ticket construction.
    Alternatives: Pass raw dictionaries keyed by header name.
    """

    sender: str
    subject: str
    body: str
    sent_date: str


@dataclass(frozen=True)
class SenderIdentity:
    """Summary: Display name, address, and avatar reference of a sender.

    Importance: Gives the presentation layer a normalized sender to render.
    Alternatives: Keep the raw sender string and parse it at display time.
    """

    name: str
    email: str
    avatar_ref: str = ""


@dataclass(frozen=True)
class ExtractedInfo:
    """Summary: Keyword and pattern derived metadata for a ticket.

    Importance: Explains the classification and feeds keyword frequency counts.
    Alternatives: Store only the final priority and sentiment labels.
    """

    contact_details: list[str] = field(default_factory=list)
    requirements: list[str] = field(default_factory=list)
    sentiment_indicators: list[str] = field(default_factory=list)
    urgency_keywords: list[str] = field(default_factory=list)
    product_mentions: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Classification:
    """Summary: Output of the heuristic classifier for one message."""

    priority: str
    sentiment: str
    extracted_info: ExtractedInfo


@dataclass(frozen=True)
class Ticket:
    """Summary: Represents one structured, classified support message.

    Importance: Canonical output entity consumed by dashboards and filters.
    Alternatives: Emit the raw row alongside a separate classification record.
    """

    id: str
    sender: SenderIdentity
    subject: str
    body: str
    received_at: datetime
    priority: str
    sentiment: str
    extracted_info: ExtractedInfo
    status: str = "pending"
    ai_response: str | None = None


@dataclass(frozen=True)
class ImportReport:
    """Summary: Result of one batch ingestion.

    Importance: Surfaces successes and row-level failures without aborting the batch.
    Alternatives: Raise on the first failing row.
    """

    total_rows: int
    succeeded: int
    failed: int
    errors: list[str]
    tickets: list[Ticket]


@dataclass(frozen=True)
class KeywordCount:
    word: str
    count: int


@dataclass(frozen=True)
class AnalysisSummary:
    """Summary: Corpus-level statistics derived from a set of tickets.

    Importance: Powers charts and headline metrics after an import.
    Alternatives: Compute aggregates in the presentation layer.
    """

    total_processed: int
    sentiment_breakdown: dict[str, int]
    priority_breakdown: dict[str, int]
    common_keywords: list[KeywordCount]
    time_distribution: list[int]
    avg_response_time_needed: float
