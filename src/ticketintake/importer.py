"""Summary: Batch import of raw records into classified tickets.

Importance: Orchestrates parsing, identity resolution, and classification per row.
Alternatives: Build tickets inline in each entrypoint.
"""

from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime
from typing import Callable, Iterable

from ticketintake.classifier import HeuristicClassifier
from ticketintake.identity import DEFAULT_AVATAR_TEMPLATE, avatar_reference, resolve_sender
from ticketintake.models import ImportReport, RawRecord, SenderIdentity, Ticket
from ticketintake.parser import EmptyImportError, parse_records


logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
IdGenerator = Callable[[int], str]

_ONE_DAY = timedelta(days=1)

_DATE_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y",
)


def local_now() -> datetime:
    """Summary: Return the current time as an aware local datetime."""

    return datetime.now().astimezone()


def batch_id_generator(prefix: str = "csv") -> IdGenerator:
    """Summary: Build an id generator scoped to one import batch.

    Importance: Keeps ids unique within a batch and distinct across batches.
    Alternatives: Use uuid4 for every ticket.
    """

    batch_token = secrets.token_hex(4)

    def generate(index: int) -> str:
        return f"{prefix}-{index}-{batch_token}"

    return generate


def parse_sent_date(value: str, clock: Clock = local_now) -> datetime:
    """Summary: Parse a sent date into an aware datetime.

    Importance: Normalizes ISO, e-mail, and spreadsheet dates for histograms and filters.
    Alternatives: Store raw strings and parse on demand.

    Naive values are read as local time. Unparseable values fall back to the clock.
    """

    cleaned = value.strip()
    parsed: datetime | None = None
    try:
        parsed = datetime.fromisoformat(cleaned.replace("Z", "+00:00"))
    except ValueError:
        parsed = None
    if parsed is None:
        try:
            parsed = parsedate_to_datetime(cleaned)
        except (TypeError, ValueError, IndexError):
            parsed = None
    if parsed is None:
        for date_format in _DATE_FORMATS:
            try:
                parsed = datetime.strptime(cleaned, date_format)
                break
            except ValueError:
                continue
    if parsed is not None:
        try:
            return _usable(parsed)
        except (OverflowError, ValueError, OSError):
            logger.debug("Out of range sent date %r, using current time.", value)
    else:
        logger.debug("Unparseable sent date %r, using current time.", value)
    return _usable(clock())


def _usable(value: datetime) -> datetime:
    """Summary: Make a datetime aware and convertible to any UTC offset.

    Importance: Later timezone conversions for histograms and filters cannot overflow.
    Alternatives: Clamp out-of-range values to datetime.min or datetime.max.
    """

    aware = value.astimezone() if value.tzinfo is None else value
    # Offsets stay under a day, so a one-day margin covers every target zone.
    utc = aware.astimezone(timezone.utc)
    utc - _ONE_DAY
    utc + _ONE_DAY
    return aware


@dataclass(frozen=True)
class TicketImporter:
    """Summary: Converts raw records into tickets and an import report.

    Importance: Keeps row failures local so one bad row never aborts a batch.
    Alternatives: Stop at the first failure and report it.
    """

    classifier: HeuristicClassifier = field(default_factory=HeuristicClassifier)
    clock: Clock = local_now
    id_generator: IdGenerator | None = None
    id_prefix: str = "csv"
    avatar_template: str = DEFAULT_AVATAR_TEMPLATE

    def import_text(self, text: str) -> ImportReport:
        """Summary: Parse and import a whole delimited file.

        Importance: Single call for file uploads from the CLI and API.
        Alternatives: Require callers to parse before importing.
        """

        records = parse_records(text)
        if not records:
            raise EmptyImportError()
        return self.import_records(records)

    def import_records(self, records: Iterable[RawRecord]) -> ImportReport:
        """Summary: Build one ticket per record, collecting row-level errors.

        Importance: Produces the report consumed by dashboards and analysis.
        Alternatives: Process rows concurrently and reorder afterwards.
        """

        generate_id = self.id_generator or batch_id_generator(self.id_prefix)
        tickets: list[Ticket] = []
        errors: list[str] = []
        total = 0
        for index, record in enumerate(records):
            total += 1
            try:
                tickets.append(self._build_ticket(record, index, generate_id))
            except Exception as exc:
                # Row numbers count the header line and are 1-based.
                message = f"Row {index + 2}: {str(exc) or 'Unknown error'}"
                logger.warning("Failed to import row: %s", message)
                errors.append(message)
        logger.info("Imported %s of %s rows.", len(tickets), total)
        return ImportReport(
            total_rows=total,
            succeeded=len(tickets),
            failed=len(errors),
            errors=errors,
            tickets=tickets,
        )

    def _build_ticket(self, record: RawRecord, index: int, generate_id: IdGenerator) -> Ticket:
        """Summary: Build a single ticket from a raw record.

        Importance: Isolates the per-row work so failures can be caught per row.
        Alternatives: Inline ticket construction in the import loop.
        """

        received_at = parse_sent_date(record.sent_date, self.clock)
        name, email = resolve_sender(record.sender)
        classification = self.classifier.classify(record.subject, record.body)
        return Ticket(
            id=generate_id(index),
            sender=SenderIdentity(
                name=name,
                email=email,
                avatar_ref=avatar_reference(index, self.avatar_template),
            ),
            subject=record.subject,
            body=record.body,
            received_at=received_at,
            priority=classification.priority,
            sentiment=classification.sentiment,
            extracted_info=classification.extracted_info,
        )
