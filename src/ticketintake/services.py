"""Summary: Core application services for TicketIntake.

Importance: Orchestrates import, triage listing, and analysis for the CLI and API.
Alternatives: Call the pipeline modules directly from each entrypoint.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import tzinfo
from pathlib import Path
from typing import Iterable

from ticketintake.analysis import analyze_tickets
from ticketintake.filters import TicketFilter, filter_tickets
from ticketintake.importer import TicketImporter
from ticketintake.models import AnalysisSummary, ImportReport, Ticket


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IngestionService:
    """Summary: Handles ingestion of delimited exports.

    Importance: Centralizes ingestion so every surface reports the same way.
    Alternatives: Ingest directly inside CLI commands.
    """

    importer: TicketImporter

    def ingest_text(self, text: str) -> ImportReport:
        """Summary: Import delimited text already held in memory.

        Importance: Serves uploads that never touch the file system.
        Alternatives: Require a temporary file for every upload.
        """

        report = self.importer.import_text(text)
        if report.failed:
            logger.warning("Import finished with %s failed rows.", report.failed)
        return report

    def ingest_file(self, path: Path) -> ImportReport:
        """Summary: Import a UTF-8 delimited file from disk.

        Importance: Drives the CLI import workflow.
        Alternatives: Stream the file through a queue-based pipeline.
        """

        if not path.exists():
            raise FileNotFoundError(f"Import file not found: {path}")
        logger.info("Importing tickets from %s.", path)
        return self.ingest_text(path.read_text(encoding="utf-8-sig"))


@dataclass(frozen=True)
class TriageService:
    """Summary: Provides filtered ticket listings.

    Importance: Surfaces urgent or unhappy customers first in listings.
    Alternatives: Leave all filtering to the presentation layer.
    """

    def list_tickets(
        self, tickets: Iterable[Ticket], criteria: TicketFilter, limit: int | None = None
    ) -> list[Ticket]:
        """Summary: Filter tickets and cap the result size.

        Importance: Keeps CLI and API listings consistent.
        Alternatives: Paginate with cursors instead of a limit.
        """

        if limit is not None and limit < 1:
            raise ValueError("limit must be at least 1")
        matched = filter_tickets(tickets, criteria)
        return matched[:limit] if limit is not None else matched


@dataclass(frozen=True)
class AnalysisService:
    """Summary: Provides aggregate statistics over ticket sets.

    Importance: Applies the configured timezone to every summary.
    Alternatives: Calculate statistics directly in the API or UI.
    """

    tz: tzinfo | None = None

    def summarize(self, tickets: Iterable[Ticket]) -> AnalysisSummary:
        return analyze_tickets(tickets, tz=self.tz)
