"""Summary: FastAPI application for TicketIntake.

Importance: Exposes import, listing, and analysis endpoints to dashboard clients.
Alternatives: Use a CLI-only workflow or a different web framework.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Depends, FastAPI, Header, HTTPException, Query
from pydantic import BaseModel, Field

from ticketintake.app import build_services
from ticketintake.config import AppConfig
from ticketintake.filters import ALL, TicketFilter
from ticketintake.parser import ImportFailedError
from ticketintake.serializers import report_payload, summary_payload, ticket_payload


logger = logging.getLogger(__name__)


class ImportRequest(BaseModel):
    """Summary: Request payload for a CSV import.

    Importance: Accepts the uploaded file content as UTF-8 text.
    Alternatives: Use multipart file uploads.
    """

    content: str = Field(min_length=1)


def create_app(config: AppConfig) -> FastAPI:
    """Summary: Create a FastAPI app wired to TicketIntake services.

    Importance: Ensures the API layer shares the same configuration as the CLI.
    Alternatives: Instantiate services globally outside the factory.
    """

    if not logging.getLogger().handlers:
        logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    app = FastAPI(title="TicketIntake API", version="0.1.0")
    services = build_services(config)
    app.state.tickets = []

    def require_api_key(x_api_key: str | None = Header(default=None)) -> None:
        """Summary: Enforce API key authentication when configured.

        Importance: Adds a minimal security layer for private deployments.
        Alternatives: Use OAuth or session-based authentication.
        """

        if not config.api_key:
            return
        if x_api_key != config.api_key:
            raise HTTPException(status_code=401, detail="Invalid API key")

    @app.get("/health")
    def health() -> dict[str, str]:
        """Summary: Health check endpoint.

        Importance: Supports uptime checks in local and cloud deployments.
        Alternatives: Use a metrics endpoint only.
        """

        return {"status": "ok"}

    @app.post("/imports", dependencies=[Depends(require_api_key)])
    def import_csv(payload: ImportRequest) -> dict[str, Any]:
        """Summary: Import CSV content and replace the current ticket set.

        Importance: Entry point for dashboard uploads.
        Alternatives: Append imported tickets to the existing set.
        """

        try:
            report = services.ingestion.ingest_text(payload.content)
        except ImportFailedError as exc:
            logger.info("Rejected import: %s", exc)
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        app.state.tickets = list(report.tickets)
        return report_payload(report)

    @app.get("/tickets", dependencies=[Depends(require_api_key)])
    def list_tickets(
        priority: str = ALL,
        sentiment: str = ALL,
        status: str = ALL,
        limit: int = Query(default=50, ge=1),
    ) -> list[dict[str, Any]]:
        """Summary: List tickets from the latest import.

        Importance: Supports filtered inbox views in the UI.
        Alternatives: Return every ticket and filter client-side.
        """

        try:
            criteria = TicketFilter(priority=priority, sentiment=sentiment, status=status)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        listed = services.triage.list_tickets(app.state.tickets, criteria, limit=limit)
        return [ticket_payload(ticket) for ticket in listed]

    @app.get("/analysis", dependencies=[Depends(require_api_key)])
    def analysis() -> dict[str, Any]:
        """Summary: Summarize the latest import.

        Importance: Provides chart data for dashboards.
        Alternatives: Cache the summary alongside the import.
        """

        return summary_payload(services.analysis.summarize(app.state.tickets))

    return app
