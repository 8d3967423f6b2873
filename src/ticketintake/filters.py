"""Summary: Ticket filtering by facet and received time.

Importance: Lets consumers narrow an imported batch without holding filter state in the core.
Alternatives: Filter in the presentation layer on every render.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

from ticketintake.models import PRIORITIES, SENTIMENTS, STATUSES, Ticket


ALL = "all"


@dataclass(frozen=True)
class TicketFilter:
    """Summary: Immutable filter criteria for a ticket collection.

    Importance: Mirrors the dashboard filters as a value object.
    Alternatives: Accept loose keyword arguments on every call.

    "all" disables a facet; start and end bound received_at inclusively.
    """

    priority: str = ALL
    sentiment: str = ALL
    status: str = ALL
    start: datetime | None = None
    end: datetime | None = None

    def __post_init__(self) -> None:
        _check_facet("priority", self.priority, PRIORITIES)
        _check_facet("sentiment", self.sentiment, SENTIMENTS)
        _check_facet("status", self.status, STATUSES)

    def matches(self, ticket: Ticket) -> bool:
        """Summary: Check whether a ticket satisfies every active criterion."""

        if self.priority != ALL and ticket.priority != self.priority:
            return False
        if self.sentiment != ALL and ticket.sentiment != self.sentiment:
            return False
        if self.status != ALL and ticket.status != self.status:
            return False
        received_at = _aware(ticket.received_at)
        if self.start is not None and received_at < _aware(self.start):
            return False
        if self.end is not None and received_at > _aware(self.end):
            return False
        return True


def filter_tickets(tickets: Iterable[Ticket], criteria: TicketFilter) -> list[Ticket]:
    """Summary: Return tickets matching the criteria in their original order.

    Importance: Backs filtered ticket listings in the CLI and API.
    Alternatives: Query tickets from a database with SQL filters.
    """

    return [ticket for ticket in tickets if criteria.matches(ticket)]


def _check_facet(name: str, value: str, allowed: tuple[str, ...]) -> None:
    if value != ALL and value not in allowed:
        raise ValueError(f"Invalid {name} filter: {value}")


def _aware(value: datetime) -> datetime:
    # Naive bounds are read as local time, like naive sent dates.
    return value if value.tzinfo is not None else value.astimezone()
