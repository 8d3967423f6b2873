"""Summary: Aggregate statistics over imported tickets.

Importance: Produces the breakdowns and histograms shown after an import.
Alternatives: Calculate counts directly in the API or UI.
"""

from __future__ import annotations

import math
from collections import Counter
from datetime import tzinfo
from typing import Iterable

from ticketintake.models import (
    PRIORITIES,
    SENTIMENTS,
    AnalysisSummary,
    KeywordCount,
    Ticket,
)


TOP_KEYWORDS = 10
BASE_RESPONSE_HOURS = 4.0
URGENT_RESPONSE_HOURS = 1.0
NEGATIVE_RESPONSE_FACTOR = 0.8


def response_time_needed(ticket: Ticket) -> float:
    """Summary: Estimate hours within which a ticket should be answered.

    Importance: Feeds the average response-time headline metric.
    Alternatives: Use SLA targets configured per customer tier.
    """

    hours = BASE_RESPONSE_HOURS
    if ticket.priority == "urgent":
        hours = URGENT_RESPONSE_HOURS
    if ticket.sentiment == "negative":
        hours *= NEGATIVE_RESPONSE_FACTOR
    return hours


def analyze_tickets(tickets: Iterable[Ticket], tz: tzinfo | None = None) -> AnalysisSummary:
    """Summary: Compute corpus-level statistics for a set of tickets.

    Importance: Provides a single derived view for dashboards after each import.
    Alternatives: Persist running counters and update them per ticket.

    Hours are taken in ``tz``, or in system local time when it is None. The
    average response time is NaN for an empty set.
    """

    items = list(tickets)
    sentiment_breakdown = {sentiment: 0 for sentiment in SENTIMENTS}
    priority_breakdown = {priority: 0 for priority in PRIORITIES}
    time_distribution = [0] * 24
    keyword_counts: Counter[str] = Counter()
    for ticket in items:
        sentiment_breakdown[ticket.sentiment] += 1
        priority_breakdown[ticket.priority] += 1
        time_distribution[ticket.received_at.astimezone(tz).hour] += 1
        info = ticket.extracted_info
        keyword_counts.update(info.urgency_keywords)
        keyword_counts.update(info.sentiment_indicators)
        keyword_counts.update(info.requirements)

    # sorted() is stable, so ties keep first-seen order.
    ranked = sorted(keyword_counts.items(), key=lambda item: item[1], reverse=True)
    common_keywords = [KeywordCount(word=word, count=count) for word, count in ranked[:TOP_KEYWORDS]]

    if items:
        avg_response = sum(response_time_needed(ticket) for ticket in items) / len(items)
    else:
        avg_response = math.nan
    return AnalysisSummary(
        total_processed=len(items),
        sentiment_breakdown=sentiment_breakdown,
        priority_breakdown=priority_breakdown,
        common_keywords=common_keywords,
        time_distribution=time_distribution,
        avg_response_time_needed=avg_response,
    )
