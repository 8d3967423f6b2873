"""Summary: Rule-based priority, sentiment, and entity classification.

Importance: Provides reproducible, explainable metadata for every imported message.
Alternatives: Use an LLM-based or supervised classifier for higher accuracy.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ticketintake.keywords import DEFAULT_KEYWORDS, KeywordSets
from ticketintake.models import Classification, ExtractedInfo


EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_PATTERN = re.compile(r"\b\d{3}[-.]?\d{3}[-.]?\d{4}\b")


@dataclass(frozen=True)
class HeuristicClassifier:
    """Summary: Simple keyword-based ticket classifier.

    Importance: Offers deterministic, fast triage without a model.
    Alternatives: Call an external classification service per row.
    """

    keywords: KeywordSets = DEFAULT_KEYWORDS

    def classify(self, subject: str, body: str) -> Classification:
        """Summary: Derive priority, sentiment, and extracted info for a message.

        Importance: Single entry point used by the batch importer.
        Alternatives: Expose separate calls for each classification facet.

        Phrases match as case-insensitive substrings, so "downtime" matches "down".
        """

        text = f"{subject} {body}".lower()
        urgency_keywords = _matching(self.keywords.urgency, text)
        positive = _matching(self.keywords.positive, text)
        negative = _matching(self.keywords.negative, text)
        sentiment = _sentiment(len(positive), len(negative))
        if sentiment == "positive":
            indicators = positive
        elif sentiment == "negative":
            indicators = negative
        else:
            indicators = []
        return Classification(
            priority="urgent" if urgency_keywords else "normal",
            sentiment=sentiment,
            extracted_info=ExtractedInfo(
                contact_details=extract_contact_details(body),
                requirements=_matching(self.keywords.requirements, text),
                sentiment_indicators=indicators,
                urgency_keywords=urgency_keywords,
                product_mentions=_matching(self.keywords.products, text),
            ),
        )


def extract_contact_details(body: str) -> list[str]:
    """Summary: Find email addresses followed by phone numbers in a body.

    Importance: Surfaces callback details without reading the whole message.
    Alternatives: Use a dedicated phone-number parsing library.
    """

    return EMAIL_PATTERN.findall(body) + PHONE_PATTERN.findall(body)


def _matching(phrases: tuple[str, ...], text: str) -> list[str]:
    """Return phrases present in text, in list order."""

    return [phrase for phrase in phrases if phrase in text]


def _sentiment(positive_count: int, negative_count: int) -> str:
    if positive_count > negative_count:
        return "positive"
    if negative_count > positive_count:
        return "negative"
    return "neutral"
