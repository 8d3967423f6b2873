"""Summary: Tests for heuristic classifier behavior.

Importance: Validates deterministic priority, sentiment, and entity extraction.
Alternatives: Use only model-driven classification without rules.
"""

from __future__ import annotations

from ticketintake.classifier import HeuristicClassifier, extract_contact_details
from ticketintake.keywords import DEFAULT_KEYWORDS, KeywordSets


def test_classifier_flags_urgent_negative_message() -> None:
    """Summary: Classify the canonical locked-out customer message.

    Importance: Confirms urgency and negativity from subject and body together.
    Alternatives: Classify the body only.
    """

    result = HeuristicClassifier().classify("URGENT: help", "cannot access account")
    assert result.priority == "urgent"
    assert result.sentiment == "negative"
    assert result.extracted_info.urgency_keywords == ["urgent", "cannot access"]
    assert result.extracted_info.sentiment_indicators == ["cannot"]
    assert result.extracted_info.product_mentions == ["account"]


def test_classifier_matches_substrings_not_words() -> None:
    result = HeuristicClassifier().classify("Scheduled downtime", "Is there any update?")
    assert result.priority == "urgent"
    assert result.extracted_info.urgency_keywords == ["down"]


def test_classifier_normal_priority_without_urgency_phrases() -> None:
    result = HeuristicClassifier().classify("Question", "How do I export my invoices?")
    assert result.priority == "normal"
    assert result.extracted_info.urgency_keywords == []


def test_classifier_positive_sentiment_lists_positive_indicators() -> None:
    result = HeuristicClassifier().classify("Thank you!", "Great support, I love the dashboard.")
    assert result.sentiment == "positive"
    assert result.extracted_info.sentiment_indicators == ["thank", "great", "love"]
    assert result.extracted_info.product_mentions == ["dashboard", "support"]


def test_classifier_tie_is_neutral_with_no_indicators() -> None:
    """Summary: Verify equal positive and negative counts yield neutral.

    Importance: Tie handling is strict equality, including zero matches.
    Alternatives: Break ties towards negative sentiment.
    """

    classifier = HeuristicClassifier()
    tied = classifier.classify("Feedback", "Thank you, but there is a problem")
    assert tied.sentiment == "neutral"
    assert tied.extracted_info.sentiment_indicators == []
    empty = classifier.classify("Hello", "Just checking in")
    assert empty.sentiment == "neutral"


def test_classifier_counts_each_phrase_once() -> None:
    result = HeuristicClassifier().classify(
        "problem problem problem", "thank you, great work"
    )
    assert result.sentiment == "positive"


def test_classifier_requirements_follow_list_order() -> None:
    result = HeuristicClassifier().classify(
        "Refund for billing", "I need help, I want to cancel and get a refund"
    )
    assert result.extracted_info.requirements == [
        "need help",
        "want to",
        "billing",
        "refund",
        "cancel",
    ]


def test_contact_details_lists_emails_before_phones() -> None:
    """Summary: Verify contact extraction order and duplicate retention.

    Importance: Downstream frequency counts depend on duplicates being kept.
    Alternatives: Deduplicate contacts per message.
    """

    body = "Call 555-123-4567 or mail jane@x.com, backup bob@y.org or jane@x.com"
    assert extract_contact_details(body) == [
        "jane@x.com",
        "bob@y.org",
        "jane@x.com",
        "555-123-4567",
    ]


def test_contact_details_ignore_subject() -> None:
    result = HeuristicClassifier().classify("Call me at 555.111.2222", "No details here")
    assert result.extracted_info.contact_details == []


def test_classifier_uses_configured_keywords() -> None:
    keywords = KeywordSets(
        urgency=("outage",),
        positive=DEFAULT_KEYWORDS.positive,
        negative=DEFAULT_KEYWORDS.negative,
        requirements=(),
        products=("reports",),
    )
    result = HeuristicClassifier(keywords=keywords).classify("Outage", "Reports are urgent")
    assert result.priority == "urgent"
    assert result.extracted_info.urgency_keywords == ["outage"]
    assert result.extracted_info.product_mentions == ["reports"]
