"""Summary: Keyword sets driving the heuristic classifier.

Importance: Keeps phrase lists as configuration instead of inline logic.
Alternatives: Hardcode the lists inside the classifier functions.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path


@dataclass(frozen=True)
class KeywordSets:
    """Summary: Named, ordered phrase lists used for classification.

    Importance: Output order of every extracted list follows these tuples.
    Alternatives: Use unordered sets and sort matches alphabetically.
    """

    urgency: tuple[str, ...]
    positive: tuple[str, ...]
    negative: tuple[str, ...]
    requirements: tuple[str, ...]
    products: tuple[str, ...]


DEFAULT_KEYWORDS = KeywordSets(
    urgency=(
        "urgent",
        "critical",
        "emergency",
        "asap",
        "immediately",
        "cannot access",
        "down",
        "broken",
        "not working",
    ),
    positive=(
        "thank",
        "great",
        "excellent",
        "love",
        "amazing",
        "wonderful",
        "fantastic",
        "pleased",
    ),
    negative=(
        "angry",
        "frustrated",
        "terrible",
        "awful",
        "hate",
        "disappointed",
        "cannot",
        "broken",
        "problem",
    ),
    requirements=(
        "need help",
        "need assistance",
        "want to",
        "looking for",
        "require",
        "account access",
        "password reset",
        "billing",
        "refund",
        "cancel",
        "upgrade",
        "downgrade",
        "feature request",
        "bug report",
    ),
    products=(
        "dashboard",
        "account",
        "billing",
        "subscription",
        "api",
        "integration",
        "mobile app",
        "web app",
        "service",
        "support",
        "premium",
        "basic plan",
    ),
)


def load_keyword_sets(path: Path, base: KeywordSets = DEFAULT_KEYWORDS) -> KeywordSets:
    """Summary: Load keyword overrides from a JSON file.

    Importance: Allows swapping or extending phrase lists without code changes.
    Alternatives: Read keyword lists from environment variables.

    Lists omitted from the file keep the values from ``base``.
    """

    if not path.exists():
        raise FileNotFoundError(f"Keyword file not found: {path}")
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Keyword file must contain a JSON object")
    known = {item.name for item in fields(KeywordSets)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown keyword sets: {', '.join(unknown)}")
    overrides: dict[str, tuple[str, ...]] = {}
    for name, phrases in data.items():
        if not isinstance(phrases, list) or not all(isinstance(p, str) for p in phrases):
            raise ValueError(f"Keyword set {name} must be a list of strings")
        overrides[name] = tuple(phrase.strip().lower() for phrase in phrases if phrase.strip())
    return replace(base, **overrides)
