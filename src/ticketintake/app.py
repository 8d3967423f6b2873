"""Summary: Application factory wiring core services.

Importance: Centralizes dependency creation for the CLI and API layers.
Alternatives: Instantiate services manually in each entrypoint.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ticketintake.classifier import HeuristicClassifier
from ticketintake.config import AppConfig
from ticketintake.importer import TicketImporter
from ticketintake.keywords import DEFAULT_KEYWORDS, KeywordSets, load_keyword_sets
from ticketintake.services import AnalysisService, IngestionService, TriageService


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppServices:
    """Summary: Bundle of core services for TicketIntake.

    Importance: Simplifies passing dependencies to CLI or API layers.
    Alternatives: Use a dependency injection container.
    """

    ingestion: IngestionService
    triage: TriageService
    analysis: AnalysisService
    keywords: KeywordSets


def build_keywords(config: AppConfig) -> KeywordSets:
    """Summary: Resolve keyword sets from configuration.

    Importance: Lets deployments externalize phrase lists.
    Alternatives: Always use the built-in phrase lists.
    """

    if not config.keywords_path:
        return DEFAULT_KEYWORDS
    logger.info("Loading keyword sets from %s.", config.keywords_path)
    return load_keyword_sets(Path(config.keywords_path))


def build_services(config: AppConfig) -> AppServices:
    """Summary: Build core services from configuration.

    Importance: Provides a single construction path for the application.
    Alternatives: Instantiate services directly within the CLI entrypoint.
    """

    keywords = build_keywords(config)
    importer = TicketImporter(
        classifier=HeuristicClassifier(keywords=keywords),
        id_prefix=config.id_prefix,
        avatar_template=config.avatar_url_template,
    )
    return AppServices(
        ingestion=IngestionService(importer=importer),
        triage=TriageService(),
        analysis=AnalysisService(tz=config.zone()),
        keywords=keywords,
    )
