"""Summary: Tests for configuration loading.

Importance: Ensures defaults, .env, and environment overrides behave correctly.
Alternatives: Validate configuration manually during runtime.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest

from ticketintake.app import build_keywords, build_services
from ticketintake.config import AppConfig, load_defaults, load_dotenv


DEFAULTS = {
    "keywords_path": "",
    "id_prefix": "csv",
    "avatar_url_template": "avatar://{photo_id}",
    "timezone": "",
    "log_level": "info",
    "api_host": "127.0.0.1",
    "api_port": "8000",
    "api_key": "",
}

ENV_VARS = (
    "TICKETINTAKE_KEYWORDS_PATH",
    "TICKETINTAKE_ID_PREFIX",
    "TICKETINTAKE_AVATAR_URL_TEMPLATE",
    "TICKETINTAKE_TIMEZONE",
    "TICKETINTAKE_LOG_LEVEL",
    "TICKETINTAKE_API_HOST",
    "TICKETINTAKE_API_PORT",
    "TICKETINTAKE_API_KEY",
)


def _write_defaults(root: Path) -> None:
    (root / "config").mkdir()
    (root / "config" / "defaults.json").write_text(json.dumps(DEFAULTS), encoding="utf-8")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_load_defaults_reads_json(tmp_path: Path) -> None:
    """Summary: Verify defaults are parsed from JSON.

    Importance: Confirms config file is the source of truth for variables.
    Alternatives: Hardcode defaults in the test.
    """

    defaults_path = tmp_path / "defaults.json"
    defaults_path.write_text("{\"id_prefix\": \"csv\"}", encoding="utf-8")
    defaults = load_defaults(defaults_path)
    assert defaults["id_prefix"] == "csv"


def test_load_defaults_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_defaults(tmp_path / "defaults.json")


def test_load_dotenv_sets_env(tmp_path: Path, clean_env: pytest.MonkeyPatch) -> None:
    """Summary: Ensure .env values populate environment variables.

    Importance: Validates local overrides without external tools.
    Alternatives: Assume OS environment is always set.
    """

    env_path = tmp_path / ".env"
    env_path.write_text("# comment\nTICKETINTAKE_ID_PREFIX=upload\n", encoding="utf-8")
    load_dotenv(env_path)
    assert os.getenv("TICKETINTAKE_ID_PREFIX") == "upload"


def test_app_config_uses_defaults(tmp_path: Path, clean_env: pytest.MonkeyPatch) -> None:
    """Summary: Verify AppConfig honors defaults when env is absent.

    Importance: Confirms config file remains the baseline for variables.
    Alternatives: Inline defaults directly in the AppConfig class.
    """

    _write_defaults(tmp_path)
    clean_env.chdir(tmp_path)
    config = AppConfig.from_env()
    assert config.keywords_path is None
    assert config.id_prefix == "csv"
    assert config.avatar_url_template == "avatar://{photo_id}"
    assert config.log_level == "INFO"
    assert config.api_port == 8000
    assert config.api_key == ""
    assert config.zone() is None


def test_app_config_env_overrides(tmp_path: Path, clean_env: pytest.MonkeyPatch) -> None:
    _write_defaults(tmp_path)
    clean_env.chdir(tmp_path)
    clean_env.setenv("TICKETINTAKE_ID_PREFIX", "import")
    clean_env.setenv("TICKETINTAKE_TIMEZONE", "UTC")
    clean_env.setenv("TICKETINTAKE_API_PORT", "9001")
    config = AppConfig.from_env()
    assert config.id_prefix == "import"
    assert config.api_port == 9001
    assert config.zone() == ZoneInfo("UTC")


def test_build_services_loads_keyword_file(tmp_path: Path, clean_env: pytest.MonkeyPatch) -> None:
    """Summary: Verify a configured keyword file reaches the classifier.

    Importance: Confirms phrase lists are swappable without code changes.
    Alternatives: Rebuild the package with new lists.
    """

    _write_defaults(tmp_path)
    keywords_path = tmp_path / "keywords.json"
    keywords_path.write_text('{"urgency": ["outage"]}', encoding="utf-8")
    clean_env.chdir(tmp_path)
    clean_env.setenv("TICKETINTAKE_KEYWORDS_PATH", str(keywords_path))
    config = AppConfig.from_env()
    assert build_keywords(config).urgency == ("outage",)
    services = build_services(config)
    report = services.ingestion.ingest_text(
        "sender,subject,body,sent_date\na@b.com,Outage,Everything is urgent,2025-01-01\n"
    )
    ticket = report.tickets[0]
    assert ticket.extracted_info.urgency_keywords == ["outage"]
    assert ticket.priority == "urgent"
    assert ticket.id.startswith("csv-0-")
    assert ticket.sender.avatar_ref == "avatar://1000000"
