"""Summary: Application configuration for TicketIntake.

Importance: Centralizes environment, .env, and config defaults for consistent behavior.
Alternatives: Use a dedicated settings library like Pydantic Settings.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from datetime import tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo


@dataclass(frozen=True)
class AppConfig:
    """Summary: Holds configuration values for the import pipeline and its surfaces.

    Importance: Ensures the CLI and API derive settings from a single source of truth.
    Alternatives: Pass every setting as a command-line flag.
    """

    keywords_path: str | None
    id_prefix: str
    avatar_url_template: str
    timezone: str
    log_level: str
    api_host: str
    api_port: int
    api_key: str

    @staticmethod
    def from_env() -> "AppConfig":
        """Summary: Build configuration from defaults, .env, and environment.

        Importance: Keeps all variables defined in config defaults while allowing overrides.
        Alternatives: Parse only environment variables without a defaults file.
        """

        defaults = load_defaults(Path("config") / "defaults.json")
        load_dotenv(Path(".env"))
        return AppConfig(
            keywords_path=os.getenv("TICKETINTAKE_KEYWORDS_PATH")
            or defaults["keywords_path"]
            or None,
            id_prefix=os.getenv("TICKETINTAKE_ID_PREFIX", defaults["id_prefix"]),
            avatar_url_template=os.getenv(
                "TICKETINTAKE_AVATAR_URL_TEMPLATE", defaults["avatar_url_template"]
            ),
            timezone=os.getenv("TICKETINTAKE_TIMEZONE", defaults["timezone"]),
            log_level=os.getenv("TICKETINTAKE_LOG_LEVEL", defaults["log_level"]).upper(),
            api_host=os.getenv("TICKETINTAKE_API_HOST", defaults["api_host"]),
            api_port=int(os.getenv("TICKETINTAKE_API_PORT", defaults["api_port"])),
            api_key=os.getenv("TICKETINTAKE_API_KEY", defaults["api_key"]),
        )

    def zone(self) -> tzinfo | None:
        """Summary: Resolve the configured timezone for hour histograms.

        Importance: Makes hour-of-day statistics independent of the host clock when set.
        Alternatives: Always use the system local timezone.
        """

        return ZoneInfo(self.timezone) if self.timezone else None


def load_defaults(path: Path) -> dict[str, str]:
    """Summary: Load configuration defaults from JSON.

    Importance: Ensures all variables exist in a single config file.
    Alternatives: Inline defaults in the AppConfig initializer.
    """

    if not path.exists():
        raise FileNotFoundError(f"Defaults file not found: {path}")
    return json.loads(path.read_text(encoding="utf-8"))


def load_dotenv(path: Path) -> None:
    """Summary: Load key-value pairs from a .env file into the environment.

    Importance: Keeps local overrides out of code while supporting local workflows.
    Alternatives: Use python-dotenv or OS-specific secret stores.
    """

    if not path.exists():
        return
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())
