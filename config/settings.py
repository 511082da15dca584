"""Application settings — all configuration loaded from environment variables.

Usage:
    from config.settings import Settings
    settings = Settings()
    settings.validate()   # raises ValueError on an unusable port, language or version
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

#: Service name reported by ``/version``.
SERVICE_NAME = "wikipedia-agent"


@dataclass
class Settings:
    """Centralised application configuration.

    All values are read from environment variables at instantiation time
    so that tests can override them by patching ``os.environ``.
    """

    # ── Listener ────────────────────────────────────────────────────────────
    host: str = field(
        default_factory=lambda: os.environ.get("HOST", "0.0.0.0")
    )
    port: int = field(
        default_factory=lambda: int(os.environ.get("PORT", "8080"))
    )
    debug: bool = field(
        default_factory=lambda: os.environ.get("FLASK_DEBUG", "0") == "1"
    )

    # ── Build info ──────────────────────────────────────────────────────────
    #: Injected at build/deploy time; "dev" for local runs.
    version: str = field(
        default_factory=lambda: os.environ.get("APP_VERSION", "dev")
    )

    # ── Provider ────────────────────────────────────────────────────────────
    lang: str = field(
        default_factory=lambda: os.environ.get("WIKI_LANG", "en")
    )
    auto_suggest: bool = field(
        default_factory=lambda: os.environ.get("WIKI_AUTO_SUGGEST", "0") == "1"
    )
    #: Empty means "derive from the service name and version".
    user_agent: str = field(
        default_factory=lambda: os.environ.get("WIKI_USER_AGENT", "")
    )

    @property
    def effective_user_agent(self) -> str:
        return self.user_agent or f"{SERVICE_NAME}/{self.version}"

    def validate(self) -> None:
        """Raise ``ValueError`` if any setting is unusable."""
        if not 0 < self.port < 65536:
            raise ValueError(f"PORT must be between 1 and 65535, got {self.port}.")
        if not self.lang.strip():
            raise ValueError("WIKI_LANG must not be blank.")
        if not self.version.strip():
            raise ValueError("APP_VERSION must not be blank.")
