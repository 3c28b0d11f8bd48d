"""
config.py — Central settings for the Career Assessment app
==========================================================
All configuration is loaded from environment variables / .env file.
Copy .env.example → .env and fill in your values.

The provider key is never checked up front: a missing or rejected key only
shows up as a failed recommendation call, which the RecommendationAgent
turns into its fallback card.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env into os.environ (no-op if already set, safe to call multiple times)
load_dotenv(override=False)


# ─── Helpers ────────────────────────────────────────────────────────────────

def _is_placeholder(value: str) -> bool:
    """Return True if the value looks like an unfilled template placeholder."""
    return not value or "<" in value or value.startswith("your-") or value == "PLACEHOLDER"


# ─── Recommendation provider ────────────────────────────────────────────────

@dataclass(frozen=True)
class ProviderConfig:
    api_key:         str
    endpoint:        str     # Azure OpenAI endpoint; empty → api.openai.com
    model:           str     # model name, or deployment name on Azure
    api_version:     str
    timeout_seconds: float
    temperature:     float

    @property
    def is_configured(self) -> bool:
        """True when the key is a real (non-placeholder) value."""
        return bool(self.api_key) and not _is_placeholder(self.api_key)

    @property
    def use_azure(self) -> bool:
        return bool(self.endpoint) and not _is_placeholder(self.endpoint)


# ─── App-level settings ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class AppConfig:
    log_level: str


# ─── Master settings object ──────────────────────────────────────────────────

@dataclass(frozen=True)
class Settings:
    provider: ProviderConfig
    app:      AppConfig

    def status_summary(self) -> dict[str, str]:
        """Return a dict of service → status badge for the UI."""
        def badge(ok: bool) -> str:
            return "🟢 Configured" if ok else "⚪ Not configured"

        backend = "Azure OpenAI" if self.provider.use_azure else "OpenAI"
        return {
            f"{backend} ({self.provider.model})": badge(self.provider.is_configured),
        }


def get_settings() -> Settings:
    """Load all configuration from environment variables."""
    _str   = lambda k, d="": os.getenv(k, d).strip()
    _float = lambda k, d=0.0: float(os.getenv(k, str(d)) or d)

    return Settings(
        provider=ProviderConfig(
            api_key         = _str("OPENAI_API_KEY") or _str("AZURE_OPENAI_API_KEY"),
            endpoint        = _str("AZURE_OPENAI_ENDPOINT").rstrip("/"),
            model           = _str("OPENAI_MODEL", "gpt-4o-mini"),
            api_version     = _str("AZURE_OPENAI_API_VERSION", "2024-10-21"),
            timeout_seconds = _float("PROVIDER_TIMEOUT_SECONDS", 30.0),
            temperature     = _float("PROVIDER_TEMPERATURE", 0.7),
        ),
        app=AppConfig(
            log_level = _str("LOG_LEVEL", "INFO").upper(),
        ),
    )


def configure_logging(level: str | None = None) -> None:
    """Apply a basic root logging config once; later calls are no-ops."""
    level = level or get_settings().app.log_level
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
