"""Environment-based configuration for the DMS harness.

Settings are read once, at session start, into a frozen :class:`Settings`
object that is passed to whichever component needs it.  Values in the process
environment win over values in a ``.env`` file.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import dotenv_values

from .errors import ConfigurationError

DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_API_BASE_URL = "https://api.example-dms.com/v1"
DEFAULT_USER = "test.user@example.com"
DEFAULT_PASSWORD = "password123"
DEFAULT_API_TOKEN = "default-test-token"

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


@dataclass(frozen=True)
class Timeouts:
    """Bounded waits used by page actions and the API client."""

    navigation_ms: float = 30_000
    action_ms: float = 10_000
    visibility_probe_ms: float = 5_000
    api_seconds: float = 30.0


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    username: str = DEFAULT_USER
    password: str = DEFAULT_PASSWORD
    api_base_url: str = DEFAULT_API_BASE_URL
    api_token: str = DEFAULT_API_TOKEN
    headless: bool = True
    browser: str = "chromium"
    artifacts_dir: Path = Path("test-results")
    log_level: str = "INFO"
    timeouts: Timeouts = field(default_factory=Timeouts)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        env_file: str | Path | None = ".env",
    ) -> "Settings":
        """Build settings from ``environ`` (default ``os.environ``) layered over ``env_file``."""
        values: dict[str, str] = {}
        if env_file is not None and Path(env_file).is_file():
            values.update({k: v for k, v in dotenv_values(env_file).items() if v is not None})
        values.update(os.environ if environ is None else environ)

        def get(name: str, default: str) -> str:
            value = values.get(name, "").strip()
            return value or default

        browser = get("BROWSER", "chromium").lower()
        if browser not in SUPPORTED_BROWSERS:
            raise ConfigurationError(
                f"BROWSER must be one of {', '.join(SUPPORTED_BROWSERS)}, got {browser!r}"
            )

        return cls(
            base_url=get("BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            username=get("DMS_USER", DEFAULT_USER),
            password=get("DMS_PASS", DEFAULT_PASSWORD),
            api_base_url=get("API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/"),
            api_token=get("API_TOKEN", DEFAULT_API_TOKEN),
            headless=_parse_bool("HEADLESS", get("HEADLESS", "true")),
            browser=browser,
            artifacts_dir=Path(get("ARTIFACTS_DIR", "test-results")),
            log_level=get("LOG_LEVEL", "INFO").upper(),
            timeouts=Timeouts(
                navigation_ms=_parse_number("DMS_NAVIGATION_TIMEOUT_MS", get("DMS_NAVIGATION_TIMEOUT_MS", "30000")),
                action_ms=_parse_number("DMS_ACTION_TIMEOUT_MS", get("DMS_ACTION_TIMEOUT_MS", "10000")),
                api_seconds=_parse_number("DMS_API_TIMEOUT_S", get("DMS_API_TIMEOUT_S", "30")),
            ),
        )


def _parse_bool(name: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    raise ConfigurationError(f"{name} must be a boolean flag, got {raw!r}")


def _parse_number(name: str, raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {raw!r}")
    return value
