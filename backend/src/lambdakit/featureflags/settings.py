"""Environment-driven settings for locating an AppConfig profile."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Any
from typing import Optional

from lambdakit.exceptions import ConfigurationError

DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class AppConfigTarget:
    """Identifies the configuration profile a session is opened against."""

    application: str
    environment: str
    profile: str
    minimum_poll_interval_seconds: Optional[int] = None

    @classmethod
    def from_env(cls) -> "AppConfigTarget":
        """Build the target from the APPCONFIG_* environment variables.

        Raises:
            ConfigurationError: If a required variable is unset or invalid.
        """
        return cls(
            application=require_env("APPCONFIG_APPLICATION_ID"),
            environment=require_env("APPCONFIG_ENVIRONMENT_ID"),
            profile=require_env("APPCONFIG_CONFIGURATION_PROFILE_ID"),
            minimum_poll_interval_seconds=_optional_int(
                "APPCONFIG_MIN_POLL_INTERVAL_SECONDS"
            ),
        )

    def session_request(self) -> dict[str, Any]:
        """Keyword arguments for StartConfigurationSession."""
        request: dict[str, Any] = {
            "ApplicationIdentifier": self.application,
            "EnvironmentIdentifier": self.environment,
            "ConfigurationProfileIdentifier": self.profile,
        }
        if self.minimum_poll_interval_seconds is not None:
            request["RequiredMinimumPollIntervalInSeconds"] = (
                self.minimum_poll_interval_seconds
            )
        return request


def require_env(name: str) -> str:
    """Return a required environment variable or raise ConfigurationError."""
    value = os.getenv(name, "").strip()
    if not value:
        raise ConfigurationError(name)
    return value


def timeout_from_env(name: str, default: float) -> float:
    """Read a timeout in seconds, falling back to ``default`` when unset."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigurationError(name, detail=f"Not a number: {raw}") from exc
    if not math.isfinite(value) or value < 0:
        raise ConfigurationError(name, detail="Must be finite and non-negative")
    return value


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(name, detail=f"Not an integer: {raw}") from exc
