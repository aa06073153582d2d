"""Custom exception classes for the application.

This module provides domain-specific exception classes that carry
appropriate HTTP status codes and structured error information.
"""

from __future__ import annotations

from typing import Any
from typing import Optional


class AppError(Exception):
    """Base exception for application errors.

    All application-specific exceptions should inherit from this class.
    Each exception carries an HTTP status code and optional details.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code (default 500).
        detail: Optional additional context.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        detail: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response body."""
        result: dict[str, Any] = {"error": self.message}
        if self.detail:
            result["detail"] = self.detail
        return result


class ConfigurationError(AppError):
    """Raised when required configuration is missing.

    Use when environment variables or settings are not properly configured.
    """

    def __init__(self, config_name: str, detail: Optional[str] = None):
        super().__init__(
            f"Missing required configuration: {config_name}",
            status_code=500,
            detail=detail,
        )
        self.config_name = config_name


class FeatureFlagError(AppError):
    """Base class for failures while fetching feature flags from AppConfig.

    None of these are retried internally; the caller decides.
    """

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message, status_code=500, detail=detail)


class SessionStartError(FeatureFlagError):
    """Raised when StartConfigurationSession fails."""

    def __init__(self, detail: Optional[str] = None):
        super().__init__("Failed to start AppConfig session", detail=detail)


class PollError(FeatureFlagError):
    """Raised when GetLatestConfiguration fails."""

    def __init__(self, detail: Optional[str] = None):
        super().__init__("Failed to poll AppConfig configuration", detail=detail)


class ParseError(FeatureFlagError):
    """Raised when AppConfig returns content that is not a flag mapping."""

    def __init__(self, detail: Optional[str] = None):
        super().__init__("Failed to parse feature flag configuration", detail=detail)


class NoDataAvailableError(FeatureFlagError):
    """Raised when a poll is unchanged but nothing was cached before.

    AppConfig only sends content when it changed since the token was
    issued, so an empty payload on a cold cache leaves nothing to serve.
    """

    def __init__(self):
        super().__init__(
            "No feature flag data available",
            detail="Configuration unchanged and no cached flags",
        )
