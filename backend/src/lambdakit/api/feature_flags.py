"""Lambda handler returning every feature flag of one AppConfig profile.

Environment Variables:
    APPCONFIG_APPLICATION_ID: AppConfig application identifier
    APPCONFIG_ENVIRONMENT_ID: AppConfig environment identifier
    APPCONFIG_CONFIGURATION_PROFILE_ID: Feature flag profile identifier
    APPCONFIG_MIN_POLL_INTERVAL_SECONDS: Optional minimum poll interval
    APPCONFIG_TIMEOUT_SECONDS: Timeout for AppConfig calls (default: 30)
"""

from __future__ import annotations

import time
from typing import Any
from typing import Mapping
from typing import Optional

from lambdakit.exceptions import AppError
from lambdakit.featureflags import AppConfigTarget
from lambdakit.featureflags import ConfigurationSession
from lambdakit.featureflags import flags_to_dict
from lambdakit.featureflags import get_feature_flags
from lambdakit.featureflags.settings import DEFAULT_TIMEOUT_SECONDS
from lambdakit.featureflags.settings import timeout_from_env
from lambdakit.utils.logging import clear_request_context
from lambdakit.utils.logging import configure_logging
from lambdakit.utils.logging import get_logger
from lambdakit.utils.logging import log_response
from lambdakit.utils.logging import set_request_context_from_lambda
from lambdakit.utils.responses import error_response
from lambdakit.utils.responses import json_response

configure_logging()
logger = get_logger(__name__)

# Lives as long as the warm instance
_SESSION = ConfigurationSession()
_TARGET: Optional[AppConfigTarget] = None


def get_session() -> ConfigurationSession:
    return _SESSION


def _get_target() -> AppConfigTarget:
    global _TARGET
    if _TARGET is None:
        _TARGET = AppConfigTarget.from_env()
    return _TARGET


def reset_state() -> None:
    """Drop the cached session and target (useful in tests)."""
    global _TARGET
    _SESSION.reset()
    _TARGET = None


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Fetch all flags and wrap them in an API response.

    Failures return a 500 without internal details; the cause is logged.
    """
    set_request_context_from_lambda(context)
    start_time = time.perf_counter()
    try:
        target = _get_target()
        timeout = timeout_from_env("APPCONFIG_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)
        flags = get_feature_flags(_SESSION, target, timeout=timeout)
        logger.info(
            f"Retrieved {len(flags)} feature flags",
            extra={"flag_count": len(flags)},
        )
        response = json_response(
            200,
            {"all_flags": flags_to_dict(flags), "message": "Feature flags retrieved"},
        )
    except AppError as exc:
        logger.error(
            f"Feature flag retrieval failed: {exc.message}",
            exc_info=True,
            extra={"error_type": type(exc).__name__, "error": exc.to_dict()},
        )
        response = _failure_response()
    except Exception:  # pragma: no cover - safety net
        logger.exception("Unexpected error retrieving feature flags")
        response = _failure_response()

    duration_ms = (time.perf_counter() - start_time) * 1000
    log_response(logger, response["statusCode"], duration_ms)
    clear_request_context()
    return response


def _failure_response() -> dict[str, Any]:
    return error_response(500, "Failed to retrieve feature flags")
