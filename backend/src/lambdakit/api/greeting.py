"""Lambda handler that switches its greeting on the ``flag1`` feature flag.

Environment Variables:
    ENV: Deployment environment; doubles as the AppConfig environment name
    GREETING_APPLICATION: AppConfig application name (default: "tmp")
    GREETING_PROFILE: AppConfig configuration profile name (default: "tmp")
"""

from __future__ import annotations

import os
from typing import Any
from typing import Mapping
from typing import Optional

from lambdakit.exceptions import AppError
from lambdakit.featureflags import AppConfigTarget
from lambdakit.featureflags import ConfigurationSession
from lambdakit.featureflags import FeatureFlags
from lambdakit.featureflags import get_feature_flags
from lambdakit.featureflags.settings import require_env
from lambdakit.utils.logging import clear_request_context
from lambdakit.utils.logging import configure_logging
from lambdakit.utils.logging import get_logger
from lambdakit.utils.logging import set_request_context_from_lambda

configure_logging()
logger = get_logger(__name__)

GATING_FLAG = "flag1"
ENABLED_GREETING = "Hello world with flag1 enabled"
DISABLED_GREETING = "Hello world with flag1 disabled"

_SESSION = ConfigurationSession()
_TARGET: Optional[AppConfigTarget] = None


def _get_target() -> AppConfigTarget:
    global _TARGET
    if _TARGET is None:
        _TARGET = AppConfigTarget(
            application=os.getenv("GREETING_APPLICATION") or "tmp",
            environment=require_env("ENV"),
            profile=os.getenv("GREETING_PROFILE") or "tmp",
        )
        logger.info(
            "Greeting target resolved",
            extra={
                "application": _TARGET.application,
                "environment": _TARGET.environment,
                "profile": _TARGET.profile,
            },
        )
    return _TARGET


def reset_state() -> None:
    """Drop the cached session and target (useful in tests)."""
    global _TARGET
    _SESSION.reset()
    _TARGET = None


def is_flag_enabled(flags: FeatureFlags, name: str) -> bool:
    """Return True only if the flag exists and is enabled."""
    flag = flags.get(name)
    return flag is not None and flag.enabled


def lambda_handler(event: Mapping[str, Any], context: Any) -> str:
    """Return the greeting matching the current state of ``flag1``.

    Raises:
        AppError: Flag retrieval failed; the invocation is reported as failed.
    """
    set_request_context_from_lambda(context)
    try:
        try:
            flags = get_feature_flags(_SESSION, _get_target())
        except AppError:
            logger.exception("Failed to get feature flags")
            raise

        enabled = is_flag_enabled(flags, GATING_FLAG)
        logger.info(f"{GATING_FLAG} enabled={enabled}", extra={"flag": GATING_FLAG})
        return ENABLED_GREETING if enabled else DISABLED_GREETING
    finally:
        clear_request_context()
