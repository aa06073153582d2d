"""AppConfig session handling with an in-memory flag cache.

AppConfig Data hands out a continuation token with every poll and only
returns content when the configuration changed since that token was
issued. A ``ConfigurationSession`` keeps the latest token together with
the last flag mapping that parsed successfully, so an "unchanged" poll
can still be answered.

The session is single-writer state for one warm Lambda instance. It does
no locking: a multi-threaded host sharing one session must hold a lock
around the whole ``get_feature_flags`` call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from typing import Optional

from botocore.exceptions import BotoCoreError
from botocore.exceptions import ClientError

from lambdakit.exceptions import NoDataAvailableError
from lambdakit.exceptions import PollError
from lambdakit.exceptions import SessionStartError
from lambdakit.featureflags.models import FeatureFlags
from lambdakit.featureflags.models import parse_feature_flags
from lambdakit.featureflags.settings import AppConfigTarget
from lambdakit.services.aws_clients import get_appconfigdata_client
from lambdakit.utils.logging import get_logger
from lambdakit.utils.logging import mask_token

logger = get_logger(__name__)


@dataclass
class ConfigurationSession:
    """Continuation token and last good flags for one AppConfig profile."""

    continuation_token: Optional[str] = None
    cached_flags: Optional[FeatureFlags] = None
    next_poll_interval_seconds: Optional[int] = None

    @property
    def is_active(self) -> bool:
        return self.continuation_token is not None

    def reset(self) -> None:
        """Forget the token and cache (process restart equivalent)."""
        self.continuation_token = None
        self.cached_flags = None
        self.next_poll_interval_seconds = None


def get_feature_flags(
    session: ConfigurationSession,
    target: AppConfigTarget,
    *,
    timeout: Optional[float] = None,
    client: Any = None,
) -> FeatureFlags:
    """Return the current feature flags, polling AppConfig once.

    The token is replaced once a poll response and its body have been
    fully received, before the payload is looked at. A failed remote call
    or body read leaves the session as it was; a payload that fails to
    parse still advances the token but keeps the previous cache.

    Args:
        session: Session state owned by the caller.
        target: Application, environment and profile to read.
        timeout: Connect/read timeout in seconds for the AppConfig calls.
        client: AppConfig Data client; defaults to the shared cached one.

    Returns:
        The flag mapping, freshly parsed or served from the cache.

    Raises:
        SessionStartError: StartConfigurationSession failed.
        PollError: GetLatestConfiguration failed.
        NoDataAvailableError: Unchanged payload and nothing cached.
        ParseError: Payload is not a valid flag mapping.
    """
    if client is None:
        client = get_appconfigdata_client(timeout=timeout)

    if not session.is_active:
        session.continuation_token = _start_session(client, target)

    try:
        response = client.get_latest_configuration(
            ConfigurationToken=session.continuation_token
        )
        content = _read_content(response.get("Configuration"))
    except (BotoCoreError, ClientError) as exc:
        raise PollError(detail=str(exc)) from exc

    session.continuation_token = response.get("NextPollConfigurationToken")
    session.next_poll_interval_seconds = response.get("NextPollIntervalInSeconds")
    if session.continuation_token is None:
        logger.warning("Poll response carried no next token; session will restart")

    if not content:
        if session.cached_flags is None:
            raise NoDataAvailableError()
        logger.debug(
            "Configuration unchanged, serving cached flags",
            extra={"flag_count": len(session.cached_flags)},
        )
        return session.cached_flags

    flags = parse_feature_flags(content)
    session.cached_flags = flags
    logger.info(
        "Feature flags refreshed from AppConfig",
        extra={
            "flag_count": len(flags),
            "content_type": response.get("ContentType"),
            "version_label": response.get("VersionLabel"),
        },
    )
    return flags


def _start_session(client: Any, target: AppConfigTarget) -> str:
    try:
        response = client.start_configuration_session(**target.session_request())
    except (BotoCoreError, ClientError) as exc:
        raise SessionStartError(detail=str(exc)) from exc

    token = response.get("InitialConfigurationToken")
    if not token:
        raise SessionStartError(detail="Response carried no initial token")

    logger.info(
        "Started AppConfig session",
        extra={
            "application": target.application,
            "environment": target.environment,
            "profile": target.profile,
            "token": mask_token(token),
        },
    )
    return token


def _read_content(body: Any) -> bytes:
    """Drain the Configuration field, which boto3 returns as a stream."""
    if body is None:
        return b""
    if hasattr(body, "read"):
        return body.read()
    return bytes(body)
