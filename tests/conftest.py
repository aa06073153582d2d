"""Pytest configuration and fixtures for backend tests.

This module provides shared fixtures for testing the feature flag
Lambdas, including fake AppConfig Data clients and response builders.
"""

from __future__ import annotations

import io
import json
import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Any
from typing import Optional

import pytest

# Add backend source to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))


# --- Response Builders ---


def make_poll_response(
    next_token: Optional[str],
    content: Any = b'',
    poll_interval: int = 60,
) -> dict:
    """Build a GetLatestConfiguration response.

    ``content`` may be bytes or a JSON-serialisable object; it is wrapped
    in a file-like body the way boto3 returns it.
    """
    if not isinstance(content, (bytes, str)):
        content = json.dumps(content)
    if isinstance(content, str):
        content = content.encode('utf-8')
    response: dict[str, Any] = {
        'Configuration': io.BytesIO(content),
        'ContentType': 'application/json',
        'NextPollIntervalInSeconds': poll_interval,
    }
    if next_token is not None:
        response['NextPollConfigurationToken'] = next_token
    return response


# --- AppConfig Fixtures ---


@pytest.fixture
def appconfig_target():
    """Target used by session tests."""
    from lambdakit.featureflags import AppConfigTarget

    return AppConfigTarget(
        application='demo-app',
        environment='dev',
        profile='feature-flags',
    )


@pytest.fixture
def appconfig_client(mocker):
    """Fake AppConfig Data client; tests script its responses."""
    client = mocker.MagicMock(name='appconfigdata')
    client.start_configuration_session.return_value = {
        'InitialConfigurationToken': 'T0',
    }
    return client


@pytest.fixture
def patch_appconfig_client(mocker, appconfig_client):
    """Route the shared client factory to the fake client."""
    mocker.patch(
        'lambdakit.featureflags.session.get_appconfigdata_client',
        return_value=appconfig_client,
    )
    return appconfig_client


@pytest.fixture
def appconfig_env(monkeypatch) -> dict:
    """Environment for the feature flags Lambda."""
    env = {
        'APPCONFIG_APPLICATION_ID': 'app-123',
        'APPCONFIG_ENVIRONMENT_ID': 'env-456',
        'APPCONFIG_CONFIGURATION_PROFILE_ID': 'prof-789',
    }
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    monkeypatch.delenv('APPCONFIG_MIN_POLL_INTERVAL_SECONDS', raising=False)
    monkeypatch.delenv('APPCONFIG_TIMEOUT_SECONDS', raising=False)
    return env


@pytest.fixture
def lambda_context():
    """Minimal Lambda context object."""
    return SimpleNamespace(
        aws_request_id='req-0001',
        function_name='feature-flags',
    )


# --- Mock Fixtures ---


@pytest.fixture
def mock_boto3_client(mocker):
    """Mock boto3 client for AWS service calls."""
    from lambdakit.services.aws_clients import clear_client_cache

    clear_client_cache()
    mock = mocker.patch('boto3.client')
    yield mock
    clear_client_cache()
