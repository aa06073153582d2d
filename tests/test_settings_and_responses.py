"""Tests for AppConfig settings and response helpers."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

from lambdakit.exceptions import ConfigurationError  # noqa: E402
from lambdakit.featureflags import AppConfigTarget, FeatureFlag  # noqa: E402
from lambdakit.featureflags.settings import timeout_from_env  # noqa: E402
from lambdakit.utils.responses import error_response, json_response  # noqa: E402


class TestAppConfigTarget:
    """Tests for loading the target from the environment."""

    def test_from_env(self, appconfig_env) -> None:
        target = AppConfigTarget.from_env()
        assert target == AppConfigTarget('app-123', 'env-456', 'prof-789')

    def test_from_env_with_poll_interval(self, monkeypatch, appconfig_env) -> None:
        monkeypatch.setenv('APPCONFIG_MIN_POLL_INTERVAL_SECONDS', '20')
        target = AppConfigTarget.from_env()
        assert target.session_request()['RequiredMinimumPollIntervalInSeconds'] == 20

    def test_invalid_poll_interval(self, monkeypatch, appconfig_env) -> None:
        monkeypatch.setenv('APPCONFIG_MIN_POLL_INTERVAL_SECONDS', 'often')
        with pytest.raises(ConfigurationError) as exc_info:
            AppConfigTarget.from_env()
        assert exc_info.value.config_name == 'APPCONFIG_MIN_POLL_INTERVAL_SECONDS'

    @pytest.mark.parametrize(
        'name',
        [
            'APPCONFIG_APPLICATION_ID',
            'APPCONFIG_ENVIRONMENT_ID',
            'APPCONFIG_CONFIGURATION_PROFILE_ID',
        ],
    )
    def test_missing_required(self, monkeypatch, appconfig_env, name) -> None:
        monkeypatch.setenv(name, '  ')
        with pytest.raises(ConfigurationError) as exc_info:
            AppConfigTarget.from_env()
        assert exc_info.value.config_name == name

    def test_session_request_omits_unset_interval(self) -> None:
        request = AppConfigTarget('a', 'e', 'p').session_request()
        assert 'RequiredMinimumPollIntervalInSeconds' not in request


class TestTimeoutFromEnv:
    """Tests for timeout parsing."""

    def test_default_when_unset(self, monkeypatch) -> None:
        monkeypatch.delenv('SOME_TIMEOUT', raising=False)
        assert timeout_from_env('SOME_TIMEOUT', 30.0) == 30.0

    def test_parses_value(self, monkeypatch) -> None:
        monkeypatch.setenv('SOME_TIMEOUT', '2.5')
        assert timeout_from_env('SOME_TIMEOUT', 30.0) == 2.5

    def test_rejects_negative(self, monkeypatch) -> None:
        monkeypatch.setenv('SOME_TIMEOUT', '-1')
        with pytest.raises(ConfigurationError):
            timeout_from_env('SOME_TIMEOUT', 30.0)

    @pytest.mark.parametrize('raw', ['nan', 'inf', '-inf', 'Infinity'])
    def test_rejects_non_finite(self, monkeypatch, raw) -> None:
        monkeypatch.setenv('SOME_TIMEOUT', raw)
        with pytest.raises(ConfigurationError):
            timeout_from_env('SOME_TIMEOUT', 30.0)


class TestResponses:
    """Tests for API response helpers."""

    def test_json_response_serializes_models(self) -> None:
        response = json_response(200, {'flag': FeatureFlag(enabled=True, colour='red')})
        assert response['statusCode'] == 200
        assert json.loads(response['body']) == {'flag': {'enabled': True, 'colour': 'red'}}
        assert response['headers']['Cache-Control'].startswith('no-store')

    def test_extra_headers(self) -> None:
        response = json_response(200, {}, headers={'X-Flag-Version': '3'})
        assert response['headers']['X-Flag-Version'] == '3'

    def test_error_response(self) -> None:
        response = error_response(503, 'Unavailable', detail='AppConfig down')
        assert response['statusCode'] == 503
        assert json.loads(response['body']) == {
            'error': 'Unavailable',
            'detail': 'AppConfig down',
        }
