from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from cognito_idp.domain.models import (
    Datapoint,
    MetricSpec,
    ResourceDimensions,
    StatisticKind,
)

_ENV_VARS = (
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
    "AWS_REGION",
    "AWS_DEFAULT_REGION",
    "AWS_PROFILE",
    "COGNITO_POOL_ID",
    "COGNITO_POOL_CLIENT_ID",
    "COGNITO_MAX_WORKERS",
    "MACKEREL_METRIC_KEY_PREFIX",
    "MACKEREL_TEMPFILE",
    "MACKEREL_PLUGIN_WORKDIR",
    "MACKEREL_AGENT_PLUGIN_META",
    "METRICS_TEXTFILE_PATH",
    "APP_LOG_LEVEL",
    "APP_ENVIRONMENT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    """Keep host AWS/Mackerel configuration out of unit tests."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    # no shared config/credentials files from the host either
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "aws-config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "aws-credentials"))
    monkeypatch.setenv("AWS_EC2_METADATA_DISABLED", "true")


def ts(seconds: int) -> datetime:
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


@pytest.fixture
def sum_spec():
    return MetricSpec(
        remote_name="SignInSuccesses",
        statistic=StatisticKind.SUM,
        local_name="SignInSuccesses",
    )


@pytest.fixture
def dimensions():
    return ResourceDimensions(pool_id="ap-northeast-1_abc", pool_client_id="client123")


@pytest.fixture
def make_datapoint():
    def _make(seconds: int, **values):
        return Datapoint(
            timestamp=ts(seconds),
            values={StatisticKind(k): v for k, v in values.items()},
        )

    return _make


@pytest.fixture
def mock_cloudwatch_client():
    """Mock CloudWatchClient for unit tests"""
    client = MagicMock()
    client.fetch_datapoints = MagicMock(return_value=[])
    return client
