from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from cognito_idp.domain.models import (
    Datapoint,
    MetricSpec,
    QueryWindow,
    ResourceDimensions,
    StatisticKind,
)


class TestDatapointFromCloudwatch:
    def test_reads_present_statistics(self):
        raw = {
            "Timestamp": datetime(2024, 1, 1, tzinfo=timezone.utc),
            "Sum": 4.0,
            "SampleCount": 2.0,
            "Unit": "Count",
        }
        dp = Datapoint.from_cloudwatch(raw)
        assert dp.timestamp == raw["Timestamp"]
        assert dp.value_of(StatisticKind.SUM) == 4.0
        assert dp.value_of(StatisticKind.SAMPLE_COUNT) == 2.0
        assert dp.value_of(StatisticKind.AVERAGE) is None
        assert StatisticKind.AVERAGE not in dp.values

    def test_integer_values_become_float(self):
        raw = {"Timestamp": datetime(2024, 1, 1, tzinfo=timezone.utc), "Sum": 3}
        assert isinstance(Datapoint.from_cloudwatch(raw).value_of(StatisticKind.SUM), float)


class TestMetricSpec:
    def test_immutable(self):
        spec = MetricSpec(
            remote_name="SignUpSuccesses",
            statistic=StatisticKind.SUM,
            local_name="SignUpSuccesses",
        )
        with pytest.raises(ValidationError):
            spec.local_name = "other"

    def test_statistic_from_api_name(self):
        spec = MetricSpec(remote_name="a", statistic="SampleCount", local_name="b")
        assert spec.statistic is StatisticKind.SAMPLE_COUNT


class TestResourceDimensions:
    def test_to_cloudwatch(self):
        dims = ResourceDimensions(pool_id="pool", pool_client_id="client")
        assert dims.to_cloudwatch() == [
            {"Name": "UserPool", "Value": "pool"},
            {"Name": "UserPoolClient", "Value": "client"},
        ]

    def test_empty_ids_passed_through(self):
        assert ResourceDimensions().to_cloudwatch() == [
            {"Name": "UserPool", "Value": ""},
            {"Name": "UserPoolClient", "Value": ""},
        ]


class TestQueryWindow:
    def test_default_window_is_three_periods(self):
        end = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        window = QueryWindow.ending_at(end)
        assert window.end == end
        assert (window.end - window.start).total_seconds() == 900
        assert window.period_seconds == 300

    def test_defaults_to_now(self):
        before = datetime.now(timezone.utc)
        window = QueryWindow.ending_at()
        assert window.end >= before
