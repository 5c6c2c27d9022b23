"""CloudWatch GetMetricStatistics wrapper."""

from __future__ import annotations

import time
from typing import Any, List, Optional

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    NoCredentialsError,
    PartialCredentialsError,
)

from cognito_idp.core.logger import get_logger
from cognito_idp.core.metrics import FETCH_LATENCY, FETCH_REQUESTS
from cognito_idp.domain.errors import AuthError, TransportError
from cognito_idp.domain.models import (
    Datapoint,
    MetricSpec,
    QueryWindow,
    ResourceDimensions,
)

logger = get_logger("cloudwatch.client")

NAMESPACE = "AWS/Cognito"

AUTH_ERROR_CODES = frozenset(
    {
        "AccessDenied",
        "AccessDeniedException",
        "ExpiredToken",
        "ExpiredTokenException",
        "InvalidClientTokenId",
        "MissingAuthenticationToken",
        "SignatureDoesNotMatch",
        "UnrecognizedClientException",
    }
)


class CloudWatchClient:
    """Issues one GetMetricStatistics request per metric spec.

    No caching, batching or retry happens here: every call is one request and
    every failure is raised to the caller as ``AuthError`` or
    ``TransportError``.
    """

    def __init__(
        self,
        client: Any,
        namespace: str = NAMESPACE,
        period_seconds: int = 300,
        window_periods: int = 3,
    ):
        self._client = client
        self.namespace = namespace
        self.period_seconds = period_seconds
        self.window_periods = window_periods

    def window(self) -> QueryWindow:
        return QueryWindow.ending_at(
            period_seconds=self.period_seconds, periods=self.window_periods
        )

    def fetch_datapoints(
        self,
        spec: MetricSpec,
        dimensions: ResourceDimensions,
        window: Optional[QueryWindow] = None,
    ) -> List[Datapoint]:
        window = window or self.window()
        FETCH_REQUESTS.inc()
        started = time.perf_counter()
        try:
            response = self._client.get_metric_statistics(
                Namespace=self.namespace,
                MetricName=spec.remote_name,
                Dimensions=dimensions.to_cloudwatch(),
                StartTime=window.start,
                EndTime=window.end,
                Period=window.period_seconds,
                Statistics=[spec.statistic.value],
            )
        except ClientError as exc:
            code = exc.response.get("Error", {}).get("Code", "")
            if code in AUTH_ERROR_CODES:
                raise AuthError(f"{code}: {exc}") from exc
            raise TransportError(str(exc)) from exc
        except (NoCredentialsError, PartialCredentialsError) as exc:
            raise AuthError(str(exc)) from exc
        except BotoCoreError as exc:
            raise TransportError(str(exc)) from exc
        finally:
            FETCH_LATENCY.observe(time.perf_counter() - started)

        raw = response.get("Datapoints", [])
        logger.debug(
            "datapoints_fetched",
            extra={
                "metric": spec.local_name,
                "remote_metric": spec.remote_name,
                "statistic": spec.statistic.value,
                "count": len(raw),
            },
        )
        return [Datapoint.from_cloudwatch(dp) for dp in raw]
