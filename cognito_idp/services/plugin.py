"""Cognito User Pool plugin: graph schema plus one snapshot per run."""

from __future__ import annotations

from typing import Sequence

from cognito_idp.core.config import DEFAULT_METRIC_KEY_PREFIX
from cognito_idp.domain.catalog import CATALOG, GRAPH_DEFINITIONS
from cognito_idp.domain.models import (
    GraphSchema,
    MetricSpec,
    ResourceDimensions,
    Snapshot,
)
from cognito_idp.infrastructure.cloudwatch.client import CloudWatchClient
from cognito_idp.services.snapshot import build_snapshot


class CognitoIdpPlugin:
    """Owns the CloudWatch client for the duration of one run."""

    def __init__(
        self,
        client: CloudWatchClient,
        dimensions: ResourceDimensions,
        prefix: str = "",
        catalog: Sequence[MetricSpec] = CATALOG,
        max_workers: int = 1,
    ):
        self.client = client
        self.dimensions = dimensions
        self.prefix = prefix
        self.catalog = tuple(catalog)
        self.max_workers = max_workers

    def metric_key_prefix(self) -> str:
        return self.prefix or DEFAULT_METRIC_KEY_PREFIX

    def schema(self) -> GraphSchema:
        return dict(GRAPH_DEFINITIONS)

    def snapshot(self) -> Snapshot:
        window = self.client.window()
        return build_snapshot(
            self.catalog,
            lambda spec: self.client.fetch_datapoints(spec, self.dimensions, window),
            max_workers=self.max_workers,
        )
