from __future__ import annotations

from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StatisticKind(str, Enum):
    """CloudWatch statistic names, as accepted by GetMetricStatistics."""

    SUM = "Sum"
    AVERAGE = "Average"
    MAXIMUM = "Maximum"
    MINIMUM = "Minimum"
    SAMPLE_COUNT = "SampleCount"


class MetricSpec(BaseModel):
    """One catalog entry: which remote metric/statistic feeds which local name."""

    model_config = ConfigDict(frozen=True)

    remote_name: str
    statistic: StatisticKind
    local_name: str


class Datapoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    values: Dict[StatisticKind, Optional[float]] = Field(default_factory=dict)

    @classmethod
    def from_cloudwatch(cls, raw: Dict[str, Any]) -> "Datapoint":
        """Build from a ``GetMetricStatistics`` datapoint dict.

        Only statistic fields present in ``raw`` end up in ``values``; ``Unit``
        and extended statistics are ignored.
        """
        values = {
            kind: float(raw[kind.value])
            for kind in StatisticKind
            if raw.get(kind.value) is not None
        }
        return cls(timestamp=raw["Timestamp"], values=values)

    def value_of(self, statistic: StatisticKind) -> Optional[float]:
        return self.values.get(statistic)


class ResourceDimensions(BaseModel):
    """The pool / pool-client pair every query is narrowed to.

    Empty ids are not validated here; CloudWatch decides what to do with them.
    """

    model_config = ConfigDict(frozen=True)

    pool_id: str = ""
    pool_client_id: str = ""

    def to_cloudwatch(self) -> List[Dict[str, str]]:
        return [
            {"Name": "UserPool", "Value": self.pool_id},
            {"Name": "UserPoolClient", "Value": self.pool_client_id},
        ]


class QueryWindow(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime
    period_seconds: int = 300

    @classmethod
    def ending_at(
        cls,
        end: Optional[datetime] = None,
        period_seconds: int = 300,
        periods: int = 3,
    ) -> "QueryWindow":
        end = end or datetime.now(timezone.utc)
        return cls(
            start=end - timedelta(seconds=period_seconds * periods),
            end=end,
            period_seconds=period_seconds,
        )


class GraphMetric(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    label: str
    diff: bool = False
    stacked: bool = False
    scale: float = 0


class GraphDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    unit: str = "float"
    metrics: List[GraphMetric]


Snapshot = Dict[str, float]
GraphSchema = Dict[str, GraphDefinition]
