"""Fixed catalog of Cognito User Pool metrics and their graph layout.

Local names and labels (including the "Parcentage" spelling) are what the
Mackerel service already stores for this plugin; they must not change.
"""

from __future__ import annotations

from typing import Tuple

from cognito_idp.domain.models import (
    GraphDefinition,
    GraphMetric,
    GraphSchema,
    MetricSpec,
    StatisticKind,
)

# (metric family, graph id)
FAMILIES: Tuple[Tuple[str, str], ...] = (
    ("SignUp", "signup"),
    ("SignIn", "signin"),
    ("TokenRefresh", "tokenRefresh"),
    ("Federation", "federation"),
)


def _family_specs(family: str) -> Tuple[MetricSpec, ...]:
    successes = f"{family}Successes"
    return (
        MetricSpec(
            remote_name=successes, statistic=StatisticKind.SUM, local_name=successes
        ),
        # Average of the raw success counter, not a success/total ratio
        MetricSpec(
            remote_name=successes,
            statistic=StatisticKind.AVERAGE,
            local_name=f"{family}ParcentageOfSuccessful",
        ),
        MetricSpec(
            remote_name=successes,
            statistic=StatisticKind.SAMPLE_COUNT,
            local_name=f"{family}SampleCount",
        ),
        MetricSpec(
            remote_name=f"{family}Throttles",
            statistic=StatisticKind.SUM,
            local_name=f"{family}Throttles",
        ),
    )


def _family_graph(family: str, graph_id: str) -> GraphDefinition:
    return GraphDefinition(
        label=graph_id,
        unit="integer",
        metrics=[
            GraphMetric(name=f"{family}Successes", label="Success Count"),
            GraphMetric(
                name=f"{family}ParcentageOfSuccessful",
                label="Parcentage Of Successfull",
            ),
            GraphMetric(name=f"{family}SampleCount", label="Request Count"),
            GraphMetric(name=f"{family}Throttles", label="Throttles Count"),
        ],
    )


CATALOG: Tuple[MetricSpec, ...] = tuple(
    spec for family, _ in FAMILIES for spec in _family_specs(family)
)

GRAPH_DEFINITIONS: GraphSchema = {
    graph_id: _family_graph(family, graph_id) for family, graph_id in FAMILIES
}


def local_names() -> Tuple[str, ...]:
    return tuple(spec.local_name for spec in CATALOG)
