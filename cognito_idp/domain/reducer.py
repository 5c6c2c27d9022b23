from __future__ import annotations

from typing import Iterable

from cognito_idp.domain.errors import NoDataError
from cognito_idp.domain.models import Datapoint, StatisticKind


def reduce_latest(datapoints: Iterable[Datapoint], statistic: StatisticKind) -> float:
    """Return ``statistic`` of the datapoint with the latest timestamp.

    CloudWatch does not return datapoints in timestamp order, so they are
    stable-sorted here; among equal timestamps the one returned last wins.

    A selected datapoint that lacks the requested field yields ``0.0`` rather
    than an error. Callers depend on this, do not turn it into a failure.

    Raises:
        NoDataError: ``datapoints`` is empty.
    """
    ordered = sorted(datapoints, key=lambda dp: dp.timestamp)
    if not ordered:
        raise NoDataError("fetched no datapoints")

    value = ordered[-1].value_of(statistic)
    return 0.0 if value is None else value
