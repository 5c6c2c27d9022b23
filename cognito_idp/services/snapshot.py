"""Snapshot assembly: fetch and reduce every catalog entry, skip failures."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, Optional, Sequence

from cognito_idp.core.logger import get_logger
from cognito_idp.core.metrics import FETCH_FAILURES, SNAPSHOT_SIZE
from cognito_idp.domain.errors import FetchError, NoDataError
from cognito_idp.domain.models import Datapoint, MetricSpec, Snapshot
from cognito_idp.domain.reducer import reduce_latest

logger = get_logger("services.snapshot")

FetchFn = Callable[[MetricSpec], Sequence[Datapoint]]


def _log_failure(spec: MetricSpec, exc: BaseException, reason: str) -> None:
    FETCH_FAILURES.labels(reason=reason).inc()
    logger.warning(
        "metric_fetch_failed",
        extra={
            "metric": spec.local_name,
            "remote_metric": spec.remote_name,
            "statistic": spec.statistic.value,
            "reason": reason,
            "error_type": type(exc).__name__,
            "error": str(exc),
        },
    )


def _collect(spec: MetricSpec, fetch: FetchFn) -> Optional[float]:
    try:
        return reduce_latest(fetch(spec), spec.statistic)
    except (FetchError, NoDataError) as exc:
        _log_failure(spec, exc, exc.reason)
    except Exception as exc:  # noqa: BLE001
        _log_failure(spec, exc, "unexpected")
        logger.debug("metric_fetch_traceback", exc_info=True)
    return None


def build_snapshot(
    catalog: Iterable[MetricSpec], fetch: FetchFn, max_workers: int = 1
) -> Snapshot:
    """Fetch and reduce every spec in ``catalog``.

    Never raises. Specs whose fetch fails or returns no datapoints are absent
    from the result; an empty dict is a valid outcome.

    With ``max_workers > 1`` fetches run on a thread pool, but results are
    merged in catalog order so the snapshot is the same as a sequential run.
    """
    specs = list(catalog)
    if max_workers > 1 and len(specs) > 1:
        with ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="cloudwatch-fetch"
        ) as pool:
            values = list(pool.map(lambda s: _collect(s, fetch), specs))
    else:
        values = [_collect(spec, fetch) for spec in specs]

    snapshot: Snapshot = {}
    for spec, value in zip(specs, values):
        if value is not None:
            snapshot[spec.local_name] = value

    SNAPSHOT_SIZE.set(len(snapshot))
    logger.info(
        "snapshot_built",
        extra={"requested": len(specs), "collected": len(snapshot)},
    )
    return snapshot
