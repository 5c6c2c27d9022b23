"""Unified self-metrics helpers.

Thin wrappers around prometheus_client primitives with (optional) service name
prefixing and basic naming validation. Plugins are short-lived processes, so
instead of serving ``/metrics`` the registry can be dumped to a textfile for
the node-exporter textfile collector.
"""

from __future__ import annotations

import re
from typing import Sequence

from prometheus_client import (
    REGISTRY,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    write_to_textfile,
)

_NAME_RE = re.compile(r"^[a-z_][a-z0-9_]*$")


def _validate(name: str) -> str:
    if not _NAME_RE.match(name):
        raise ValueError(
            f"Invalid metric name '{name}'. Use snake_case alphanumerics/underscores."
        )
    return name


def _prefix(name: str, service: str | None) -> str:
    if service:
        service = service.replace("-", "_")
        if not name.startswith(service + "_"):
            return f"{service}_{name}"
    return name


def get_counter(
    name: str,
    documentation: str,
    service: str | None = None,
    labelnames: Sequence[str] = (),
    registry: CollectorRegistry | None = REGISTRY,
) -> Counter:
    return Counter(
        _validate(_prefix(name, service)),
        documentation,
        labelnames=labelnames,
        registry=registry,
    )


def get_histogram(
    name: str,
    documentation: str,
    service: str | None = None,
    buckets: list[float] | None = None,
    registry: CollectorRegistry | None = REGISTRY,
) -> Histogram:
    full_name = _validate(_prefix(name, service))
    if buckets is None:
        return Histogram(full_name, documentation, registry=registry)
    return Histogram(full_name, documentation, buckets=buckets, registry=registry)


def get_gauge(
    name: str,
    documentation: str,
    service: str | None = None,
    registry: CollectorRegistry | None = REGISTRY,
) -> Gauge:
    return Gauge(_validate(_prefix(name, service)), documentation, registry=registry)


def dump_textfile(path: str, registry: CollectorRegistry = REGISTRY) -> None:
    """Atomically write the registry in exposition format to ``path``."""
    write_to_textfile(path, registry)


__all__ = [
    "get_counter",
    "get_histogram",
    "get_gauge",
    "dump_textfile",
]
