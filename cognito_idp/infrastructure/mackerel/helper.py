"""Mackerel agent plugin protocol.

Two outputs, selected by ``MACKEREL_AGENT_PLUGIN_META``:

* graph definitions: a ``# mackerel-agent-plugin`` header followed by one
  JSON line describing every graph under ``<prefix>.<graph id>``;
* values: ``<prefix>.<graph id>.<metric>\\t<value>\\t<unix time>`` per metric.

Previous values are kept in a JSON tempfile so that ``diff`` metrics can be
reported as per-minute rates.
"""

from __future__ import annotations

import json
import math
import os
import sys
import tempfile
import time
from typing import IO, Any, Dict, Optional, Protocol

from cognito_idp.core.logger import get_logger
from cognito_idp.domain.models import GraphMetric, GraphSchema, Snapshot

logger = get_logger("mackerel.helper")

META_HEADER = "# mackerel-agent-plugin"
LAST_TIME_KEY = "_lastTime"
MAX_DIFF_INTERVAL_SECONDS = 600


class Plugin(Protocol):
    def metric_key_prefix(self) -> str: ...

    def schema(self) -> GraphSchema: ...

    def snapshot(self) -> Snapshot: ...


def default_tempfile_path(prefix: str, workdir: str = "") -> str:
    return os.path.join(workdir or tempfile.gettempdir(), f"mackerel-plugin-{prefix}")


def format_value_line(key: str, value: float, timestamp: int) -> str:
    return f"{key}\t{float(value):f}\t{timestamp}"


class MackerelPluginHelper:
    def __init__(
        self,
        plugin: Plugin,
        tempfile_path: str = "",
        workdir: str = "",
        out: Optional[IO[str]] = None,
    ):
        self.plugin = plugin
        self.tempfile_path = tempfile_path or default_tempfile_path(
            plugin.metric_key_prefix(), workdir
        )
        self._out = out

    @property
    def out(self) -> IO[str]:
        return self._out if self._out is not None else sys.stdout

    def run(self, meta: str = "") -> None:
        if meta:
            self.output_definitions()
        else:
            self.output_values()

    # ----- definitions -----
    def definitions(self) -> Dict[str, Any]:
        prefix = self.plugin.metric_key_prefix()
        graphs: Dict[str, Any] = {}
        for graph_id, graph in self.plugin.schema().items():
            key = f"{prefix}.{graph_id}" if graph_id else prefix
            graphs[key] = {
                "label": graph.label or key,
                "unit": graph.unit,
                "metrics": [
                    {"name": m.name, "label": m.label, "stacked": m.stacked}
                    for m in graph.metrics
                ],
            }
        return {"graphs": dict(sorted(graphs.items()))}

    def output_definitions(self) -> None:
        print(META_HEADER, file=self.out)
        print(json.dumps(self.definitions(), separators=(",", ":")), file=self.out)

    # ----- values -----
    def output_values(self, now: Optional[float] = None) -> None:
        stat = self.plugin.snapshot()
        now_ts = int(now if now is not None else time.time())
        last_stat, last_time = self.load_last_values()
        self.save_values(stat, now_ts)

        prefix = self.plugin.metric_key_prefix()
        for graph_id, graph in sorted(self.plugin.schema().items()):
            for metric in graph.metrics:
                value = self._resolve(metric, stat, last_stat, now_ts, last_time)
                if value is None:
                    continue
                key = ".".join(part for part in (prefix, graph_id, metric.name) if part)
                print(format_value_line(key, value, now_ts), file=self.out)

    def _resolve(
        self,
        metric: GraphMetric,
        stat: Snapshot,
        last_stat: Dict[str, float],
        now_ts: int,
        last_time: Optional[int],
    ) -> Optional[float]:
        value = stat.get(metric.name)
        if value is None:
            return None
        if metric.diff:
            last = last_stat.get(metric.name)
            if last is None or last_time is None:
                logger.info("diff_skipped_no_previous", extra={"metric": metric.name})
                return None
            value = calc_diff(value, now_ts, last, last_time)
            if value is None:
                return None
        if metric.scale:
            value *= metric.scale
        return value

    # ----- tempfile -----
    def load_last_values(self) -> tuple[Dict[str, float], Optional[int]]:
        if not os.path.exists(self.tempfile_path):
            return {}, None
        try:
            with open(self.tempfile_path, encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as exc:
            logger.warning(
                "last_values_unreadable",
                extra={"path": self.tempfile_path, "error": str(exc)},
            )
            return {}, None
        if not isinstance(data, dict):
            return {}, None
        last_time = data.pop(LAST_TIME_KEY, None)
        values = {k: float(v) for k, v in data.items() if _is_finite_number(v)}
        if len(values) != len(data):
            logger.warning(
                "last_values_partially_ignored",
                extra={"path": self.tempfile_path, "ignored": len(data) - len(values)},
            )
        return values, int(last_time) if _is_finite_number(last_time) else None

    def save_values(self, stat: Snapshot, now_ts: int) -> None:
        payload: Dict[str, Any] = dict(stat)
        payload[LAST_TIME_KEY] = now_ts
        try:
            with open(self.tempfile_path, "w", encoding="utf-8") as fh:
                json.dump(payload, fh)
        except OSError as exc:
            logger.error(
                "last_values_save_failed",
                extra={"path": self.tempfile_path, "error": str(exc)},
            )


def _is_finite_number(value: Any) -> bool:
    # json.load accepts NaN/Infinity and unbounded ints; bool is an int subclass
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def calc_diff(
    value: float, now_ts: int, last_value: float, last_time: int
) -> Optional[float]:
    """Per-minute rate between two samples, or None when it is not meaningful."""
    elapsed = now_ts - last_time
    if elapsed <= 0 or elapsed > MAX_DIFF_INTERVAL_SECONDS:
        logger.info("diff_skipped_interval", extra={"elapsed": elapsed})
        return None
    if value < last_value:
        logger.info("diff_skipped_counter_reset", extra={"value": value})
        return None
    return (value - last_value) * 60 / elapsed
