import pytest
from prometheus_client import CollectorRegistry

from shared.metrics import dump_textfile, get_counter, get_gauge, get_histogram


class TestMetricHelpers:
    def test_counter_prefixed_with_service(self):
        registry = CollectorRegistry()
        counter = get_counter("runs_total", "Runs", service="my-plugin", registry=registry)
        counter.inc()
        assert registry.get_sample_value("my_plugin_runs_total") == 1.0

    def test_counter_labels(self):
        registry = CollectorRegistry()
        counter = get_counter(
            "errors_total", "Errors", labelnames=("reason",), registry=registry
        )
        counter.labels(reason="auth").inc(2)
        assert registry.get_sample_value("errors_total", {"reason": "auth"}) == 2.0

    def test_invalid_name_rejected(self):
        with pytest.raises(ValueError):
            get_gauge("Bad-Name", "bad", registry=CollectorRegistry())

    def test_histogram_buckets(self):
        registry = CollectorRegistry()
        hist = get_histogram("latency_seconds", "Latency", buckets=[0.1, 1.0], registry=registry)
        hist.observe(0.5)
        assert registry.get_sample_value("latency_seconds_bucket", {"le": "1.0"}) == 1.0

    def test_dump_textfile(self, tmp_path):
        registry = CollectorRegistry()
        get_gauge("snapshot_metrics", "Size", registry=registry).set(3)
        path = tmp_path / "plugin.prom"

        dump_textfile(str(path), registry)

        assert "snapshot_metrics 3.0" in path.read_text()
