from shared.config import BaseServiceConfig

DEFAULT_METRIC_KEY_PREFIX = "cognito-idp"


class Settings(BaseServiceConfig):
    # Target resource
    cognito_pool_id: str = ""
    cognito_pool_client_id: str = ""

    # CloudWatch query
    cloudwatch_namespace: str = "AWS/Cognito"
    cloudwatch_period_seconds: int = 300
    cloudwatch_window_periods: int = 3  # start = now - period * periods
    cognito_max_workers: int = 1  # >1 fans fetches out over a thread pool

    # Mackerel agent protocol
    mackerel_metric_key_prefix: str = ""
    mackerel_tempfile: str = ""
    mackerel_plugin_workdir: str = ""
    mackerel_agent_plugin_meta: str = ""

    # Self-metrics; empty disables the textfile dump
    metrics_textfile_path: str = ""

    otel_service_name: str = "mackerel-plugin-aws-cognito-idp"

    @property
    def metric_key_prefix(self) -> str:
        return self.mackerel_metric_key_prefix or DEFAULT_METRIC_KEY_PREFIX
