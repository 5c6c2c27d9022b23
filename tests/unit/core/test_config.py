from cognito_idp.core.config import DEFAULT_METRIC_KEY_PREFIX, Settings


class TestSettings:
    """Test configuration settings."""

    def test_default_values(self):
        config = Settings()

        assert config.aws_access_key_id == ""
        assert config.aws_secret_access_key == ""
        assert config.aws_region == ""
        assert config.cognito_pool_id == ""
        assert config.cognito_pool_client_id == ""
        assert config.cloudwatch_namespace == "AWS/Cognito"
        assert config.cloudwatch_period_seconds == 300
        assert config.cloudwatch_window_periods == 3
        assert config.cognito_max_workers == 1
        assert config.mackerel_tempfile == ""
        assert config.otel_service_name == "mackerel-plugin-aws-cognito-idp"
        assert config.app_log_level == "INFO"
        assert "secret" in config.app_log_redaction_patterns

    def test_prefix_defaults_to_cognito_idp(self):
        assert DEFAULT_METRIC_KEY_PREFIX == "cognito-idp"
        assert Settings().metric_key_prefix == "cognito-idp"

    def test_empty_prefix_falls_back(self):
        assert Settings(mackerel_metric_key_prefix="").metric_key_prefix == "cognito-idp"

    def test_custom_prefix(self):
        assert Settings(mackerel_metric_key_prefix="pool-a").metric_key_prefix == "pool-a"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("AWS_REGION", "ap-northeast-1")
        monkeypatch.setenv("COGNITO_POOL_ID", "ap-northeast-1_xyz")
        monkeypatch.setenv("MACKEREL_AGENT_PLUGIN_META", "1")

        config = Settings()

        assert config.aws_region == "ap-northeast-1"
        assert config.cognito_pool_id == "ap-northeast-1_xyz"
        assert config.mackerel_agent_plugin_meta == "1"

    def test_init_overrides_environment(self, monkeypatch):
        monkeypatch.setenv("AWS_REGION", "ap-northeast-1")
        assert Settings(aws_region="eu-west-1").aws_region == "eu-west-1"


class TestBoto3Kwargs:
    def test_no_credentials(self):
        assert Settings().to_boto3_kwargs() == {}

    def test_static_credentials_need_both(self):
        config = Settings(aws_access_key_id="AKID")
        assert not config.has_static_credentials()
        assert config.to_boto3_kwargs() == {}

    def test_full(self):
        config = Settings(
            aws_access_key_id="AKID", aws_secret_access_key="SECRET", aws_region="us-east-1"
        )
        assert config.to_boto3_kwargs() == {
            "aws_access_key_id": "AKID",
            "aws_secret_access_key": "SECRET",
            "region_name": "us-east-1",
        }
