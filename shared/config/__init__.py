"""Shared configuration base classes.

Provides the logging and AWS settings every plugin needs so that the plugin's
own ``Settings`` only declares what is specific to the resource it polls.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseLoggingConfig(BaseSettings):
    """Common logging configuration."""

    app_log_level: str = "INFO"
    app_log_redaction_patterns: list[str] = [
        "password",
        "token",
        "secret",
        "key",
        "authorization",
        "cookie",
        "session",
    ]
    app_environment: str = "production"


class BaseAWSConfig(BaseSettings):
    """AWS credentials and region.

    Empty values mean "not supplied" and leave resolution to boto3's default
    credential chain (env vars, shared config, instance profile).
    """

    aws_access_key_id: str = ""
    aws_secret_access_key: str = ""
    aws_region: str = ""

    def has_static_credentials(self) -> bool:
        return bool(self.aws_access_key_id and self.aws_secret_access_key)

    def to_boto3_kwargs(self) -> dict[str, str]:
        """Build kwargs suitable for ``boto3.Session``."""
        kwargs: dict[str, str] = {}
        if self.has_static_credentials():
            kwargs["aws_access_key_id"] = self.aws_access_key_id
            kwargs["aws_secret_access_key"] = self.aws_secret_access_key
        if self.aws_region:
            kwargs["region_name"] = self.aws_region
        return kwargs


class BaseServiceConfig(BaseLoggingConfig, BaseAWSConfig):
    """Base configuration combining logging and AWS settings.

    Plugins should inherit from this and add their own specific settings.
    The otel_service_name should be overridden by each plugin.
    """

    model_config = SettingsConfigDict(extra="ignore")

    otel_service_name: str = "unknown"  # Should be overridden by plugin


__all__ = ["BaseLoggingConfig", "BaseAWSConfig", "BaseServiceConfig"]
