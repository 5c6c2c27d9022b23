from pydantic import ValidationError

from cognito_idp.core.config import Settings
from cognito_idp.core.logger import get_logger
from cognito_idp.domain.errors import SetupError
from cognito_idp.domain.models import ResourceDimensions
from cognito_idp.infrastructure.cloudwatch.client import CloudWatchClient
from cognito_idp.infrastructure.cloudwatch.session import create_cloudwatch_client
from cognito_idp.services.plugin import CognitoIdpPlugin
from shared.logging.json import configure_logging

logger = get_logger("startup")


def load_settings(**overrides) -> Settings:
    """Build settings from the environment, with ``overrides`` taking priority."""
    try:
        return Settings(**overrides)
    except ValidationError as exc:
        raise SetupError(f"invalid configuration: {exc}") from exc


def initialize_logging(settings: Settings) -> None:
    configure_logging(
        service=settings.otel_service_name,
        level=settings.app_log_level,
        environment=settings.app_environment,
        redaction_patterns=settings.app_log_redaction_patterns,
    )


def build_plugin(settings: Settings) -> CognitoIdpPlugin:
    """Create the CloudWatch client and wire it into the plugin.

    Raises:
        SetupError: the AWS session or client could not be created.
    """
    client = CloudWatchClient(
        create_cloudwatch_client(settings),
        namespace=settings.cloudwatch_namespace,
        period_seconds=settings.cloudwatch_period_seconds,
        window_periods=settings.cloudwatch_window_periods,
    )
    plugin = CognitoIdpPlugin(
        client,
        ResourceDimensions(
            pool_id=settings.cognito_pool_id,
            pool_client_id=settings.cognito_pool_client_id,
        ),
        prefix=settings.metric_key_prefix,
        max_workers=settings.cognito_max_workers,
    )
    if not (settings.cognito_pool_id and settings.cognito_pool_client_id):
        logger.warning(
            "pool_dimensions_incomplete",
            extra={
                "pool_id": settings.cognito_pool_id,
                "pool_client_id": settings.cognito_pool_client_id,
            },
        )
    logger.info(
        "plugin_initialized",
        extra={
            "namespace": settings.cloudwatch_namespace,
            "prefix": plugin.metric_key_prefix(),
            "metrics": len(plugin.catalog),
        },
    )
    return plugin
