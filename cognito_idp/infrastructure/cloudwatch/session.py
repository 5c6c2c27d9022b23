"""boto3 session and CloudWatch client construction."""

from __future__ import annotations

from typing import Any

import boto3
from botocore.exceptions import BotoCoreError

from cognito_idp.core.config import Settings
from cognito_idp.core.logger import get_logger
from cognito_idp.domain.errors import SetupError

logger = get_logger("cloudwatch.session")


def create_boto3_session(settings: Settings) -> boto3.Session:
    """Create a boto3 Session from settings.

    Static credentials are applied only when both the key id and the secret
    are set; otherwise boto3's default credential chain is used. The region is
    applied only when set.
    """
    kwargs = settings.to_boto3_kwargs()
    try:
        session = boto3.Session(**kwargs)
    except BotoCoreError as exc:
        raise SetupError(f"cannot create AWS session: {exc}") from exc

    logger.debug(
        "aws_session_created",
        extra={
            "static_credentials": settings.has_static_credentials(),
            "region": session.region_name,
        },
    )
    return session


def create_cloudwatch_client(settings: Settings) -> Any:
    """Return a low-level ``cloudwatch`` client.

    Raises:
        SetupError: the session or client could not be built, e.g. no region
            could be resolved from settings or the environment.
    """
    session = create_boto3_session(settings)
    try:
        return session.client("cloudwatch")
    except BotoCoreError as exc:
        raise SetupError(f"cannot create CloudWatch client: {exc}") from exc
