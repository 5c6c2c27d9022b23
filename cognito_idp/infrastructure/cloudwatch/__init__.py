from .client import CloudWatchClient
from .session import create_cloudwatch_client

__all__ = ["CloudWatchClient", "create_cloudwatch_client"]
