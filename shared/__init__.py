"""Shared utilities and components for monitoring plugins."""

from .config import BaseAWSConfig, BaseLoggingConfig, BaseServiceConfig

__all__ = [
    "BaseServiceConfig",
    "BaseLoggingConfig",
    "BaseAWSConfig",
]
