from .json import CustomJsonFormatter, SensitiveDataFilter, configure_logging
from .logger import get_logger

__all__ = [
    "CustomJsonFormatter",
    "SensitiveDataFilter",
    "configure_logging",
    "get_logger",
]
