"""Plugin logger shim.

Delegates to the shared logger so early log lines go to stderr even before
the JSON formatter is installed by ``startup.initialize_logging``.
"""

from __future__ import annotations

import logging

from shared.logging.logger import get_logger as _shared_get_logger


def get_logger(name: str) -> logging.Logger:
    return _shared_get_logger(name)
