"""Shared logger utility.

Auto-configures a plain stderr handler on first use so that log lines emitted
before ``configure_logging`` runs (argument parsing, settings validation)
never end up on stdout, which belongs to the agent protocol.
"""

from __future__ import annotations

import logging
import sys

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger, installing the stderr fallback handler on first use."""
    global _configured

    if not _configured:
        _configure_minimal_logging()
        _configured = True

    logger = logging.getLogger(name)
    logger.propagate = True
    return logger


def _configure_minimal_logging():
    logging.basicConfig(
        level=logging.INFO,
        stream=sys.stderr,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def mark_configured():
    """Skip the fallback; called by shared.logging.json.configure_logging."""
    global _configured
    _configured = True
