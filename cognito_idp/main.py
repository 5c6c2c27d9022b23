from __future__ import annotations

import argparse
import sys
from typing import Any, Dict, Optional, Sequence

from cognito_idp.core.config import DEFAULT_METRIC_KEY_PREFIX
from cognito_idp.core.logger import get_logger
from cognito_idp.domain.errors import SetupError
from cognito_idp.infrastructure.mackerel.helper import MackerelPluginHelper
from cognito_idp.startup import build_plugin, initialize_logging, load_settings
from shared.metrics import dump_textfile

logger = get_logger("app")

# flag dest -> Settings field
FLAG_SETTINGS = {
    "access_key_id": "aws_access_key_id",
    "secret_access_key": "aws_secret_access_key",
    "region": "aws_region",
    "pool_id": "cognito_pool_id",
    "pool_client_id": "cognito_pool_client_id",
    "tempfile": "mackerel_tempfile",
    "metric_key_prefix": "mackerel_metric_key_prefix",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mackerel-plugin-aws-cognito-idp",
        description="Mackerel plugin for AWS Cognito User Pool CloudWatch metrics",
    )
    parser.add_argument("--access-key-id", help="AWS Access Key ID")
    parser.add_argument("--secret-access-key", help="AWS Secret Access Key")
    parser.add_argument("--region", help="AWS Region")
    parser.add_argument("--pool-id", help="Pool Id")
    parser.add_argument("--pool-client-id", help="Pool Client Id")
    parser.add_argument("--tempfile", help="Temp file name")
    parser.add_argument(
        "--metric-key-prefix",
        help=f"Metric key prefix (default: {DEFAULT_METRIC_KEY_PREFIX})",
    )
    return parser


def parse_overrides(argv: Optional[Sequence[str]] = None) -> Dict[str, Any]:
    """Map given CLI flags onto Settings fields; unset flags defer to the env."""
    args = build_parser().parse_args(argv)
    return {
        field: getattr(args, dest)
        for dest, field in FLAG_SETTINGS.items()
        if getattr(args, dest) is not None
    }


def run(argv: Optional[Sequence[str]] = None) -> int:
    overrides = parse_overrides(argv)
    try:
        settings = load_settings(**overrides)
        initialize_logging(settings)
        plugin = build_plugin(settings)
    except SetupError:
        logger.exception("setup_failed")
        return 1

    helper = MackerelPluginHelper(
        plugin,
        tempfile_path=settings.mackerel_tempfile,
        workdir=settings.mackerel_plugin_workdir,
    )
    helper.run(meta=settings.mackerel_agent_plugin_meta)

    if settings.metrics_textfile_path:
        try:
            dump_textfile(settings.metrics_textfile_path)
        except OSError as exc:
            logger.error(
                "self_metrics_dump_failed",
                extra={"path": settings.metrics_textfile_path, "error": str(exc)},
            )
    return 0


def main() -> None:  # pragma: no cover - small wrapper
    sys.exit(run())


if __name__ == "__main__":  # pragma: no cover
    main()
