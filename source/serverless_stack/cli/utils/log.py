# ABOUTME: Logging setup for the sst CLI
# ABOUTME: Routes library and CLI log records to stderr through rich

"""Logging configuration."""

import logging
from collections.abc import Mapping

from rich.console import Console
from rich.logging import RichHandler

DEBUG_ENV_VAR = "SST_DEBUG"


def debug_enabled(environ: Mapping[str, str]) -> bool:
    """Whether debug logging was requested through the environment."""
    return environ.get(DEBUG_ENV_VAR, "").lower() in ("true", "1", "yes", "y")


def configure_logging(debug: bool = False) -> None:
    """Install a single rich handler on the root logger."""
    handler = RichHandler(console=Console(stderr=True), show_time=debug, show_path=False)
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(name)s - %(message)s",
        handlers=[handler],
        force=True,
    )
    # boto3 and botocore are noisy at DEBUG
    for name in ("boto3", "botocore", "urllib3"):
        logging.getLogger(name).setLevel(logging.INFO if debug else logging.WARNING)
