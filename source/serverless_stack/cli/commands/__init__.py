# ABOUTME: Commands module for the sst CLI
# ABOUTME: Contains all CLI command implementations

"""CLI commands for sst."""

from .build import BuildCommand
from .deploy import DeployCommand
from .passthrough import CdkCommand, RunTestsCommand
from .remove import RemoveCommand

__all__ = [
    "BuildCommand",
    "DeployCommand",
    "RemoveCommand",
    "RunTestsCommand",
    "CdkCommand",
]
