# ABOUTME: Execution context threaded through every command
# ABOUTME: Carries working directory, environment, handlers and process primitives

"""Execution context for a single CLI invocation."""

import os
import subprocess
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console

if TYPE_CHECKING:
    from serverless_stack.cli.invocation import CommandArgs
    from serverless_stack.cli.utils.cdk import CdkConfig

    Handler = Callable[[CommandArgs, CdkConfig], int | None]


def default_handlers() -> dict[str, "Handler"]:
    """Static dispatch table for the in-process commands."""
    from serverless_stack.scripts import build, deploy, remove

    return {
        "build": build.run,
        "deploy": deploy.run,
        "remove": remove.run,
    }


@dataclass
class ExecutionContext:
    """Everything a command needs from the outside world.

    Commands never touch the process working directory or call ``sys.exit``;
    they read ``cwd`` from here and return their exit code.
    """

    cwd: Path
    environ: Mapping[str, str] = field(default_factory=dict)
    handlers: dict[str, "Handler"] = field(default_factory=default_handlers)
    spawn: Callable[..., subprocess.CompletedProcess] = subprocess.run
    console: Console = field(default_factory=Console)

    @classmethod
    def from_process(cls) -> "ExecutionContext":
        """Build the context from the running process."""
        return cls(cwd=Path.cwd(), environ=dict(os.environ))

    def with_cwd(self, cwd: Path) -> "ExecutionContext":
        """Return a copy rooted at another directory."""
        return replace(self, cwd=cwd)
