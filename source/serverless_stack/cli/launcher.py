# ABOUTME: Child process launcher for pass-through commands
# ABOUTME: Spawns helper scripts with inherited stdio and maps their exit to ours

"""Subprocess launcher for the test and cdk commands."""

import logging
import signal
import subprocess
import sys
from collections.abc import Sequence

from rich.console import Console

from serverless_stack.context import ExecutionContext

logger = logging.getLogger(__name__)

SCRIPTS_PACKAGE = "serverless_stack.scripts"

SIGNAL_MESSAGES = {
    "SIGKILL": (
        "The command failed because the process exited too early. "
        "This probably means the system ran out of memory or someone called "
        "`kill -9` on the process."
    ),
    "SIGTERM": (
        "The command failed because the process exited too early. "
        "Someone might have called `kill` or `killall`, or the system could "
        "be shutting down."
    ),
}


def build_command(script: str, forwarded_args: Sequence[str], interpreter_args: Sequence[str] = ()) -> list[str]:
    """Command line that runs one of the helper scripts in a fresh interpreter."""
    return [sys.executable, *interpreter_args, "-m", f"{SCRIPTS_PACKAGE}.{script}", *forwarded_args]


def signal_name(returncode: int) -> str:
    """Name of the signal encoded in a negative subprocess return code."""
    try:
        return signal.Signals(-returncode).name
    except ValueError:
        return f"signal {-returncode}"


def exit_code_for(result: subprocess.CompletedProcess, console: Console) -> int:
    """Translate a finished child into the exit code of this process.

    A child killed by a signal always yields 1; known signals also print a
    diagnostic. A normal exit status is passed through unchanged.
    """
    if result.returncode < 0:
        name = signal_name(result.returncode)
        logger.debug("Child %s terminated by %s", result.args, name)
        message = SIGNAL_MESSAGES.get(name)
        if message:
            console.print(message, markup=False, highlight=False)
        return 1
    return result.returncode


def launch_script(
    script: str,
    forwarded_args: Sequence[str],
    context: ExecutionContext,
    interpreter_args: Sequence[str] = (),
) -> int:
    """Run a helper script synchronously and return the exit code to use."""
    command = build_command(script, forwarded_args, interpreter_args)
    logger.debug("Spawning %s in %s", command, context.cwd)

    result = context.spawn(command, cwd=context.cwd, env=dict(context.environ))
    return exit_code_for(result, context.console)
