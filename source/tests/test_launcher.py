# ABOUTME: Tests for the child process launcher
# ABOUTME: Verifies signal diagnostics and exit status propagation

import io
import signal
import subprocess
import sys

import pytest
from rich.console import Console

from serverless_stack.cli.launcher import SIGNAL_MESSAGES, build_command, exit_code_for, launch_script, signal_name


def make_console():
    buffer = io.StringIO()
    return Console(file=buffer, width=200, color_system=None), buffer


def flat(text: str) -> str:
    return " ".join(text.split())


class TestExitCodeFor:
    def test_sigkill_reports_out_of_memory(self):
        console, buffer = make_console()
        result = subprocess.CompletedProcess(["x"], -signal.SIGKILL)

        assert exit_code_for(result, console) == 1
        assert "ran out of memory" in flat(buffer.getvalue())
        assert "`kill -9`" in buffer.getvalue()

    def test_sigterm_reports_external_termination(self):
        console, buffer = make_console()
        result = subprocess.CompletedProcess(["x"], -signal.SIGTERM)

        assert exit_code_for(result, console) == 1
        output = flat(buffer.getvalue())
        assert "`kill` or `killall`" in output
        assert "ran out of memory" not in output

    def test_other_signals_exit_one_silently(self):
        console, buffer = make_console()
        result = subprocess.CompletedProcess(["x"], -signal.SIGINT)

        assert exit_code_for(result, console) == 1
        assert buffer.getvalue() == ""

    @pytest.mark.parametrize("status", [0, 2, 42])
    def test_normal_exit_status_is_propagated(self, status):
        console, buffer = make_console()

        assert exit_code_for(subprocess.CompletedProcess(["x"], status), console) == status
        assert buffer.getvalue() == ""


def test_signal_name():
    assert signal_name(-signal.SIGKILL) == "SIGKILL"
    assert signal_name(-9999) == "signal 9999"
    assert set(SIGNAL_MESSAGES) == {"SIGKILL", "SIGTERM"}


def test_build_command():
    command = build_command("test", ["-k", "smoke"], ["-X", "dev"])

    assert command == [sys.executable, "-X", "dev", "-m", "serverless_stack.scripts.test", "-k", "smoke"]


def test_launch_script_spawns_in_context(context, spawn, app_dir):
    spawn.returncode = 3

    assert launch_script("cdk", ["ls"], context) == 3

    command, kwargs = spawn.calls[0]
    assert command[-3:] == ["-m", "serverless_stack.scripts.cdk", "ls"]
    assert kwargs["cwd"] == app_dir
