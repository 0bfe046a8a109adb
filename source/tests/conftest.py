# ABOUTME: Shared fixtures for the sst CLI tests
# ABOUTME: Provides a throwaway app directory and an execution context with fakes

import io
import json
import subprocess

import pytest
from rich.console import Console

from serverless_stack.context import ExecutionContext


class RecordingHandler:
    """Stands in for an in-process handler and remembers its calls."""

    def __init__(self, result=0):
        self.result = result
        self.calls = []

    def __call__(self, args, config):
        self.calls.append((args, config))
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


class FakeSpawn:
    """Stands in for subprocess.run and returns a canned exit status."""

    def __init__(self, returncode=0):
        self.returncode = returncode
        self.calls = []

    def __call__(self, command, **kwargs):
        self.calls.append((command, kwargs))
        return subprocess.CompletedProcess(command, self.returncode)


@pytest.fixture(autouse=True)
def aws_env(monkeypatch):
    """Keep tests away from real AWS credentials."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.delenv("AWS_PROFILE", raising=False)


@pytest.fixture
def app_dir(tmp_path):
    (tmp_path / "sst.json").write_text(json.dumps({"name": "my-app", "region": "us-east-1"}))
    return tmp_path


@pytest.fixture
def handlers():
    return {"build": RecordingHandler(), "deploy": RecordingHandler(), "remove": RecordingHandler()}


@pytest.fixture
def spawn():
    return FakeSpawn()


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def context(app_dir, handlers, spawn, output):
    console = Console(file=output, width=200, color_system=None)
    return ExecutionContext(cwd=app_dir, environ={}, handlers=handlers, spawn=spawn, console=console)
