# ABOUTME: Pass-through commands that run in a child process
# ABOUTME: test runs the app's tests, cdk forwards to the AWS CDK CLI

"""Test and cdk commands - Forward arguments to a child process."""

from cleo.commands.command import Command
from cleo.helpers import argument

from serverless_stack.cli.launcher import launch_script
from serverless_stack.context import ExecutionContext


class PassthroughCommand(Command):
    """Hands every remaining argument to a helper script.

    ``sst test ...`` and ``sst cdk ...`` are normally routed to the launcher
    before option parsing so flags reach the child untouched. Through the
    application, use ``--`` to forward options.
    """

    arguments = [
        argument("args", description="Arguments forwarded to the child process", optional=True, multiple=True),
    ]

    def __init__(self, context: ExecutionContext):
        self.context = context
        super().__init__()

    def handle(self) -> int:
        return launch_script(self.name, self.argument("args") or [], self.context)


class RunTestsCommand(PassthroughCommand):
    name = "test"
    description = "Run your tests"


class CdkCommand(PassthroughCommand):
    name = "cdk"
    description = "Access the AWS CDK CLI"
