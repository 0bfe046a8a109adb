# ABOUTME: Shared base for the build, deploy and remove commands
# ABOUTME: Parses stage/region/stack, prepares the CDK app and calls the handler

"""Base command for in-process handlers."""

import logging

from cleo.commands.command import Command
from cleo.helpers import option

from serverless_stack.cli.invocation import CommandArgs
from serverless_stack.cli.utils.cdk import InvalidOptionError, prepare_cdk
from serverless_stack.cli.utils.validators import validate_stack_name
from serverless_stack.config import ConfigError
from serverless_stack.context import ExecutionContext
from serverless_stack.paths import AppPaths

logger = logging.getLogger(__name__)


def stage_options() -> list:
    """Options every in-process command accepts."""
    return [
        option("stage", description="The stage you want to deploy to", flag=False),
        option("region", description="The region you want to deploy to", flag=False),
    ]


class HandlerCommand(Command):
    """Runs the handler registered under the command's name."""

    def __init__(self, context: ExecutionContext):
        self.context = context
        super().__init__()

    def command_args(self) -> CommandArgs:
        stack = self.argument("stack") if self.definition.has_argument("stack") else None
        return CommandArgs(
            command=self.name,
            stack=stack,
            stage=self.option("stage"),
            region=self.option("region"),
        )

    def handle(self) -> int:
        """Execute the command through its handler."""
        console = self.context.console
        args = self.command_args()

        if args.stack is not None and not validate_stack_name(args.stack):
            console.print(f"[red]Invalid stack name: {args.stack}[/red]")
            return 1

        paths = AppPaths.from_cwd(self.context.cwd)
        try:
            config = prepare_cdk(args, paths, self.context.environ, console=console)
        except (ConfigError, InvalidOptionError) as e:
            console.print(f"[red]{e}[/red]")
            return 1

        paths.ensure_build_dir()

        handler = self.context.handlers[self.name]
        logger.debug("Dispatching %s to %s", self.name, getattr(handler, "__module__", handler))

        # Handler errors are not caught here; the application reports them and exits 1
        return handler(args, config) or 0
