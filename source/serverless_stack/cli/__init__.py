# ABOUTME: CLI module for the sst deployment tool
# ABOUTME: Routes subcommands to in-process handlers or child processes

"""Command-line interface for sst."""

import sys

from cleo.application import Application
from cleo.io.inputs.argv_input import ArgvInput
from rich.markup import escape

from serverless_stack import __version__
from serverless_stack.context import ExecutionContext

from .commands.build import BuildCommand
from .commands.deploy import DeployCommand
from .commands.passthrough import CdkCommand, RunTestsCommand
from .commands.remove import RemoveCommand
from .invocation import parse_invocation
from .launcher import launch_script
from .utils.log import configure_logging, debug_enabled

PROG = "sst"

EPILOGUE = "For more information, visit www.serverless-stack.com"

EXAMPLES = [
    (f"{PROG} build", "Build using defaults"),
    (f"{PROG} remove my-s3-stack", "Remove a specific stack"),
    (f"{PROG} deploy --stage prod --region us-west-1", "Deploy to a stage and region"),
]

# Flags that belong to sst even when test or cdk follows them
HELP_FLAGS = ("-h", "--help")
VERSION_FLAGS = ("-v", "-V", "--version")


def create_application(context: ExecutionContext) -> Application:
    """Create the CLI application."""
    application = Application(PROG, __version__)
    application.auto_exits(False)

    # Add commands
    application.add(BuildCommand(context))
    application.add(DeployCommand(context))
    application.add(RemoveCommand(context))
    application.add(RunTestsCommand(context))
    application.add(CdkCommand(context))

    return application


def show_usage(application: Application, context: ExecutionContext) -> int:
    """Print the command list, examples and epilogue."""
    exit_code = application.run(ArgvInput([PROG, "list"]))
    context.console.print("\n[bold]Examples:[/bold]")
    for example, description in EXAMPLES:
        context.console.print(f"  [green]{example:<45}[/green] {description}", highlight=False)
    context.console.print(f"\n{EPILOGUE}", highlight=False)
    return exit_code


def usage_error(application: Application, context: ExecutionContext, message: str) -> int:
    """Print the message followed by the usage."""
    context.console.print(f"[red]{message}[/red]\n", highlight=False)
    show_usage(application, context)
    return 1


def run(args: list[str], context: ExecutionContext) -> int:
    """Dispatch one invocation and return the exit code."""
    invocation = parse_invocation(args)
    leading = invocation.interpreter_args
    wants_help = any(flag in HELP_FLAGS for flag in leading)
    wants_version = any(flag in VERSION_FLAGS for flag in leading)

    if invocation.is_passthrough and not (wants_help or wants_version):
        return launch_script(
            invocation.script,
            invocation.forwarded_args,
            context,
            interpreter_args=leading,
        )

    application = create_application(context)

    # cleo spells the version flag -V and keeps -v for verbosity
    if wants_version:
        return application.run(ArgvInput([PROG, "--version"]))
    if wants_help:
        if invocation.script is None:
            return show_usage(application, context)
        if application.has(invocation.script):
            return application.run(ArgvInput([PROG, "help", invocation.script]))

    if not args:
        return usage_error(application, context, "Please specify a command.")
    if invocation.script and not application.has(invocation.script):
        return usage_error(application, context, f'Unknown command "{escape(invocation.script)}".')

    return application.run(ArgvInput([PROG, *args]))


def main():
    """Main entry point for the CLI."""
    context = ExecutionContext.from_process()
    configure_logging(debug=debug_enabled(context.environ))
    sys.exit(run(sys.argv[1:], context))


if __name__ == "__main__":
    main()
