# ABOUTME: In-process handler for sst remove
# ABOUTME: Deletes the app's stacks in reverse order

"""Remove handler - Delete deployed stacks."""

import logging

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from serverless_stack.cli.invocation import CommandArgs
from serverless_stack.cli.utils.assembly import StackArtifact, select_stacks
from serverless_stack.cli.utils.cdk import CdkConfig
from serverless_stack.cli.utils.cf_exceptions import StackNotFoundError
from serverless_stack.cli.utils.cloudformation import CloudFormationManager

from .build import synthesize

logger = logging.getLogger(__name__)


def delete_one(manager: CloudFormationManager, stack: StackArtifact, console: Console) -> bool:
    """Delete a CloudFormation stack behind a spinner."""
    status = manager.get_stack_status(stack.stack_name)
    if not status:
        console.print(f"[yellow]Stack {stack.stack_name} not found or already deleted[/yellow]")
        return True

    with Progress(SpinnerColumn(), TextColumn("[progress.description]{task.description}"), console=console) as progress:
        task = progress.add_task(f"Deleting stack {stack.stack_name}...", total=None)

        result = manager.delete_stack(
            stack_name=stack.stack_name,
            force=True,
            on_event=lambda e: progress.update(
                task, description=f"Deleting {e.get('LogicalResourceId', stack.stack_name)}..."
            ),
        )

        progress.update(task, completed=True)

    if result.success:
        return True

    if "DELETE_FAILED" in str(result.error):
        console.print("[red]Stack deletion failed. Check CloudFormation console for details.[/red]")
    else:
        console.print(f"[red]Error deleting stack: {result.error}[/red]")
    return False


def run(args: CommandArgs, config: CdkConfig) -> int:
    """Remove the app, or the single stack named on the command line."""
    console = config.console

    stacks = synthesize(config)
    if stacks is None:
        return 1

    try:
        stacks = select_stacks(stacks, args.stack)
    except StackNotFoundError as e:
        console.print(f"[red]{e.message}[/red]")
        return 1

    console.print(f"\n[bold]Removing stage [cyan]{config.stage}[/cyan] from [cyan]{config.region}[/cyan][/bold]\n")

    manager = CloudFormationManager(region=config.region)
    # Dependents were synthesized after their dependencies
    for stack in reversed(stacks):
        logger.debug("Removing %s", stack.stack_name)
        if not delete_one(manager, stack, console):
            console.print("\n[red]Removal failed. Some resources may still exist.[/red]")
            return 1
        console.print(f"[green]✓ {stack.stack_name} removed[/green]")

    console.print("\n[green]Removal complete![/green]")
    return 0
