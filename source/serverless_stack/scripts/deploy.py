# ABOUTME: In-process handler for sst deploy
# ABOUTME: Synthesizes the app, deploys its stacks through the CDK toolkit and shows outputs

"""Deploy handler - Deploy synthesized stacks to AWS."""

import logging

from rich import box
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from serverless_stack.cli.invocation import CommandArgs
from serverless_stack.cli.utils.assembly import StackArtifact, select_stacks
from serverless_stack.cli.utils.cdk import CdkConfig, DeployError, deploy
from serverless_stack.cli.utils.cf_exceptions import StackNotFoundError
from serverless_stack.cli.utils.cloudformation import CloudFormationManager

from .build import synthesize

logger = logging.getLogger(__name__)


def deploy_one(stack: StackArtifact, config: CdkConfig) -> DeployError | None:
    """Deploy a single stack behind a spinner and return the error, if any."""
    console = config.console
    with Progress(SpinnerColumn(), TextColumn("[progress.description]{task.description}"), console=console) as progress:
        task = progress.add_task(f"Deploying {stack.stack_name}...", total=None)
        try:
            deploy(config, stack.selector)
        except DeployError as e:
            return e
        finally:
            progress.update(task, completed=True)
    return None


def print_outputs(stack_name: str, outputs: dict[str, str], console: Console) -> None:
    if not outputs:
        return
    table = Table(title=f"{stack_name} outputs", box=box.SIMPLE)
    table.add_column("Output", style="cyan")
    table.add_column("Value")
    for key, value in sorted(outputs.items()):
        table.add_row(key, value)
    console.print(table)


def run(args: CommandArgs, config: CdkConfig) -> int:
    """Deploy the app, or the single stack named on the command line."""
    console = config.console

    stacks = synthesize(config)
    if stacks is None:
        return 1

    try:
        stacks = select_stacks(stacks, args.stack)
    except StackNotFoundError as e:
        console.print(f"[red]{e.message}[/red]")
        return 1

    if not stacks:
        console.print("[yellow]The app has no stacks to deploy.[/yellow]")
        return 0

    console.print(
        f"\n[bold]Deploying {len(stacks)} stack(s) to stage [cyan]{config.stage}[/cyan] "
        f"in [cyan]{config.region}[/cyan][/bold]\n"
    )

    manager = CloudFormationManager(region=config.region)
    for stack in stacks:
        logger.debug("Deploying %s as %s", stack.stack_name, stack.selector)
        error = deploy_one(stack, config)

        if error:
            console.print(f"[red]✗ {stack.stack_name} failed: {error.message}[/red]")
            if error.stderr:
                console.print(error.stderr, markup=False, highlight=False)
            console.print("\n[red]Deployment failed. Check the CloudFormation console for details.[/red]")
            return 1

        console.print(f"[green]✓ {stack.stack_name} deployed[/green]")
        print_outputs(stack.stack_name, manager.get_stack_outputs(stack.stack_name), console)

    console.print("\n[green]Deployment complete![/green]")
    return 0
