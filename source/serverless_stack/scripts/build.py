# ABOUTME: In-process handler for sst build
# ABOUTME: Synthesizes the app and lists the stacks it produced

"""Build handler - Synthesize the app into the build directory."""

import logging

from rich.progress import Progress, SpinnerColumn, TextColumn

from serverless_stack.cli.invocation import CommandArgs
from serverless_stack.cli.utils.assembly import StackArtifact, read_stacks
from serverless_stack.cli.utils.cdk import CdkConfig, SynthError, synth

logger = logging.getLogger(__name__)


def synthesize(config: CdkConfig) -> list[StackArtifact] | None:
    """Run cdk synth with a spinner and return the stacks, or None on failure."""
    console = config.console
    with Progress(SpinnerColumn(), TextColumn("[progress.description]{task.description}"), console=console) as progress:
        task = progress.add_task(f"Building {config.name} for stage {config.stage}...", total=None)
        try:
            synth(config)
        except SynthError as e:
            progress.update(task, completed=True)
            console.print(f"[red]{e.message}[/red]")
            if e.stderr:
                console.print(e.stderr, markup=False, highlight=False)
            return None
        progress.update(task, completed=True)

    stacks = read_stacks(config.paths.assembly_path)
    logger.debug("Synthesized %d stacks into %s", len(stacks), config.paths.assembly_path)
    return stacks


def run(args: CommandArgs, config: CdkConfig) -> int:
    """Build the app."""
    console = config.console

    stacks = synthesize(config)
    if stacks is None:
        return 1

    console.print(f"\n[green]✓ Built {len(stacks)} stack(s)[/green] in [cyan]{config.paths.assembly_path}[/cyan]")
    for stack in stacks:
        console.print(f"• [cyan]{stack.stack_name}[/cyan]")
    return 0
