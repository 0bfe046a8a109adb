# ABOUTME: Remove command for sst apps
# ABOUTME: Deletes the deployed stacks of a stage

"""Remove command - Remove the app and all its resources."""

from cleo.helpers import argument

from .base import HandlerCommand, stage_options


class RemoveCommand(HandlerCommand):
    name = "remove"
    description = "Remove your app and all its resources"
    help = """Deletes the stacks of the app in reverse order.

  <info>sst remove</info>               Remove every stack
  <info>sst remove my-s3-stack</info>   Remove a specific stack"""

    arguments = [
        argument("stack", description="Specify a stack, if you have multiple stacks", optional=True),
    ]

    options = stage_options()
