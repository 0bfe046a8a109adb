# ABOUTME: Deploy command for sst apps
# ABOUTME: Deploys all stacks, or a single one, to a stage and region

"""Deploy command - Deploy the app to AWS."""

from cleo.helpers import argument

from .base import HandlerCommand, stage_options


class DeployCommand(HandlerCommand):
    name = "deploy"
    description = "Deploy your app to AWS"
    help = """Deploys the stacks of the app with CloudFormation.

  <info>sst deploy</info>                                   Deploy every stack
  <info>sst deploy --stage prod --region us-west-1</info>   Deploy to a stage and region
  <info>sst deploy my-api-stack</info>                      Deploy a specific stack"""

    arguments = [
        argument("stack", description="Specify a stack, if you have multiple stacks", optional=True),
    ]

    options = stage_options()
