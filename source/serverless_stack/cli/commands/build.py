# ABOUTME: Build command for sst apps
# ABOUTME: Synthesizes the CDK app into the build directory without deploying

"""Build command - Synthesize the app."""

from .base import HandlerCommand, stage_options


class BuildCommand(HandlerCommand):
    name = "build"
    description = "Build your app and prepare to deploy"
    help = """Synthesizes every stack of the app into <comment>.build/cdk.out</comment>.

  <info>sst build</info>                              Build using defaults
  <info>sst build --stage prod --region us-west-1</info>  Build for a stage and region"""

    options = stage_options()
