# ABOUTME: Preparation of the CDK app before build, deploy and remove
# ABOUTME: Resolves stage and region and drives the CDK toolkit against the build directory

"""CDK helpers shared by the in-process handlers."""

import logging
import shutil
import subprocess
from collections.abc import Mapping
from dataclasses import dataclass, field

from rich.console import Console

from serverless_stack.cli.invocation import CommandArgs
from serverless_stack.config import AppConfig
from serverless_stack.paths import AppPaths

from .validators import validate_aws_region, validate_stage

logger = logging.getLogger(__name__)

DEFAULT_STAGE = "dev"
DEFAULT_REGION = "us-east-1"


class CdkError(Exception):
    """Raised when a CDK toolkit command fails."""

    def __init__(self, message: str, stderr: str = ""):
        self.message = message
        self.stderr = stderr
        super().__init__(self.message)


class SynthError(CdkError):
    """Raised when cdk synth fails."""

    pass


class DeployError(CdkError):
    """Raised when cdk deploy fails for a stack."""

    pass


class InvalidOptionError(ValueError):
    """Raised when --stage or --region has an unusable value."""


@dataclass
class CdkConfig:
    """Resolved settings for one build/deploy/remove run."""

    name: str
    stage: str
    region: str
    paths: AppPaths
    context: dict[str, str] = field(default_factory=dict)
    environ: dict[str, str] = field(default_factory=dict, repr=False)
    console: Console = field(default_factory=Console, repr=False)

    def qualified_name(self) -> str:
        """Name prefix shared by all stacks of this stage."""
        return f"{self.stage}-{self.name}"


def prepare_cdk(
    args: CommandArgs, paths: AppPaths, environ: Mapping[str, str], console: Console | None = None
) -> CdkConfig:
    """Resolve the app config for a command.

    Options on the command line win over sst.json, which wins over the
    environment and the built-in defaults.
    """
    app = AppConfig.load(paths.config_path)

    stage = args.stage or app.stage or DEFAULT_STAGE
    region = (
        args.region
        or app.region
        or environ.get("AWS_REGION")
        or environ.get("AWS_DEFAULT_REGION")
        or DEFAULT_REGION
    )

    if not validate_stage(stage):
        raise InvalidOptionError(f"Invalid stage: {stage}. Use letters, numbers and hyphens.")
    if not validate_aws_region(region):
        raise InvalidOptionError(f"Invalid region: {region}. Expected a region like us-east-1.")

    logger.debug("Prepared %s for stage %s in %s", app.name, stage, region)
    return CdkConfig(
        name=app.name,
        stage=stage,
        region=region,
        paths=paths,
        context=dict(app.cdk_context),
        environ=dict(environ),
        console=console or Console(),
    )


def cdk_executable() -> list[str]:
    """Command prefix for the CDK CLI, falling back to npx."""
    cdk = shutil.which("cdk")
    if cdk:
        return [cdk]
    return ["npx", "aws-cdk"]


def cdk_env(config: CdkConfig) -> dict[str, str]:
    """Environment for CDK child processes."""
    env = dict(config.environ)
    env["CDK_DEFAULT_REGION"] = config.region
    env["SST_STAGE"] = config.stage
    env["SST_REGION"] = config.region
    return env


def synth_command(config: CdkConfig) -> list[str]:
    """The cdk synth invocation that writes the cloud assembly."""
    cmd = [*cdk_executable(), "synth", "--quiet", "--output", str(config.paths.assembly_path)]
    context = {"stage": config.stage, "region": config.region, **config.context}
    for key, value in context.items():
        cmd.extend(["--context", f"{key}={value}"])
    return cmd


def deploy_command(config: CdkConfig, selector: str) -> list[str]:
    """The cdk deploy invocation for one stack of an already synthesized assembly.

    The toolkit publishes file and image assets and uploads templates too
    large to send inline, so the handler never builds CreateStack calls itself.
    """
    return [
        *cdk_executable(),
        "deploy",
        "--app",
        str(config.paths.assembly_path),
        selector,
        "--exclusively",
        "--require-approval",
        "never",
        "--progress",
        "events",
        "--tags",
        f"sst:app={config.name}",
        "--tags",
        f"sst:stage={config.stage}",
    ]


def run_cdk(action: str, cmd: list[str], config: CdkConfig, error: type[CdkError]) -> subprocess.CompletedProcess:
    """Run a toolkit command in the app directory, raising ``error`` on failure."""
    logger.debug("Running %s", cmd)

    try:
        result = subprocess.run(
            cmd,
            cwd=config.paths.app_path,
            env=cdk_env(config),
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as e:
        raise error("Could not run the CDK CLI. Install it with: npm install -g aws-cdk", str(e)) from e

    if result.returncode != 0:
        raise error(f"cdk {action} failed with exit code {result.returncode}", result.stderr)
    return result


def synth(config: CdkConfig) -> None:
    """Synthesize the app into the build directory."""
    run_cdk("synth", synth_command(config), config, SynthError)


def deploy(config: CdkConfig, selector: str) -> None:
    """Deploy one stack from the synthesized assembly."""
    run_cdk("deploy", deploy_command(config, selector), config, DeployError)
