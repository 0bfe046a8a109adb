# ABOUTME: Command names, the parsed argument bag and raw argv routing
# ABOUTME: Decides which subcommand was asked for before cleo sees the tokens

"""Invocation parsing for the sst CLI."""

from dataclasses import dataclass, field

BUILD = "build"
DEPLOY = "deploy"
REMOVE = "remove"
TEST = "test"
CDK = "cdk"

COMMANDS = (BUILD, DEPLOY, REMOVE, TEST, CDK)
INTERNAL_COMMANDS = (BUILD, DEPLOY, REMOVE)
PASSTHROUGH_COMMANDS = (TEST, CDK)


@dataclass(frozen=True)
class CommandArgs:
    """Parsed arguments handed to in-process handlers."""

    command: str
    stack: str | None = None
    stage: str | None = None
    region: str | None = None


@dataclass(frozen=True)
class Invocation:
    """Raw tokens split around the subcommand."""

    script: str | None
    interpreter_args: list[str] = field(default_factory=list)
    forwarded_args: list[str] = field(default_factory=list)

    @property
    def is_passthrough(self) -> bool:
        return self.script in PASSTHROUGH_COMMANDS


def parse_invocation(args: list[str]) -> Invocation:
    """Split ``argv[1:]`` into interpreter options, subcommand and the rest.

    The subcommand is the first token that is not an option. Options before it
    are kept for the child interpreter of pass-through commands; values for
    those options must be attached (``-Ximporttime``).
    """
    for index, token in enumerate(args):
        if not token.startswith("-"):
            return Invocation(
                script=token,
                interpreter_args=list(args[:index]),
                forwarded_args=list(args[index + 1 :]),
            )
    return Invocation(script=None, interpreter_args=list(args))
