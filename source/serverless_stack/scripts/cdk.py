# ABOUTME: Child script behind sst cdk
# ABOUTME: Replaces itself with the AWS CDK CLI and the forwarded arguments

"""Forward arguments to the AWS CDK CLI."""

import os
import sys

from serverless_stack.cli.utils.cdk import cdk_executable


def main(argv: list[str]) -> None:
    command = [*cdk_executable(), *argv]
    try:
        os.execvp(command[0], command)
    except FileNotFoundError:
        print("Could not run the CDK CLI. Install it with: npm install -g aws-cdk", file=sys.stderr)
        sys.exit(127)


if __name__ == "__main__":
    main(sys.argv[1:])
