# ABOUTME: Input validation functions for CLI commands
# ABOUTME: Validates stages, regions and stack names given on the command line

"""Input validators for CLI commands."""

import re


def validate_aws_region(region: str) -> bool:
    """Validate AWS region format."""
    if not region:
        return False

    # AWS region format: us-east-1, eu-west-2, us-gov-west-1, etc.
    pattern = r"^[a-z]{2}(-gov)?-[a-z]+-\d{1,2}$"
    return bool(re.match(pattern, region))


def validate_stage(stage: str) -> bool:
    """Validate a stage name.

    Stages end up inside stack names, so they follow the same alphabet:
    letters, digits and hyphens, starting with a letter.
    """
    if not stage or len(stage) > 64:
        return False

    pattern = r"^[a-zA-Z][a-zA-Z0-9-]*$"
    return bool(re.match(pattern, stage))


def validate_stack_name(name: str) -> bool:
    """Validate CloudFormation stack name."""
    if not name or len(name) > 128:
        return False

    # Stack names can contain only alphanumeric characters and hyphens
    pattern = r"^[a-zA-Z][a-zA-Z0-9-]*$"
    return bool(re.match(pattern, name))
