# ABOUTME: Reader for the cloud assembly written by cdk synth
# ABOUTME: Lists the CloudFormation stacks an app synthesizes and their templates

"""Cloud assembly helpers."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from .cf_exceptions import StackNotFoundError

logger = logging.getLogger(__name__)

MANIFEST_FILE = "manifest.json"
STACK_ARTIFACT_TYPE = "aws:cloudformation:stack"
NESTED_ASSEMBLY_TYPE = "cdk:cloud-assembly"


@dataclass(frozen=True)
class StackArtifact:
    """One stack in the synthesized app."""

    artifact_id: str
    stack_name: str
    template_path: Path
    environment: str | None = None
    display_name: str | None = None

    @property
    def selector(self) -> str:
        """Name the CDK toolkit uses to pick this stack."""
        return self.display_name or self.artifact_id


def read_stacks(assembly_path: Path) -> list[StackArtifact]:
    """Read the stack artifacts from ``manifest.json`` in manifest order.

    Stacks inside CDK Stages live in nested assemblies; they are listed in
    place of the nested assembly artifact.
    """
    manifest_path = Path(assembly_path) / MANIFEST_FILE
    with open(manifest_path) as f:
        manifest = json.load(f)

    stacks = []
    for artifact_id, artifact in manifest.get("artifacts", {}).items():
        artifact_type = artifact.get("type")
        properties = artifact.get("properties", {})

        if artifact_type == NESTED_ASSEMBLY_TYPE:
            nested_path = manifest_path.parent / properties["directoryName"]
            logger.debug("Reading nested assembly %s from %s", artifact_id, nested_path)
            stacks.extend(read_stacks(nested_path))
            continue
        if artifact_type != STACK_ARTIFACT_TYPE:
            continue

        stacks.append(
            StackArtifact(
                artifact_id=artifact_id,
                stack_name=properties.get("stackName", artifact_id),
                template_path=manifest_path.parent / properties["templateFile"],
                environment=artifact.get("environment"),
                display_name=artifact.get("displayName"),
            )
        )
    return stacks


def select_stacks(stacks: list[StackArtifact], name: str | None) -> list[StackArtifact]:
    """Pick the stack called ``name`` or every stack when no name is given."""
    if not name:
        return list(stacks)

    selected = [stack for stack in stacks if name in (stack.artifact_id, stack.stack_name)]
    if not selected:
        available = ", ".join(stack.stack_name for stack in stacks) or "none"
        raise StackNotFoundError(f"Unknown stack: {name}. Valid stacks: {available}", name)
    return selected
