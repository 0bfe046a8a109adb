# ABOUTME: CloudFormation manager using boto3 SDK
# ABOUTME: Reads stack status and outputs and deletes the stacks of an sst app

"""CloudFormation manager for boto3-based stack operations."""

import logging
import threading
import time
from collections.abc import Callable

import boto3
from botocore.exceptions import ClientError, WaiterError

logger = logging.getLogger(__name__)


class StackDeletionResult:
    """Result of a stack deletion operation."""

    def __init__(self, success: bool, error: str = None):
        self.success = success
        self.error = error


class CloudFormationManager:
    """
    Centralized CloudFormation operations manager.
    Output lookups after deploy and every stack deletion go through here.
    """

    def __init__(self, region: str, profile: str = None):
        """
        Initialize CloudFormation manager.

        Args:
            region: AWS region
            profile: Optional AWS profile name
        """
        self.region = region
        self.session = (
            boto3.Session(region_name=region, profile_name=profile) if profile else boto3.Session(region_name=region)
        )
        self._cf_client = None

    @property
    def cf_client(self):
        """Lazy-loaded CloudFormation client."""
        if not self._cf_client:
            self._cf_client = self.session.client("cloudformation")
        return self._cf_client

    def delete_stack(
        self,
        stack_name: str,
        force: bool = False,
        on_event: Callable = None,
        timeout: int = 600,
    ) -> StackDeletionResult:
        """
        Delete a CloudFormation stack.

        Args:
            stack_name: Name of the stack to delete
            force: Retry deletion even if in DELETE_FAILED state
            on_event: Callback for stack events
            timeout: Timeout in seconds

        Returns:
            StackDeletionResult with success status
        """
        try:
            exists, current_status = self._check_stack_exists(stack_name)

            if not exists:
                if on_event:
                    on_event({"message": f"Stack {stack_name} does not exist or already deleted"})
                return StackDeletionResult(success=True)

            if current_status == "DELETE_FAILED" and not force:
                return StackDeletionResult(
                    success=False, error="Stack is in DELETE_FAILED state. Use force=True to retry."
                )

            if on_event:
                on_event({"message": f"Deleting stack {stack_name}..."})

            logger.debug("delete_stack %s in %s", stack_name, self.region)
            self.cf_client.delete_stack(StackName=stack_name)

            success = self._wait_for_stack(stack_name, "stack_delete_complete", timeout, on_event)
            if success:
                return StackDeletionResult(success=True)
            return StackDeletionResult(success=False, error=self._get_stack_failure_reason(stack_name))

        except ClientError as e:
            error_message = e.response["Error"]["Message"]
            return StackDeletionResult(success=False, error=error_message)

    def get_stack_status(self, stack_name: str) -> str | None:
        """
        Get the current status of a stack.

        Args:
            stack_name: Name of the stack

        Returns:
            Stack status or None if not found
        """
        exists, status = self._check_stack_exists(stack_name)
        return status if exists else None

    def get_stack_outputs(self, stack_name: str) -> dict[str, str]:
        """
        Get outputs from a CloudFormation stack.

        Args:
            stack_name: Name of the stack

        Returns:
            Dictionary of output keys and values
        """
        try:
            response = self.cf_client.describe_stacks(StackName=stack_name)
            if response["Stacks"]:
                stack = response["Stacks"][0]
                return {output["OutputKey"]: output["OutputValue"] for output in stack.get("Outputs", [])}
            return {}
        except ClientError:
            return {}

    def _check_stack_exists(self, stack_name: str) -> tuple[bool, str | None]:
        """Check if stack exists and return its status."""
        try:
            response = self.cf_client.describe_stacks(StackName=stack_name)
            if response["Stacks"]:
                status = response["Stacks"][0]["StackStatus"]
                return True, status
            return False, None
        except ClientError as e:
            if e.response["Error"]["Code"] == "ValidationError":
                return False, None
            raise

    def _wait_for_stack(self, stack_name: str, waiter_name: str, timeout: int, on_event: Callable = None) -> bool:
        """
        Wait for stack operation to complete with event streaming.

        Args:
            stack_name: Name of the stack
            waiter_name: Name of the waiter (e.g., 'stack_create_complete')
            timeout: Timeout in seconds
            on_event: Callback for stack events

        Returns:
            True if successful, False otherwise
        """
        if on_event:
            self._start_event_streaming(stack_name, on_event)

        try:
            waiter = self.cf_client.get_waiter(waiter_name)
            waiter.wait(StackName=stack_name, WaiterConfig={"Delay": 5, "MaxAttempts": max(timeout // 5, 1)})
            return True
        except WaiterError as e:
            logger.debug("Waiter %s for %s stopped: %s", waiter_name, stack_name, e)
            return False

    def _start_event_streaming(self, stack_name: str, on_event: Callable) -> threading.Thread:
        """Start streaming stack events in a separate thread."""
        seen_events = set()

        def stream_events():
            while True:
                try:
                    response = self.cf_client.describe_stack_events(StackName=stack_name)
                    for event in response.get("StackEvents", []):
                        event_id = event["EventId"]
                        if event_id not in seen_events:
                            seen_events.add(event_id)
                            on_event(
                                {
                                    "timestamp": event.get("Timestamp"),
                                    "LogicalResourceId": event.get("LogicalResourceId"),
                                    "ResourceType": event.get("ResourceType"),
                                    "ResourceStatus": event.get("ResourceStatus"),
                                    "ResourceStatusReason": event.get("ResourceStatusReason"),
                                    "message": f"{event.get('LogicalResourceId')} - {event.get('ResourceStatus')}",
                                }
                            )

                    status = self.get_stack_status(stack_name)
                    if not status or "COMPLETE" in status or "FAILED" in status:
                        break

                    time.sleep(2)
                except ClientError as e:
                    logger.debug("Stopped streaming events for %s: %s", stack_name, e)
                    break

        thread = threading.Thread(target=stream_events, daemon=True)
        thread.start()
        return thread

    def _get_stack_failure_reason(self, stack_name: str) -> str:
        """Get the failure reason from stack events."""
        try:
            response = self.cf_client.describe_stack_events(StackName=stack_name)
        except ClientError as e:
            return f"Error fetching failure reason: {e}"

        for event in response.get("StackEvents", []):
            status = event.get("ResourceStatus", "")
            reason = event.get("ResourceStatusReason", "") or ""

            if "FAILED" in status and "cancelled" not in reason.lower():
                resource_type = event.get("ResourceType", "Unknown")
                logical_id = event.get("LogicalResourceId", "Unknown")
                return f"{resource_type} ({logical_id}): {reason}"

        return "Unknown failure reason"
