# ABOUTME: Tests for the boto3 CloudFormation manager
# ABOUTME: Drives delete, status and output lookups against a mocked client

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError, WaiterError

from serverless_stack.cli.utils.cloudformation import CloudFormationManager


def client_error(code: str, message: str, operation: str = "DescribeStacks") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


def stack(status: str, outputs=None) -> dict:
    return {"Stacks": [{"StackStatus": status, "Outputs": outputs or []}]}


NOT_FOUND = client_error("ValidationError", "Stack with id dev-api does not exist")


@pytest.fixture
def manager():
    manager = CloudFormationManager(region="us-east-1")
    manager._cf_client = MagicMock()
    return manager


class TestDeleteStack:
    def test_missing_stack_is_success(self, manager):
        manager.cf_client.describe_stacks.side_effect = [NOT_FOUND]

        assert manager.delete_stack("dev-api").success
        manager.cf_client.delete_stack.assert_not_called()

    def test_deletes_and_waits(self, manager):
        client = manager.cf_client
        client.describe_stacks.return_value = stack("CREATE_COMPLETE")

        assert manager.delete_stack("dev-api").success
        client.delete_stack.assert_called_once_with(StackName="dev-api")
        client.get_waiter.assert_called_with("stack_delete_complete")

    def test_delete_failed_requires_force(self, manager):
        manager.cf_client.describe_stacks.return_value = stack("DELETE_FAILED")

        result = manager.delete_stack("dev-api")

        assert not result.success
        assert "DELETE_FAILED" in result.error

    def test_failed_wait_reports_reason(self, manager):
        client = manager.cf_client
        client.describe_stacks.return_value = stack("CREATE_COMPLETE")
        client.get_waiter.return_value.wait.side_effect = WaiterError(
            name="StackDeleteComplete", reason="failed", last_response={}
        )
        client.describe_stack_events.return_value = {
            "StackEvents": [
                {
                    "ResourceStatus": "DELETE_FAILED",
                    "ResourceStatusReason": "Bucket is not empty",
                    "ResourceType": "AWS::S3::Bucket",
                    "LogicalResourceId": "Uploads",
                }
            ]
        }

        result = manager.delete_stack("dev-api")

        assert not result.success
        assert result.error == "AWS::S3::Bucket (Uploads): Bucket is not empty"

    def test_client_error(self, manager):
        client = manager.cf_client
        client.describe_stacks.return_value = stack("CREATE_COMPLETE")
        client.delete_stack.side_effect = client_error("AccessDenied", "not allowed", "DeleteStack")

        result = manager.delete_stack("dev-api")

        assert not result.success
        assert result.error == "not allowed"


def test_get_stack_status(manager):
    manager.cf_client.describe_stacks.side_effect = [stack("UPDATE_COMPLETE"), NOT_FOUND]

    assert manager.get_stack_status("dev-api") == "UPDATE_COMPLETE"
    assert manager.get_stack_status("dev-api") is None


def test_get_stack_outputs(manager):
    manager.cf_client.describe_stacks.side_effect = [
        stack("CREATE_COMPLETE", [{"OutputKey": "Url", "OutputValue": "https://example.com"}]),
        NOT_FOUND,
    ]

    assert manager.get_stack_outputs("dev-api") == {"Url": "https://example.com"}
    assert manager.get_stack_outputs("dev-api") == {}
