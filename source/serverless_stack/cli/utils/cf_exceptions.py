# ABOUTME: Custom exception classes for CloudFormation operations
# ABOUTME: Provides structured error handling for boto3 CloudFormation calls

"""Custom exceptions for CloudFormation operations."""


class CloudFormationError(Exception):
    """Base exception for all CloudFormation operations."""

    def __init__(self, message: str, stack_name: str = None):
        self.message = message
        self.stack_name = stack_name
        super().__init__(self.message)


class StackNotFoundError(CloudFormationError):
    """Raised when a stack does not exist."""

    pass

