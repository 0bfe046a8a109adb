# ABOUTME: serverless-stack CLI - Build, deploy and remove AWS CDK apps
# ABOUTME: Main package for the sst command-line dispatcher

"""serverless-stack - AWS CDK deployment tool."""

__version__ = "0.1.0"
__all__ = ["cli", "config", "context", "paths", "scripts"]
