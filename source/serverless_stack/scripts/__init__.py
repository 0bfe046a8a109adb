# ABOUTME: Handlers behind the sst subcommands
# ABOUTME: build/deploy/remove run in-process; test and cdk run as child scripts

"""Command handlers and child-process scripts."""
