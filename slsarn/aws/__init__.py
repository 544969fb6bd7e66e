"""AWS account and region resolution for slsarn."""

from slsarn.aws.account import AwsAccount, resolve_account, resolve_config

__all__ = [
    "AwsAccount",
    "resolve_account",
    "resolve_config",
]
