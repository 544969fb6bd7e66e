"""Naming conventions and IAM ARN patterns for serverless services on AWS."""

from slsarn.arns import ArnSet, build_arns, build_tags
from slsarn.config import ServiceConfig
from slsarn.exceptions import AccountResolutionError, MissingRequiredFieldError

__all__ = [
    "AccountResolutionError",
    "ArnSet",
    "MissingRequiredFieldError",
    "ServiceConfig",
    "build_arns",
    "build_tags",
]
