import logging
from dataclasses import dataclass

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from slsarn.config import ServiceConfig
from slsarn.exceptions import AccountResolutionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AwsAccount:
    account_id: str
    region: str


def resolve_account(profile: str | None = None, region: str | None = None) -> AwsAccount:
    """Look up the caller's account id and region through the boto3 credential chain.

    Raises:
        AccountResolutionError: If no region is configured or the STS call fails.
    """
    try:
        session = boto3.Session(profile_name=profile, region_name=region)
    except BotoCoreError as e:
        raise AccountResolutionError(f"Failed to create AWS session: {e}") from e

    resolved_region = session.region_name
    if not resolved_region:
        raise AccountResolutionError(
            "No AWS region configured. Pass a region or set AWS_REGION / AWS_DEFAULT_REGION."
        )
    try:
        account_id = session.client("sts").get_caller_identity()["Account"]
    except (BotoCoreError, ClientError) as e:
        raise AccountResolutionError(f"Failed to resolve AWS account id: {e}") from e

    logger.info("Resolved AWS account %s in %s", account_id, resolved_region)
    return AwsAccount(account_id=account_id, region=resolved_region)


def resolve_config(config: ServiceConfig, profile: str | None = None) -> ServiceConfig:
    """Resolve defaults, asking AWS only for the account id or region when they are missing."""
    resolved = config.resolve()
    if resolved.iam_account_id and resolved.region:
        return resolved

    logger.debug("Account id or region not set, resolving from AWS session")
    account = resolve_account(profile=profile, region=resolved.region or None)
    return resolved.resolve(account_id=account.account_id, region=account.region)
