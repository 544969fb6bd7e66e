import logging

import pulumi
from pulumi_aws import get_caller_identity, get_region

from slsarn.arns import ArnSet
from slsarn.config import ServiceConfig
from slsarn.constants import (
    DEFAULT_IAM_PARTITION,
    DEFAULT_IAM_REGION,
    DEFAULT_ROLE_ADMIN_NAME,
    DEFAULT_ROLE_CI_NAME,
    DEFAULT_ROLE_DEVELOPER_NAME,
    DEFAULT_STAGE,
    PULUMI_CONFIG_NAMESPACE,
)

logger = logging.getLogger(__name__)


def load_service_config(config: pulumi.Config | None = None) -> ServiceConfig:
    """Read a ServiceConfig from Pulumi stack config.

    Keys use the camelCase names, e.g. `slsarn:serviceName`, `slsarn:stage`,
    `slsarn:manyLambdasEnabled`. `serviceName` is required.
    """
    config = config or pulumi.Config(PULUMI_CONFIG_NAMESPACE)
    return ServiceConfig(
        service_name=config.require("serviceName"),
        stage=config.get("stage") or DEFAULT_STAGE,
        region=config.get("region") or "",
        iam_account_id=config.get("iamAccountId") or "",
        iam_partition=config.get("iamPartition") or DEFAULT_IAM_PARTITION,
        iam_region=config.get("iamRegion") or DEFAULT_IAM_REGION,
        tf_service_name=config.get("tfServiceName") or "",
        sls_service_name=config.get("slsServiceName") or "",
        role_admin_name=config.get("roleAdminName") or DEFAULT_ROLE_ADMIN_NAME,
        role_developer_name=config.get("roleDeveloperName") or DEFAULT_ROLE_DEVELOPER_NAME,
        role_ci_name=config.get("roleCiName") or DEFAULT_ROLE_CI_NAME,
        many_lambdas_enabled=bool(config.get_bool("manyLambdasEnabled")),
    )


def resolve_stack_config(config: ServiceConfig) -> ServiceConfig:
    """Fill account id and region from the stack's AWS provider when they are empty."""
    resolved = config.resolve()
    account_id = resolved.iam_account_id or get_caller_identity().account_id
    region = resolved.region or get_region().name
    logger.info("Using AWS account %s in %s", account_id, region)
    return resolved.resolve(account_id=account_id, region=region)


def export_arns(arns: ArnSet, tags: dict[str, str] | None = None) -> None:
    for name, value in arns.to_dict().items():
        pulumi.export(name, value)
    if tags is not None:
        pulumi.export("tags", tags)
