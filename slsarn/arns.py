import logging
from dataclasses import dataclass

from slsarn.config import ServiceConfig
from slsarn.constants import LAMBDA_ROLE_SUFFIX

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArnSet:
    """ARNs and ARN patterns that scope IAM permissions for one service stage."""

    sls_cloudformation_arn: str
    sls_deploy_bucket_arn: str
    sls_log_stream_arn: str
    sls_events_arn: str
    sls_lambda_arn: str
    sls_lambda_role_name: str
    sls_lambda_role_arn: str
    sls_apigw_arn: str
    sls_log_stream_all_arn: str

    def to_dict(self) -> dict[str, str]:
        return {
            "slsCloudformationArn": self.sls_cloudformation_arn,
            "slsDeployBucketArn": self.sls_deploy_bucket_arn,
            "slsLogStreamArn": self.sls_log_stream_arn,
            "slsEventsArn": self.sls_events_arn,
            "slsLambdaArn": self.sls_lambda_arn,
            "slsLambdaRoleName": self.sls_lambda_role_name,
            "slsLambdaRoleArn": self.sls_lambda_role_arn,
            "slsApigwArn": self.sls_apigw_arn,
            "slsLogStreamAllArn": self.sls_log_stream_all_arn,
        }


def build_arns(config: ServiceConfig) -> ArnSet:
    """Build the ARN set for a service config.

    Defaults are resolved first, so a missing service name fails before anything
    is built. Account id and region must already be on the config (or be left
    empty on purpose); no lookups happen here.

    Raises:
        MissingRequiredFieldError: If `service_name` is empty.
    """
    c = config.resolve()
    partition = c.iam_partition
    iam_region = c.iam_region
    account_id = c.iam_account_id
    # Prefix shared by every stage-scoped resource the serverless framework creates
    service_stage = f"{c.sls_service_name}-{c.stage}"

    logger.debug("Building ARNs for %s in partition %s", service_stage, partition)

    return ArnSet(
        sls_cloudformation_arn=(
            f"arn:{partition}:cloudformation:{iam_region}:{account_id}:stack/{service_stage}/*"
        ),
        # S3 ARNs have no region or account. Bucket names get truncated, hence the wildcards.
        sls_deploy_bucket_arn=f"arn:{partition}:s3:::{c.sls_service_name}-*-serverless*-*",
        sls_log_stream_arn=(
            f"arn:{partition}:logs:{iam_region}:{account_id}:"
            f"log-group:/aws/lambda/{service_stage}-*:log-stream:"
        ),
        sls_events_arn=f"arn:{partition}:events:{iam_region}:{account_id}:rule/{service_stage}",
        sls_lambda_arn=(
            f"arn:{partition}:lambda:{iam_region}:{account_id}:function:{service_stage}-*"
        ),
        # Must match the real role name, so the concrete region is used
        sls_lambda_role_name=f"{service_stage}-{c.region}-{LAMBDA_ROLE_SUFFIX}",
        sls_lambda_role_arn=(
            f"arn:{partition}:iam::{account_id}:"
            f"role/{service_stage}-{iam_region}-{LAMBDA_ROLE_SUFFIX}"
        ),
        # No account id: non-admin roles fail permission checks when it is present.
        # TODO: narrow /restapis* once stage-specific API ids can be referenced.
        sls_apigw_arn=f"arn:{partition}:apigateway:{iam_region}::/restapis*",
        sls_log_stream_all_arn=(
            f"arn:{partition}:logs:{iam_region}:{account_id}:log-group::log-stream:"
        ),
    )


def build_tags(config: ServiceConfig) -> dict[str, str]:
    return config.tags
