DEFAULT_IAM_PARTITION = "*"
DEFAULT_IAM_REGION = "*"
DEFAULT_STAGE = "development"
DEFAULT_ROLE_ADMIN_NAME = "admin"
DEFAULT_ROLE_DEVELOPER_NAME = "developer"
DEFAULT_ROLE_CI_NAME = "ci"
TF_SERVICE_PREFIX = "tf-"
SLS_SERVICE_PREFIX = "sls-"
# Suffix the serverless framework appends to the per-stage Lambda execution role
LAMBDA_ROLE_SUFFIX = "lambdaRole"
PULUMI_CONFIG_NAMESPACE = "slsarn"
