import pytest

from slsarn.config import ServiceConfig

ACCOUNT_ID = "123456789012"
REGION = "us-east-1"


@pytest.fixture
def orders_config() -> ServiceConfig:
    return ServiceConfig(
        service_name="orders",
        stage="production",
        region=REGION,
        iam_region="*",
        iam_partition="aws",
        iam_account_id=ACCOUNT_ID,
    )
