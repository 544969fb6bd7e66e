"""AWS-specific test fixtures shared across aws test modules."""

from unittest.mock import patch

import pytest
from pulumi.runtime import set_mocks

from .pulumi_mocks import ACCOUNT_ID, DEFAULT_REGION, PulumiTestMocks


@pytest.fixture
def pulumi_mocks():
    """Provide shared Pulumi mocks for AWS provider lookups."""
    mocks = PulumiTestMocks()
    set_mocks(mocks)
    return mocks


@pytest.fixture
def mock_session():
    """Patch boto3.Session with a session that resolves a fixed account and region."""
    with patch("slsarn.aws.account.boto3.Session") as session_cls:
        session = session_cls.return_value
        session.region_name = DEFAULT_REGION
        session.client.return_value.get_caller_identity.return_value = {
            "Account": ACCOUNT_ID,
            "Arn": f"arn:aws:iam::{ACCOUNT_ID}:user/test-user",
            "UserId": "test-user-id",
        }
        yield session_cls
