"""Tests for boto3-backed account and region resolution."""

import pytest
from botocore.exceptions import ClientError, NoCredentialsError, ProfileNotFound

from slsarn.aws.account import AwsAccount, resolve_account, resolve_config
from slsarn.config import ServiceConfig
from slsarn.exceptions import AccountResolutionError, MissingRequiredFieldError

from .pulumi_mocks import ACCOUNT_ID, DEFAULT_REGION


def test_resolve_account(mock_session):
    account = resolve_account(profile="dev", region="eu-west-1")

    assert account == AwsAccount(account_id=ACCOUNT_ID, region=DEFAULT_REGION)
    mock_session.assert_called_once_with(profile_name="dev", region_name="eu-west-1")
    mock_session.return_value.client.assert_called_once_with("sts")


def test_resolve_account_without_region_fails(mock_session):
    mock_session.return_value.region_name = None

    with pytest.raises(AccountResolutionError, match="No AWS region configured"):
        resolve_account()

    mock_session.return_value.client.assert_not_called()


def test_resolve_account_wraps_client_error(mock_session):
    sts = mock_session.return_value.client.return_value
    sts.get_caller_identity.side_effect = ClientError(
        {"Error": {"Code": "ExpiredToken", "Message": "The security token has expired"}},
        "GetCallerIdentity",
    )

    with pytest.raises(AccountResolutionError, match="ExpiredToken") as exc_info:
        resolve_account()

    assert isinstance(exc_info.value.__cause__, ClientError)


def test_resolve_account_wraps_missing_credentials(mock_session):
    sts = mock_session.return_value.client.return_value
    sts.get_caller_identity.side_effect = NoCredentialsError()

    with pytest.raises(AccountResolutionError, match="Unable to locate credentials"):
        resolve_account()


def test_resolve_account_wraps_unknown_profile(mock_session):
    mock_session.side_effect = ProfileNotFound(profile="missing")

    with pytest.raises(AccountResolutionError, match="missing"):
        resolve_account(profile="missing")


def test_resolve_config_fills_account_and_region(mock_session):
    resolved = resolve_config(ServiceConfig(service_name="orders"), profile="dev")

    assert resolved.iam_account_id == ACCOUNT_ID
    assert resolved.region == DEFAULT_REGION
    assert resolved.sls_service_name == "sls-orders"
    mock_session.assert_called_once_with(profile_name="dev", region_name=None)


def test_resolve_config_passes_configured_region_to_session(mock_session):
    resolve_config(ServiceConfig(service_name="orders", region="eu-west-1"))

    mock_session.assert_called_once_with(profile_name=None, region_name="eu-west-1")


def test_resolve_config_keeps_explicit_region(mock_session):
    mock_session.return_value.region_name = "eu-west-1"
    resolved = resolve_config(ServiceConfig(service_name="orders", region="eu-west-1"))

    assert resolved.region == "eu-west-1"
    assert resolved.iam_account_id == ACCOUNT_ID


def test_resolve_config_skips_lookup_when_fully_specified(mock_session):
    config = ServiceConfig(service_name="orders", iam_account_id="999999999999", region="us-west-2")
    resolved = resolve_config(config)

    assert resolved.iam_account_id == "999999999999"
    assert resolved.region == "us-west-2"
    mock_session.assert_not_called()


def test_resolve_config_validates_before_lookup(mock_session):
    with pytest.raises(MissingRequiredFieldError):
        resolve_config(ServiceConfig(service_name=""))

    mock_session.assert_not_called()
