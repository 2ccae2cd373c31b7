from unittest.mock import MagicMock, patch

import pytest

from domainkit.aws import acm_client
from domainkit.aws.domain import resolve_domain_config
from domainkit.config import AwsConfig
from domainkit.context import ProcessContext


@pytest.mark.parametrize(
    ("endpoint_type", "expected_region"),
    [("edge", "us-east-1"), ("regional", "eu-west-1")],
)
def test_acm_client_uses_domain_region(ctx, endpoint_type, expected_region):
    domain = resolve_domain_config(
        {"domain_name": "api.example.com", "endpoint_type": endpoint_type}, ctx
    )
    mock_client = MagicMock()

    with patch("domainkit.aws.acm.boto3.Session") as mock_session:
        mock_session.return_value.client.return_value = mock_client
        client = acm_client(domain, ctx)

    mock_session.assert_called_once_with(profile_name="default", region_name=expected_region)
    mock_session.return_value.client.assert_called_once_with("acm")
    assert client is mock_client


def test_acm_client_without_profile():
    no_profile_ctx = ProcessContext(stage="dev", aws=AwsConfig(region="eu-west-1"))
    domain = resolve_domain_config({"domain_name": "api.example.com"}, no_profile_ctx)

    with patch("domainkit.aws.acm.boto3.Session") as mock_session:
        acm_client(domain, no_profile_ctx)

    mock_session.assert_called_once_with(profile_name=None, region_name="us-east-1")


def test_resolution_does_not_create_clients(ctx):
    with patch("domainkit.aws.acm.boto3.Session") as mock_session:
        resolve_domain_config({"domain_name": "api.example.com"}, ctx)
    mock_session.assert_not_called()
