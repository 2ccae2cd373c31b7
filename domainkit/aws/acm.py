"""Certificate Manager client factory for resolved custom domains."""

import logging
from typing import TYPE_CHECKING

import boto3
from botocore.client import BaseClient

if TYPE_CHECKING:
    from domainkit.aws.domain.config import DomainConfig
    from domainkit.context import ProcessContext

logger = logging.getLogger(__name__)


def acm_client(domain: "DomainConfig", ctx: "ProcessContext") -> BaseClient:
    """Create an ACM client in the region the domain's certificate lives in.

    Edge domains get a us-east-1 client, regional domains one in the deployment
    region. Credentials come from the context's profile or the default chain.
    """
    logger.debug("Creating ACM client for '%s' in %s", domain.domain_name, domain.region)
    session = boto3.Session(profile_name=ctx.aws.profile, region_name=domain.region)
    return session.client("acm")
