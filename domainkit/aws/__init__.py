"""AWS custom domain support for domainkit."""

from domainkit.aws.acm import acm_client
from domainkit.aws.domain import DomainConfig, resolve_custom_domains, resolve_domain_config

__all__ = ["DomainConfig", "acm_client", "resolve_custom_domains", "resolve_domain_config"]
