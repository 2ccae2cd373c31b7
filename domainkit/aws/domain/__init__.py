from .config import (
    CustomDomainDict,
    CustomDomainsDescriptor,
    DomainConfig,
    Route53Params,
    Route53ParamsDict,
    evaluate_enabled,
    normalize_base_path,
    resolve_custom_domains,
    resolve_domain_config,
)
from .constants import NO_BASE_PATH, ApiType, EndpointType, RoutingPolicy, SecurityPolicy

# Only export public API for users
__all__ = [
    "NO_BASE_PATH",
    "ApiType",
    "CustomDomainDict",
    "CustomDomainsDescriptor",
    "DomainConfig",
    "EndpointType",
    "Route53Params",
    "Route53ParamsDict",
    "RoutingPolicy",
    "SecurityPolicy",
    "evaluate_enabled",
    "normalize_base_path",
    "resolve_custom_domains",
    "resolve_domain_config",
]
