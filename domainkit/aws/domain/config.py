import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, TypedDict, final

from domainkit.aws.domain.constants import (
    API_TYPES,
    DEFAULT_API_TYPE,
    DEFAULT_ENDPOINT_TYPE,
    DEFAULT_ROUTING_POLICY,
    DEFAULT_ROUTING_WEIGHT,
    DEFAULT_SECURITY_POLICY,
    ENDPOINT_TYPES,
    NO_BASE_PATH,
    ROUTING_POLICIES,
    SECURITY_POLICIES,
    ApiType,
    ApiTypeLiteral,
    EndpointType,
    EndpointTypeLiteral,
    RoutingPolicy,
    RoutingPolicyLiteral,
    SecurityPolicy,
    SecurityPolicyLiteral,
)
from domainkit.exceptions import (
    AmbiguousEnablementError,
    ConfigurationError,
    IncompatibleEndpointTypeError,
    IncompatibleRoutingConfigurationError,
    UnsupportedApiTypeError,
    UnsupportedEndpointTypeError,
    UnsupportedOptionError,
    UnsupportedRoutingPolicyError,
    UnsupportedSecurityPolicyError,
)

if TYPE_CHECKING:
    from domainkit.context import ProcessContext

logger = logging.getLogger(__name__)


class Route53ParamsDict(TypedDict, total=False):
    routing_policy: RoutingPolicyLiteral | RoutingPolicy | str
    set_identifier: str
    weight: int
    health_check_id: str


class CustomDomainDict(TypedDict, total=False):
    domain_name: str
    base_path: str
    stage: str
    endpoint_type: EndpointTypeLiteral | EndpointType | str
    api_type: ApiTypeLiteral | ApiType | str
    security_policy: SecurityPolicyLiteral | SecurityPolicy | str
    enabled: bool | str
    certificate_name: str
    certificate_arn: str
    hosted_zone_id: str
    hosted_zone_private: bool
    create_route53_record: bool
    auto_domain: bool
    auto_domain_wait_for: str
    allow_path_matching: bool
    route53_params: Route53ParamsDict


class CustomDomainsDescriptor(TypedDict, total=False):
    """Custom domain section of a deployment descriptor.

    Either a single `custom_domain` or a list of `custom_domains`. List entries may
    be keyed by API type, e.g. `{"http": {"domain_name": "api.example.com"}}`.
    """

    custom_domain: CustomDomainDict
    custom_domains: Sequence[CustomDomainDict | Mapping[ApiTypeLiteral, CustomDomainDict]]


@final
@dataclass(frozen=True, kw_only=True)
class Route53Params:
    routing_policy: RoutingPolicy = DEFAULT_ROUTING_POLICY
    set_identifier: str | None = None
    weight: int = DEFAULT_ROUTING_WEIGHT
    health_check_id: str | None = None


@final
@dataclass(frozen=True, kw_only=True)
class DomainConfig:
    """Fully resolved custom domain configuration.

    Produced by `resolve_domain_config`. Enumerated options are always enum members,
    `base_path` is never blank and `region` is the region the domain's certificate
    and API Gateway domain name live in.
    """

    domain_name: str
    base_path: str
    stage: str
    endpoint_type: EndpointType
    api_type: ApiType
    security_policy: SecurityPolicy
    region: str
    enabled: bool = True
    certificate_name: str | None = None
    certificate_arn: str | None = None
    hosted_zone_id: str | None = None
    hosted_zone_private: bool | None = None
    create_route53_record: bool | None = None
    auto_domain: bool | None = None
    auto_domain_wait_for: str | None = None
    allow_path_matching: bool = False
    route53_params: Route53Params = field(default_factory=Route53Params)

    @property
    def has_base_path(self) -> bool:
        return self.base_path != NO_BASE_PATH


def evaluate_enabled(enabled: object) -> bool:
    """Resolve the 'enabled' flag of a custom domain.

    A missing value means enabled, which keeps configurations written for older
    versions working. Besides booleans only the exact strings "true" and "false"
    are accepted.

    Raises:
        AmbiguousEnablementError: For any other value.
    """
    if enabled is None:
        return True
    if isinstance(enabled, bool):
        return enabled
    if enabled == "true":
        return True
    if enabled == "false":
        return False
    raise AmbiguousEnablementError(enabled)


def normalize_base_path(base_path: str | None) -> str:
    if base_path is None or not base_path.strip():
        return NO_BASE_PATH
    return base_path.strip()


def _resolve_option[E: Enum](
    value: E | str | None,
    default: E,
    table: dict[str, E],
    error: type[UnsupportedOptionError],
    *,
    empty_is_default: bool = True,
) -> E:
    # Case-insensitive match on the exact value; surrounding whitespace is not stripped
    if value is None or (empty_is_default and value == ""):
        return default
    if isinstance(value, type(default)):
        return value
    member = table.get(value.lower()) if isinstance(value, str) else None
    if member is None:
        raise error(value, list(table))
    return member


def resolve_domain_config(config: CustomDomainDict, ctx: "ProcessContext") -> DomainConfig:
    """Resolve a raw custom domain record into a validated `DomainConfig`.

    Steps run in a fixed order and the first invalid value aborts the resolution:
    enablement, base path, stage, endpoint type, API type, security policy, region,
    routing policy and finally the routing/endpoint compatibility check.

    Args:
        config: Raw custom domain record from the deployment descriptor.
        ctx: Process-wide settings (stages, deployment region, default region).

    Raises:
        ConfigurationError: Subclass describing the first invalid value.
    """
    enabled = evaluate_enabled(config.get("enabled"))
    domain_name = config.get("domain_name")
    base_path = normalize_base_path(config.get("base_path"))

    stage = config.get("stage")
    if stage is None:
        stage = ctx.stage_override or ctx.stage

    endpoint_type = _resolve_option(
        config.get("endpoint_type"),
        DEFAULT_ENDPOINT_TYPE,
        ENDPOINT_TYPES,
        UnsupportedEndpointTypeError,
    )
    api_type = _resolve_option(
        config.get("api_type"), DEFAULT_API_TYPE, API_TYPES, UnsupportedApiTypeError
    )
    security_policy = _resolve_option(
        config.get("security_policy"),
        DEFAULT_SECURITY_POLICY,
        SECURITY_POLICIES,
        UnsupportedSecurityPolicyError,
    )

    region = ctx.region if endpoint_type is EndpointType.REGIONAL else ctx.default_region

    route53_params = _resolve_route53_params(config.get("route53_params") or {}, endpoint_type)

    logger.debug(
        "Resolved custom domain '%s': %s endpoint in %s, %s API, base path %s, stage %s",
        domain_name,
        endpoint_type.value,
        region,
        api_type.value,
        base_path,
        stage,
    )

    return DomainConfig(
        domain_name=domain_name,
        base_path=base_path,
        stage=stage,
        endpoint_type=endpoint_type,
        api_type=api_type,
        security_policy=security_policy,
        region=region,
        enabled=enabled,
        certificate_name=config.get("certificate_name"),
        certificate_arn=config.get("certificate_arn"),
        hosted_zone_id=config.get("hosted_zone_id"),
        hosted_zone_private=config.get("hosted_zone_private"),
        create_route53_record=config.get("create_route53_record"),
        auto_domain=config.get("auto_domain"),
        auto_domain_wait_for=config.get("auto_domain_wait_for"),
        allow_path_matching=config.get("allow_path_matching") or False,
        route53_params=route53_params,
    )


def _resolve_route53_params(
    params: Route53ParamsDict, endpoint_type: EndpointType
) -> Route53Params:
    routing_policy = _resolve_option(
        params.get("routing_policy"),
        DEFAULT_ROUTING_POLICY,
        ROUTING_POLICIES,
        UnsupportedRoutingPolicyError,
        empty_is_default=False,
    )
    if routing_policy is not RoutingPolicy.SIMPLE and endpoint_type is EndpointType.EDGE:
        raise IncompatibleRoutingConfigurationError(routing_policy.value)

    weight = params.get("weight")
    return Route53Params(
        routing_policy=routing_policy,
        set_identifier=params.get("set_identifier"),
        weight=DEFAULT_ROUTING_WEIGHT if weight is None else weight,
        health_check_id=params.get("health_check_id"),
    )


def resolve_custom_domains(
    descriptor: CustomDomainsDescriptor, ctx: "ProcessContext"
) -> tuple[DomainConfig, ...]:
    """Resolve every custom domain declared in a deployment descriptor.

    Disabled domains are resolved and returned as well; callers decide whether to
    skip them. Entries are independent of each other and keep their input order.

    Raises:
        ConfigurationError: If no custom domain is declared or any entry is invalid.
    """
    if descriptor.get("custom_domain"):
        entries = [descriptor["custom_domain"]]
    elif descriptor.get("custom_domains"):
        entries = list(descriptor["custom_domains"])
    else:
        raise ConfigurationError(
            "Custom domain configuration is missing. "
            "Declare either 'custom_domain' or 'custom_domains'."
        )

    domains = tuple(resolve_domain_config(_unwrap_entry(entry), ctx) for entry in entries)
    for domain in domains:
        _validate_endpoint_for_api_type(domain)

    logger.info(
        "Resolved %d custom domain(s), %d enabled",
        len(domains),
        sum(1 for domain in domains if domain.enabled),
    )
    return domains


def _unwrap_entry(
    entry: CustomDomainDict | Mapping[ApiTypeLiteral, CustomDomainDict],
) -> CustomDomainDict:
    if len(entry) != 1:
        return entry
    key, value = next(iter(entry.items()))
    if key not in API_TYPES or not isinstance(value, Mapping):
        return entry
    # API type from the key applies unless the entry sets its own
    return {"api_type": key, **value}


def _validate_endpoint_for_api_type(domain: DomainConfig) -> None:
    # HTTP and WebSocket APIs only support regional custom domains
    if domain.endpoint_type is EndpointType.EDGE and domain.api_type is not ApiType.REST:
        raise IncompatibleEndpointTypeError(domain.domain_name, domain.api_type.value)
