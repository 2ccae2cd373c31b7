class ConfigurationError(ValueError):
    """Raised when a custom domain configuration cannot be resolved."""


class AmbiguousEnablementError(ConfigurationError):
    """Raised when 'enabled' is neither a boolean nor the string "true" or "false"."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f'Ambiguous enablement boolean: "{value}"')


class UnsupportedOptionError(ConfigurationError):
    """Raised when an enumerated option does not match any of its allowed values."""

    option = "option"

    def __init__(self, value: object, allowed: list[str]):
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"{value!r} is not a supported {self.option}, use {_human_join(allowed)}."
        )


class UnsupportedEndpointTypeError(UnsupportedOptionError):
    option = "endpoint type"


class UnsupportedApiTypeError(UnsupportedOptionError):
    option = "API type"


class UnsupportedSecurityPolicyError(UnsupportedOptionError):
    option = "security policy"


class UnsupportedRoutingPolicyError(UnsupportedOptionError):
    option = "routing policy"


class IncompatibleRoutingConfigurationError(ConfigurationError):
    """Raised when latency or weighted routing is combined with an edge endpoint."""

    def __init__(self, routing_policy: str):
        self.routing_policy = routing_policy
        super().__init__(
            f"{routing_policy} routing is not intended to be used with edge endpoints. "
            "Use a regional endpoint instead."
        )


class IncompatibleEndpointTypeError(ConfigurationError):
    """Raised when an HTTP or WebSocket API is configured with an edge endpoint."""

    def __init__(self, domain_name: str, api_type: str):
        self.domain_name = domain_name
        self.api_type = api_type
        super().__init__(
            f"{domain_name}: 'edge' endpoint type is not compatible with {api_type} APIs. "
            "Use a regional endpoint instead."
        )


def _human_join(values: list[str]) -> str:
    if len(values) == 1:
        return values[0]
    return f"{', '.join(values[:-1])} or {values[-1]}"
