from enum import Enum
from typing import Literal

NO_BASE_PATH = "(none)"
# ACM certificates for edge endpoints must live in us-east-1
DEFAULT_REGION = "us-east-1"
DEFAULT_ROUTING_WEIGHT = 200


class EndpointType(Enum):
    EDGE = "EDGE"
    REGIONAL = "REGIONAL"


class ApiType(Enum):
    REST = "REST"
    HTTP = "HTTP"
    WEBSOCKET = "WEBSOCKET"


# Minimum TLS version accepted by the custom domain
class SecurityPolicy(Enum):
    TLS_1_0 = "TLS_1_0"
    TLS_1_2 = "TLS_1_2"


# Route 53 record routing policies
class RoutingPolicy(Enum):
    SIMPLE = "simple"
    LATENCY = "latency"
    WEIGHTED = "weighted"


EndpointTypeLiteral = Literal["edge", "regional"]
ApiTypeLiteral = Literal["rest", "http", "websocket"]
SecurityPolicyLiteral = Literal["tls_1_0", "tls_1_2"]
RoutingPolicyLiteral = Literal["simple", "latency", "weighted"]


def _lookup_table[E: Enum](enum_type: type[E]) -> dict[str, E]:
    return {member.name.lower(): member for member in enum_type}


ENDPOINT_TYPES = _lookup_table(EndpointType)
API_TYPES = _lookup_table(ApiType)
SECURITY_POLICIES = _lookup_table(SecurityPolicy)
ROUTING_POLICIES = _lookup_table(RoutingPolicy)

DEFAULT_ENDPOINT_TYPE = EndpointType.EDGE
DEFAULT_API_TYPE = ApiType.REST
DEFAULT_SECURITY_POLICY = SecurityPolicy.TLS_1_2
DEFAULT_ROUTING_POLICY = RoutingPolicy.SIMPLE
