import pytest

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


@pytest.mark.parametrize(
    "error",
    [
        AmbiguousEnablementError("maybe"),
        UnsupportedEndpointTypeError("global", ["edge", "regional"]),
        IncompatibleRoutingConfigurationError("weighted"),
        IncompatibleEndpointTypeError("api.example.com", "HTTP"),
    ],
)
def test_errors_are_configuration_errors(error):
    assert isinstance(error, ConfigurationError)
    assert isinstance(error, ValueError)


@pytest.mark.parametrize(
    ("error_type", "option"),
    [
        (UnsupportedEndpointTypeError, "endpoint type"),
        (UnsupportedApiTypeError, "API type"),
        (UnsupportedSecurityPolicyError, "security policy"),
        (UnsupportedRoutingPolicyError, "routing policy"),
    ],
)
def test_unsupported_option_messages(error_type, option):
    error = error_type("bogus", ["a", "b", "c"])
    assert isinstance(error, UnsupportedOptionError)
    assert str(error) == f"'bogus' is not a supported {option}, use a, b or c."


def test_unsupported_option_with_single_allowed_value():
    error = UnsupportedEndpointTypeError("bogus", ["edge"])
    assert str(error) == "'bogus' is not a supported endpoint type, use edge."


def test_ambiguous_enablement_message():
    assert str(AmbiguousEnablementError(1)) == 'Ambiguous enablement boolean: "1"'
