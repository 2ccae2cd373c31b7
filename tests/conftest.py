import pytest

from domainkit.config import AwsConfig
from domainkit.context import ProcessContext

DEPLOYMENT_REGION = "eu-west-1"


@pytest.fixture
def ctx() -> ProcessContext:
    return ProcessContext(
        stage="dev",
        aws=AwsConfig(profile="default", region=DEPLOYMENT_REGION),
    )


@pytest.fixture
def ctx_with_stage_override() -> ProcessContext:
    return ProcessContext(
        stage="dev",
        aws=AwsConfig(profile="default", region=DEPLOYMENT_REGION),
        stage_override="prod",
    )
