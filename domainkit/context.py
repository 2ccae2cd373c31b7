from dataclasses import dataclass

import pulumi

from domainkit.aws.domain.constants import DEFAULT_REGION
from domainkit.config import AwsConfig


@dataclass(frozen=True)
class ProcessContext:
    """Process-wide settings shared by every custom domain of a deployment.

    Built once before any domain is resolved and never mutated afterwards, so
    the same context can be handed to any number of resolutions.

    Attributes:
        stage: Stage configured for the service (provider level).
        aws: Credentials profile and deployment region.
        stage_override: Stage selected for this invocation, e.g. from the command line.
            Takes precedence over `stage`.
        default_region: Region used for edge endpoints.
    """

    stage: str
    aws: AwsConfig
    stage_override: str | None = None
    default_region: str = DEFAULT_REGION

    def __post_init__(self) -> None:
        if not self.stage:
            raise ValueError("Stage cannot be empty")
        if not self.aws.region:
            raise ValueError(
                "Deployment region is not configured. "
                "Set it in AwsConfig or with 'pulumi config set aws:region <region>'."
            )

    @property
    def region(self) -> str:
        """Region the deployment targets."""
        return self.aws.region

    @classmethod
    def from_pulumi(cls, stage_override: str | None = None) -> "ProcessContext":
        """Build the context from the current Pulumi stack.

        The stack name is used as the stage. Region and profile are read from the
        stack's `aws:region` and `aws:profile` config values.

        Raises:
            pulumi.ConfigMissingError: If `aws:region` is not set for the stack.
        """
        aws_config = pulumi.Config("aws")
        return cls(
            stage=pulumi.get_stack(),
            aws=AwsConfig(profile=aws_config.get("profile"), region=aws_config.require("region")),
            stage_override=stage_override,
        )
