from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class AwsConfig:
    """AWS credentials and deployment region used when resolving custom domains.

    Both values are optional overrides. When not specified, boto3 follows the
    standard AWS credential and region resolution chain.

    ## Credentials Resolution Order

    1. **Environment variables**: AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY and
       optionally AWS_SESSION_TOKEN
    2. **Assume role providers**: AWS_ROLE_ARN + AWS_WEB_IDENTITY_TOKEN_FILE, or a
       role configured in ~/.aws/config
    3. **AWS IAM Identity Center (SSO)** via `aws sso login`
    4. **Shared credentials file**: ~/.aws/credentials
    5. **IAM role credentials** when running inside AWS

    ## Region

    `region` is the region the deployment targets. Regional custom domains and
    their certificates are looked up there; edge domains always use us-east-1.

    ## Examples

    ```python
    AwsConfig(region="eu-west-1")
    AwsConfig(profile="prod-profile", region="eu-west-1")
    ```
    """

    profile: str | None = None
    region: str | None = None
