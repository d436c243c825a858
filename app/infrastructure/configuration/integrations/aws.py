"""AWS integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class AwsSettings(IntegrationSettings):
    """AWS configuration settings.

    Credentials are never read from here: the action receives them from the
    orchestration framework's secret store on every invocation.

    Environment Variables:
        AWS_ENDPOINT_URL: Custom endpoint URL (for testing/LocalStack)
        AWS_CONNECT_TIMEOUT: Seconds to wait for a connection (default: 5)
        AWS_READ_TIMEOUT: Seconds to wait for a response (default: 10)

    Example:
        ```python
        from infrastructure.configuration import settings

        endpoint_url = settings.aws.ENDPOINT_URL
        ```
    """

    ENDPOINT_URL: str = Field(default="", alias="AWS_ENDPOINT_URL")
    CONNECT_TIMEOUT: float = Field(default=5.0, alias="AWS_CONNECT_TIMEOUT")
    READ_TIMEOUT: float = Field(default=10.0, alias="AWS_READ_TIMEOUT")

    @property
    def CLIENT_CONFIG(self) -> dict[str, object]:
        """Keyword arguments for botocore.config.Config.

        Retries are disabled at the transport level; the caller decides
        whether to re-invoke based on the classified error.

        Returns:
            Dict of botocore Config kwargs
        """
        return {
            "connect_timeout": self.CONNECT_TIMEOUT,
            "read_timeout": self.READ_TIMEOUT,
            "retries": {"max_attempts": 1, "mode": "standard"},
        }
