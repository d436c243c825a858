"""Session provider for AWS client operations.

Centralizes boto3 session creation, credential handling, and configuration
building for AWS service clients. A provider is built per invocation from
the credentials handed over by the orchestration framework.
"""

from typing import Any, Dict, Optional

import structlog

from infrastructure.clients.aws import executor

logger = structlog.get_logger()


class SessionProvider:
    """Provider for AWS session configuration and credential handling.

    Manages region, credentials, endpoint URL and botocore client options so
    per-service clients don't need to duplicate this code.

    Args:
        region: AWS region for all clients (e.g., 'us-east-1')
        access_key_id: Static access key id; default credential chain when None
        secret_access_key: Static secret access key
        endpoint_url: Custom endpoint URL (for testing/LocalStack)
        botocore_config: Keyword arguments for botocore.config.Config
    """

    def __init__(
        self,
        region: Optional[str] = None,
        access_key_id: Optional[str] = None,
        secret_access_key: Optional[str] = None,
        endpoint_url: Optional[str] = None,
        botocore_config: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.region = region
        self.endpoint_url = endpoint_url
        self.botocore_config = botocore_config
        self._access_key_id = access_key_id
        self._secret_access_key = secret_access_key

    @property
    def has_static_credentials(self) -> bool:
        return bool(self._access_key_id and self._secret_access_key)

    def build_client_kwargs(self) -> Dict[str, Any]:
        """Build session and client configuration kwargs for boto3.

        Returns:
            Dict with session_config and client_config for passing to
            get_boto3_client
        """
        session_config: Dict[str, Any] = {}
        client_config: Dict[str, Any] = {}

        if self.region:
            session_config["region_name"] = self.region
            client_config["region_name"] = self.region

        if self.has_static_credentials:
            session_config["aws_access_key_id"] = self._access_key_id
            session_config["aws_secret_access_key"] = self._secret_access_key

        if self.endpoint_url:
            client_config["endpoint_url"] = self.endpoint_url

        if self.botocore_config:
            client_config["config"] = dict(self.botocore_config)

        logger.debug(
            "built_client_kwargs",
            region=self.region,
            endpoint_url=self.endpoint_url,
            static_credentials=self.has_static_credentials,
        )
        return {
            "session_config": session_config or None,
            "client_config": client_config or None,
        }

    def get_boto3_client(self, service_name: str) -> Any:
        """Get a fully-configured boto3 client for the given service.

        Args:
            service_name: AWS service name (e.g., 'identitystore')

        Returns:
            Configured boto3 client instance
        """
        kw = self.build_client_kwargs()
        return executor.get_boto3_client(
            service_name,
            session_config=kw["session_config"],
            client_config=kw["client_config"],
        )
