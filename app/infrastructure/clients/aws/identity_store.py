"""Identity Store client for AWS operations.

Provides type-safe access to the AWS Identity Store operations used to
manage group memberships (get_user_id, get_group_membership_id,
delete_group_membership) with consistent error handling and
OperationResult return types.
"""

from typing import Any, Dict, Optional

import structlog

from infrastructure.clients.aws.executor import execute_aws_api_call
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.operations.result import OperationResult

logger = structlog.get_logger()


class IdentityStoreClient:
    """Client for AWS Identity Store operations.

    All methods return OperationResult for consistent error handling and
    downstream processing. The underlying boto3 client is created on first
    use and reused for every call made through this instance.

    Args:
        session_provider: SessionProvider instance for credential/config management
        default_identity_store_id: Default Identity Store ID for this client
        client: Optional pre-built boto3 client (tests, custom transports)
    """

    def __init__(
        self,
        session_provider: SessionProvider,
        default_identity_store_id: Optional[str] = None,
        client: Optional[Any] = None,
    ) -> None:
        self._session_provider = session_provider
        self._service_name = "identitystore"
        self._default_identity_store_id = default_identity_store_id
        self._client = client
        self._logger = logger.bind(component="identity_store_client")

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = self._session_provider.get_boto3_client(
                self._service_name
            )
        return self._client

    def _resolve_store_id(self, identity_store_id: Optional[str]) -> Optional[str]:
        return identity_store_id or self._default_identity_store_id

    @staticmethod
    def _missing_store_id() -> OperationResult:
        return OperationResult.permanent_error(
            message="identity_store_id is required",
            error_code="MISSING_IDENTITY_STORE_ID",
        )

    def get_user_id_by_username(
        self,
        username: str,
        identity_store_id: Optional[str] = None,
        **kwargs,
    ) -> OperationResult:
        """
        Get a user ID by its unique userName attribute.

        Args:
            username (str): The userName to search for
            identity_store_id: Optional override for Identity Store ID
            **kwargs: Additional parameters for the API call

        Returns:
            OperationResult: raw `get_user_id` response in `data` on success.
        """
        store_id = self._resolve_store_id(identity_store_id)
        if not store_id:
            return self._missing_store_id()

        return execute_aws_api_call(
            self._service_name,
            "get_user_id",
            self.client,
            IdentityStoreId=store_id,
            AlternateIdentifier={
                "UniqueAttribute": {
                    "AttributePath": "userName",
                    "AttributeValue": username,
                }
            },
            **kwargs,
        )

    def get_group_membership_id(
        self,
        group_id: str,
        member_id: Dict[str, str],
        identity_store_id: Optional[str] = None,
        **kwargs,
    ) -> OperationResult:
        """Get a group membership ID by group ID and member ID.

        Args:
            group_id: ID of the group
            member_id: Dict with 'UserId' key for the member
            identity_store_id: Optional override for Identity Store ID
            **kwargs: Additional parameters for the API call
        Returns:
            OperationResult with the raw `get_group_membership_id` response or error
        """
        store_id = self._resolve_store_id(identity_store_id)
        if not store_id:
            return self._missing_store_id()

        return execute_aws_api_call(
            self._service_name,
            "get_group_membership_id",
            self.client,
            IdentityStoreId=store_id,
            GroupId=group_id,
            MemberId=member_id,
            **kwargs,
        )

    def delete_group_membership(
        self,
        membership_id: str,
        identity_store_id: Optional[str] = None,
        **kwargs,
    ) -> OperationResult:
        """Delete a group membership from Identity Store.

        Args:
            membership_id: ID of the membership to delete
            identity_store_id: Optional override for Identity Store ID
            **kwargs: Additional parameters
        Returns:
            OperationResult with status
        """
        store_id = self._resolve_store_id(identity_store_id)
        if not store_id:
            return self._missing_store_id()

        return execute_aws_api_call(
            self._service_name,
            "delete_group_membership",
            self.client,
            IdentityStoreId=store_id,
            MembershipId=membership_id,
            **kwargs,
        )
