"""Infrastructure AWS clients public API.

This package provides DI-friendly AWS clients returning OperationResult:

    from infrastructure.clients.aws import IdentityStoreClient, SessionProvider

    provider = SessionProvider(region="ca-central-1")
    identitystore = IdentityStoreClient(provider, default_identity_store_id="d-123")

    result = identitystore.get_user_id_by_username("jdoe")
    if result.is_success:
        user_id = result.data["UserId"]
"""

from infrastructure.clients.aws.executor import (
    execute_aws_api_call,
    get_boto3_client,
)
from infrastructure.clients.aws.identity_store import IdentityStoreClient
from infrastructure.clients.aws.session_provider import SessionProvider

__all__ = [
    "SessionProvider",
    "IdentityStoreClient",
    "execute_aws_api_call",
    "get_boto3_client",
]
