"""Resolve a username to its Identity Store user ID."""

from infrastructure.clients.aws.identity_store import IdentityStoreClient
from infrastructure.logging import get_module_logger
from infrastructure.operations.classifiers import add_error_context
from infrastructure.operations.result import OperationResult

logger = get_module_logger()


def resolve_user_id(
    client: IdentityStoreClient, identity_store_id: str, user_name: str
) -> OperationResult:
    """Look up a user by its unique userName attribute.

    A missing user is fatal: it will not appear on its own by retrying.

    Args:
        client: Identity Store client scoped to the invocation
        identity_store_id: Identity Store to search
        user_name: Value of the userName attribute

    Returns:
        OperationResult whose `data` is the UserId exactly as returned by AWS,
        or a TRANSIENT_ERROR / PERMANENT_ERROR result.
    """
    result = client.get_user_id_by_username(
        user_name, identity_store_id=identity_store_id
    )

    if result.is_not_found:
        return OperationResult.permanent_error(
            f"User not found: {user_name}", error_code=result.error_code
        )

    context = f"Failed to get user ID for {user_name}"
    if not result.is_success:
        return add_error_context(result, context)

    user_id = (result.data or {}).get("UserId")
    if not user_id:
        return OperationResult.permanent_error(
            f"{context}: response did not include a UserId",
            error_code="MALFORMED_RESPONSE",
        )

    logger.debug("user_id_resolved", user_name=user_name, user_id=user_id)
    return OperationResult.success(data=user_id, message="user_id_resolved")
