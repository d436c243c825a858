"""Idempotent removal of a single group membership.

Two steps, each performed at most once:

    locate membership --found--> delete membership
          |                            |
      not found                  not found / deleted
          v                            v
    removed=False            removed=False / True

"Not found" at either step means the user is already out of the group and
is reported as a successful no-op. Retrying is left to the caller.
"""

from infrastructure.clients.aws.identity_store import IdentityStoreClient
from infrastructure.logging import get_module_logger
from infrastructure.operations.classifiers import add_error_context
from infrastructure.operations.result import OperationResult

logger = get_module_logger()


def _locate_membership(
    client: IdentityStoreClient, identity_store_id: str, group_id: str, user_id: str
) -> OperationResult:
    result = client.get_group_membership_id(
        group_id, {"UserId": user_id}, identity_store_id=identity_store_id
    )
    if not result.is_success:
        return result

    membership_id = (result.data or {}).get("MembershipId")
    if not membership_id:
        return OperationResult.permanent_error(
            "response did not include a MembershipId",
            error_code="MALFORMED_RESPONSE",
        )
    return OperationResult.success(data=membership_id)


def remove_membership(
    client: IdentityStoreClient, identity_store_id: str, group_id: str, user_id: str
) -> OperationResult:
    """Remove a user from a group if it is a member.

    Args:
        client: Identity Store client scoped to the invocation
        identity_store_id: Identity Store holding the group
        group_id: Target group
        user_id: Resolved Identity Store user ID

    Returns:
        OperationResult whose `data` is True when a membership was deleted,
        False when there was none to delete, or a classified error.
    """
    located = _locate_membership(client, identity_store_id, group_id, user_id)
    if located.is_not_found:
        logger.info("user_not_a_member", group_id=group_id, user_id=user_id)
        return OperationResult.success(data=False, message="user_not_a_member")
    if not located.is_success:
        return add_error_context(located, "Failed to get membership ID")

    membership_id = located.data
    deleted = client.delete_group_membership(
        membership_id, identity_store_id=identity_store_id
    )
    if deleted.is_not_found:
        # Removed concurrently between lookup and delete
        logger.info(
            "membership_already_deleted",
            group_id=group_id,
            membership_id=membership_id,
        )
        return OperationResult.success(
            data=False, message="membership_already_deleted"
        )
    if not deleted.is_success:
        return add_error_context(deleted, "Failed to remove user from group")

    logger.debug("membership_deleted", membership_id=membership_id)
    return OperationResult.success(data=True, message="membership_deleted")
