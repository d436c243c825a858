"""Remove a user from an AWS IAM Identity Center group.

Lifecycle handlers called by the orchestration framework:

- `invoke`: validate, resolve the user, remove the membership, report.
- `error`: re-raise the failure so the framework applies its retry policy.
- `halt`: report a summary when the framework aborts the job.

`invoke` only ever raises a ClassifiedError (RetryableError or FatalError).
"""

import asyncio
from typing import Any, Dict, Mapping, Optional

from infrastructure.clients.aws.identity_store import IdentityStoreClient
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.configuration import settings
from infrastructure.logging import bind_request_context, get_module_logger
from modules.identity_center.errors import ClassifiedError, FatalError
from modules.identity_center.membership import remove_membership
from modules.identity_center.models import (
    ActionInput,
    ActionResult,
    Credentials,
    HaltSummary,
    UNKNOWN,
    load_credentials,
    validate_inputs,
)
from modules.identity_center.resolver import resolve_user_id

ACTION_NAME = "remove_user_from_identity_center_group"

logger = get_module_logger()


def build_identity_store_client(
    action_input: ActionInput, credentials: Credentials
) -> IdentityStoreClient:
    """Construct the Identity Store client used for one invocation.

    Args:
        action_input: Validated request (region and identity store)
        credentials: Credentials from the invocation secrets

    Returns:
        IdentityStoreClient with its boto3 client already created
    """
    session_provider = SessionProvider(
        region=action_input.region,
        access_key_id=credentials.access_key_id,
        secret_access_key=credentials.secret_access_key.get_secret_value(),
        endpoint_url=settings.aws.ENDPOINT_URL or None,
        botocore_config=settings.aws.CLIENT_CONFIG,
    )
    return IdentityStoreClient(
        session_provider,
        default_identity_store_id=action_input.identity_store_id,
        client=session_provider.get_boto3_client("identitystore"),
    )


async def _remove_user_from_group(
    params: Mapping[str, Any], context: Any
) -> ActionResult:
    action_input = validate_inputs(params)
    logger.info(
        "processing_user_for_group",
        user_name=action_input.user_name,
        group_id=action_input.group_id,
    )

    credentials = load_credentials(context)
    client = await asyncio.to_thread(
        build_identity_store_client, action_input, credentials
    )

    logger.info("resolving_user_id", user_name=action_input.user_name)
    user_result = await asyncio.to_thread(
        resolve_user_id,
        client,
        action_input.identity_store_id,
        action_input.user_name,
    )
    if not user_result.is_success:
        raise ClassifiedError.from_result(user_result)
    user_id = user_result.data
    logger.info("user_id_resolved", user_id=user_id)

    logger.info(
        "removing_user_from_group", user_id=user_id, group_id=action_input.group_id
    )
    removal = await asyncio.to_thread(
        remove_membership,
        client,
        action_input.identity_store_id,
        action_input.group_id,
        user_id,
    )
    if not removal.is_success:
        raise ClassifiedError.from_result(removal)

    result = ActionResult(
        user_name=action_input.user_name,
        group_id=action_input.group_id,
        user_id=user_id,
        removed=bool(removal.data),
    )
    if result.removed:
        logger.info(
            "user_removed_from_group",
            user_name=result.user_name,
            group_id=result.group_id,
        )
    else:
        logger.info(
            "user_was_not_a_member",
            user_name=result.user_name,
            group_id=result.group_id,
        )
    return result


def _param(params: Optional[Mapping[str, Any]], key: str) -> Any:
    if not isinstance(params, Mapping):
        return None
    return params.get(key)


def _param_or_unknown(params: Optional[Mapping[str, Any]], key: str) -> str:
    value = _param(params, key)
    return str(value) if value else UNKNOWN


async def invoke(params: Mapping[str, Any], context: Any) -> Dict[str, Any]:
    """Remove `userName` from `groupId` in the given Identity Store.

    Args:
        params: {userName, identityStoreId, groupId, region}
        context: Framework context exposing `secrets` with
            AWS_ACCESS_KEY_ID and AWS_SECRET_ACCESS_KEY

    Returns:
        {userName, groupId, userId, removed, removedAt}. `removed` is False
        when the user was not (or no longer) a member.

    Raises:
        RetryableError: throttling or temporary service unavailability
        FatalError: anything else
    """
    with bind_request_context(
        action=ACTION_NAME,
        user_name=_param(params, "userName"),
        group_id=_param(params, "groupId"),
    ):
        logger.info("remove_user_from_group_started")
        try:
            result = await _remove_user_from_group(params, context)
        except ClassifiedError as e:
            logger.error(
                "remove_user_from_group_failed",
                error=str(e),
                retryable=e.retryable,
            )
            raise
        except Exception as e:  # pylint: disable=broad-except
            logger.exception("remove_user_from_group_failed", error=str(e))
            raise FatalError(f"Unexpected error: {e}") from e

        return result.model_dump(by_alias=True)


async def error(params: Mapping[str, Any], context: Any) -> None:
    """Re-raise the failure handed back by the framework.

    Retry and backoff decisions belong to the framework.

    Raises:
        The given exception unchanged, or a FatalError carrying its message
        when the framework passes a plain value instead of an exception.
    """
    err = _param(params, "error")
    logger.error("error_handler_invoked", error=str(err) if err is not None else None)

    if isinstance(err, BaseException):
        raise err
    if isinstance(err, Mapping):
        err = err.get("message")
    raise FatalError(str(err) if err else "Unknown error")


async def halt(params: Mapping[str, Any], context: Any) -> Dict[str, Any]:
    """Report a summary when the job is halted. Makes no remote calls."""
    summary = HaltSummary(
        user_name=_param_or_unknown(params, "userName"),
        group_id=_param_or_unknown(params, "groupId"),
        reason=_param_or_unknown(params, "reason"),
    )
    logger.info("job_halted", reason=summary.reason)
    return summary.model_dump(by_alias=True)


HANDLERS = {
    "invoke": invoke,
    "error": error,
    "halt": halt,
}
