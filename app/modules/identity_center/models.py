"""Data models for the Identity Center actions."""

from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from modules.identity_center.errors import FatalError

# Evaluation order matters: the first invalid field determines the error.
REQUIRED_PARAMS = ("userName", "identityStoreId", "groupId", "region")

ACCESS_KEY_ID_SECRET = "AWS_ACCESS_KEY_ID"
SECRET_ACCESS_KEY_SECRET = "AWS_SECRET_ACCESS_KEY"

UNKNOWN = "unknown"


def utc_timestamp() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    return (
        datetime.now(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


class ActionInput(BaseModel):
    """Validated parameters of a removal request."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    user_name: str = Field(..., alias="userName")
    identity_store_id: str = Field(..., alias="identityStoreId")
    group_id: str = Field(..., alias="groupId")
    region: str = Field(..., alias="region")


class Credentials(BaseModel):
    """AWS credentials handed over by the framework's secret store."""

    model_config = ConfigDict(frozen=True)

    access_key_id: str
    secret_access_key: SecretStr


class ActionResult(BaseModel):
    """Outcome of a successful removal request."""

    model_config = ConfigDict(populate_by_name=True)

    user_name: str = Field(..., alias="userName")
    group_id: str = Field(..., alias="groupId")
    user_id: str = Field(..., alias="userId")
    removed: bool
    removed_at: str = Field(default_factory=utc_timestamp, alias="removedAt")


class HaltSummary(BaseModel):
    """Best-effort summary returned when the framework halts the job.

    `cleanup_completed` is always True; halting performs no cleanup.
    """

    model_config = ConfigDict(populate_by_name=True)

    user_name: str = Field(default=UNKNOWN, alias="userName")
    group_id: str = Field(default=UNKNOWN, alias="groupId")
    reason: str = UNKNOWN
    halted_at: str = Field(default_factory=utc_timestamp, alias="haltedAt")
    cleanup_completed: bool = Field(default=True, alias="cleanupCompleted")


def _is_valid_param(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def validate_inputs(params: Optional[Mapping[str, Any]]) -> ActionInput:
    """Validate the framework params and build an ActionInput.

    Fields are checked in REQUIRED_PARAMS order and validation stops at the
    first violation.

    Args:
        params: Raw params passed to `invoke`

    Returns:
        ActionInput with the values exactly as given

    Raises:
        FatalError: "Invalid or missing {field} parameter"
    """
    if not isinstance(params, Mapping):
        params = {}
    for field in REQUIRED_PARAMS:
        if not _is_valid_param(params.get(field)):
            raise FatalError(f"Invalid or missing {field} parameter")
    return ActionInput(**{field: params[field] for field in REQUIRED_PARAMS})


def _get_secrets(context: Any) -> Mapping[str, Any]:
    if context is None:
        return {}
    if isinstance(context, Mapping):
        secrets = context.get("secrets")
    else:
        secrets = getattr(context, "secrets", None)
    return secrets or {}


def load_credentials(context: Any) -> Credentials:
    """Read the AWS credentials from the invocation context secrets.

    Args:
        context: Framework context exposing `secrets` (attribute or key)

    Returns:
        Credentials

    Raises:
        FatalError: when either secret is missing or empty
    """
    secrets = _get_secrets(context)
    access_key_id = secrets.get(ACCESS_KEY_ID_SECRET)
    secret_access_key = secrets.get(SECRET_ACCESS_KEY_SECRET)
    if not access_key_id or not secret_access_key:
        raise FatalError("Missing required AWS credentials in secrets")
    return Credentials(
        access_key_id=access_key_id, secret_access_key=secret_access_key
    )
