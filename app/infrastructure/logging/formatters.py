"""structlog processors applied to every action log entry.

The action logs identifiers (user name, group, membership and user IDs)
and verbatim upstream AWS error messages. It must never log the
`AWS_ACCESS_KEY_ID` / `AWS_SECRET_ACCESS_KEY` secrets it receives, nor
the boto3 session kwargs built from them.
"""

from typing import Any, Mapping

REDACTED = "***REDACTED***"

# Exact secret and boto3 session key names, compared lowercased.
AWS_SECRET_NAMES = frozenset(
    {
        "aws_access_key_id",
        "aws_secret_access_key",
        "aws_session_token",
    }
)

# Key fragments that mark any other key as credential-bearing.
SECRET_KEY_FRAGMENTS = ("secret", "access_key", "token", "password")

# Keys whose values are kept whole regardless of size.
UNTRUNCATED_KEYS = frozenset({"event", "exception"})


def add_build_info(app_name: str, git_sha: str = "Unknown"):
    """Stamp each entry with the application name and deployed commit."""

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.setdefault("app", app_name)
        event_dict.setdefault("git_sha", git_sha)
        return event_dict

    return processor


def is_secret_key(key: Any) -> bool:
    """True when `key` names a credential (case-insensitive)."""
    lowered = str(key).lower()
    if lowered in AWS_SECRET_NAMES:
        return True
    return any(fragment in lowered for fragment in SECRET_KEY_FRAGMENTS)


def _redact(value: Any, mask: str) -> Any:
    if not isinstance(value, Mapping):
        return value
    return {
        key: mask if is_secret_key(key) and item is not None else _redact(item, mask)
        for key, item in value.items()
    }


def redact_credentials(mask: str = REDACTED):
    """Build a processor that hides credential values.

    Top-level keys and keys of nested mappings (for example a logged
    `secrets` or `session_config` dict) are both checked. None values are
    left as-is so a missing secret stays visible as missing.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        return _redact(event_dict, mask)

    return processor


def truncate_long_values(max_length: int = 500):
    """Build a processor that caps string values at `max_length` characters.

    Upstream error messages are logged as received. The event name and a
    rendered traceback are never cut.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if key in UNTRUNCATED_KEYS or not isinstance(value, str):
                continue
            if len(value) > max_length:
                event_dict[key] = (
                    f"{value[:max_length]}...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
