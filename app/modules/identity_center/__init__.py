"""Identity Center group-membership actions.

Exposes the `invoke` / `error` / `halt` lifecycle handlers that remove one
user from one AWS IAM Identity Center group, classifying every failure as
retryable or fatal.
"""

from modules.identity_center.action import HANDLERS, error, halt, invoke
from modules.identity_center.errors import ClassifiedError, FatalError, RetryableError

__all__ = [
    "HANDLERS",
    "invoke",
    "error",
    "halt",
    "ClassifiedError",
    "RetryableError",
    "FatalError",
]
