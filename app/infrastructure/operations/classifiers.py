"""Error classifiers for AWS SDK exceptions.

Converts exceptions raised by boto3 Identity Store calls into standardized
OperationResult objects. Collapses the upstream fault codes into a
two-state taxonomy (TRANSIENT_ERROR / PERMANENT_ERROR), plus NOT_FOUND which
callers interpret in context.

Key Functions:
- classify_aws_error(): AWS SDK errors → OperationResult
- add_error_context(): Prefix a fatal result's message with operation context

Usage:
    from infrastructure.operations.classifiers import classify_aws_error

    try:
        response = client.get_user_id(IdentityStoreId=store_id, ...)
    except Exception as exc:
        return classify_aws_error(exc)
"""

from botocore.exceptions import ClientError

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

TRANSIENT_ERROR_CODES = frozenset(
    {
        "ThrottlingException",
        "ServiceUnavailableException",
    }
)
NOT_FOUND_ERROR_CODES = frozenset({"ResourceNotFoundException"})


def classify_aws_error(exc: Exception) -> OperationResult:
    """Classify AWS SDK errors into OperationResult.

    Handles botocore.exceptions.ClientError exceptions by mapping AWS error
    codes to appropriate OperationStatus values.

    Error Code Mapping (first match wins):
    - Not a ClientError (connection, timeout, unexpected): PERMANENT_ERROR
    - ResourceNotFoundException: NOT_FOUND
    - ThrottlingException, ServiceUnavailableException: TRANSIENT_ERROR
    - Other: PERMANENT_ERROR

    Args:
        exc: Exception raised by AWS SDK (boto3/botocore)

    Returns:
        OperationResult with appropriate status, message and error_code.
        The upstream discriminator is kept in error_code.
    """
    if not isinstance(exc, ClientError):
        # Transport failures surface here; none of them carries a known
        # transient discriminator
        return OperationResult.permanent_error(
            f"{type(exc).__name__}: {str(exc)}",
            error_code="UNEXPECTED_ERROR",
        )

    error_info = {}
    if hasattr(exc, "response") and exc.response:
        error_info = exc.response.get("Error", {}) or {}
    error_code = error_info.get("Code", "Unknown")
    error_message = error_info.get("Message") or str(exc)

    if error_code in NOT_FOUND_ERROR_CODES:
        return OperationResult.not_found(error_message, error_code=error_code)

    if error_code in TRANSIENT_ERROR_CODES:
        return OperationResult.transient_error(
            f"AWS service temporarily unavailable: {error_message}",
            error_code=error_code,
        )

    return OperationResult.permanent_error(error_message, error_code=error_code)


def add_error_context(result: OperationResult, context: str) -> OperationResult:
    """Prefix the message of a permanent error with operation context.

    Transient errors keep their "temporarily unavailable" message and
    non-error results are returned unchanged.

    Args:
        result: Result returned by an AWS call
        context: Operation context, e.g. "Failed to get membership ID"

    Returns:
        A new OperationResult, or the input when no context applies
    """
    if result.status != OperationStatus.PERMANENT_ERROR:
        return result
    return OperationResult.permanent_error(
        f"{context}: {result.message}", error_code=result.error_code
    )
