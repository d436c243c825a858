"""Errors raised across the action's framework boundary."""

from infrastructure.operations.result import OperationResult


class ClassifiedError(Exception):
    """Failure classified as retryable or fatal.

    The orchestration framework reads `retryable` to decide whether the
    action may be re-invoked with the same inputs.

    Attributes:
        message: human-friendly message
        retryable: fixed per subclass
    """

    retryable: bool = False

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @classmethod
    def from_result(cls, result: OperationResult) -> "ClassifiedError":
        """Build the exception matching a failed OperationResult."""
        if result.is_retryable:
            return RetryableError(result.message)
        return FatalError(result.message)


class RetryableError(ClassifiedError):
    """Transient failure; safe to retry with the same inputs."""

    retryable = True


class FatalError(ClassifiedError):
    """Permanent failure; needs input correction or operator intervention."""

    retryable = False
