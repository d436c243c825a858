"""Operation status enumeration.

Status codes for operation results, used to classify outcomes of Identity
Store calls into the retryable/fatal taxonomy.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Retryable error (throttling, service unavailable)
        PERMANENT_ERROR: Non-retryable error (validation, missing user, unknown faults)
        NOT_FOUND: Resource not found, interpreted by the caller
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    NOT_FOUND = "not_found"
