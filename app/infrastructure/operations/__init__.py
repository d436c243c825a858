"""Operation result types and status enums.

This module contains standardized result types for Identity Store
operations, including the status enum, the result dataclass, and the error
classifier for AWS SDK exceptions.
"""

from infrastructure.operations.classifiers import (
    add_error_context,
    classify_aws_error,
)
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_aws_error",
    "add_error_context",
]
