"""Base AWS client utilities for infrastructure clients.

Provides `get_boto3_client` and `execute_aws_api_call` with the
OperationResult pattern. This module intentionally avoids reading
settings at import time and accepts configuration via parameters.

`execute_aws_api_call` performs exactly one attempt: failures are
classified, never retried here.
"""

from typing import Any, Dict, Optional

import boto3  # type: ignore
from botocore.client import BaseClient  # type: ignore
from botocore.config import Config  # type: ignore
import structlog

from infrastructure.operations.classifiers import classify_aws_error
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

logger = structlog.get_logger()


def get_boto3_client(
    service_name: str,
    session_config: Optional[Dict[str, Any]] = None,
    client_config: Optional[Dict[str, Any]] = None,
) -> BaseClient:
    """Create a boto3 client for the given service.

    Args:
        service_name: AWS service name (e.g., 'identitystore')
        session_config: Optional boto3 session kwargs (region_name, credentials)
        client_config: Optional client kwargs (region_name, endpoint_url, and
            botocore Config kwargs under "config")

    Returns:
        botocore client instance
    """
    session_config = dict(session_config or {})
    client_config = dict(client_config or {})

    if isinstance(client_config.get("config"), dict):
        client_config["config"] = Config(**client_config["config"])

    session = boto3.Session(**session_config)
    return session.client(service_name, **client_config)


def execute_aws_api_call(
    service_name: str,
    method: str,
    client: Any,
    **kwargs,
) -> OperationResult:
    """Execute a single AWS API call and return a standardized result.

    Args:
        service_name: AWS service name, used for logging
        method: Name of the boto3 client method to call
        client: boto3 client (or any object exposing `method`)
        **kwargs: Parameters passed verbatim to the boto3 method

    Returns:
        OperationResult with the raw response in `data` on success, or the
        classified error otherwise.
    """
    try:
        api_method = getattr(client, method)
        response = api_method(**kwargs)
    except Exception as e:  # pylint: disable=broad-except
        result = classify_aws_error(e)
        if result.status == OperationStatus.NOT_FOUND:
            logger.info(
                "aws_api_not_found",
                service=service_name,
                method=method,
                code=result.error_code,
            )
        else:
            logger.error(
                "aws_api_error",
                service=service_name,
                method=method,
                status=result.status.value,
                code=result.error_code,
                error=str(e),
            )
        return result

    return OperationResult.success(
        data=response, message=f"{service_name}.{method} succeeded"
    )
