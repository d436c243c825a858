"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the
Identity Center action using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    AwsSettings: AWS integration settings class (for testing)

Example:
    ```python
    from infrastructure.configuration import settings

    log_level = settings.LOG_LEVEL
    endpoint_url = settings.aws.ENDPOINT_URL
    ```
"""

from infrastructure.configuration.integrations import AwsSettings
from infrastructure.configuration.settings import Settings, settings

__all__ = ["Settings", "AwsSettings", "settings"]
