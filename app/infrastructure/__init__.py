"""Infrastructure modules for the Identity Center actions.

Centralized infrastructure components:
- configuration: Settings management (settings, Settings)
- logging: Structured logging (get_module_logger, bind_request_context)
- operations: Operation results and error classification
- clients: AWS clients returning OperationResult
"""
