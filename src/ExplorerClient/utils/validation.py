# ============================================================================
# ExplorerClient - Argument Validation
#
# Purpose: Shared checks for request id / context arguments
# Inputs: Raw caller arguments
# Outputs: None (raises on invalid input)
# Dependencies: errors
# Usage: require_key(request_id, context, action="start")
#
# Changelog:
#   2026-10-02: Initial validation helper
# ============================================================================

from typing import Any

from ExplorerClient.errors import InvalidArgumentError


def _is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def require_key(request_id: Any, context: Any, action: str) -> None:
    """
    Ensure both parts of a measurement key are non-empty strings.

    Args:
        request_id: Request ID supplied by the caller
        context: Execution context supplied by the caller
        action: Operation name used in the error message

    Raises:
        InvalidArgumentError: If either value is missing, empty or not a string
    """
    if not _is_non_empty_str(request_id) or not _is_non_empty_str(context):
        raise InvalidArgumentError(
            f"Failed to {action} measurement because of no id/context provided",
            details=f"id={request_id!r}, context={context!r}",
        )
