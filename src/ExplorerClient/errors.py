# ============================================================================
# ExplorerClient - Error Classes
#
# Purpose: Custom exception hierarchy for the package
# Inputs: Error messages and measurement keys
# Outputs: Structured exceptions
# Dependencies: None
# Usage: raise DuplicateMeasurementError("req-1", "db-query")
#
# Changelog:
#   2026-10-02: Initial error classes
#   2026-10-09: Measurement errors carry request_id/context attributes
#   2026-10-19: Added TrackerClosedError
# ============================================================================

from typing import Optional


class ExplorerClientError(Exception):
    """Base exception for all ExplorerClient errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        """
        Initialize error.

        Args:
            message: Error message
            details: Optional detailed error information
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        """String representation."""
        if self.details:
            return f"{self.message}\nDetails: {self.details}"
        return self.message


class ConfigurationError(ExplorerClientError):
    """Raised when configuration is invalid or the explorer URI is missing."""

    pass


class InvalidArgumentError(ExplorerClientError):
    """Raised when an operation receives a missing or empty id/context."""

    pass


class MeasurementError(ExplorerClientError):
    """Base for errors tied to one (request_id, context) pair."""

    def __init__(self, message: str, request_id: str, context: str, details: Optional[str] = None):
        super().__init__(message, details=details)
        self.request_id = request_id
        self.context = context


class DuplicateMeasurementError(MeasurementError):
    """Raised when a measurement is started twice for the same pair."""

    def __init__(self, request_id: str, context: str):
        super().__init__(
            f"Measurement already started for id: {request_id} and context: {context}",
            request_id,
            context,
        )


class MeasurementNotFoundError(MeasurementError):
    """Raised when no in-flight measurement exists for the pair."""

    def __init__(self, request_id: str, context: str):
        super().__init__(
            f"Measurement was not started for id: {request_id} and context: {context}",
            request_id,
            context,
        )


class DeliveryError(ExplorerClientError):
    """Raised when a measurement could not be delivered to the collector."""

    pass


class TrackerClosedError(ExplorerClientError):
    """Raised when a tracker is used after close()."""

    def __init__(self) -> None:
        super().__init__("Measurement tracker is closed")
