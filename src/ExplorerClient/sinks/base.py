# ============================================================================
# ExplorerClient - Base Sink Interface
#
# Purpose: Abstract base class for measurement delivery sinks
# Inputs: Measurement payload dicts
# Outputs: Location identifier string
# Dependencies: abc
# Usage: class MySink(Sink): ...
#
# Changelog:
#   2026-10-02: Initial Sink interface
# ============================================================================

from abc import ABC, abstractmethod
from typing import Any, Dict


class Sink(ABC):
    """
    Abstract base class for measurement delivery sinks.

    Sinks deliver one completed measurement payload to a backend (the
    collector's HTTP API in production, an in-memory list in tests).
    """

    @abstractmethod
    def write(self, payload: Dict[str, Any]) -> str:
        """
        Deliver a measurement payload.

        Args:
            payload: Dict with id, context, type, start and stop keys

        Returns:
            Location identifier (URL, etc.)

        Raises:
            DeliveryError: If delivery fails
        """
        pass

    def close(self) -> None:
        """Release any resources held by the sink."""
        pass
