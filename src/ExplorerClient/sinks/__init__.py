# ============================================================================
# ExplorerClient - Sinks Package
#
# Purpose: Delivery backends for completed measurements
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from ExplorerClient.sinks import Sink, HTTPSink
#
# Changelog:
#   2026-10-02: Initial sinks package
# ============================================================================

from ExplorerClient.sinks.base import Sink
from ExplorerClient.sinks.http_sink import HTTPSink

__all__ = [
    "Sink",
    "HTTPSink",
]
