# ============================================================================
# ExplorerClient - Utils Package
#
# Purpose: Shared utility functions
# Inputs: None
# Outputs: Public API exports
# Dependencies: None
# Usage: from ExplorerClient.utils import monotonic_ns, require_key
#
# Changelog:
#   2026-10-02: Initial utils package
# ============================================================================

from ExplorerClient.utils.time import monotonic_ns, ns_to_ms
from ExplorerClient.utils.validation import require_key

__all__ = ["monotonic_ns", "ns_to_ms", "require_key"]
