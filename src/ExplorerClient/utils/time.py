# ============================================================================
# ExplorerClient - Time Utilities
#
# Purpose: High-resolution clock for measurement timestamps
# Inputs: None
# Outputs: Integer nanoseconds from a monotonic counter
# Dependencies: time
# Usage: started = monotonic_ns()
#
# Changelog:
#   2026-10-02: Initial clock helper
# ============================================================================

import time


def monotonic_ns() -> int:
    """
    Read the monotonic high-resolution counter.

    Values only have meaning relative to each other (elapsed = stop - start);
    they are not epoch timestamps.

    Returns:
        Counter value in nanoseconds
    """
    return time.perf_counter_ns()


def ns_to_ms(ns: int) -> float:
    """Convert a nanosecond duration to milliseconds."""
    return ns / 1_000_000
