# ============================================================================
# ExplorerClient - Measurement Model
#
# Purpose: In-flight measurement records and the two-level table holding them
# Inputs: Request IDs, contexts, nanosecond timestamps
# Outputs: Measurement records and collector payloads
# Dependencies: dataclasses
# Usage: table.add(Measurement("req-1", "db-query", start_time=monotonic_ns()))
#
# Changelog:
#   2026-10-02: Initial measurement model
#   2026-10-09: Added MeasurementTable.measurements() snapshot for pending()
# ============================================================================

from dataclasses import dataclass, replace
from typing import Any, Dict, Iterator, List, Optional

DEFAULT_TYPE = "unknown"


@dataclass
class Measurement:
    """One timed execution segment within a request."""

    request_id: str
    context: str
    start_time: int
    type: str = DEFAULT_TYPE
    stop_time: Optional[int] = None

    @property
    def is_stopped(self) -> bool:
        return self.stop_time is not None

    @property
    def elapsed_ns(self) -> Optional[int]:
        if self.stop_time is None:
            return None
        return self.stop_time - self.start_time

    def to_payload(self) -> Dict[str, Any]:
        """Body sent to the collector's /add endpoint."""
        return {
            "id": self.request_id,
            "context": self.context,
            "type": self.type,
            "start": self.start_time,
            "stop": self.stop_time,
        }

    def copy(self) -> "Measurement":
        return replace(self)


class MeasurementTable:
    """
    Measurements keyed by request ID, then by context.

    A (request_id, context) pair is present from ``start`` until its report
    has been delivered. Emptied request mappings are left in place.
    Not thread-safe on its own; the tracker serialises access.
    """

    def __init__(self) -> None:
        self._requests: Dict[str, Dict[str, Measurement]] = {}

    def contains(self, request_id: str, context: str) -> bool:
        return context in self._requests.get(request_id, {})

    def get(self, request_id: str, context: str) -> Optional[Measurement]:
        return self._requests.get(request_id, {}).get(context)

    def add(self, measurement: Measurement) -> None:
        contexts = self._requests.setdefault(measurement.request_id, {})
        contexts[measurement.context] = measurement

    def remove(self, request_id: str, context: str) -> Optional[Measurement]:
        contexts = self._requests.get(request_id)
        if contexts is None:
            return None
        return contexts.pop(context, None)

    def request_ids(self) -> List[str]:
        return list(self._requests.keys())

    def measurements(self) -> List[Measurement]:
        """Flat list of copies of every stored measurement."""
        return [m.copy() for m in self]

    def __iter__(self) -> Iterator[Measurement]:
        for contexts in self._requests.values():
            yield from contexts.values()

    def __len__(self) -> int:
        return sum(len(contexts) for contexts in self._requests.values())
