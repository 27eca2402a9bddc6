# ============================================================================
# ExplorerClient - Measurement Tracker
#
# Purpose: Start/stop timed segments per (request_id, context) and deliver
#          completed measurements to the explorer service in the background
# Inputs: start()/stop() calls from instrumented code
# Outputs: Futures resolving with the delivery outcome
# Dependencies: concurrent.futures, threading, config, measurement, sinks
# Usage: tracker = MeasurementTracker({"explorerUri": "http://collector.local"})
#        tracker.start("req-1", "db-query"); future = tracker.stop("req-1", "db-query")
#
# Changelog:
#   2026-10-02: Initial tracker
#   2026-10-06: stop() returns a Future so callers can observe delivery failure
#   2026-10-09: Added measure() context manager and pending()
#   2026-10-19: Deliveries only clear the measurement they sent; use after
#               close() raises TrackerClosedError before touching the table
# ============================================================================

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Union

from ExplorerClient.config import ClientConfig, load_config
from ExplorerClient.errors import (
    DeliveryError,
    DuplicateMeasurementError,
    InvalidArgumentError,
    MeasurementNotFoundError,
    TrackerClosedError,
)
from ExplorerClient.logging_utils import get_logger
from ExplorerClient.measurement import DEFAULT_TYPE, Measurement, MeasurementTable
from ExplorerClient.sinks.base import Sink
from ExplorerClient.sinks.http_sink import HTTPSink
from ExplorerClient.utils.time import monotonic_ns, ns_to_ms
from ExplorerClient.utils.validation import require_key

logger = get_logger(__name__)


class MeasurementTracker:
    """
    Tracks in-flight measurements and reports finished ones to the explorer.

    Every instance owns its table, lock, worker pool and sink, so several
    trackers can live in one process without sharing state.

    Table access from start/stop/flush/clear/pending is serialised by one
    lock. Delivery happens on worker threads; a failed delivery leaves the
    measurement in the table and is never retried automatically.
    """

    def __init__(
        self,
        config: Union[ClientConfig, Mapping[str, Any]],
        *,
        sink: Optional[Sink] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        """
        Args:
            config: ClientConfig or mapping with at least explorerUri/explorer_uri.
            sink: Delivery backend. Defaults to an HTTPSink for the explorer URI.
            clock: Zero-argument callable returning monotonic nanoseconds.

        Raises:
            ConfigurationError: If config is malformed or has no explorer URI.
        """
        self.config = load_config(config)
        self._measurements = MeasurementTable()
        self._lock = threading.RLock()
        self._clock = clock or monotonic_ns
        self._sink = sink or HTTPSink(
            self.config.explorer_uri,
            service=self.config.service,
            timeout=self.config.timeout,
        )
        self._executor = ThreadPoolExecutor(
            max_workers=self.config.max_workers,
            thread_name_prefix="explorer-flush",
        )
        self._closed = False

    def __enter__(self) -> "MeasurementTracker":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def start(self, request_id: str, context: str, action_type: Optional[str] = None) -> None:
        """
        Start measuring a segment.

        Args:
            request_id: RequestID for tracking the whole request
            context: Execution context within the request
            action_type: What action started execution (debug info)

        Raises:
            InvalidArgumentError: If request_id or context is missing/empty
            DuplicateMeasurementError: If the pair is already being measured
        """
        require_key(request_id, context, "start")
        with self._lock:
            self._ensure_open()
            if self._measurements.contains(request_id, context):
                raise DuplicateMeasurementError(request_id, context)
            self._measurements.add(
                Measurement(
                    request_id=request_id,
                    context=context,
                    type=action_type or DEFAULT_TYPE,
                    start_time=self._clock(),
                )
            )
        logger.debug(f"Measurement started: id={request_id} context={context}")

    def stop(self, request_id: str, context: str, action_type: Optional[str] = None) -> "Future[str]":
        """
        Stop measuring a segment and submit it to the explorer.

        Does not wait for delivery. The type recorded at start() is the one
        reported; ``action_type`` is accepted for call-site symmetry only.
        Stopping a pair whose earlier delivery failed re-stamps the stop time
        and submits it again.

        Args:
            request_id: RequestID for tracking the whole request
            context: Execution context within the request
            action_type: Ignored

        Returns:
            Future resolving to the delivery location, or raising DeliveryError

        Raises:
            InvalidArgumentError: If request_id or context is missing/empty
            MeasurementNotFoundError: If start() was never called for the pair
            TrackerClosedError: If close() has been called
        """
        require_key(request_id, context, "stop")
        with self._lock:
            self._ensure_open()
            measurement = self._measurements.get(request_id, context)
            if measurement is None:
                raise MeasurementNotFoundError(request_id, context)
            measurement.stop_time = self._clock()
            logger.debug(
                f"Measurement stopped: id={request_id} context={context} "
                f"elapsed={ns_to_ms(measurement.elapsed_ns or 0):.3f}ms"
            )
            return self.flush(request_id, context)

    @contextmanager
    def measure(
        self, request_id: str, context: str, action_type: Optional[str] = None
    ) -> Iterator[Measurement]:
        """Time the enclosed block. Stops (and submits) even if the block raises.

        Args:
            request_id: RequestID for tracking the whole request
            context: Execution context within the request
            action_type: What action started execution (debug info)
        """
        self.start(request_id, context, action_type)
        with self._lock:
            measurement = self._measurements.get(request_id, context)
        try:
            yield measurement  # type: ignore[misc]
        finally:
            self.stop(request_id, context)

    def flush(self, request_id: str, context: str) -> "Future[str]":
        """
        Submit a stopped measurement for delivery.

        Called by stop(). The payload is captured synchronously; the HTTP call
        runs on the worker pool. On success the pair is cleared.

        Returns:
            Future resolving to the delivery location, or raising DeliveryError

        Raises:
            InvalidArgumentError: If arguments are invalid or the measurement
                has not been stopped
            MeasurementNotFoundError: If the pair is not in the table
            TrackerClosedError: If close() has been called
        """
        require_key(request_id, context, "flush")
        with self._lock:
            self._ensure_open()
            measurement = self._measurements.get(request_id, context)
            if measurement is None:
                raise MeasurementNotFoundError(request_id, context)
            if not measurement.is_stopped:
                raise InvalidArgumentError(
                    f"Failed to flush measurement for id: {request_id} and context: {context}",
                    details="measurement has not been stopped",
                )
            payload = measurement.to_payload()
            return self._executor.submit(self._deliver, measurement, payload)

    def clear(self, request_id: str, context: str) -> None:
        """
        Remove a measurement from the table. No-op if it is already gone.

        Raises:
            InvalidArgumentError: If request_id or context is missing/empty
        """
        require_key(request_id, context, "clear")
        with self._lock:
            removed = self._measurements.remove(request_id, context)
        if removed is not None:
            logger.debug(f"Measurement cleared: id={request_id} context={context}")

    def pending(self) -> List[Measurement]:
        """Copies of measurements still in the table (in flight or failed delivery)."""
        with self._lock:
            return self._measurements.measurements()

    def close(self, wait: bool = True) -> None:
        """Shut down the worker pool and the sink.

        Args:
            wait: Block until submitted deliveries finish.
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
        self._executor.shutdown(wait=wait)
        self._sink.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise TrackerClosedError()

    def _deliver(self, measurement: Measurement, payload: Dict[str, Any]) -> str:
        request_id, context = measurement.request_id, measurement.context
        try:
            location = self._sink.write(payload)
        except DeliveryError:
            logger.exception(f"Failed to flush measurement for id: {request_id} and context: {context}")
            raise
        except Exception as e:
            logger.exception(f"Failed to flush measurement for id: {request_id} and context: {context}")
            raise DeliveryError(
                f"Failed to flush measurement for id: {request_id} and context: {context}",
                details=str(e),
            ) from e
        # Only the entry that was sent may be cleared; a restarted pair is a new object
        with self._lock:
            if self._measurements.get(request_id, context) is measurement:
                self._measurements.remove(request_id, context)
        logger.info(f"Measurement delivered: id={request_id} context={context} -> {location}")
        return location
