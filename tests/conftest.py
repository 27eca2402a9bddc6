# ============================================================================
# ExplorerClient - Test Configuration and Fixtures
#
# Purpose: Shared pytest fixtures for testing
# Inputs: None
# Outputs: Fixtures for use in tests
# Dependencies: pytest, httpx
# Usage: pytest tests/ (fixtures are automatically available)
#
# Changelog:
#   2026-10-02: Initial collector transport and fake clock fixtures
# ============================================================================

import json
from typing import Any, Dict, List

import httpx
import pytest

from ExplorerClient.sinks.http_sink import HTTPSink
from ExplorerClient.tracker import MeasurementTracker

COLLECTOR_URI = "http://collector.local"


class FakeCollector:
    """
    In-process stand-in for the explorer service.

    Records every request and answers with ``status_code``; set ``error`` to an
    exception to simulate a transport failure instead.
    """

    def __init__(self, status_code: int = 200):
        self.status_code = status_code
        self.error: Any = None
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json={"ok": self.status_code < 300})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def payloads(self) -> List[Dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests]


class FakeClock:
    """Deterministic nanosecond clock advancing by ``step`` on each read."""

    def __init__(self, start: int = 1_000, step: int = 250):
        self.now = start
        self.step = step

    def __call__(self) -> int:
        value = self.now
        self.now += self.step
        return value


@pytest.fixture
def collector():
    return FakeCollector()


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def http_sink(collector):
    sink = HTTPSink(COLLECTOR_URI, service="test-svc", transport=collector.transport)
    yield sink
    sink.close()


@pytest.fixture
def tracker(http_sink, fake_clock):
    """Tracker wired to the fake collector and fake clock."""
    tracker = MeasurementTracker({"explorerUri": COLLECTOR_URI}, sink=http_sink, clock=fake_clock)
    yield tracker
    tracker.close()
