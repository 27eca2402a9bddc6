# ============================================================================
# ExplorerClient - Measurement Model Tests
#
# Purpose: Test Measurement payloads and MeasurementTable bookkeeping
# Inputs: None
# Outputs: Test pass/fail
# Dependencies: pytest, ExplorerClient
# Usage: pytest tests/test_measurement.py -v
#
# Changelog:
#   2026-10-02: Initial measurement tests
# ============================================================================

from ExplorerClient.measurement import Measurement, MeasurementTable


def _measurement(request_id="req-1", context="db-query", **kwargs) -> Measurement:
    return Measurement(request_id=request_id, context=context, start_time=100, **kwargs)


class TestMeasurement:
    def test_defaults(self):
        m = _measurement()
        assert m.type == "unknown"
        assert m.stop_time is None
        assert not m.is_stopped
        assert m.elapsed_ns is None

    def test_elapsed(self):
        m = _measurement(stop_time=350)
        assert m.is_stopped
        assert m.elapsed_ns == 250

    def test_payload_shape(self):
        m = _measurement(type="sql", stop_time=350)
        assert m.to_payload() == {
            "id": "req-1",
            "context": "db-query",
            "type": "sql",
            "start": 100,
            "stop": 350,
        }

    def test_copy_is_independent(self):
        m = _measurement()
        clone = m.copy()
        clone.stop_time = 999
        assert m.stop_time is None


class TestMeasurementTable:
    def test_add_and_get(self):
        table = MeasurementTable()
        m = _measurement()
        table.add(m)

        assert table.contains("req-1", "db-query")
        assert table.get("req-1", "db-query") is m
        assert len(table) == 1

    def test_contexts_are_scoped_per_request(self):
        table = MeasurementTable()
        table.add(_measurement("req-1", "render"))
        table.add(_measurement("req-2", "render"))
        table.add(_measurement("req-1", "db-query"))

        assert len(table) == 3
        assert sorted(table.request_ids()) == ["req-1", "req-2"]
        assert not table.contains("req-2", "db-query")

    def test_remove_keeps_empty_request_mapping(self):
        table = MeasurementTable()
        m = _measurement()
        table.add(m)

        assert table.remove("req-1", "db-query") is m
        assert len(table) == 0
        assert table.request_ids() == ["req-1"]

    def test_remove_absent_pair(self):
        table = MeasurementTable()
        assert table.remove("nope", "nothing") is None
        table.add(_measurement())
        assert table.remove("req-1", "other") is None
        assert len(table) == 1

    def test_measurements_snapshot(self):
        table = MeasurementTable()
        table.add(_measurement())
        snapshot = table.measurements()
        snapshot[0].type = "changed"
        assert table.get("req-1", "db-query").type == "unknown"
